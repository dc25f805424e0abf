# swimdq/apps/dq/taxonomy.py
"""
Catálogo fijo de infracciones por estilo.

Cada estilo es una de dos formas:
  - Flat: lista plana de etiquetas (se guardan tal cual).
  - Grouped: categoría -> etiquetas; se guardan como "<Categoría>: <Etiqueta>",
    salvo la categoría "Other", que se guarda sin prefijo.

"Medley" agrupa infracciones que aplican a cualquier estilo: al elegir otro
estilo se muestran primero las de Medley y luego las propias.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

MEDLEY = "Medley"
OTHER_CATEGORY = "Other"
OTHER_PREFIX = "Other: "


@dataclass(frozen=True)
class InfractionOption:
    display_label: str
    stored_value: str
    stroke: str
    category: Optional[str] = None


@dataclass(frozen=True)
class InfractionSection:
    title: str
    options: Tuple[InfractionOption, ...]


@dataclass(frozen=True)
class Flat:
    labels: Tuple[str, ...]

    def options(self, stroke: str) -> List[InfractionOption]:
        return [InfractionOption(label, label, stroke) for label in self.labels]

    def sections(self, stroke: str) -> List[InfractionSection]:
        return [InfractionSection(f"{stroke} Infractions", tuple(self.options(stroke)))]


@dataclass(frozen=True)
class Grouped:
    categories: Tuple[Tuple[str, Tuple[str, ...]], ...]

    def options(self, stroke: str) -> List[InfractionOption]:
        out: List[InfractionOption] = []
        for section in self.sections(stroke):
            out.extend(section.options)
        return out

    def sections(self, stroke: str) -> List[InfractionSection]:
        out: List[InfractionSection] = []
        for category, labels in self.categories:
            opts = tuple(
                InfractionOption(label, _qualify(category, label), stroke, category)
                for label in labels
            )
            out.append(InfractionSection(category, opts))
        return out


TaxonomyEntry = Union[Flat, Grouped]


def _qualify(category: str, label: str) -> str:
    if category == OTHER_CATEGORY:
        return label
    return f"{category}: {label}"


INFRACTIONS: Dict[str, TaxonomyEntry] = {
    MEDLEY: Flat((
        "Stroke Infraction",
        "Out of Sequence",
        "Fourth Distance Wrong Stroke",
    )),
    "Butterfly": Grouped((
        ("Kick", ("Alternating", "Breast", "Scissors")),
        ("Arms", ("Non-Simultaneous", "Underwater Recovery")),
        ("Touch", ("One Hand", "Not Separated", "No Touch")),
        (OTHER_CATEGORY, (
            "Not Toward Wall",
            "Head Did Not Break Surface by 15m",
            "Re-Submerged",
        )),
    )),
    "Backstroke": Grouped((
        (OTHER_CATEGORY, (
            "No Touch At Turn",
            "Past Vertical at Turn",
            "Delay Arm Pull",
            "Delay Initiating Turn",
            "Multiple Strokes",
            "Toes Over Lip",
            "Head Did Not Break Surface by 15m",
            "Re-Submerged",
            "Not On Back",
            "Shoulders Past Vertical",
        )),
    )),
    "Breaststroke": Grouped((
        ("Kick", ("Alternating", "Butterfly", "Scissors")),
        ("Arms", ("Past Hipline", "Non-Simultaneous", "Elbows Recovered")),
        ("Touch", ("One Hand", "Not Separated", "No Touch")),
        (OTHER_CATEGORY, (
            "Not Toward Wall",
            "Cycle: Double Pulls/Kicks",
            "Kick Before Pull",
            "Head Not Up Before Hands Turn",
        )),
    )),
    "Freestyle": Grouped((
        (OTHER_CATEGORY, ("No Touch At Turn", "Head Did Not Break Surface by 15m", "Re-Submerged")),
    )),
    "Relays": Grouped((
        (OTHER_CATEGORY, ("Early Take Off", "Changed Order")),
    )),
    "Miscellaneous": Grouped((
        (OTHER_CATEGORY, ("False Start", "Declared False Start", "Did Not Finish", "Delay of Meet")),
    )),
}


def _strokes_shown(stroke: str) -> List[str]:
    # Medley + estilo elegido, sin repetir la clave
    if stroke not in INFRACTIONS:
        return []
    return list(dict.fromkeys([MEDLEY, stroke]))


def labels_for(stroke: str) -> List[InfractionOption]:
    """
    Opciones seleccionables para un estilo, en orden de declaración.
    Estilo desconocido o vacío -> lista vacía.
    """
    out: List[InfractionOption] = []
    for key in _strokes_shown(stroke):
        out.extend(INFRACTIONS[key].options(key))
    return out


def sections_for(stroke: str) -> List[InfractionSection]:
    out: List[InfractionSection] = []
    for key in _strokes_shown(stroke):
        out.extend(INFRACTIONS[key].sections(key))
    return out


def stroke_choices() -> List[Tuple[str, str]]:
    return [(key, key) for key in INFRACTIONS]


def is_offered(stroke: str, stored_value: str) -> bool:
    return any(o.stored_value == stored_value for o in labels_for(stroke))


def other_entry(text: Optional[str]) -> Optional[str]:
    """
    Entrada libre "Other: <texto>" (recortado). None si el texto está vacío.
    """
    cleaned = (text or "").strip()
    if not cleaned:
        return None
    return f"{OTHER_PREFIX}{cleaned}"
