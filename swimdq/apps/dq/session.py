# swimdq/apps/dq/session.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .taxonomy import other_entry

NO_STROKE_SELECTED = "NoStrokeSelected"
STROKE_SELECTED = "StrokeSelected"
SUBMITTED = "Submitted"


def _session_key(meet_id: Any) -> str:
    return f"dq_submission:{meet_id}"


@dataclass
class SubmissionSession:
    """
    Estado de una carga de DQ para un meet dentro de una sesión de navegador.
    No se guarda en la BD hasta el submit final.

    Cambiar de estilo limpia las infracciones elegidas y el texto libre, así
    no se arrastran etiquetas de otro estilo (p. ej. "Kick: ..." de Breaststroke).
    """
    stroke: str = ""
    selected: List[str] = field(default_factory=list)
    other_text: str = ""
    submitted: bool = False

    @property
    def state(self) -> str:
        if self.submitted:
            return SUBMITTED
        if not self.stroke:
            return NO_STROKE_SELECTED
        return STROKE_SELECTED

    def select_stroke(self, stroke: str) -> None:
        stroke = (stroke or "").strip()
        if stroke != self.stroke:
            self.selected = []
            self.other_text = ""
        self.stroke = stroke
        self.submitted = False

    def toggle_infraction(self, stored_value: str) -> None:
        if stored_value in self.selected:
            self.selected = [v for v in self.selected if v != stored_value]
        else:
            self.selected = self.selected + [stored_value]
        self.submitted = False

    def is_selected(self, stored_value: str) -> bool:
        return stored_value in self.selected

    def set_other_text(self, text: str) -> None:
        self.other_text = text or ""

    def infractions(self) -> List[str]:
        """
        Seleccionadas en orden de toggle + como mucho un "Other: <texto>" al final.
        """
        out = list(self.selected)
        extra = other_entry(self.other_text)
        if extra:
            out.append(extra)
        return out

    def mark_submitted(self) -> None:
        self.submitted = True

    # ---------- Persistencia en request.session ----------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "stroke": self.stroke,
            "selected": list(self.selected),
            "other_text": self.other_text,
            "submitted": self.submitted,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubmissionSession":
        data = data or {}
        return cls(
            stroke=str(data.get("stroke") or ""),
            selected=[str(v) for v in (data.get("selected") or [])],
            other_text=str(data.get("other_text") or ""),
            submitted=bool(data.get("submitted")),
        )

    @classmethod
    def load(cls, request, meet_id: Any) -> "SubmissionSession":
        return cls.from_dict(request.session.get(_session_key(meet_id)))

    def save(self, request, meet_id: Any) -> None:
        request.session[_session_key(meet_id)] = self.to_dict()

    @staticmethod
    def discard(request, meet_id: Any) -> None:
        request.session.pop(_session_key(meet_id), None)
