# swimdq/apps/meets/services/meets.py
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.db import transaction

from ..models import Meet, Official

logger = logging.getLogger(__name__)


class MeetNotFound(ObjectDoesNotExist):
    """El id no corresponde a ningún meet."""


# ------------------------------
# Normalización de entradas
# ------------------------------
def _parse_date(value: Any) -> Optional[date]:
    """
    Acepta date/datetime o string ISO 'YYYY-MM-DD'. Devuelve None si viene vacío
    y lanza ValidationError si el string no es una fecha válida.
    """
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError({"date": "Invalid date. Use YYYY-MM-DD."})


def _clean_official(value: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    value = value or {}
    return {
        "name": str(value.get("name") or "").strip(),
        "email": str(value.get("email") or "").strip(),
    }


def _created_ts(meet: Meet) -> float:
    # Sin timestamp utilizable cuenta como epoch 0
    return meet.created_at.timestamp() if meet.created_at else 0.0


# ------------------------------
# Operaciones
# ------------------------------
def create_meet(
    date: Any,
    home_team: str,
    away_team: str,
    head_official: Mapping[str, Any],
    invited_officials: Iterable[Mapping[str, Any]],
) -> int:
    """
    Crea un meet activo con su lista de oficiales invitados y devuelve su id.

    - Filas de oficiales totalmente vacías se ignoran (filas extra del formset).
    - Debe quedar al menos un invitado y cada invitado necesita nombre y email.
    - Meet + oficiales se escriben en una sola transacción: si la BD falla no
      queda un registro parcial y el DatabaseError sube al llamador.
    """
    errors: Dict[str, str] = {}

    meet_date = _parse_date(date)
    if meet_date is None:
        errors["date"] = "Date is required."

    home = (home_team or "").strip()
    away = (away_team or "").strip()
    if not home:
        errors["home_team"] = "Home team is required."
    if not away:
        errors["away_team"] = "Away team is required."

    head = _clean_official(head_official)
    if not head["name"] or not head["email"]:
        errors["head_official"] = "Head official name and email are required."

    officials = [_clean_official(o) for o in (invited_officials or [])]
    officials = [o for o in officials if o["name"] or o["email"]]
    if not officials:
        errors["invited_officials"] = "At least one invited official is required."
    elif any(not o["name"] or not o["email"] for o in officials):
        errors["invited_officials"] = "Every invited official needs a name and an email."

    if errors:
        raise ValidationError(errors)

    with transaction.atomic():
        meet = Meet.objects.create(
            date=meet_date,
            home_team=home,
            away_team=away,
            head_official_name=head["name"],
            head_official_email=head["email"],
            status=Meet.STATUS_ACTIVE,
        )
        Official.objects.bulk_create(
            [
                Official(meet=meet, name=o["name"], email=o["email"], position=i)
                for i, o in enumerate(officials)
            ]
        )

    logger.info("Meet created id=%s name=%r invited=%d", meet.pk, meet.name, len(officials))
    return meet.pk


def list_meets() -> List[Meet]:
    """
    Todos los meets (sin paginar), fecha DESC y, a igual fecha, creación DESC.
    """
    meets = list(Meet.objects.all())
    meets.sort(key=lambda m: (m.date, _created_ts(m)), reverse=True)
    return meets


def get_meet(meet_id: Any) -> Meet:
    """
    Lectura fresca del meet con sus invitados precargados.
    """
    try:
        return Meet.objects.prefetch_related("invited_officials").get(pk=meet_id)
    except (Meet.DoesNotExist, ValueError, TypeError):
        raise MeetNotFound(f"Meet {meet_id!r} not found.")


def close_meet(meet_id: Any) -> Meet:
    """
    Pasa el meet a 'closed'. Idempotente: cerrar un meet ya cerrado lo deja cerrado.
    El objeto devuelto solo cambia después de que la BD confirmó el update.
    """
    try:
        meet = Meet.objects.get(pk=meet_id)
    except (Meet.DoesNotExist, ValueError, TypeError):
        raise MeetNotFound(f"Meet {meet_id!r} not found.")

    Meet.objects.filter(pk=meet.pk).update(status=Meet.STATUS_CLOSED)
    meet.status = Meet.STATUS_CLOSED

    logger.info("Meet closed id=%s", meet.pk)
    return meet
