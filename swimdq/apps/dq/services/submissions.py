# swimdq/apps/dq/services/submissions.py
from __future__ import annotations

import logging
from typing import Any, Iterable, List

from django.core.exceptions import PermissionDenied

from swimdq.apps.meets.models import Meet
from swimdq.apps.meets.services.meets import get_meet

from ..models import DQSubmission

logger = logging.getLogger(__name__)

NOT_AUTHORIZED_MESSAGE = "Email not authorized to submit for this meet."


class NotAuthorized(PermissionDenied):
    """El email no está en la lista de oficiales invitados del meet."""


def _fold(email: str) -> str:
    return (email or "").strip().casefold()


def is_invited(meet: Meet, email: str) -> bool:
    """
    True si el email coincide (sin distinguir mayúsculas) con algún invitado.
    """
    wanted = _fold(email)
    if not wanted:
        return False
    return any(_fold(o.email) == wanted for o in meet.invited_officials.all())


def submit_dq(
    meet_id: Any,
    *,
    team: str,
    event_number: str,
    heat_number: str,
    lane_number: str,
    swimmer_name: str,
    stroke: str,
    official_email: str,
    infractions: Iterable[str],
    notes: str = "",
) -> DQSubmission:
    """
    Registra un DQ en estado 'pending'.

    - El meet se relee de la BD en cada envío (MeetNotFound si ya no existe).
    - Si el email no está invitado se lanza NotAuthorized y no se escribe nada.
    - Una sola escritura por envío; errores de BD suben sin reintentos.
    """
    meet = get_meet(meet_id)

    if not is_invited(meet, official_email):
        logger.warning("DQ rejected: %r is not invited to meet id=%s", official_email, meet.pk)
        raise NotAuthorized(NOT_AUTHORIZED_MESSAGE)

    values: List[str] = [str(v) for v in infractions]
    submission = DQSubmission.objects.create(
        meet=meet,
        team=team,
        event_number=event_number,
        heat_number=heat_number,
        lane_number=lane_number,
        swimmer_name=swimmer_name,
        stroke=stroke,
        infractions=values,
        official_email=official_email,
        notes=notes or "",
        status=DQSubmission.STATUS_PENDING,
    )
    logger.info(
        "DQ submitted id=%s meet=%s event=%s heat=%s lane=%s infractions=%d",
        submission.pk, meet.pk, event_number, heat_number, lane_number, len(values),
    )
    return submission
