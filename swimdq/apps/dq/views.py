# swimdq/apps/dq/views.py
from __future__ import annotations

import logging
from typing import Any, Dict

from django.contrib import messages
from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render

from swimdq.apps.meets.models import Meet
from swimdq.apps.meets.services.meets import MeetNotFound, get_meet

from .forms import DQSubmissionForm
from .services.submissions import NotAuthorized, submit_dq
from .session import SubmissionSession
from .taxonomy import is_offered, sections_for

logger = logging.getLogger(__name__)


# -------------------------------
# Utilidades
# -------------------------------
def _not_found(request: HttpRequest, meet_id: Any) -> HttpResponse:
    SubmissionSession.discard(request, meet_id)
    return render(request, "dq/not_found.html", {"meet_id": meet_id}, status=404)


def _render_form(
    request: HttpRequest,
    meet: Meet,
    form: DQSubmissionForm,
    session: SubmissionSession,
    status: int = 200,
) -> HttpResponse:
    ctx: Dict[str, Any] = {
        "meet": meet,
        "form": form,
        "session": session,
        "sections": sections_for(session.stroke),
        "selected": set(session.selected),
    }
    return render(request, "dq/submit.html", ctx, status=status)


def _unbound_form(request: HttpRequest, session: SubmissionSession) -> DQSubmissionForm:
    # Re-render sin validar: conserva lo tipeado, pero estilo/texto libre salen de la sesión
    initial = request.POST.dict()
    initial["stroke"] = session.stroke
    initial["other_text"] = session.other_text
    return DQSubmissionForm(initial=initial)


# -------------------------------
# Carga de DQ
# URL: submit/<int:meet_id>/
# -------------------------------
def submit(request: HttpRequest, meet_id: int) -> HttpResponse:
    """
    Formulario de DQ para un meet.
      - action=stroke  -> elige estilo (si cambia, limpia selección y texto libre)
      - toggle=<valor> -> agrega/quita una infracción ofrecida para el estilo actual
      - action=submit  -> valida, autoriza el email contra los invitados y guarda 'pending'
    Tras un envío exitoso se queda en la misma página (se pueden cargar varios DQs).
    """
    try:
        meet = get_meet(meet_id)
    except MeetNotFound:
        return _not_found(request, meet_id)
    except DatabaseError:
        logger.exception("Error loading meet id=%s", meet_id)
        return render(request, "dq/unavailable.html", {"meet_id": meet_id}, status=503)

    session = SubmissionSession.load(request, meet.pk)

    if request.method != "POST":
        form = DQSubmissionForm(initial={"stroke": session.stroke, "other_text": session.other_text})
        return _render_form(request, meet, form, session)

    # Los botones de infracción envían toggle=<valor guardado>
    if "toggle" in request.POST:
        action = "toggle"
    else:
        action = request.POST.get("action") or "submit"

    posted_stroke = request.POST.get("stroke", "")
    stroke_changed = posted_stroke != session.stroke
    session.select_stroke(posted_stroke)
    if not stroke_changed:
        session.set_other_text(request.POST.get("other_text", ""))

    if action == "toggle":
        value = request.POST.get("toggle", "")
        if is_offered(session.stroke, value):
            session.toggle_infraction(value)
        else:
            logger.warning("Ignoring infraction %r not offered for stroke %r", value, session.stroke)

    session.save(request, meet.pk)

    if action != "submit":
        return _render_form(request, meet, _unbound_form(request, session), session)

    form = DQSubmissionForm(request.POST)
    if not form.is_valid():
        messages.error(request, "There are errors in the form. Check the fields.")
        return _render_form(request, meet, form, session, status=400)

    data = form.cleaned_data
    try:
        submit_dq(
            meet.pk,
            team=data["team"],
            event_number=data["event_number"],
            heat_number=data["heat_number"],
            lane_number=data["lane_number"],
            swimmer_name=data["swimmer_name"],
            stroke=data["stroke"],
            official_email=data["official_email"],
            infractions=session.infractions(),
            notes=data.get("notes") or "",
        )
    except MeetNotFound:
        return _not_found(request, meet_id)
    except NotAuthorized as e:
        messages.error(request, str(e))
        return _render_form(request, meet, form, session, status=403)
    except DatabaseError:
        logger.exception("Error saving DQ for meet id=%s", meet.pk)
        messages.error(request, "Could not submit the DQ. Nothing was recorded.")
        return _render_form(request, meet, form, session, status=503)

    session.mark_submitted()
    session.save(request, meet.pk)
    messages.success(request, "DQ Submitted!")
    return _render_form(request, meet, form, session)
