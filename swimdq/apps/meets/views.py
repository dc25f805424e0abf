from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from .forms import MeetForm, OfficialFormSet, officials_with_extra_row
from .models import Meet
from .services.meets import MeetNotFound, close_meet, create_meet, list_meets

logger = logging.getLogger(__name__)

OFFICIALS_PREFIX = "officials"


def _created_meet(request: HttpRequest) -> Optional[Meet]:
    # ?created=<id> tras el redirect de creación
    value = request.GET.get("created")
    if not value:
        return None
    try:
        return Meet.objects.get(pk=int(value))
    except (Meet.DoesNotExist, ValueError, TypeError):
        return None


def _render_dashboard(request: HttpRequest, form: MeetForm, formset, status: int = 200) -> HttpResponse:
    ctx: Dict[str, Any] = {
        "form": form,
        "formset": formset,
        "created_meet": _created_meet(request),
    }
    try:
        ctx["meets"] = list_meets()
    except DatabaseError:
        logger.exception("Could not load meets")
        messages.error(request, "Could not load meets. Try again.")
        ctx["meets"] = []
    return render(request, "meets/admin.html", ctx, status=status)


@staff_member_required(login_url="login")
def admin_dashboard(request: HttpRequest) -> HttpResponse:
    """
    Página única de administración:
      - GET: formulario de creación + lista de meets (fecha DESC, creación DESC).
      - POST action=add_official: re-render con una fila más de invitado (sin validar).
      - POST: crea el meet y redirige con ?created=<id> para mostrar los links.
    """
    if request.method == "POST":
        if request.POST.get("action") == "add_official":
            form = MeetForm(initial=request.POST.dict())
            formset = officials_with_extra_row(request.POST, prefix=OFFICIALS_PREFIX)
            return _render_dashboard(request, form, formset)

        form = MeetForm(request.POST)
        formset = OfficialFormSet(request.POST, prefix=OFFICIALS_PREFIX)
        if form.is_valid() and formset.is_valid():
            try:
                meet_id = create_meet(
                    form.cleaned_data["date"],
                    form.cleaned_data["home_team"],
                    form.cleaned_data["away_team"],
                    form.head_official(),
                    formset.officials(),
                )
            except ValidationError as e:
                for msg in e.messages:
                    form.add_error(None, msg)
            except DatabaseError:
                logger.exception("Error creating meet")
                messages.error(request, "Error creating meet. Nothing was saved.")
            else:
                messages.success(request, "Meet created!")
                return redirect(f"{reverse('meets_admin')}?created={meet_id}")
        else:
            messages.error(request, "There are errors in the form. Check the fields.")
        return _render_dashboard(request, form, formset, status=400)

    form = MeetForm()
    formset = OfficialFormSet(prefix=OFFICIALS_PREFIX)
    return _render_dashboard(request, form, formset)


@staff_member_required(login_url="login")
@require_POST
def close(request: HttpRequest, meet_id: int) -> HttpResponse:
    try:
        meet = close_meet(meet_id)
    except MeetNotFound:
        messages.error(request, "Meet not found.")
    except DatabaseError:
        logger.exception("Error closing meet id=%s", meet_id)
        messages.error(request, "Could not close the meet. Try again.")
    else:
        messages.success(request, f"Meet '{meet.name}' closed.")
    return redirect(reverse("meets_admin"))


# -------- Healthcheck simple --------
def health(request: HttpRequest) -> JsonResponse:
    return JsonResponse({"ok": True})
