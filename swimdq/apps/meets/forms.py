from __future__ import annotations

from typing import Dict, List

from django import forms
from django.forms import formset_factory


class MeetForm(forms.Form):
    date = forms.DateField(label="Date", widget=forms.DateInput(attrs={"type": "date"}))
    home_team = forms.CharField(max_length=120, label="Home Team",
                                widget=forms.TextInput(attrs={"placeholder": "Home Team"}))
    away_team = forms.CharField(max_length=120, label="Away Team",
                                widget=forms.TextInput(attrs={"placeholder": "Away Team"}))

    # Juez principal
    head_official_name = forms.CharField(max_length=120, label="Name",
                                         widget=forms.TextInput(attrs={"placeholder": "Name"}))
    head_official_email = forms.EmailField(label="Email",
                                           widget=forms.EmailInput(attrs={"placeholder": "Email"}))

    def head_official(self) -> Dict[str, str]:
        return {
            "name": self.cleaned_data["head_official_name"],
            "email": self.cleaned_data["head_official_email"],
        }


class OfficialForm(forms.Form):
    name = forms.CharField(max_length=120, label="Name",
                           widget=forms.TextInput(attrs={"placeholder": "Name"}))
    email = forms.EmailField(label="Email", widget=forms.EmailInput(attrs={"placeholder": "Email"}))


class BaseOfficialFormSet(forms.BaseFormSet):
    def clean(self):
        super().clean()
        if any(self.errors):
            return
        if not self.officials():
            raise forms.ValidationError("Invite at least one official.")

    def officials(self) -> List[Dict[str, str]]:
        """
        Filas válidas y no borradas, en el orden en que se cargaron.
        """
        out: List[Dict[str, str]] = []
        for form in self.forms:
            data = getattr(form, "cleaned_data", None) or {}
            if not data or data.get("DELETE"):
                continue
            out.append({"name": data["name"], "email": data["email"]})
        return out


OfficialFormSet = formset_factory(
    OfficialForm,
    formset=BaseOfficialFormSet,
    extra=0,
    min_num=1,
    validate_min=True,
    can_delete=True,
)

# Misma forma, con una fila vacía adicional (opcional al validar)
OfficialFormSetWithBlankRow = formset_factory(
    OfficialForm,
    formset=BaseOfficialFormSet,
    extra=1,
    min_num=1,
    validate_min=True,
    can_delete=True,
)


def officials_with_extra_row(data, prefix: str = "officials"):
    """
    Re-arma el formset (sin validar) con lo enviado más una fila vacía:
    botón "Add Official" sin JavaScript. Las filas marcadas para borrar se descartan.
    """
    try:
        total = int(data.get(f"{prefix}-TOTAL_FORMS") or 0)
    except (TypeError, ValueError):
        total = 0

    initial: List[Dict[str, str]] = []
    for i in range(total):
        if data.get(f"{prefix}-{i}-DELETE"):
            continue
        initial.append({
            "name": data.get(f"{prefix}-{i}-name", ""),
            "email": data.get(f"{prefix}-{i}-email", ""),
        })
    return OfficialFormSetWithBlankRow(initial=initial or None, prefix=prefix)
