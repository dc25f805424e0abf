# swimdq/apps/dq/forms.py
from __future__ import annotations

from django import forms

from .taxonomy import stroke_choices


class DQSubmissionForm(forms.Form):
    """
    Campos del DQ. Las infracciones no viajan acá: se acumulan en
    SubmissionSession con los botones de toggle.
    """
    team = forms.CharField(max_length=120, label="Team",
                           widget=forms.TextInput(attrs={"placeholder": "Team"}))
    event_number = forms.CharField(max_length=16, label="Event #",
                                   widget=forms.TextInput(attrs={"placeholder": "Event #"}))
    heat_number = forms.CharField(max_length=16, label="Heat #",
                                  widget=forms.TextInput(attrs={"placeholder": "Heat #"}))
    lane_number = forms.CharField(max_length=16, label="Lane #",
                                  widget=forms.TextInput(attrs={"placeholder": "Lane #"}))
    swimmer_name = forms.CharField(max_length=160, label="Swimmer Name",
                                   widget=forms.TextInput(attrs={"placeholder": "Swimmer Name"}))
    stroke = forms.ChoiceField(label="Stroke")
    other_text = forms.CharField(
        required=False,
        max_length=200,
        label="Other",
        widget=forms.TextInput(attrs={"placeholder": "Describe other infraction"}),
    )
    notes = forms.CharField(
        required=False,
        label="Notes",
        widget=forms.Textarea(attrs={"placeholder": "Optional notes...", "rows": 3}),
    )
    official_email = forms.EmailField(label="Your Email",
                                      widget=forms.EmailInput(attrs={"placeholder": "Your Email"}))

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["stroke"].choices = [("", "Select Stroke")] + stroke_choices()
