# swimdq/apps/dq/models.py
from __future__ import annotations

from django.db import models
from django.utils import timezone


class DQSubmission(models.Model):
    """
    Reporte de descalificación cargado por un oficial invitado.
    Se crea siempre en 'pending'; la revisión queda fuera de este flujo.
    """
    STATUS_PENDING = "pending"
    STATUS_CHOICES = (
        (STATUS_PENDING, "Pending"),
    )

    meet = models.ForeignKey(
        "meets.Meet",
        on_delete=models.CASCADE,
        related_name="dq_submissions",
    )

    team = models.CharField(max_length=120)
    event_number = models.CharField(max_length=16)
    heat_number = models.CharField(max_length=16)
    lane_number = models.CharField(max_length=16)
    swimmer_name = models.CharField(max_length=160)
    stroke = models.CharField(max_length=32)

    # Valores guardados del catálogo, en orden de selección; "Other: ..." al final
    infractions = models.JSONField(default=list, blank=True)

    official_email = models.EmailField()
    notes = models.TextField(blank=True, default="")

    submitted_at = models.DateTimeField(default=timezone.now, editable=False)
    status = models.CharField(max_length=8, choices=STATUS_CHOICES, default=STATUS_PENDING)

    class Meta:
        ordering = ("-submitted_at",)

    def __str__(self) -> str:
        return f"{self.meet} · E{self.event_number} H{self.heat_number} L{self.lane_number} · {self.swimmer_name}"
