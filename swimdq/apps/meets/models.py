from __future__ import annotations

from datetime import date as date_cls

from django.db import models
from django.utils import timezone


def build_meet_name(home_team: str, away_team: str, meet_date) -> str:
    """
    Nombre visible del meet: "{home} vs {away} - {fecha ISO}".
    """
    if isinstance(meet_date, date_cls):
        meet_date = meet_date.isoformat()
    return f"{home_team} vs {away_team} - {meet_date}"


class Meet(models.Model):
    STATUS_ACTIVE = "active"
    STATUS_CLOSED = "closed"
    STATUS_CHOICES = (
        (STATUS_ACTIVE, "Active"),
        (STATUS_CLOSED, "Closed"),
    )

    name = models.CharField(max_length=255, blank=True)
    date = models.DateField()
    home_team = models.CharField(max_length=120)
    away_team = models.CharField(max_length=120)

    # Juez principal (no forma parte de la lista de invitados)
    head_official_name = models.CharField(max_length=120)
    head_official_email = models.EmailField()

    status = models.CharField(max_length=8, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    # Nullable: registros importados pueden no traer timestamp
    created_at = models.DateTimeField(default=timezone.now, null=True, blank=True)

    class Meta:
        ordering = ("-date", "-created_at")

    def __str__(self) -> str:
        return self.name or build_meet_name(self.home_team, self.away_team, self.date)

    def save(self, *args, **kwargs):
        # El nombre se deriva siempre de equipos + fecha
        self.name = build_meet_name(self.home_team, self.away_team, self.date)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "name" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["name"]
        super().save(*args, **kwargs)

    @property
    def is_active(self) -> bool:
        return self.status == self.STATUS_ACTIVE

    @property
    def is_closed(self) -> bool:
        return self.status == self.STATUS_CLOSED


class Official(models.Model):
    """
    Oficial invitado a un meet. La lista de invitados es la allow-list
    para cargar DQs; el email se compara sin distinguir mayúsculas.
    """
    meet = models.ForeignKey(Meet, on_delete=models.CASCADE, related_name="invited_officials")
    name = models.CharField(max_length=120)
    email = models.EmailField()
    position = models.PositiveIntegerField(default=0, help_text="Orden dentro de la lista de invitados.")

    class Meta:
        ordering = ("meet", "position", "id")

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
