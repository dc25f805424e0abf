from __future__ import annotations

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from swimdq.apps.meets.models import Meet, build_meet_name
from swimdq.apps.meets.services.meets import create_meet


class Command(BaseCommand):
    help = "Crea un meet DEMO activo con juez principal y oficiales invitados (idempotente por nombre)."

    def add_arguments(self, parser):
        parser.add_argument("--home", default="Dolphins", help="Equipo local.")
        parser.add_argument("--away", default="Sharks", help="Equipo visitante.")
        parser.add_argument("--days-ahead", dest="days_ahead", type=int, default=7,
                            help="Días desde hoy para la fecha del meet.")
        parser.add_argument("--officials", type=int, default=3, help="Cantidad de oficiales invitados.")

    def handle(self, *args, **opts):
        meet_date = timezone.localdate() + timedelta(days=opts["days_ahead"])
        name = build_meet_name(opts["home"], opts["away"], meet_date)

        existing = Meet.objects.filter(name=name).first()
        if existing:
            self.stdout.write(self.style.WARNING(f"Ya existe '{name}' (id={existing.pk}); no se crea otro."))
            return

        invited = [
            {"name": f"Official {i}", "email": f"official{i}@swimdq.test"}
            for i in range(1, max(opts["officials"], 1) + 1)
        ]
        meet_id = create_meet(
            meet_date,
            opts["home"],
            opts["away"],
            {"name": "Head Referee", "email": "referee@swimdq.test"},
            invited,
        )

        self.stdout.write(self.style.SUCCESS(f"✓ Meet '{name}' creado (id={meet_id})"))
        self.stdout.write(f"  Submit: /submit/{meet_id}/")
        for o in invited:
            self.stdout.write(f"  Invitado: {o['name']} <{o['email']}>")
