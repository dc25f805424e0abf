from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from swimdq.apps.meets.services.meets import MeetNotFound, close_meet


class Command(BaseCommand):
    help = "Cierra un meet (status -> closed). Cerrar uno ya cerrado no cambia nada."

    def add_arguments(self, parser):
        parser.add_argument("meet_id", type=int, help="Id del meet.")

    def handle(self, *args, **opts):
        try:
            meet = close_meet(opts["meet_id"])
        except MeetNotFound:
            raise CommandError(f"No existe Meet con id={opts['meet_id']}")

        self.stdout.write(self.style.SUCCESS(f"✓ Meet '{meet.name}' cerrado"))
