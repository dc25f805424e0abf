from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.core.validators import validate_email
from django.db import transaction
from django.db.models import Max

from openpyxl import load_workbook

from swimdq.apps.meets.models import Meet, Official

COLUMNS = ["name", "email"]


def _read_rows(xlsx_path: Path, sheet_name: str | None) -> List[Dict[str, str]]:
    """
    Lee la hoja y devuelve filas {name, email} (strings ya recortados).
    La cabecera debe tener las columnas 'name' y 'email' (en cualquier orden).
    """
    wb = load_workbook(filename=str(xlsx_path), data_only=True, read_only=True)
    try:
        try:
            ws = wb[sheet_name] if sheet_name else wb.worksheets[0]
        except KeyError:
            raise CommandError(f"Hoja '{sheet_name}' no existe en {xlsx_path.name}.")

        rows_iter = ws.iter_rows(values_only=True)
        header_cells = next(rows_iter, None) or ()
        headers = [str(h).strip().lower() if h is not None else "" for h in header_cells]

        missing = [c for c in COLUMNS if c not in headers]
        if missing:
            raise CommandError(
                f"Cabecera inválida: faltan columnas {missing}. Cabecera completa: {headers}"
            )
        idx = {c: headers.index(c) for c in COLUMNS}

        out: List[Dict[str, str]] = []
        for values in rows_iter:
            values = list(values or ())
            row = {}
            for col, i in idx.items():
                v = values[i] if i < len(values) else None
                row[col] = str(v).strip() if v is not None else ""
            out.append(row)
        return out
    finally:
        wb.close()


class Command(BaseCommand):
    help = "Agrega oficiales invitados a un meet desde un .xlsx con columnas 'name' y 'email'."

    def add_arguments(self, parser):
        parser.add_argument("meet_id", type=int, help="Id del meet destino.")
        parser.add_argument("xlsx_path", type=str, help="Ruta al archivo .xlsx con los oficiales.")
        parser.add_argument("--sheet", type=str, default=None, help="Nombre de la hoja (por defecto: primera)")
        parser.add_argument("--dry-run", action="store_true", help="Simula sin escribir cambios")

    def handle(self, *args, **options):
        xlsx_path = Path(options["xlsx_path"])
        dry_run = options.get("dry_run", False)

        if not xlsx_path.exists():
            raise CommandError(f"Archivo no encontrado: {xlsx_path}")

        try:
            meet = Meet.objects.get(pk=options["meet_id"])
        except Meet.DoesNotExist:
            raise CommandError(f"Meet {options['meet_id']} no existe.")

        rows = _read_rows(xlsx_path, options.get("sheet"))

        known = {e.casefold() for e in meet.invited_officials.values_list("email", flat=True)}
        to_add: List[Dict[str, str]] = []
        skipped = errors = 0

        for line, row in enumerate(rows, start=2):
            if not row["name"] and not row["email"]:
                continue
            if not row["name"] or not row["email"]:
                errors += 1
                self.stdout.write(self.style.WARNING(f"Fila {line}: falta nombre o email; se ignora."))
                continue
            try:
                validate_email(row["email"])
            except ValidationError:
                errors += 1
                self.stdout.write(self.style.WARNING(f"Fila {line}: email inválido '{row['email']}'."))
                continue
            if row["email"].casefold() in known:
                skipped += 1
                continue
            known.add(row["email"].casefold())
            to_add.append(row)

        if not dry_run and to_add:
            with transaction.atomic():
                start = (meet.invited_officials.aggregate(m=Max("position"))["m"] or 0) + 1
                Official.objects.bulk_create(
                    [
                        Official(meet=meet, name=r["name"], email=r["email"], position=start + i)
                        for i, r in enumerate(to_add)
                    ]
                )

        self.stdout.write(self.style.SUCCESS(f"Meet: {meet.name}"))
        self.stdout.write(self.style.SUCCESS(
            f"Nuevos: {len(to_add)}  ·  Ya invitados: {skipped}  ·  ERRORES: {errors}"
        ))
        if dry_run:
            self.stdout.write("(Simulación; no se escribió nada. Quita --dry-run para aplicar.)")
