from __future__ import annotations

from django.contrib import admin

from .models import DQSubmission


@admin.register(DQSubmission)
class DQSubmissionAdmin(admin.ModelAdmin):
    """
    Solo lectura: los DQs se crean únicamente desde /submit/<meet_id>/,
    donde se valida el email contra los oficiales invitados.
    """
    list_display = (
        "meet",
        "event_number",
        "heat_number",
        "lane_number",
        "swimmer_name",
        "team",
        "stroke",
        "official_email",
        "status",
        "submitted_at",
    )
    list_filter = ("meet", "stroke", "status")
    search_fields = ("swimmer_name", "team", "official_email")
    fields = (
        "meet",
        "team",
        "event_number",
        "heat_number",
        "lane_number",
        "swimmer_name",
        "stroke",
        "infractions_display",
        "notes",
        "official_email",
        "status",
        "submitted_at",
    )
    readonly_fields = fields

    def has_add_permission(self, request) -> bool:
        return False

    def infractions_display(self, obj: DQSubmission) -> str:
        return ", ".join(obj.infractions or []) or "—"
    infractions_display.short_description = "Infractions"
