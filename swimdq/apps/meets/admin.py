from __future__ import annotations

from django.contrib import admin, messages
from django.utils.translation import gettext_lazy as _

from .models import Meet, Official
from .services.meets import close_meet


# -----------------------------
# Inline de oficiales invitados
# -----------------------------
class OfficialInline(admin.TabularInline):
    model = Official
    extra = 0
    fields = ("position", "name", "email")
    ordering = ("position", "id")


# -----------------------------
# Meet
# -----------------------------
@admin.register(Meet)
class MeetAdmin(admin.ModelAdmin):
    list_display = ("name", "date", "status", "head_official_name", "invited_count", "created_at")
    list_filter = ("status", "date")
    search_fields = ("name", "home_team", "away_team", "head_official_email", "invited_officials__email")
    # status solo cambia con la acción de cierre (active -> closed)
    readonly_fields = ("name", "status", "created_at")
    inlines = [OfficialInline]
    actions = ["action_close_meets"]

    def has_add_permission(self, request) -> bool:
        # Los meets se crean desde /admin/ (create_meet valida invitados)
        return False

    def invited_count(self, obj: Meet) -> int:
        return obj.invited_officials.count()
    invited_count.short_description = "Invited"

    @admin.action(description=_("Close selected meets"))
    def action_close_meets(self, request, queryset):
        closed = 0
        for meet in queryset:
            close_meet(meet.pk)
            closed += 1
        self.message_user(request, f"{closed} meets closed.", level=messages.SUCCESS)
