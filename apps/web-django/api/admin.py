from django.contrib import admin

from .models import HandRecord, NavigatorSession


@admin.register(NavigatorSession)
class NavigatorSessionAdmin(admin.ModelAdmin):
    list_display = ("session_id", "current_prediction", "reset_count", "updated_at")
    search_fields = ("session_id",)
    ordering = ("-updated_at",)


@admin.register(HandRecord)
class HandRecordAdmin(admin.ModelAdmin):
    list_display = (
        "session",
        "sequence_number",
        "player_score",
        "banker_score",
        "outcome",
        "evaluation_result",
        "running_total",
    )
    list_filter = ("outcome", "evaluation_result")
    ordering = ("session", "sequence_number")
