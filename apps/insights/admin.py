from django.contrib import admin

from apps.core.utils import truncate

from .models import StrategicInsight


@admin.register(StrategicInsight)
class StrategicInsightAdmin(admin.ModelAdmin):
    list_display = [
        "diagnostic", "status", "hash_short", "model_name", "prompt_version",
        "tokens_used", "error_short", "created_at",
    ]
    list_filter = ["status", "model_name"]
    readonly_fields = ["content_hash", "payload", "error_message", "created_at"]

    @admin.display(description="Hash")
    def hash_short(self, obj):
        return obj.content_hash[:8]

    @admin.display(description="Erro")
    def error_short(self, obj):
        return truncate(obj.error_message, 80)
