from django.contrib import admin

from .models import Diagnostic
from .scoring import total_progress


@admin.register(Diagnostic)
class DiagnosticAdmin(admin.ModelAdmin):
    list_display = ["__str__", "client", "status", "progress", "updated_at", "finished_at"]
    list_filter = ["status"]
    search_fields = ["client__nome_fantasia", "client__razao_social", "client__cnpj"]
    readonly_fields = ["client_info", "responses", "finished_at"]
    date_hierarchy = "created_at"

    @admin.display(description="Progresso")
    def progress(self, obj):
        return f"{total_progress(obj.to_session())}%"
