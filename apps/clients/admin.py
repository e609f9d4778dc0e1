from django.contrib import admin

from apps.diagnostics.models import Diagnostic

from .models import Client


class DiagnosticInline(admin.TabularInline):
    model = Diagnostic
    extra = 0
    fields = ["status", "finished_at", "updated_at"]
    readonly_fields = ["status", "finished_at", "updated_at"]
    show_change_link = True


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ["nome_fantasia", "razao_social", "cnpj", "email", "is_active", "created_at"]
    list_filter = ["is_active", "uf", "segmento"]
    search_fields = ["nome_fantasia", "razao_social", "cnpj"]
    inlines = [DiagnosticInline]
