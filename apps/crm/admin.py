from django.contrib import admin

from .models import Contract, Lead


@admin.register(Lead)
class LeadAdmin(admin.ModelAdmin):
    list_display = ["nome_cliente", "status", "valor_estimado", "created_at"]
    list_filter = ["status"]
    search_fields = ["nome_cliente"]


@admin.register(Contract)
class ContractAdmin(admin.ModelAdmin):
    list_display = ["client", "descricao", "valor", "status", "created_at"]
    list_filter = ["status"]
