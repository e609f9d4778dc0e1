"""CRM: leads (propostas) and active contracts."""
from django.db import models

from apps.clients.models import Client
from apps.core.models import TimeStampedModel


class Lead(TimeStampedModel):
    """Oportunidade comercial no funil da consultoria."""

    class Status(models.TextChoices):
        NEW = "Novo", "Novo"
        NEGOTIATING = "Em negociação", "Em negociação"
        PROPOSAL_SENT = "Proposta enviada", "Proposta enviada"
        WON = "Ganhos", "Ganhos"
        LOST = "Perdido", "Perdido"

    nome_cliente = models.CharField("Cliente", max_length=300)
    client = models.ForeignKey(
        Client, on_delete=models.SET_NULL, null=True, blank=True, related_name="leads"
    )
    status = models.CharField(
        "Status", max_length=30, choices=Status.choices, default=Status.NEW, db_index=True
    )
    valor_estimado = models.DecimalField(
        "Valor estimado", max_digits=15, decimal_places=2, default=0
    )

    class Meta:
        verbose_name = "Lead"
        verbose_name_plural = "Leads"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.nome_cliente} — {self.status}"


class Contract(TimeStampedModel):
    """Contrato de consultoria fechado com um cliente."""

    class Status(models.TextChoices):
        ACTIVE = "Ativo", "Ativo"
        CLOSED = "Encerrado", "Encerrado"

    client = models.ForeignKey(Client, on_delete=models.CASCADE, related_name="contracts")
    descricao = models.CharField("Descrição", max_length=300, blank=True)
    valor = models.DecimalField("Valor", max_digits=15, decimal_places=2)
    status = models.CharField(
        "Status", max_length=20, choices=Status.choices, default=Status.ACTIVE, db_index=True
    )

    class Meta:
        verbose_name = "Contrato"
        verbose_name_plural = "Contratos"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.client.nome_fantasia} — R$ {self.valor} ({self.status})"
