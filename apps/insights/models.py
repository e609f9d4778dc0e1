"""Strategic insight cache: one LLM payload per diagnostic content hash."""
from django.db import models

from apps.core.models import TimeStampedModel
from apps.diagnostics.models import Diagnostic


class StrategicInsight(TimeStampedModel):
    """Relatório estratégico gerado por IA para um estado exato das respostas."""

    class Status(models.TextChoices):
        PENDING = "pending", "Em processamento"
        READY = "ready", "Pronto"
        UNAVAILABLE = "unavailable", "Indisponível"
        SUPERSEDED = "superseded", "Substituído"

    diagnostic = models.ForeignKey(
        Diagnostic, on_delete=models.CASCADE, related_name="insights"
    )
    content_hash = models.CharField(
        "Hash das respostas", max_length=64,
        help_text="SHA-256 das respostas usadas no prompt",
    )
    status = models.CharField(
        "Status", max_length=20, choices=Status.choices,
        default=Status.PENDING, db_index=True,
    )
    payload = models.JSONField(
        "Relatório", default=dict, blank=True,
        help_text="sumarioExecutivo, swot, ishikawa, plano5W2H, pdca",
    )
    error_message = models.TextField("Erro", blank=True)
    prompt_version = models.CharField("Versão do prompt", max_length=50, blank=True)
    model_name = models.CharField("Modelo IA", max_length=100, blank=True)
    tokens_used = models.PositiveIntegerField("Tokens consumidos", default=0)
    processing_time_ms = models.PositiveIntegerField("Tempo (ms)", default=0)

    class Meta:
        verbose_name = "Insight Estratégico"
        verbose_name_plural = "Insights Estratégicos"
        ordering = ["-created_at"]
        unique_together = [("diagnostic", "content_hash")]

    def __str__(self):
        return f"{self.get_status_display()} — {self.diagnostic} [{self.content_hash[:8]}]"
