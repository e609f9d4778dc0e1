"""Diagnostic 360º — persisted session state."""
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models

from apps.clients.models import Client
from apps.core.models import TimeStampedModel

from .scoring import STATUS_FINALIZED, STATUS_STARTED, DiagnosticSession


class Diagnostic(TimeStampedModel):
    """Sessão de diagnóstico: respostas por pergunta + status."""

    class Status(models.TextChoices):
        STARTED = STATUS_STARTED, "Iniciado"
        FINALIZED = STATUS_FINALIZED, "Finalizado"

    client = models.ForeignKey(
        Client, on_delete=models.SET_NULL, null=True, blank=True,
        related_name="diagnostics",
    )
    client_info = models.JSONField(
        "Dados do cliente (snapshot)", default=dict, blank=True, encoder=DjangoJSONEncoder,
        help_text="Cópia do cadastro no momento da entrevista",
    )
    responses = models.JSONField(
        "Respostas", default=dict, blank=True,
        help_text='{"1.1": {"selected_option": "B", "score": 33, "observation": "", "action_plan": ""}}',
    )
    status = models.CharField(
        "Status", max_length=20, choices=Status.choices,
        default=Status.STARTED, db_index=True,
    )
    finished_at = models.DateTimeField("Finalizado em", null=True, blank=True)

    class Meta:
        verbose_name = "Diagnóstico"
        verbose_name_plural = "Diagnósticos"
        ordering = ["-updated_at"]

    def __str__(self):
        return f"Diagnóstico {self.client_name or str(self.pk)[:8]} ({self.status})"

    @property
    def client_name(self) -> str:
        name = (self.client_info or {}).get("nome_fantasia", "")
        if not name and self.client_id:
            name = self.client.nome_fantasia
        return name

    def to_session(self) -> DiagnosticSession:
        return DiagnosticSession.from_dict({
            "id": self.pk,
            "client_id": self.client_id,
            "responses": self.responses,
            "status": self.status,
        })
