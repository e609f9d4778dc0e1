import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("diagnostics", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="StrategicInsight",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Atualizado em")),
                ("content_hash", models.CharField(help_text="SHA-256 das respostas usadas no prompt", max_length=64, verbose_name="Hash das respostas")),
                ("status", models.CharField(choices=[("pending", "Em processamento"), ("ready", "Pronto"), ("unavailable", "Indisponível"), ("superseded", "Substituído")], db_index=True, default="pending", max_length=20, verbose_name="Status")),
                ("payload", models.JSONField(blank=True, default=dict, help_text="sumarioExecutivo, swot, ishikawa, plano5W2H, pdca", verbose_name="Relatório")),
                ("error_message", models.TextField(blank=True, verbose_name="Erro")),
                ("prompt_version", models.CharField(blank=True, max_length=50, verbose_name="Versão do prompt")),
                ("model_name", models.CharField(blank=True, max_length=100, verbose_name="Modelo IA")),
                ("tokens_used", models.PositiveIntegerField(default=0, verbose_name="Tokens consumidos")),
                ("processing_time_ms", models.PositiveIntegerField(default=0, verbose_name="Tempo (ms)")),
                ("diagnostic", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="insights", to="diagnostics.diagnostic")),
            ],
            options={
                "verbose_name": "Insight Estratégico",
                "verbose_name_plural": "Insights Estratégicos",
                "ordering": ["-created_at"],
                "unique_together": {("diagnostic", "content_hash")},
            },
        ),
    ]
