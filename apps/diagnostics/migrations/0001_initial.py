import uuid

import django.core.serializers.json
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("clients", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Diagnostic",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Atualizado em")),
                ("client_info", models.JSONField(blank=True, default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder, help_text="Cópia do cadastro no momento da entrevista", verbose_name="Dados do cliente (snapshot)")),
                ("responses", models.JSONField(blank=True, default=dict, help_text='{"1.1": {"selected_option": "B", "score": 33, "observation": "", "action_plan": ""}}', verbose_name="Respostas")),
                ("status", models.CharField(choices=[("Iniciado", "Iniciado"), ("Finalizado", "Finalizado")], db_index=True, default="Iniciado", max_length=20, verbose_name="Status")),
                ("finished_at", models.DateTimeField(blank=True, null=True, verbose_name="Finalizado em")),
                ("client", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="diagnostics", to="clients.client")),
            ],
            options={
                "verbose_name": "Diagnóstico",
                "verbose_name_plural": "Diagnósticos",
                "ordering": ["-updated_at"],
            },
        ),
    ]
