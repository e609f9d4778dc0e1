import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("clients", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Lead",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Atualizado em")),
                ("nome_cliente", models.CharField(max_length=300, verbose_name="Cliente")),
                ("status", models.CharField(choices=[("Novo", "Novo"), ("Em negociação", "Em negociação"), ("Proposta enviada", "Proposta enviada"), ("Ganhos", "Ganhos"), ("Perdido", "Perdido")], db_index=True, default="Novo", max_length=30, verbose_name="Status")),
                ("valor_estimado", models.DecimalField(decimal_places=2, default=0, max_digits=15, verbose_name="Valor estimado")),
                ("client", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="leads", to="clients.client")),
            ],
            options={
                "verbose_name": "Lead",
                "verbose_name_plural": "Leads",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Contract",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Atualizado em")),
                ("descricao", models.CharField(blank=True, max_length=300, verbose_name="Descrição")),
                ("valor", models.DecimalField(decimal_places=2, max_digits=15, verbose_name="Valor")),
                ("status", models.CharField(choices=[("Ativo", "Ativo"), ("Encerrado", "Encerrado")], db_index=True, default="Ativo", max_length=20, verbose_name="Status")),
                ("client", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="contracts", to="clients.client")),
            ],
            options={
                "verbose_name": "Contrato",
                "verbose_name_plural": "Contratos",
                "ordering": ["-created_at"],
            },
        ),
    ]
