import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Client",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Criado em")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Atualizado em")),
                ("razao_social", models.CharField(max_length=300, verbose_name="Razão Social")),
                ("nome_fantasia", models.CharField(max_length=300, verbose_name="Nome Fantasia")),
                ("cnpj", models.CharField(blank=True, help_text="Chave de upsert do cadastro; vazio = ainda não informado", max_length=18, null=True, unique=True, verbose_name="CNPJ")),
                ("responsavel", models.CharField(blank=True, max_length=200, verbose_name="Responsável")),
                ("entrevistado", models.CharField(blank=True, max_length=200, verbose_name="Entrevistado")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="E-mail")),
                ("whatsapp", models.CharField(blank=True, max_length=20, verbose_name="WhatsApp")),
                ("telefone_fixo", models.CharField(blank=True, max_length=20, verbose_name="Telefone fixo")),
                ("logradouro", models.CharField(blank=True, max_length=300, verbose_name="Logradouro")),
                ("numero", models.CharField(blank=True, max_length=20, verbose_name="Número")),
                ("bairro", models.CharField(blank=True, max_length=120, verbose_name="Bairro")),
                ("cidade", models.CharField(blank=True, max_length=120, verbose_name="Cidade")),
                ("uf", models.CharField(blank=True, max_length=2, verbose_name="UF")),
                ("cep", models.CharField(blank=True, max_length=9, verbose_name="CEP")),
                ("site", models.URLField(blank=True, verbose_name="Site")),
                ("instagram", models.CharField(blank=True, max_length=120, verbose_name="Instagram")),
                ("linkedin", models.CharField(blank=True, max_length=200, verbose_name="LinkedIn")),
                ("data_fundacao", models.DateField(blank=True, null=True, verbose_name="Data de fundação")),
                ("inscricao_estadual", models.CharField(blank=True, max_length=30, verbose_name="Inscrição Estadual")),
                ("faturamento_mensal", models.CharField(blank=True, max_length=50, verbose_name="Faturamento mensal médio")),
                ("faturamento_anual", models.CharField(blank=True, max_length=50, verbose_name="Faturamento anual")),
                ("mercado", models.CharField(blank=True, max_length=120, verbose_name="Mercado")),
                ("nicho", models.CharField(blank=True, max_length=120, verbose_name="Nicho")),
                ("segmento", models.CharField(blank=True, max_length=120, verbose_name="Segmento")),
                ("quantidade_funcionarios", models.CharField(blank=True, max_length=50, verbose_name="Quantidade de funcionários")),
                ("estrutura_organizacional", models.TextField(blank=True, verbose_name="Estrutura organizacional")),
                ("is_active", models.BooleanField(default=True, verbose_name="Ativo")),
            ],
            options={
                "verbose_name": "Cliente",
                "verbose_name_plural": "Clientes",
                "ordering": ["nome_fantasia"],
            },
        ),
    ]
