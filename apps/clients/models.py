"""Client domain models."""
from django.db import models

from apps.core.models import TimeStampedModel


class Client(TimeStampedModel):
    """Empresa diagnosticada — dados do cadastro inicial."""

    razao_social = models.CharField("Razão Social", max_length=300)
    nome_fantasia = models.CharField("Nome Fantasia", max_length=300)
    cnpj = models.CharField(
        "CNPJ", max_length=18, unique=True, null=True, blank=True,
        help_text="Chave de upsert do cadastro; vazio = ainda não informado",
    )
    responsavel = models.CharField("Responsável", max_length=200, blank=True)
    entrevistado = models.CharField("Entrevistado", max_length=200, blank=True)
    email = models.EmailField("E-mail", blank=True)
    whatsapp = models.CharField("WhatsApp", max_length=20, blank=True)
    telefone_fixo = models.CharField("Telefone fixo", max_length=20, blank=True)

    # Endereço
    logradouro = models.CharField("Logradouro", max_length=300, blank=True)
    numero = models.CharField("Número", max_length=20, blank=True)
    bairro = models.CharField("Bairro", max_length=120, blank=True)
    cidade = models.CharField("Cidade", max_length=120, blank=True)
    uf = models.CharField("UF", max_length=2, blank=True)
    cep = models.CharField("CEP", max_length=9, blank=True)

    # Presença digital
    site = models.URLField("Site", blank=True)
    instagram = models.CharField("Instagram", max_length=120, blank=True)
    linkedin = models.CharField("LinkedIn", max_length=200, blank=True)

    # Perfil do negócio
    data_fundacao = models.DateField("Data de fundação", null=True, blank=True)
    inscricao_estadual = models.CharField("Inscrição Estadual", max_length=30, blank=True)
    faturamento_mensal = models.CharField("Faturamento mensal médio", max_length=50, blank=True)
    faturamento_anual = models.CharField("Faturamento anual", max_length=50, blank=True)
    mercado = models.CharField("Mercado", max_length=120, blank=True)
    nicho = models.CharField("Nicho", max_length=120, blank=True)
    segmento = models.CharField("Segmento", max_length=120, blank=True)
    quantidade_funcionarios = models.CharField("Quantidade de funcionários", max_length=50, blank=True)
    estrutura_organizacional = models.TextField("Estrutura organizacional", blank=True)
    is_active = models.BooleanField("Ativo", default=True)

    class Meta:
        verbose_name = "Cliente"
        verbose_name_plural = "Clientes"
        ordering = ["nome_fantasia"]

    def __str__(self):
        if self.cnpj:
            return f"{self.nome_fantasia} ({self.cnpj})"
        return self.nome_fantasia
