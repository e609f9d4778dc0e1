"""Client forms."""
from django import forms

from apps.core.utils import only_digits

from .models import Client


def format_cnpj(digits: str) -> str:
    return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"


class ClientForm(forms.ModelForm):
    REQUIRED = ("razao_social", "nome_fantasia", "responsavel", "entrevistado")

    class Meta:
        model = Client
        fields = [
            "razao_social", "nome_fantasia", "cnpj", "responsavel", "entrevistado",
            "email", "whatsapp", "telefone_fixo",
            "logradouro", "numero", "bairro", "cidade", "uf", "cep",
            "site", "instagram", "linkedin",
            "data_fundacao", "inscricao_estadual",
            "faturamento_mensal", "faturamento_anual",
            "mercado", "nicho", "segmento", "quantidade_funcionarios",
            "estrutura_organizacional", "is_active",
        ]
        widgets = {
            "cnpj": forms.TextInput(attrs={"placeholder": "00.000.000/0000-00"}),
            "faturamento_mensal": forms.TextInput(attrs={"placeholder": "R$ 0,00"}),
            "faturamento_anual": forms.TextInput(attrs={"placeholder": "R$ 0,00"}),
            "data_fundacao": forms.DateInput(attrs={"type": "date"}),
            "estrutura_organizacional": forms.Textarea(attrs={"rows": 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name in self.REQUIRED:
            self.fields[name].required = True

    def clean_cnpj(self):
        raw = self.cleaned_data.get("cnpj") or ""
        if not raw.strip():
            return None
        digits = only_digits(raw)
        if len(digits) != 14:
            raise forms.ValidationError("CNPJ deve ter 14 dígitos.")
        return format_cnpj(digits)

    def clean_uf(self):
        return (self.cleaned_data.get("uf") or "").strip().upper()
