"""Diagnostic forms — client intake and per-area questionnaire."""
from django import forms

from apps.clients.forms import format_cnpj
from apps.core.utils import only_digits

from .catalog import OPTIONS, questions_for_area


class DiagnosticStartForm(forms.Form):
    """Dados vitais do cliente coletados antes do questionário."""

    razao_social = forms.CharField(label="Razão Social", max_length=300)
    nome_fantasia = forms.CharField(label="Nome Fantasia", max_length=300)
    cnpj = forms.CharField(
        label="CNPJ", max_length=18, required=False,
        widget=forms.TextInput(attrs={"placeholder": "00.000.000/0000-00"}),
    )
    responsavel = forms.CharField(label="Responsável", max_length=200)
    entrevistado = forms.CharField(
        label="Nome do Entrevistado", max_length=200,
        widget=forms.TextInput(attrs={"placeholder": "Quem está respondendo?"}),
    )
    email = forms.EmailField(label="E-mail", required=False)
    whatsapp = forms.CharField(label="WhatsApp", max_length=20, required=False)
    segmento = forms.CharField(
        label="Mercado / Segmento", max_length=120, required=False,
        widget=forms.TextInput(attrs={"placeholder": "Ex: Indústria, Varejo, Serviços..."}),
    )
    quantidade_funcionarios = forms.CharField(label="Quantidade de Funcionários", max_length=50, required=False)
    faturamento_mensal = forms.CharField(label="Faturamento Mensal Médio", max_length=50, required=False)
    faturamento_anual = forms.CharField(label="Faturamento Anual", max_length=50, required=False)
    estrutura_organizacional = forms.CharField(
        label="Estrutura Organizacional Atual", required=False,
        widget=forms.Textarea(attrs={"rows": 3}),
    )

    def clean_cnpj(self):
        raw = self.cleaned_data.get("cnpj", "")
        if not raw.strip():
            return ""
        digits = only_digits(raw)
        if len(digits) != 14:
            raise forms.ValidationError("CNPJ deve ter 14 dígitos.")
        return format_cnpj(digits)


def field_key(question_id: str) -> str:
    return question_id.replace(".", "_")


class AreaResponsesForm(forms.Form):
    """Option + notes for every question of one area."""

    def __init__(self, area_id: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.area_id = area_id
        self.questions = questions_for_area(area_id)
        for q in self.questions:
            key = field_key(q.id)
            self.fields[f"opt_{key}"] = forms.ChoiceField(
                label=q.prompt,
                choices=[(opt, q.options[opt]) for opt in OPTIONS],
                widget=forms.RadioSelect,
                required=False,
            )
            self.fields[f"obs_{key}"] = forms.CharField(
                label="Observações do Consultor", required=False,
                widget=forms.Textarea(attrs={"rows": 3, "placeholder": "Notas da entrevista..."}),
            )
            self.fields[f"plan_{key}"] = forms.CharField(
                label="Melhorias Sugeridas", required=False,
                widget=forms.Textarea(attrs={"rows": 3, "placeholder": "O que deve ser feito..."}),
            )

    @classmethod
    def initial_for(cls, area_id: str, session) -> dict:
        initial = {}
        for q in questions_for_area(area_id):
            resp = session.responses.get(q.id)
            if resp is None:
                continue
            key = field_key(q.id)
            initial[f"opt_{key}"] = resp.selected_option or ""
            initial[f"obs_{key}"] = resp.observation
            initial[f"plan_{key}"] = resp.action_plan
        return initial

    def question_rows(self) -> list[dict]:
        rows = []
        for idx, q in enumerate(self.questions, start=1):
            key = field_key(q.id)
            rows.append({
                "index": idx,
                "question": q,
                "option": self[f"opt_{key}"],
                "observation": self[f"obs_{key}"],
                "action_plan": self[f"plan_{key}"],
            })
        return rows

    def _submitted(self, name: str):
        """Cleaned value, or None when the field was not part of the submission."""
        if name not in self.data:
            return None
        return self.cleaned_data.get(name, "")

    def entries(self):
        """Yield (question_id, option, observation, action_plan) from cleaned data."""
        for q in self.questions:
            key = field_key(q.id)
            yield (
                q.id,
                self.cleaned_data.get(f"opt_{key}") or None,
                self._submitted(f"obs_{key}"),
                self._submitted(f"plan_{key}"),
            )
