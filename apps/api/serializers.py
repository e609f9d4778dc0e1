"""DRF serializers for clients, diagnostics and CRM."""
from rest_framework import serializers

from apps.clients.models import Client
from apps.crm.models import Contract, Lead
from apps.diagnostics.catalog import OPTIONS
from apps.diagnostics.forms import DiagnosticStartForm
from apps.diagnostics.models import Diagnostic
from apps.diagnostics.scoring import NOTE_FIELDS, total_progress


class ClientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Client
        fields = [
            "id", "razao_social", "nome_fantasia", "cnpj", "responsavel",
            "entrevistado", "email", "whatsapp", "telefone_fixo",
            "logradouro", "numero", "bairro", "cidade", "uf", "cep",
            "site", "instagram", "linkedin", "data_fundacao",
            "faturamento_mensal", "faturamento_anual", "mercado", "nicho",
            "segmento", "quantidade_funcionarios", "estrutura_organizacional",
            "is_active", "created_at",
        ]


class DiagnosticSerializer(serializers.ModelSerializer):
    client_name = serializers.CharField(read_only=True)
    progress = serializers.SerializerMethodField()

    class Meta:
        model = Diagnostic
        fields = [
            "id", "client", "client_name", "client_info", "responses",
            "status", "progress", "finished_at", "created_at", "updated_at",
        ]
        read_only_fields = ["responses", "status", "finished_at"]

    def get_progress(self, obj) -> int:
        return total_progress(obj.to_session())


class DiagnosticCreateSerializer(serializers.Serializer):
    client = serializers.PrimaryKeyRelatedField(
        queryset=Client.objects.all(), pk_field=serializers.UUIDField(),
        required=False, allow_null=True,
    )
    client_info = serializers.DictField(required=False, allow_null=True)

    def validate_client_info(self, value):
        if not value:
            return None
        form = DiagnosticStartForm(value)
        if not form.is_valid():
            raise serializers.ValidationError(
                {field: list(errors) for field, errors in form.errors.items()}
            )
        return form.cleaned_data


class AnswerSerializer(serializers.Serializer):
    question_id = serializers.CharField()
    option = serializers.ChoiceField(choices=OPTIONS)
    suggestion = serializers.CharField(required=False, allow_blank=True)


class NoteSerializer(serializers.Serializer):
    question_id = serializers.CharField()
    field = serializers.ChoiceField(choices=NOTE_FIELDS)
    text = serializers.CharField(allow_blank=True)


class LeadSerializer(serializers.ModelSerializer):
    class Meta:
        model = Lead
        fields = ["id", "nome_cliente", "client", "status", "valor_estimado", "created_at"]


class ContractSerializer(serializers.ModelSerializer):
    class Meta:
        model = Contract
        fields = ["id", "client", "descricao", "valor", "status", "created_at"]
