"""DRF serializers validating the strategic report payload returned by the LLM."""
from rest_framework import serializers

PDCA_PHASES = ("PLAN", "DO", "CHECK", "ACT")


class SwotSerializer(serializers.Serializer):
    forcas = serializers.ListField(child=serializers.CharField())
    fraquezas = serializers.ListField(child=serializers.CharField())
    oportunidades = serializers.ListField(child=serializers.CharField())
    ameacas = serializers.ListField(child=serializers.CharField())


class IshikawaCauseSerializer(serializers.Serializer):
    categoria = serializers.CharField()
    causa = serializers.CharField()


class ActionItemSerializer(serializers.Serializer):
    oQue = serializers.CharField()
    porQue = serializers.CharField(allow_blank=True, default="")
    quem = serializers.CharField(allow_blank=True, default="")
    onde = serializers.CharField(allow_blank=True, default="")
    quando = serializers.CharField(allow_blank=True, default="")
    como = serializers.CharField(allow_blank=True, default="")
    quanto = serializers.CharField(allow_blank=True, default="")


class PdcaStepSerializer(serializers.Serializer):
    fase = serializers.CharField()
    descricao = serializers.CharField()

    def validate_fase(self, value):
        value = value.strip().upper()
        if value not in PDCA_PHASES:
            raise serializers.ValidationError(f"Fase PDCA inválida: {value}")
        return value


class StrategicReportSerializer(serializers.Serializer):
    sumarioExecutivo = serializers.CharField()
    swot = SwotSerializer()
    ishikawa = IshikawaCauseSerializer(many=True)
    plano5W2H = ActionItemSerializer(many=True)
    pdca = PdcaStepSerializer(many=True)
