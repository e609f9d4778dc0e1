"""DRF viewsets — clients, diagnostics (engine actions), CRM and stats."""
import logging
import uuid
from dataclasses import asdict

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.clients.models import Client
from apps.crm.models import Contract, Lead
from apps.crm.stats import get_dashboard_stats, invalidate_dashboard_stats
from apps.diagnostics.catalog import AREAS, UnknownQuestion
from apps.diagnostics.models import Diagnostic
from apps.diagnostics.repository import PersistenceFailure, save_session
from apps.diagnostics.scoring import (
    DiagnosticSession,
    area_progress,
    compute_area_results,
    compute_priority,
    finish,
    record_answer,
    record_note,
    total_progress,
)
from apps.insights.services import insight_eligible, ready_payload, request_insight
from apps.reports.assembly import build_report

from .serializers import (
    AnswerSerializer,
    ClientSerializer,
    ContractSerializer,
    DiagnosticCreateSerializer,
    DiagnosticSerializer,
    LeadSerializer,
    NoteSerializer,
)

logger = logging.getLogger(__name__)


def _unavailable(exc):
    return Response({"error": str(exc)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)


class InvalidateStatsMixin:
    """Writes that change dashboard numbers drop the cached stats."""

    def perform_create(self, serializer):
        serializer.save()
        invalidate_dashboard_stats()

    def perform_update(self, serializer):
        serializer.save()
        invalidate_dashboard_stats()

    def perform_destroy(self, instance):
        instance.delete()
        invalidate_dashboard_stats()


class ClientViewSet(InvalidateStatsMixin, viewsets.ModelViewSet):
    queryset = Client.objects.all()
    serializer_class = ClientSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    search_fields = ["nome_fantasia", "razao_social", "cnpj"]
    filterset_fields = ["is_active", "uf", "segmento"]


class DiagnosticViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    queryset = Diagnostic.objects.select_related("client")
    serializer_class = DiagnosticSerializer
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_fields = ["status", "client"]
    ordering_fields = ["created_at", "updated_at"]

    def create(self, request, *args, **kwargs):
        """POST /api/diagnostics/ {"client": "uuid"?, "client_info": {...}?}"""
        serializer = DiagnosticCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        client = serializer.validated_data.get("client")
        session = DiagnosticSession(id=str(uuid.uuid4()), client_id=str(client.pk) if client else None)
        try:
            diagnostic = save_session(session, client_info=serializer.validated_data.get("client_info"))
        except PersistenceFailure as exc:
            return _unavailable(exc)
        return Response(self.get_serializer(diagnostic).data, status=status.HTTP_201_CREATED)

    def _save(self, session):
        diagnostic = save_session(session)
        return Response(self.get_serializer(diagnostic).data)

    @action(detail=True, methods=["post"])
    def answer(self, request, pk=None):
        """POST /api/diagnostics/{id}/answer/ {"question_id": "1.1", "option": "B"}"""
        diagnostic = self.get_object()
        serializer = AnswerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            session = record_answer(
                diagnostic.to_session(), d["question_id"], d["option"], d.get("suggestion") or None,
            )
        except (UnknownQuestion, ValueError) as exc:
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        try:
            return self._save(session)
        except PersistenceFailure as exc:
            return _unavailable(exc)

    @action(detail=True, methods=["post"])
    def note(self, request, pk=None):
        """POST /api/diagnostics/{id}/note/ {"question_id": "1.1", "field": "observation", "text": "..."}"""
        diagnostic = self.get_object()
        serializer = NoteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        d = serializer.validated_data
        try:
            session = record_note(diagnostic.to_session(), d["question_id"], d["field"], d["text"])
        except (UnknownQuestion, ValueError) as exc:
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        try:
            return self._save(session)
        except PersistenceFailure as exc:
            return _unavailable(exc)

    @action(detail=True, methods=["post"])
    def finish(self, request, pk=None):
        diagnostic = self.get_object()
        session = diagnostic.to_session()
        progress = total_progress(session)
        if progress < 100:
            return Response(
                {"error": "diagnostic incomplete", "progress": progress},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            response = self._save(finish(session))
        except PersistenceFailure as exc:
            return _unavailable(exc)
        invalidate_dashboard_stats()
        return response

    @action(detail=True, methods=["get"])
    def results(self, request, pk=None):
        session = self.get_object().to_session()
        area_results = compute_area_results(session)
        return Response({
            "total_progress": total_progress(session),
            "area_progress": {a.id: area_progress(session, a.id) for a in AREAS},
            "area_results": [asdict(r) for r in area_results],
            "priority": asdict(compute_priority(area_results)),
        })

    @action(detail=True, methods=["get"])
    def report(self, request, pk=None):
        diagnostic = self.get_object()
        session = diagnostic.to_session()
        insight = request_insight(diagnostic, session) if insight_eligible(session) else None
        report = build_report(session, ready_payload(insight), diagnostic.client_name)
        data = report.to_dict()
        data["insight_status"] = insight.status if insight else None
        return Response(data)


class LeadViewSet(InvalidateStatsMixin, viewsets.ModelViewSet):
    queryset = Lead.objects.select_related("client")
    serializer_class = LeadSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    search_fields = ["nome_cliente"]
    filterset_fields = ["status", "client"]


class ContractViewSet(InvalidateStatsMixin, viewsets.ModelViewSet):
    queryset = Contract.objects.select_related("client")
    serializer_class = ContractSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    search_fields = ["client__nome_fantasia", "descricao"]
    filterset_fields = ["status", "client"]


class StatsView(APIView):
    """GET /api/stats/ — dashboard KPIs (cached)."""

    def get(self, request):
        return Response(get_dashboard_stats().to_dict())
