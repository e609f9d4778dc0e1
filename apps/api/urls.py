"""API URL configuration."""
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from . import views

app_name = "api"

router = DefaultRouter()
router.register("clients", views.ClientViewSet)
router.register("diagnostics", views.DiagnosticViewSet)
router.register("leads", views.LeadViewSet)
router.register("contracts", views.ContractViewSet)

urlpatterns = [
    path("stats/", views.StatsView.as_view(), name="stats"),
    path("", include(router.urls)),
]

# ── Exemplo de payloads ────────────────────────────────
#
# POST /api/diagnostics/{uuid}/answer/
# {"question_id": "5.1", "option": "A"}
# Response: diagnóstico atualizado (responses, status, progress)
#
# GET /api/diagnostics/{uuid}/results/
# Response:
# {
#   "total_progress": 100,
#   "area_results": [{"area_id": "societario", "score": 66, "gaps": [...]}, ...],
#   "priority": {"area_id": "financeiro", "type": "RISCO",
#                "message": "Prioridade Crítica detectada!", ...}
# }
#
# GET /api/stats/
# Response: {"active_clients": 12, "total_contracts_value": 45000.0,
#            "diagnostics_performed": 9, "proposals_sent": 20, "conversion_rate": 25.0}
