"""Dashboard statistics (cached)."""
import logging
from dataclasses import asdict, dataclass
from decimal import Decimal

from django.conf import settings
from django.core.cache import cache
from django.db.models import Sum

from apps.clients.models import Client
from apps.diagnostics.models import Diagnostic

from .models import Contract, Lead

logger = logging.getLogger(__name__)

CACHE_KEY = "crm:dashboard_stats"


@dataclass(frozen=True)
class DashboardStats:
    active_clients: int
    total_contracts_value: Decimal
    diagnostics_performed: int
    proposals_sent: int
    conversion_rate: float

    def to_dict(self) -> dict:
        return asdict(self)


def compute_dashboard_stats() -> DashboardStats:
    proposals_sent = Lead.objects.count()
    wins = Lead.objects.filter(status=Lead.Status.WON).count()
    total = Contract.objects.filter(status=Contract.Status.ACTIVE).aggregate(total=Sum("valor"))["total"]
    return DashboardStats(
        active_clients=Client.objects.filter(is_active=True).count(),
        total_contracts_value=total or Decimal("0"),
        diagnostics_performed=Diagnostic.objects.filter(status=Diagnostic.Status.FINALIZED).count(),
        proposals_sent=proposals_sent,
        conversion_rate=round(wins / proposals_sent * 100, 1) if proposals_sent else 0.0,
    )


def get_dashboard_stats(use_cache: bool = True) -> DashboardStats:
    if use_cache:
        cached = cache.get(CACHE_KEY)
        if cached is not None:
            return cached
    stats = compute_dashboard_stats()
    cache.set(CACHE_KEY, stats, timeout=settings.DASHBOARD_STATS_TTL)
    logger.debug("Dashboard stats refreshed: %s", stats)
    return stats


def invalidate_dashboard_stats():
    cache.delete(CACHE_KEY)
