"""Celery tasks — strategic insight generation."""
import logging
from datetime import timedelta

from celery import shared_task
from django.conf import settings
from django.utils import timezone

from apps.diagnostics.scoring import (
    DiagnosticSession,
    compute_area_results,
    compute_priority,
    responses_hash,
)

from . import prompts
from .client import ExternalInsightUnavailable, fetch_insight
from .models import StrategicInsight

logger = logging.getLogger(__name__)


@shared_task(queue="ai")
def generate_strategic_insight(diagnostic_id: str, content_hash: str, snapshot: dict, client_name: str = ""):
    """Generate the insight for a response snapshot taken at request time."""
    try:
        insight = StrategicInsight.objects.select_related("diagnostic").get(
            diagnostic_id=diagnostic_id, content_hash=content_hash,
        )
    except StrategicInsight.DoesNotExist:
        logger.error("Insight %s [%s] not found", diagnostic_id, content_hash[:8])
        return

    # Last write wins: skip the call when the responses already changed
    current_hash = responses_hash(insight.diagnostic.to_session())
    if current_hash != content_hash:
        insight.status = StrategicInsight.Status.SUPERSEDED
        insight.save(update_fields=["status", "updated_at"])
        logger.info("Insight %s [%s] superseded, skipping", diagnostic_id, content_hash[:8])
        return {"status": "superseded"}

    session = DiagnosticSession.from_dict(snapshot)
    priority = compute_priority(compute_area_results(session))

    try:
        payload, tokens, elapsed_ms = fetch_insight(session, priority, client_name)
    except ExternalInsightUnavailable as exc:
        logger.warning("Strategic insight unavailable for %s: %s", diagnostic_id, exc)
        insight.status = StrategicInsight.Status.UNAVAILABLE
        insight.error_message = str(exc)[:2000]
        insight.save(update_fields=["status", "error_message", "updated_at"])
        return {"status": "unavailable", "reason": exc.reason}

    insight.status = StrategicInsight.Status.READY
    insight.payload = payload
    insight.prompt_version = prompts.PROMPT_VERSION
    insight.model_name = settings.GEMINI_MODEL
    insight.tokens_used = tokens
    insight.processing_time_ms = elapsed_ms
    insight.save()
    return {"status": "ready", "insight_id": str(insight.pk)}


@shared_task(queue="ai")
def expire_stale_insights():
    """Mark insights stuck in pending (lost worker) as unavailable so they can be regenerated."""
    cutoff = timezone.now() - timedelta(minutes=settings.INSIGHT_PENDING_TIMEOUT_MINUTES)
    count = StrategicInsight.objects.filter(
        status=StrategicInsight.Status.PENDING, updated_at__lt=cutoff,
    ).update(
        status=StrategicInsight.Status.UNAVAILABLE,
        error_message="Tempo de processamento excedido.",
        updated_at=timezone.now(),
    )
    if count:
        logger.warning("Expired %d stale pending insights", count)
    return {"expired": count}
