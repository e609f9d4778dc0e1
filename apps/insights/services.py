"""Insight cache lookups and task enqueueing."""
import logging

from django.conf import settings
from kombu.exceptions import OperationalError

from apps.diagnostics.models import Diagnostic
from apps.diagnostics.scoring import DiagnosticSession, responses_hash, total_progress

from .models import StrategicInsight

logger = logging.getLogger(__name__)


def request_insight(
    diagnostic: Diagnostic,
    session: DiagnosticSession | None = None,
    force: bool = False,
) -> StrategicInsight:
    """
    Return the insight row for the session's current responses.

    Enqueues generation at most once per content hash. A superseded row is
    re-queued; an unavailable one only when ``force`` is set.
    """
    from .tasks import generate_strategic_insight

    session = session or diagnostic.to_session()
    content_hash = responses_hash(session)
    insight, created = StrategicInsight.objects.get_or_create(
        diagnostic=diagnostic,
        content_hash=content_hash,
    )

    requeue = insight.status == StrategicInsight.Status.SUPERSEDED or (
        force and insight.status == StrategicInsight.Status.UNAVAILABLE
    )
    if requeue:
        insight.status = StrategicInsight.Status.PENDING
        insight.error_message = ""
        insight.save(update_fields=["status", "error_message", "updated_at"])

    if created or requeue:
        logger.info("Enqueue strategic insight for %s [%s]", diagnostic.pk, content_hash[:8])
        try:
            generate_strategic_insight.delay(
                str(diagnostic.pk),
                content_hash,
                session.snapshot().to_dict(),
                diagnostic.client_name,
            )
        except OperationalError as exc:
            logger.exception("Could not enqueue strategic insight for %s", diagnostic.pk)
            insight.status = StrategicInsight.Status.UNAVAILABLE
            insight.error_message = f"broker: {exc}"
            insight.save(update_fields=["status", "error_message", "updated_at"])
            return insight
        insight.refresh_from_db()
    return insight


def ready_payload(insight: StrategicInsight | None) -> dict | None:
    if insight is not None and insight.status == StrategicInsight.Status.READY:
        return insight.payload
    return None


def insight_eligible(session: DiagnosticSession) -> bool:
    """Generation runs for finalized or nearly complete sessions only."""
    return session.is_finalized or total_progress(session) >= settings.INSIGHT_MIN_PROGRESS
