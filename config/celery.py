"""Celery configuration for Diagnóstico 360º."""
import os

from celery import Celery
from celery.schedules import crontab

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.development")

app = Celery("diagnostico360")
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()

# ── Named queues ────────────────────────────────────────
app.conf.task_routes = {
    "apps.insights.tasks.*": {"queue": "ai"},
}

# ── Beat schedule (periodic tasks) ─────────────────────
app.conf.beat_schedule = {
    # Libera insights presos em "pending" quando o worker cai (a cada 10 min)
    "expire-stale-insights": {
        "task": "apps.insights.tasks.expire_stale_insights",
        "schedule": crontab(minute="*/10"),
        "options": {"queue": "ai"},
    },
}
