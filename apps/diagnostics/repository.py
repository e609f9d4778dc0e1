"""
Persistence contract for diagnostic sessions.

``save_session`` upserts the client (by CNPJ) and then the diagnostic (by id).
The two writes are sequential best-effort upserts, not one transaction; each
call can be retried by the caller.
"""
import logging

from django.db import DatabaseError
from django.utils import timezone

from apps.clients.models import Client

from .models import Diagnostic
from .scoring import STATUS_FINALIZED, DiagnosticSession

logger = logging.getLogger(__name__)

CLIENT_FIELDS = {
    f.name for f in Client._meta.get_fields()
    if getattr(f, "concrete", False) and not f.primary_key
    and f.name not in ("created_at", "updated_at")
}


class PersistenceFailure(Exception):
    """Read or write against the data store failed."""


def _upsert_client(client_info: dict, client_id: str | None) -> Client:
    data = {k: v for k, v in client_info.items() if k in CLIENT_FIELDS}
    cnpj = data.pop("cnpj", None) or None
    if cnpj:
        client, _ = Client.objects.update_or_create(cnpj=cnpj, defaults=data)
        return client
    if client_id:
        client, _ = Client.objects.update_or_create(pk=client_id, defaults=data)
        return client
    return Client.objects.create(**data)


def save_session(session: DiagnosticSession, client_info: dict | None = None) -> Diagnostic:
    """Upsert client (optional) and diagnostic. Raises ``PersistenceFailure``."""
    try:
        client_id = session.client_id
        if client_info:
            client_id = _upsert_client(client_info, client_id).pk

        existing = Diagnostic.objects.filter(pk=session.id).first()
        status = session.status
        finished_at = existing.finished_at if existing else None
        if existing and existing.status == STATUS_FINALIZED:
            status = STATUS_FINALIZED
        if status == STATUS_FINALIZED and finished_at is None:
            finished_at = timezone.now()

        defaults = {
            "client_id": client_id,
            "responses": session.responses_dict(),
            "status": status,
            "finished_at": finished_at,
        }
        if client_info:
            defaults["client_info"] = client_info
        diagnostic, created = Diagnostic.objects.update_or_create(
            pk=session.id, defaults=defaults,
        )
    except DatabaseError as exc:
        logger.exception("Failed to save diagnostic %s", session.id)
        raise PersistenceFailure(f"Erro ao salvar o diagnóstico: {exc}") from exc

    logger.info(
        "Diagnostic %s %s (status=%s, %d responses)",
        diagnostic.pk, "created" if created else "updated",
        diagnostic.status, len(diagnostic.responses),
    )
    return diagnostic


def load_session(diagnostic_id) -> DiagnosticSession:
    """Load a session. Raises ``Diagnostic.DoesNotExist`` or ``PersistenceFailure``."""
    try:
        diagnostic = Diagnostic.objects.get(pk=diagnostic_id)
    except DatabaseError as exc:
        logger.exception("Failed to load diagnostic %s", diagnostic_id)
        raise PersistenceFailure(f"Erro ao carregar o diagnóstico: {exc}") from exc
    return diagnostic.to_session()
