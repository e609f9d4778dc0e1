"""
Strategic insight collaborator. One Gemini call per request, no retry.

``generate_insight`` never raises: network/API failures and payloads that do
not match ``StrategicReportSerializer`` are logged and turned into ``None`` so
report assembly falls back to its deterministic narrative.
"""
import json
import logging
import time

from django.conf import settings

from apps.diagnostics.catalog import QUESTIONS, get_area
from apps.diagnostics.scoring import DiagnosticSession, PriorityAnalysis

from . import prompts
from .schema import StrategicReportSerializer

logger = logging.getLogger(__name__)

_model = None


class ExternalInsightUnavailable(Exception):
    """The insight service failed or answered something unusable."""

    NETWORK = "network"
    SCHEMA = "schema"
    DISABLED = "disabled"

    def __init__(self, reason: str, detail: str = ""):
        super().__init__(f"{reason}: {detail}" if detail else reason)
        self.reason = reason
        self.detail = detail


def _get_model():
    global _model
    if _model is None:
        import google.generativeai as genai
        genai.configure(api_key=settings.GEMINI_API_KEY)
        _model = genai.GenerativeModel(
            settings.GEMINI_MODEL,
            generation_config=genai.GenerationConfig(
                temperature=0.4,
                max_output_tokens=8000,
                response_mime_type="application/json",
            ),
        )
    return _model


def build_diagnostic_summary(session: DiagnosticSession) -> str:
    lines = []
    for q in QUESTIONS:
        resp = session.responses.get(q.id)
        if not resp or not resp.selected_option:
            continue
        lines.append(
            f"- [{get_area(q.area_id).name}] {q.id} {q.label} | "
            f"Status: {prompts.status_label(resp.score)} ({resp.score}) | "
            f"Obs: {resp.observation or 'N/A'}"
        )
    return "\n".join(lines) or "(Nenhuma pergunta respondida.)"


def build_prompt(session: DiagnosticSession, priority: PriorityAnalysis, client_name: str = "") -> str:
    user_prompt = prompts.STRATEGIC_USER.format(
        client_name=client_name or "cliente",
        priority_type=priority.type,
        priority_area=priority.area_name,
        priority_message=priority.message,
        diagnostic_summary=build_diagnostic_summary(session),
    )
    prompt = f"{prompts.STRATEGIC_SYSTEM}\n\n---\n\n{user_prompt}"
    prompt += "\n\nIMPORTANTE: Responda APENAS com JSON válido, sem markdown ou texto adicional."
    return prompt


def _call_llm(prompt: str) -> tuple[str, int]:
    """Return (raw_text, tokens_used). Raises ``ExternalInsightUnavailable``."""
    if not settings.GEMINI_API_KEY:
        raise ExternalInsightUnavailable(ExternalInsightUnavailable.DISABLED, "GEMINI_API_KEY not set")
    try:
        model = _get_model()
        resp = model.generate_content(
            prompt,
            request_options={"timeout": settings.INSIGHT_TIMEOUT_SECONDS},
        )
        content = resp.text
    except Exception as exc:
        raise ExternalInsightUnavailable(ExternalInsightUnavailable.NETWORK, str(exc)) from exc

    tokens = 0
    if resp.usage_metadata:
        tokens = (resp.usage_metadata.prompt_token_count or 0) + (resp.usage_metadata.candidates_token_count or 0)
    return content or "", tokens


def parse_payload(content: str) -> dict:
    """Decode and validate the JSON payload. Raises ``ExternalInsightUnavailable``."""
    cleaned = content.strip()
    if cleaned.startswith("```"):
        lines = cleaned.split("\n")
        lines = [l for l in lines if not l.strip().startswith("```")]
        cleaned = "\n".join(lines)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ExternalInsightUnavailable(ExternalInsightUnavailable.SCHEMA, f"invalid JSON: {exc}") from exc

    serializer = StrategicReportSerializer(data=data)
    if not serializer.is_valid():
        raise ExternalInsightUnavailable(ExternalInsightUnavailable.SCHEMA, json.dumps(serializer.errors))
    return json.loads(json.dumps(serializer.validated_data))


def fetch_insight(session: DiagnosticSession, priority: PriorityAnalysis, client_name: str = "") -> tuple[dict, int, int]:
    """Return (payload, tokens, elapsed_ms). Raises ``ExternalInsightUnavailable``."""
    start = time.time()
    content, tokens = _call_llm(build_prompt(session, priority, client_name))
    payload = parse_payload(content)
    elapsed_ms = int((time.time() - start) * 1000)
    logger.info(
        "Strategic insight for %s: %d tokens, %dms", session.id, tokens, elapsed_ms,
    )
    return payload, tokens, elapsed_ms


def generate_insight(session: DiagnosticSession, priority: PriorityAnalysis, client_name: str = "") -> dict | None:
    try:
        payload, _, _ = fetch_insight(session, priority, client_name)
    except ExternalInsightUnavailable as exc:
        logger.warning("Strategic insight unavailable for %s (%s)", session.id, exc)
        return None
    return payload
