"""
Scoring & aggregation engine for the 360º diagnostic.

Pure functions over a caller-owned ``DiagnosticSession``: mutations return a
new session, aggregations never touch the database. The catalog in
``catalog.py`` is the only reference data.
"""
from __future__ import annotations

import copy
import math
from dataclasses import asdict, dataclass, field, replace

from apps.core.utils import content_hash

from .catalog import (
    AREAS,
    GAP_THRESHOLD,
    QUESTIONS,
    RISK_THRESHOLD,
    SCORE_MAP,
    area_index,
    get_area,
    get_question,
    questions_for_area,
)

STATUS_STARTED = "Iniciado"
STATUS_FINALIZED = "Finalizado"

PRIORITY_RISK = "RISCO"
PRIORITY_TRACTION = "TRACAO"
PRIORITY_EFFICIENCY = "EFICIENCIA"

DEFAULT_PRIORITY_AREA = "processos"

NOTE_FIELDS = ("observation", "action_plan")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass
class Response:
    selected_option: str | None = None
    score: int = 0
    observation: str = ""
    action_plan: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> Response:
        # Registros antigos usam camelCase (selectedOption / actionPlan)
        option = data.get("selected_option", data.get("selectedOption"))
        return cls(
            selected_option=option or None,
            score=SCORE_MAP[option] if option in SCORE_MAP else 0,
            observation=data.get("observation") or "",
            action_plan=data.get("action_plan", data.get("actionPlan")) or "",
        )


@dataclass
class DiagnosticSession:
    id: str
    client_id: str | None = None
    responses: dict[str, Response] = field(default_factory=dict)
    status: str = STATUS_STARTED

    @property
    def is_finalized(self) -> bool:
        return self.status == STATUS_FINALIZED

    def snapshot(self) -> DiagnosticSession:
        """Independent copy; later edits to ``self`` do not leak into it."""
        return copy.deepcopy(self)

    def responses_dict(self) -> dict:
        return {qid: resp.to_dict() for qid, resp in self.responses.items()}

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "client_id": self.client_id,
            "responses": self.responses_dict(),
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: dict) -> DiagnosticSession:
        return cls(
            id=str(data["id"]),
            client_id=str(data["client_id"]) if data.get("client_id") else None,
            responses={
                qid: Response.from_dict(resp or {})
                for qid, resp in (data.get("responses") or {}).items()
            },
            status=data.get("status") or STATUS_STARTED,
        )


@dataclass(frozen=True)
class Gap:
    question_id: str
    prompt: str
    score: int
    recommendation: str

    @property
    def impact(self) -> str:
        return "Crítico" if self.score < RISK_THRESHOLD else "Alto"


@dataclass(frozen=True)
class AreaResult:
    area_id: str
    area_name: str
    score: int
    answered: int
    total: int
    gaps: tuple[Gap, ...] = ()
    detailed: tuple[dict, ...] = ()


@dataclass(frozen=True)
class PriorityAnalysis:
    area_id: str
    area_name: str
    message: str
    type: str

    @property
    def is_risk(self) -> bool:
        return self.type == PRIORITY_RISK


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------
def _with_response(session: DiagnosticSession, question_id: str, response: Response) -> DiagnosticSession:
    responses = dict(session.responses)
    responses[question_id] = response
    return replace(session, responses=responses)


def record_answer(
    session: DiagnosticSession,
    question_id: str,
    option: str,
    suggestion: str | None = None,
) -> DiagnosticSession:
    """
    Select an option for a question.

    The action plan is filled with the option's suggestion only while it is
    empty; text already present (typed by the consultant or filled by an
    earlier click) is kept when the option changes.
    """
    question = get_question(question_id)
    if option not in SCORE_MAP:
        raise ValueError(f"Opção inválida: {option!r}")
    if suggestion is None:
        suggestion = question.suggestion_for(option)

    current = session.responses.get(question_id) or Response()
    updated = replace(
        current,
        selected_option=option,
        score=SCORE_MAP[option],
        action_plan=current.action_plan or suggestion,
    )
    return _with_response(session, question_id, updated)


def record_note(
    session: DiagnosticSession,
    question_id: str,
    field_name: str,
    text: str,
) -> DiagnosticSession:
    """Set the observation or action-plan free text. No score effect."""
    get_question(question_id)
    if field_name not in NOTE_FIELDS:
        raise ValueError(f"Campo inválido: {field_name!r}")
    current = session.responses.get(question_id) or Response()
    return _with_response(session, question_id, replace(current, **{field_name: text or ""}))


def finish(session: DiagnosticSession) -> DiagnosticSession:
    return replace(session, status=STATUS_FINALIZED)


# ---------------------------------------------------------------------------
# Aggregations
# ---------------------------------------------------------------------------
def _is_answered(session: DiagnosticSession, question_id: str) -> bool:
    resp = session.responses.get(question_id)
    return bool(resp and resp.selected_option)


def _score(session: DiagnosticSession, question_id: str) -> int:
    resp = session.responses.get(question_id)
    return resp.score if resp else 0


def area_progress(session: DiagnosticSession, area_id: str) -> int:
    """Share (0-100) of the area's questions with a selected option, rounded half-up."""
    get_area(area_id)
    questions = questions_for_area(area_id)
    answered = sum(1 for q in questions if _is_answered(session, q.id))
    return round_half_up(answered / len(questions) * 100)


def total_progress(session: DiagnosticSession) -> int:
    answered = sum(1 for q in QUESTIONS if _is_answered(session, q.id))
    return round_half_up(answered / len(QUESTIONS) * 100)


def compute_area_results(session: DiagnosticSession) -> list[AreaResult]:
    """Per-area mean score and gaps, in catalog order."""
    results = []
    for area in AREAS:
        questions = questions_for_area(area.id)
        scores = [_score(session, q.id) for q in questions]
        gaps = []
        for q, score in zip(questions, scores):
            if score >= GAP_THRESHOLD:
                continue
            resp = session.responses.get(q.id)
            plan = (resp.action_plan if resp else "").strip()
            gaps.append(Gap(
                question_id=q.id,
                prompt=q.prompt,
                score=score,
                recommendation=plan or q.default_suggestion,
            ))
        results.append(AreaResult(
            area_id=area.id,
            area_name=area.name,
            score=round_half_up(sum(scores) / len(scores)),
            answered=sum(1 for q in questions if _is_answered(session, q.id)),
            total=len(questions),
            gaps=tuple(gaps),
            detailed=tuple(
                {"subject": q.label, "value": score, "full_mark": 100}
                for q, score in zip(questions, scores)
            ),
        ))
    return results


def compute_priority(area_results: list[AreaResult]) -> PriorityAnalysis:
    """
    Pick the single most urgent area.

    Risk: a risk-dimension area scoring below 40; the lowest wins, ties go to
    catalog order. Areas without any answer are not assessable and never
    qualify. Otherwise the weakest assessed area is framed as traction
    (commercial/marketing) or efficiency.
    """
    ordered = sorted(area_results, key=lambda r: area_index(r.area_id))
    assessed = [r for r in ordered if r.answered > 0]

    critical = [
        r for r in assessed
        if get_area(r.area_id).dimension == PRIORITY_RISK and r.score < RISK_THRESHOLD
    ]
    if critical:
        worst = min(critical, key=lambda r: r.score)
        return PriorityAnalysis(
            area_id=worst.area_id,
            area_name=worst.area_name,
            message="Prioridade Crítica detectada!",
            type=PRIORITY_RISK,
        )

    if not assessed:
        area = get_area(DEFAULT_PRIORITY_AREA)
        return PriorityAnalysis(
            area_id=area.id,
            area_name=area.name,
            message="Diagnóstico ainda sem respostas para priorização.",
            type=PRIORITY_EFFICIENCY,
        )

    weakest = min(assessed, key=lambda r: r.score)
    if get_area(weakest.area_id).dimension == PRIORITY_TRACTION:
        return PriorityAnalysis(
            area_id=weakest.area_id,
            area_name=weakest.area_name,
            message="Aceleração de Receita",
            type=PRIORITY_TRACTION,
        )
    return PriorityAnalysis(
        area_id=weakest.area_id,
        area_name=weakest.area_name,
        message="Otimização para Escala",
        type=PRIORITY_EFFICIENCY,
    )


def responses_hash(session: DiagnosticSession) -> str:
    """Content hash of the responses; changes whenever any response changes."""
    return content_hash(session.responses_dict())
