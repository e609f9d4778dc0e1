"""
Report assembly: scores + optional strategic insight → render-ready Report.

Pure: no database, no network. When no insight is available a deterministic
contingency narrative is derived from the priority analysis and area results,
so a report can always be rendered.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field

from apps.diagnostics.catalog import GAP_THRESHOLD, get_area
from apps.diagnostics.scoring import (
    PRIORITY_RISK,
    AreaResult,
    DiagnosticSession,
    Gap,
    PriorityAnalysis,
    compute_area_results,
    compute_priority,
    round_half_up,
    total_progress,
)

FALLBACK_TAG = "[Relatório de contingência]"
STRENGTH_THRESHOLD = 70
MAX_ACTIONS = 4

ISHIKAWA_CATEGORY = {
    "societario": "Métodos",
    "tecnologia": "Máquinas",
    "comercial": "Métodos",
    "marketing": "Meio Ambiente",
    "financeiro": "Medida",
    "controladoria": "Medida",
    "fiscal": "Materiais",
    "contabil": "Materiais",
    "cultura": "Mão de Obra",
    "pessoas": "Mão de Obra",
    "planejamento": "Métodos",
    "processos": "Métodos",
}


@dataclass(frozen=True)
class ActionItem:
    """One 5W2H line."""

    what: str
    why: str = ""
    who: str = ""
    where: str = ""
    when: str = ""
    how: str = ""
    how_much: str = ""


@dataclass(frozen=True)
class Report:
    summary: str
    strengths: tuple[str, ...]
    weaknesses: tuple[str, ...]
    opportunities: tuple[str, ...]
    threats: tuple[str, ...]
    ishikawa: tuple[tuple[str, str], ...]
    action_plan: tuple[ActionItem, ...]
    pdca: tuple[tuple[str, str], ...]
    area_results: tuple[AreaResult, ...]
    priority: PriorityAnalysis
    total_progress: int
    radar: tuple[dict, ...] = ()
    is_fallback: bool = False
    client_name: str = ""
    gap_rows: tuple[dict, ...] = field(default=())

    @property
    def average_score(self) -> int:
        if not self.area_results:
            return 0
        return round_half_up(sum(r.score for r in self.area_results) / len(self.area_results))

    def to_dict(self) -> dict:
        data = asdict(self)
        data["average_score"] = self.average_score
        data["ishikawa"] = [{"category": c, "cause": cause} for c, cause in self.ishikawa]
        data["pdca"] = [{"phase": p, "description": d} for p, d in self.pdca]
        return data


def _ordered_gaps(area_results, priority: PriorityAnalysis) -> list[tuple[AreaResult, Gap]]:
    """Gaps of the priority area first, then the rest by ascending score."""
    pairs = [(r, g) for r in area_results for g in r.gaps]
    return sorted(pairs, key=lambda p: (p[0].area_id != priority.area_id, p[1].score))


def _fallback_summary(area_results, priority, progress, client_name, average) -> str:
    gap_count = sum(len(r.gaps) for r in area_results)
    who = client_name or "A empresa"
    text = (
        f"{FALLBACK_TAG} {who} apresenta maturidade média de {average}% "
        f"no Diagnóstico 360º ({progress}% das perguntas respondidas). "
        f"Área prioritária: {priority.area_name} — {priority.message}. "
        f"Foram identificados {gap_count} pontos de atenção com nota abaixo de {GAP_THRESHOLD}%."
    )
    if priority.type == PRIORITY_RISK:
        text += " Este setor exige reestruturação imediata para garantir a viabilidade operacional e financeira do negócio."
    return text


def _fallback_swot(area_results, gaps):
    strengths = [f"{r.area_name} com maturidade de {r.score}%" for r in area_results if r.score >= STRENGTH_THRESHOLD]
    if not strengths:
        best = max(area_results, key=lambda r: r.score)
        strengths = [f"{best.area_name} é a área mais madura ({best.score}%)"]
    weaknesses = [f"{r.area_name} com maturidade de {r.score}%" for r in area_results if r.score < 40]
    opportunities = [g.recommendation for _, g in gaps[:MAX_ACTIONS]]
    threats = [
        f"Exposição a riscos em {r.area_name} ({r.score}%)"
        for r in area_results
        if get_area(r.area_id).dimension == PRIORITY_RISK and r.score < GAP_THRESHOLD
    ]
    return strengths, weaknesses, opportunities, threats


def _fallback_ishikawa(area_results, priority):
    for r in area_results:
        if r.area_id == priority.area_id and r.gaps:
            category = ISHIKAWA_CATEGORY.get(r.area_id, "Métodos")
            return [(category, g.prompt) for g in r.gaps]
    return []


def _fallback_actions(gaps) -> list[ActionItem]:
    return [
        ActionItem(
            what=gap.recommendation,
            why=f"Nota {gap.score}% em: {gap.prompt}",
            who=f"Responsável pela área {result.area_name}",
            where=result.area_name,
            when="Próximos 30 dias" if gap.impact == "Crítico" else "Próximos 90 dias",
            how="Plano de ação acompanhado em reunião mensal de resultados",
            how_much="A definir",
        )
        for result, gap in gaps[:MAX_ACTIONS]
    ]


def _fallback_pdca(priority) -> list[tuple[str, str]]:
    return [
        ("PLAN", f"Detalhar o plano de ação para {priority.area_name} com metas e responsáveis."),
        ("DO", "Executar as ações prioritárias do 5W2H em ciclos quinzenais."),
        ("CHECK", "Reaplicar o Diagnóstico 360º e comparar a maturidade por área."),
        ("ACT", "Padronizar o que funcionou e iniciar o próximo ciclo de melhorias."),
    ]


def _from_insight(insight: dict):
    swot = insight.get("swot") or {}
    ishikawa = [(i.get("categoria", ""), i.get("causa", "")) for i in insight.get("ishikawa") or []]
    actions = [
        ActionItem(
            what=a.get("oQue", ""),
            why=a.get("porQue", ""),
            who=a.get("quem", ""),
            where=a.get("onde", ""),
            when=a.get("quando", ""),
            how=a.get("como", ""),
            how_much=a.get("quanto", ""),
        )
        for a in insight.get("plano5W2H") or []
    ]
    pdca = [(p.get("fase", ""), p.get("descricao", "")) for p in insight.get("pdca") or []]
    return (
        (insight.get("sumarioExecutivo") or "").strip(),
        (
            list(swot.get("forcas") or []),
            list(swot.get("fraquezas") or []),
            list(swot.get("oportunidades") or []),
            list(swot.get("ameacas") or []),
        ),
        ishikawa,
        actions,
        pdca,
    )


def assemble_report(
    session: DiagnosticSession,
    area_results: list[AreaResult],
    priority: PriorityAnalysis,
    insight: dict | None = None,
    client_name: str = "",
) -> Report:
    """Merge computed scores with the optional insight payload."""
    area_results = tuple(area_results)
    progress = total_progress(session)
    gaps = _ordered_gaps(area_results, priority)
    average = round_half_up(sum(r.score for r in area_results) / len(area_results)) if area_results else 0

    summary = ""
    if insight is not None:
        summary, swot, ishikawa, actions, pdca = _from_insight(insight)
    is_fallback = insight is None or not summary
    if is_fallback:
        summary = _fallback_summary(area_results, priority, progress, client_name, average)
        swot = _fallback_swot(area_results, gaps) if area_results else ([], [], [], [])
        ishikawa = _fallback_ishikawa(area_results, priority)
        actions = _fallback_actions(gaps)
        pdca = _fallback_pdca(priority)

    strengths, weaknesses, opportunities, threats = swot
    return Report(
        summary=summary,
        strengths=tuple(strengths),
        weaknesses=tuple(weaknesses),
        opportunities=tuple(opportunities),
        threats=tuple(threats),
        ishikawa=tuple(ishikawa),
        action_plan=tuple(actions),
        pdca=tuple(pdca),
        area_results=area_results,
        priority=priority,
        total_progress=progress,
        radar=tuple(
            {"subject": r.area_name.split(" ")[0], "value": r.score, "full_mark": 100}
            for r in area_results
        ),
        is_fallback=is_fallback,
        client_name=client_name,
        gap_rows=tuple(
            {
                "area": r.area_name,
                "question_id": g.question_id,
                "prompt": g.prompt,
                "score": g.score,
                "impact": g.impact,
                "recommendation": g.recommendation,
            }
            for r in area_results for g in r.gaps
        ),
    )


def build_report(session: DiagnosticSession, insight: dict | None = None, client_name: str = "") -> Report:
    area_results = compute_area_results(session)
    priority = compute_priority(area_results)
    return assemble_report(session, area_results, priority, insight, client_name)
