"""Scoring & aggregation engine."""
import pytest

from apps.diagnostics.catalog import KEEP_SUGGESTION, UnknownQuestion, get_question
from apps.diagnostics.scoring import (
    PRIORITY_EFFICIENCY,
    PRIORITY_RISK,
    PRIORITY_TRACTION,
    STATUS_FINALIZED,
    STATUS_STARTED,
    AreaResult,
    DiagnosticSession,
    Gap,
    Response,
    area_progress,
    compute_area_results,
    compute_priority,
    finish,
    record_answer,
    record_note,
    responses_hash,
    round_half_up,
    total_progress,
)

from .helpers import answer_all, answer_area


def _results_by_area(session):
    return {r.area_id: r for r in compute_area_results(session)}


class TestRecordAnswer:
    @pytest.mark.parametrize("option,score", [("A", 0), ("B", 33), ("C", 66), ("D", 100)])
    def test_score_follows_option(self, empty_session, option, score):
        session = record_answer(empty_session, "1.1", option)
        assert session.responses["1.1"].selected_option == option
        assert session.responses["1.1"].score == score

    def test_returns_new_session(self, empty_session):
        session = record_answer(empty_session, "1.1", "B")
        assert empty_session.responses == {}
        assert session is not empty_session

    def test_fills_action_plan_with_suggestion(self, empty_session):
        session = record_answer(empty_session, "5.1", "A")
        assert session.responses["5.1"].action_plan == get_question("5.1").default_suggestion

    def test_d_option_suggests_keeping_practice(self, empty_session):
        session = record_answer(empty_session, "5.1", "D")
        assert session.responses["5.1"].action_plan == KEEP_SUGGESTION

    def test_explicit_suggestion(self, empty_session):
        session = record_answer(empty_session, "5.1", "B", suggestion="Contratar BPO financeiro")
        assert session.responses["5.1"].action_plan == "Contratar BPO financeiro"

    def test_existing_action_plan_is_preserved(self, empty_session):
        session = record_note(empty_session, "5.1", "action_plan", "Plano do consultor")
        session = record_answer(session, "5.1", "A")
        assert session.responses["5.1"].action_plan == "Plano do consultor"

    def test_changing_option_keeps_first_suggestion(self, empty_session):
        session = record_answer(empty_session, "5.1", "A")
        session = record_answer(session, "5.1", "D")
        resp = session.responses["5.1"]
        assert resp.score == 100
        assert resp.action_plan == get_question("5.1").default_suggestion

    def test_observation_survives_answer(self, empty_session):
        session = record_note(empty_session, "2.3", "observation", "Usa planilhas")
        session = record_answer(session, "2.3", "C")
        assert session.responses["2.3"].observation == "Usa planilhas"

    def test_unknown_question(self, empty_session):
        with pytest.raises(UnknownQuestion):
            record_answer(empty_session, "99.1", "A")

    def test_invalid_option(self, empty_session):
        with pytest.raises(ValueError):
            record_answer(empty_session, "1.1", "E")

    def test_idempotent(self, empty_session):
        once = record_answer(empty_session, "3.2", "C")
        twice = record_answer(once, "3.2", "C")
        assert once.responses == twice.responses


class TestRecordNote:
    def test_note_does_not_change_score(self, empty_session):
        session = record_answer(empty_session, "1.1", "B")
        session = record_note(session, "1.1", "observation", "Sócios em conflito")
        assert session.responses["1.1"].score == 33
        assert session.responses["1.1"].observation == "Sócios em conflito"

    def test_note_alone_does_not_count_as_answered(self, empty_session):
        session = record_note(empty_session, "1.1", "observation", "Ainda vai verificar")
        assert area_progress(session, "societario") == 0
        assert total_progress(session) == 0

    def test_invalid_field(self, empty_session):
        with pytest.raises(ValueError):
            record_note(empty_session, "1.1", "score", "100")

    def test_unknown_question(self, empty_session):
        with pytest.raises(UnknownQuestion):
            record_note(empty_session, "0.0", "observation", "x")


class TestProgress:
    def test_empty_session(self, empty_session):
        assert total_progress(empty_session) == 0
        assert area_progress(empty_session, "societario") == 0

    def test_area_progress_is_monotonic(self, empty_session):
        session = empty_session
        previous = 0
        for idx in range(1, 6):
            session = record_answer(session, f"4.{idx}", "B")
            current = area_progress(session, "marketing")
            assert current > previous
            previous = current
        assert previous == 100

    def test_area_progress_ignores_other_areas(self, empty_session):
        session = answer_area(empty_session, 1, "DDDDD")
        assert area_progress(session, "societario") == 100
        assert area_progress(session, "tecnologia") == 0

    def test_total_progress_rounds(self, empty_session):
        session = record_answer(empty_session, "1.1", "A")
        assert total_progress(session) == 2  # 1/60 = 1.67%

    def test_area_progress_is_whole_percentage(self, empty_session):
        session = record_answer(empty_session, "5.1", "C")
        session = record_answer(session, "5.2", "C")
        session = record_answer(session, "5.3", "C")
        assert area_progress(session, "financeiro") == 60
        assert isinstance(area_progress(session, "financeiro"), int)

    def test_total_progress_complete(self, empty_session):
        assert total_progress(answer_all(empty_session)) == 100

    def test_unknown_area(self, empty_session):
        with pytest.raises(KeyError):
            area_progress(empty_session, "juridico")


class TestAreaResults:
    def test_catalog_order_and_bounds(self, empty_session):
        results = compute_area_results(answer_area(empty_session, 3, "ABCDA"))
        assert len(results) == 12
        assert results[0].area_id == "societario"
        assert results[-1].area_id == "processos"
        assert all(0 <= r.score <= 100 for r in results)

    def test_empty_area_scores_zero_with_all_gaps(self, empty_session):
        result = _results_by_area(empty_session)["fiscal"]
        assert result.score == 0
        assert result.answered == 0
        assert len(result.gaps) == 5

    def test_unanswered_question_counts_as_zero(self, empty_session):
        session = record_answer(empty_session, "1.1", "D")
        result = _results_by_area(session)["societario"]
        assert result.score == 20
        assert [g.question_id for g in result.gaps] == ["1.2", "1.3", "1.4", "1.5"]

    def test_mean_uses_half_up_rounding(self, empty_session):
        session = answer_area(empty_session, 2, "BBBCC")  # (99 + 132) / 5 = 46.2
        assert _results_by_area(session)["tecnologia"].score == 46
        session = answer_area(empty_session, 2, "DCCAA")  # 232 / 5 = 46.4
        assert _results_by_area(session)["tecnologia"].score == 46
        session = answer_area(empty_session, 2, "DDCBA")  # 299 / 5 = 59.8
        assert _results_by_area(session)["tecnologia"].score == 60

    def test_gap_threshold(self, empty_session):
        session = answer_area(empty_session, 3, "ABCDB")
        gaps = _results_by_area(session)["comercial"].gaps
        assert [g.question_id for g in gaps] == ["3.1", "3.2", "3.5"]
        assert all(g.score < 60 for g in gaps)

    def test_all_d_has_no_gaps(self, empty_session):
        results = compute_area_results(answer_all(empty_session, "D"))
        assert all(r.score == 100 and not r.gaps for r in results)

    def test_gap_recommendation_uses_action_plan(self, empty_session):
        session = record_answer(empty_session, "5.2", "A")
        session = record_note(session, "5.2", "action_plan", "Separar contas PF e PJ")
        gap = next(g for g in _results_by_area(session)["financeiro"].gaps if g.question_id == "5.2")
        assert gap.recommendation == "Separar contas PF e PJ"

    def test_gap_recommendation_falls_back_to_default(self, empty_session):
        session = record_answer(empty_session, "5.2", "A")
        session = record_note(session, "5.2", "action_plan", "   ")
        gap = next(g for g in _results_by_area(session)["financeiro"].gaps if g.question_id == "5.2")
        assert gap.recommendation == get_question("5.2").default_suggestion

    def test_gap_impact(self):
        assert Gap("1.1", "p", 0, "r").impact == "Crítico"
        assert Gap("1.1", "p", 33, "r").impact == "Crítico"
        assert Gap("1.1", "p", 50, "r").impact == "Alto"

    def test_detailed_series(self, empty_session):
        session = answer_area(empty_session, 1, "ABCDA")
        result = _results_by_area(session)["societario"]
        assert [d["value"] for d in result.detailed] == [0, 33, 66, 100, 0]
        assert all(d["full_mark"] == 100 for d in result.detailed)

    def test_idempotent(self, empty_session):
        session = answer_area(empty_session, 6, "ABCDA")
        assert compute_area_results(session) == compute_area_results(session)


class TestPriority:
    def test_financial_risk(self, empty_session):
        session = answer_all(empty_session, "D")
        session = answer_area(session, 5, "DAAAA")  # financeiro = 20
        priority = compute_priority(compute_area_results(session))
        assert priority.area_id == "financeiro"
        assert priority.type == PRIORITY_RISK
        assert priority.message == "Prioridade Crítica detectada!"
        assert priority.is_risk

    def test_lowest_risk_area_wins(self, empty_session):
        session = answer_all(empty_session, "D")
        session = answer_area(session, 1, "BBBBB")  # societario = 33
        session = answer_area(session, 7, "AAAAD")  # fiscal = 20
        priority = compute_priority(compute_area_results(session))
        assert priority.area_id == "fiscal"

    def test_tie_goes_to_catalog_order(self):
        def result(area_id, score):
            return AreaResult(area_id=area_id, area_name=area_id, score=score, answered=5, total=5)

        results = [result("financeiro", 39), result("societario", 39), result("processos", 100)]
        assert compute_priority(results).area_id == "societario"

    def test_non_risk_area_below_threshold_is_not_risk(self, empty_session):
        session = answer_all(empty_session, "D")
        session = answer_area(session, 3, "AAAAA")  # comercial = 0
        priority = compute_priority(compute_area_results(session))
        assert priority.type == PRIORITY_TRACTION
        assert priority.area_id == "comercial"
        assert priority.message == "Aceleração de Receita"

    def test_efficiency_for_weakest_operational_area(self, empty_session):
        session = answer_all(empty_session, "D")
        session = answer_area(session, 10, "CCCCC")  # pessoas = 66
        priority = compute_priority(compute_area_results(session))
        assert priority.type == PRIORITY_EFFICIENCY
        assert priority.area_id == "pessoas"
        assert priority.message == "Otimização para Escala"

    def test_risk_area_at_threshold_is_not_risk(self):
        results = [
            AreaResult(area_id="financeiro", area_name="Financeiro", score=40, answered=5, total=5),
            AreaResult(area_id="marketing", area_name="Marketing", score=80, answered=5, total=5),
        ]
        priority = compute_priority(results)
        assert priority.type == PRIORITY_EFFICIENCY
        assert priority.area_id == "financeiro"

    def test_unanswered_areas_never_qualify(self, empty_session):
        session = answer_area(empty_session, 3, "DDDDD")
        priority = compute_priority(compute_area_results(session))
        assert priority.type != PRIORITY_RISK
        assert priority.area_id == "comercial"

    def test_empty_session_default(self, empty_session):
        priority = compute_priority(compute_area_results(empty_session))
        assert priority.type == PRIORITY_EFFICIENCY
        assert priority.area_id == "processos"
        assert priority.message == "Diagnóstico ainda sem respostas para priorização."

    def test_all_d_is_efficiency(self, empty_session):
        priority = compute_priority(compute_area_results(answer_all(empty_session, "D")))
        assert priority.type == PRIORITY_EFFICIENCY


class TestSessionLifecycle:
    def test_finish(self, empty_session):
        assert empty_session.status == STATUS_STARTED
        finished = finish(empty_session)
        assert finished.status == STATUS_FINALIZED
        assert finish(finished).status == STATUS_FINALIZED
        assert empty_session.status == STATUS_STARTED

    def test_snapshot_is_independent(self, empty_session):
        session = record_answer(empty_session, "1.1", "A")
        snap = session.snapshot()
        session.responses["1.1"].observation = "editado"
        assert snap.responses["1.1"].observation == ""

    def test_round_trip_dict(self, empty_session):
        session = record_note(record_answer(empty_session, "9.4", "C"), "9.4", "observation", "ok")
        assert DiagnosticSession.from_dict(session.to_dict()) == session

    def test_from_dict_accepts_camel_case(self):
        resp = Response.from_dict({"selectedOption": "B", "actionPlan": "Fazer X", "score": 999})
        assert resp.selected_option == "B"
        assert resp.score == 33
        assert resp.action_plan == "Fazer X"

    def test_responses_hash(self, empty_session):
        a = record_answer(record_answer(empty_session, "1.1", "A"), "2.1", "B")
        b = record_answer(record_answer(empty_session, "2.1", "B"), "1.1", "A")
        assert responses_hash(a) == responses_hash(b)
        assert responses_hash(a) != responses_hash(record_answer(a, "1.1", "C"))
        assert responses_hash(a) != responses_hash(record_note(a, "1.1", "observation", "x"))

    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (46.4, 46), (59.8, 60)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected
