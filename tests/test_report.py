"""Report assembly — insight merge and contingency narrative."""
from apps.diagnostics.scoring import compute_area_results, compute_priority
from apps.reports.assembly import FALLBACK_TAG, MAX_ACTIONS, assemble_report, build_report

from .helpers import answer_all, answer_area


class TestFallbackReport:
    def test_empty_session_still_has_summary(self, empty_session):
        report = build_report(empty_session)
        assert report.is_fallback
        assert report.summary.startswith(FALLBACK_TAG)
        assert report.total_progress == 0
        assert len(report.area_results) == 12
        assert len(report.radar) == 12

    def test_summary_mentions_priority_and_client(self, empty_session):
        session = answer_area(answer_all(empty_session, "D"), 5, "DAAAA")
        report = build_report(session, client_name="Pão Quente")
        assert "Pão Quente" in report.summary
        assert "Financeiro" in report.summary
        assert "reestruturação imediata" in report.summary
        assert report.priority.area_id == "financeiro"

    def test_action_plan_starts_with_priority_area_gaps(self, empty_session):
        session = answer_all(empty_session, "D")
        session = answer_area(session, 3, "AADDD")  # comercial = 40, 2 gaps
        session = answer_area(session, 5, "AAAAD")  # financeiro = 20, 4 gaps
        report = build_report(session)
        assert len(report.action_plan) == MAX_ACTIONS
        assert all(item.where == "Financeiro" for item in report.action_plan)
        assert all(item.what for item in report.action_plan)

    def test_all_d_has_no_actions_but_strengths(self, empty_session):
        report = build_report(answer_all(empty_session, "D"))
        assert report.action_plan == ()
        assert report.gap_rows == ()
        assert len(report.strengths) == 12
        assert report.weaknesses == ()
        assert report.average_score == 100

    def test_only_mature_areas_are_strengths(self, empty_session):
        session = answer_area(empty_session, 2, "DDDCC")  # tecnologia = 86
        report = build_report(session)
        assert report.strengths == ("Tecnologia & Inovação com maturidade de 86%",)

    def test_strength_falls_back_to_best_area(self, empty_session):
        session = answer_area(empty_session, 2, "CCCCC")  # tecnologia = 66
        report = build_report(session)
        assert report.strengths == ("Tecnologia & Inovação é a área mais madura (66%)",)

    def test_ishikawa_uses_priority_area_gaps(self, empty_session):
        session = answer_area(answer_all(empty_session, "D"), 7, "AAACD")  # fiscal = 33
        report = build_report(session)
        assert report.priority.area_id == "fiscal"
        assert len(report.ishikawa) == 3
        assert all(category == "Materiais" for category, _ in report.ishikawa)

    def test_pdca_has_four_phases(self, empty_session):
        report = build_report(empty_session)
        assert [phase for phase, _ in report.pdca] == ["PLAN", "DO", "CHECK", "ACT"]

    def test_gap_rows(self, empty_session):
        session = answer_area(answer_all(empty_session, "D"), 1, "ABDDD")
        report = build_report(session)
        assert [(row["question_id"], row["impact"]) for row in report.gap_rows] == [
            ("1.1", "Crítico"), ("1.2", "Crítico"),
        ]


class TestInsightReport:
    def test_uses_insight_payload(self, empty_session, insight_payload):
        session = answer_all(empty_session, "C")
        report = build_report(session, insight_payload, client_name="Pão Quente")
        assert not report.is_fallback
        assert report.summary == insight_payload["sumarioExecutivo"]
        assert report.strengths == ("Marca reconhecida",)
        assert report.threats == ("Concorrência de grandes redes",)
        assert report.ishikawa == (
            ("Métodos", "Ausência de fluxo de caixa"),
            ("Medida", "Sem DRE mensal"),
        )
        action = report.action_plan[0]
        assert action.what == "Implantar fluxo de caixa diário"
        assert action.how_much == "R$ 0,00"
        assert [phase for phase, _ in report.pdca] == ["PLAN", "DO", "CHECK", "ACT"]

    def test_scores_are_computed_not_taken_from_insight(self, empty_session, insight_payload):
        session = answer_all(empty_session, "B")
        report = build_report(session, insight_payload)
        assert all(r.score == 33 for r in report.area_results)
        assert report.total_progress == 100

    def test_blank_summary_falls_back(self, empty_session, insight_payload):
        insight_payload["sumarioExecutivo"] = "  "
        report = build_report(empty_session, insight_payload)
        assert report.is_fallback
        assert report.summary.startswith(FALLBACK_TAG)

    def test_assemble_with_precomputed_results(self, empty_session, insight_payload):
        session = answer_all(empty_session, "D")
        results = compute_area_results(session)
        priority = compute_priority(results)
        report = assemble_report(session, results, priority, insight_payload)
        assert report.priority == priority
        assert report.area_results == tuple(results)

    def test_to_dict(self, empty_session, insight_payload):
        data = build_report(empty_session, insight_payload).to_dict()
        assert data["summary"] == insight_payload["sumarioExecutivo"]
        assert data["ishikawa"][0] == {"category": "Métodos", "cause": "Ausência de fluxo de caixa"}
        assert data["pdca"][0]["phase"] == "PLAN"
        assert data["priority"]["area_id"] == "processos"
        assert "average_score" in data
