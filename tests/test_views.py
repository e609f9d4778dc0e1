"""Integration tests for HTML views."""
from unittest.mock import patch

import pytest
from django.urls import reverse
from kombu.exceptions import OperationalError

from apps.clients.models import Client
from apps.diagnostics.catalog import get_question
from apps.diagnostics.models import Diagnostic
from apps.insights.models import StrategicInsight
from apps.reports.assembly import FALLBACK_TAG


def _wizard_url(diagnostic, area_id="societario"):
    return reverse("diagnostics:wizard", kwargs={"pk": diagnostic.pk, "area_id": area_id})


class TestAuth:
    @pytest.mark.parametrize("name", ["crm:dashboard", "clients:list", "diagnostics:list", "diagnostics:create"])
    def test_requires_login(self, client, db, name):
        resp = client.get(reverse(name))
        assert resp.status_code == 302
        assert "/accounts/login/" in resp.url

    def test_health(self, client, db):
        assert client.get("/health/").json() == {"status": "ok"}


class TestClientViews:
    def test_list(self, auth_client, sample_client):
        resp = auth_client.get(reverse("clients:list"), {"q": "teste"})
        assert resp.status_code == 200
        assert "Teste Tech" in resp.content.decode()

    def test_create_formats_cnpj(self, auth_client):
        resp = auth_client.post(reverse("clients:create"), {
            "razao_social": "Nova Empresa LTDA",
            "nome_fantasia": "Nova",
            "cnpj": "99888777000166",
            "responsavel": "Paula",
            "entrevistado": "Rafael",
            "uf": "sp",
            "is_active": "on",
        })
        assert resp.status_code == 302
        client = Client.objects.get(nome_fantasia="Nova")
        assert client.cnpj == "99.888.777/0001-66"
        assert client.uf == "SP"

    def test_create_rejects_short_cnpj(self, auth_client):
        resp = auth_client.post(reverse("clients:create"), {
            "razao_social": "X", "nome_fantasia": "X", "cnpj": "123",
            "responsavel": "Y", "entrevistado": "Z",
        })
        assert resp.status_code == 200
        assert not Client.objects.exists()

    def test_detail_lists_diagnostics(self, auth_client, answered):
        resp = auth_client.get(reverse("clients:detail", kwargs={"pk": answered.client_id}))
        assert resp.status_code == 200
        assert resp.context["diagnostic_rows"][0]["progress"] == 100


class TestDiagnosticFlow:
    def test_start_creates_diagnostic(self, auth_client):
        resp = auth_client.post(reverse("diagnostics:create"), {
            "razao_social": "Padaria Pão Quente LTDA",
            "nome_fantasia": "Pão Quente",
            "cnpj": "12345678000199",
            "responsavel": "Maria",
            "entrevistado": "João",
        })
        diagnostic = Diagnostic.objects.get()
        assert resp.status_code == 302
        assert resp.url == _wizard_url(diagnostic)
        assert diagnostic.client.cnpj == "12.345.678/0001-99"
        assert diagnostic.client_info["entrevistado"] == "João"

    def test_start_requires_vital_data(self, auth_client):
        resp = auth_client.post(reverse("diagnostics:create"), {"razao_social": "X"})
        assert resp.status_code == 200
        assert "nome_fantasia" in resp.context["form"].errors
        assert not Diagnostic.objects.exists()

    def test_start_prefills_existing_client(self, auth_client, sample_client):
        resp = auth_client.get(reverse("diagnostics:create"), {"client": sample_client.pk})
        assert resp.context["form"].initial["nome_fantasia"] == "Teste Tech"

    def test_wizard_renders_area(self, auth_client, diagnostic):
        resp = auth_client.get(_wizard_url(diagnostic, "financeiro"))
        assert resp.status_code == 200
        assert get_question("5.1").prompt in resp.content.decode()
        assert resp.context["area_number"] == 5
        assert resp.context["total_progress"] == 0

    def test_wizard_unknown_area(self, auth_client, diagnostic):
        assert auth_client.get(_wizard_url(diagnostic, "juridico")).status_code == 404

    def test_wizard_saves_answers_and_notes(self, auth_client, diagnostic):
        resp = auth_client.post(_wizard_url(diagnostic), {
            "opt_1_1": "B",
            "obs_1_1": "Contrato de 2015",
            "opt_1_2": "D",
            "plan_1_2": "Revisar acordo em 2025",
            "go_to": "tecnologia",
        })
        assert resp.status_code == 302
        assert resp.url == _wizard_url(diagnostic, "tecnologia")

        diagnostic.refresh_from_db()
        r11 = diagnostic.responses["1.1"]
        assert r11["score"] == 33
        assert r11["observation"] == "Contrato de 2015"
        assert r11["action_plan"] == get_question("1.1").default_suggestion
        assert diagnostic.responses["1.2"]["action_plan"] == "Revisar acordo em 2025"
        assert "1.3" not in diagnostic.responses

    def test_wizard_blank_plan_keeps_suggestion_for_new_answer(self, auth_client, diagnostic):
        auth_client.post(_wizard_url(diagnostic), {"opt_1_3": "A", "obs_1_3": "", "plan_1_3": ""})
        diagnostic.refresh_from_db()
        assert diagnostic.responses["1.3"]["action_plan"] == get_question("1.3").default_suggestion

    def test_wizard_clears_action_plan(self, auth_client, diagnostic):
        auth_client.post(_wizard_url(diagnostic), {"opt_1_3": "A"})
        auth_client.post(_wizard_url(diagnostic), {"opt_1_3": "A", "obs_1_3": "", "plan_1_3": ""})
        diagnostic.refresh_from_db()
        assert diagnostic.responses["1.3"]["action_plan"] == ""
        assert diagnostic.responses["1.3"]["score"] == 0

    def test_wizard_keeps_notes_not_submitted(self, auth_client, diagnostic):
        auth_client.post(_wizard_url(diagnostic), {"opt_1_4": "C", "obs_1_4": "Sem acordo formal"})
        auth_client.post(_wizard_url(diagnostic), {"opt_1_4": "D"})
        diagnostic.refresh_from_db()
        assert diagnostic.responses["1.4"]["observation"] == "Sem acordo formal"
        assert diagnostic.responses["1.4"]["score"] == 100

    def test_wizard_go_to_report(self, auth_client, diagnostic):
        resp = auth_client.post(_wizard_url(diagnostic, "processos"), {"opt_12_1": "C", "go_to": "report"})
        assert resp.url == reverse("diagnostics:report", kwargs={"pk": diagnostic.pk})

    def test_answer_view(self, auth_client, diagnostic):
        resp = auth_client.post(
            reverse("diagnostics:answer", kwargs={"pk": diagnostic.pk}),
            {"question_id": "7.2", "option": "A"},
        )
        assert resp.url == _wizard_url(diagnostic, "fiscal")
        diagnostic.refresh_from_db()
        assert diagnostic.responses["7.2"]["selected_option"] == "A"

    def test_answer_unknown_question(self, auth_client, diagnostic):
        resp = auth_client.post(
            reverse("diagnostics:answer", kwargs={"pk": diagnostic.pk}),
            {"question_id": "42.1", "option": "A"},
        )
        assert resp.status_code == 400

    def test_note_view(self, auth_client, diagnostic):
        auth_client.post(
            reverse("diagnostics:note", kwargs={"pk": diagnostic.pk}),
            {"question_id": "9.1", "field": "observation", "text": "Clima tenso"},
        )
        diagnostic.refresh_from_db()
        assert diagnostic.responses["9.1"]["observation"] == "Clima tenso"
        assert diagnostic.responses["9.1"]["selected_option"] is None

    def test_finish_requires_complete_questionnaire(self, auth_client, diagnostic):
        auth_client.post(reverse("diagnostics:finish", kwargs={"pk": diagnostic.pk}))
        diagnostic.refresh_from_db()
        assert diagnostic.status == Diagnostic.Status.STARTED

    def test_finish(self, auth_client, answered):
        resp = auth_client.post(reverse("diagnostics:finish", kwargs={"pk": answered.pk}))
        assert resp.url == reverse("diagnostics:report", kwargs={"pk": answered.pk})
        answered.refresh_from_db()
        assert answered.status == Diagnostic.Status.FINALIZED
        assert answered.finished_at is not None

    def test_list_filters_by_status(self, auth_client, diagnostic):
        resp = auth_client.get(reverse("diagnostics:list"), {"status": "Finalizado"})
        assert resp.context["rows"] == []
        resp = auth_client.get(reverse("diagnostics:list"), {"status": "Iniciado"})
        assert len(resp.context["rows"]) == 1


class TestReportView:
    def test_fallback_report(self, auth_client, answered, settings):
        settings.GEMINI_API_KEY = ""
        resp = auth_client.get(reverse("diagnostics:report", kwargs={"pk": answered.pk}))
        assert resp.status_code == 200
        report = resp.context["report"]
        assert report.is_fallback
        assert report.priority.area_id == "financeiro"
        assert FALLBACK_TAG in resp.content.decode()
        assert resp.context["insight"].status == StrategicInsight.Status.UNAVAILABLE

    @patch("apps.insights.tasks.generate_strategic_insight.delay")
    def test_broker_down_renders_fallback(self, mock_delay, auth_client, answered):
        mock_delay.side_effect = OperationalError("broker down")
        url = reverse("diagnostics:report", kwargs={"pk": answered.pk})
        resp = auth_client.get(url)
        assert resp.status_code == 200
        assert resp.context["report"].is_fallback
        assert resp.context["insight"].status == StrategicInsight.Status.UNAVAILABLE

        mock_delay.side_effect = None
        auth_client.post(url)
        assert mock_delay.call_count == 2
        assert answered.insights.get().status == StrategicInsight.Status.PENDING

    def test_incomplete_session_skips_insight(self, auth_client, diagnostic):
        resp = auth_client.get(reverse("diagnostics:report", kwargs={"pk": diagnostic.pk}))
        assert resp.status_code == 200
        assert resp.context["insight"] is None
        assert not StrategicInsight.objects.exists()

    def test_regenerate(self, auth_client, answered, settings):
        settings.GEMINI_API_KEY = ""
        url = reverse("diagnostics:report", kwargs={"pk": answered.pk})
        resp = auth_client.post(url)
        assert resp.url == url
        assert answered.insights.count() == 1


class TestDashboard:
    def test_dashboard(self, auth_client, answered):
        resp = auth_client.get(reverse("crm:dashboard"))
        assert resp.status_code == 200
        assert resp.context["stats"].diagnostics_performed == 0
        assert len(resp.context["pipeline"]) == 5
