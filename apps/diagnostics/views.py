"""Diagnostic views — intake, wizard per area, finish and report."""
import logging
import uuid

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, HttpResponseBadRequest
from django.shortcuts import get_object_or_404, redirect, render
from django.views import View
from django.views.generic import ListView

from apps.clients.models import Client
from apps.crm.stats import invalidate_dashboard_stats
from apps.insights.services import insight_eligible, ready_payload, request_insight
from apps.reports.assembly import build_report

from .catalog import AREAS, UnknownQuestion, get_area, get_question
from .forms import AreaResponsesForm, DiagnosticStartForm
from .models import Diagnostic
from .repository import PersistenceFailure, save_session
from .scoring import (
    DiagnosticSession,
    area_progress,
    finish,
    record_answer,
    record_note,
    total_progress,
)

logger = logging.getLogger(__name__)

START_FIELDS = list(DiagnosticStartForm.base_fields)


def _load_or_404(pk) -> tuple[Diagnostic, DiagnosticSession]:
    diagnostic = get_object_or_404(Diagnostic.objects.select_related("client"), pk=pk)
    return diagnostic, diagnostic.to_session()


def _area_nav(session: DiagnosticSession, current_id: str | None = None) -> list[dict]:
    return [
        {
            "area": area,
            "number": idx,
            "progress": area_progress(session, area.id),
            "is_current": area.id == current_id,
        }
        for idx, area in enumerate(AREAS, start=1)
    ]


class DiagnosticListView(LoginRequiredMixin, ListView):
    model = Diagnostic
    template_name = "diagnostics/diagnostic_list.html"
    context_object_name = "diagnostics"
    paginate_by = 25

    def get_queryset(self):
        qs = super().get_queryset().select_related("client")
        status = self.request.GET.get("status")
        if status in dict(Diagnostic.Status.choices):
            qs = qs.filter(status=status)
        return qs

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["rows"] = [
            {"diagnostic": d, "progress": total_progress(d.to_session())}
            for d in ctx["diagnostics"]
        ]
        ctx["status_choices"] = Diagnostic.Status.choices
        return ctx


class DiagnosticCreateView(LoginRequiredMixin, View):
    """Client intake; the diagnostic starts on the first area."""

    template_name = "diagnostics/diagnostic_form.html"

    def _initial(self):
        client_pk = self.request.GET.get("client")
        if not client_pk:
            return {}
        client = Client.objects.filter(pk=client_pk).first()
        if client is None:
            return {}
        return {name: getattr(client, name) or "" for name in START_FIELDS}

    def get(self, request):
        form = DiagnosticStartForm(initial=self._initial())
        return render(request, self.template_name, {"form": form})

    def post(self, request):
        form = DiagnosticStartForm(request.POST)
        if not form.is_valid():
            return render(request, self.template_name, {"form": form})

        session = DiagnosticSession(id=str(uuid.uuid4()))
        try:
            diagnostic = save_session(session, client_info=form.cleaned_data)
        except PersistenceFailure as exc:
            messages.error(request, str(exc))
            return render(request, self.template_name, {"form": form})

        invalidate_dashboard_stats()
        logger.info("Diagnostic %s started for client %s", diagnostic.pk, diagnostic.client_id)
        messages.success(request, f"Diagnóstico iniciado para {diagnostic.client_name}.")
        return redirect("diagnostics:wizard", pk=diagnostic.pk, area_id=AREAS[0].id)


class DiagnosticWizardView(LoginRequiredMixin, View):
    template_name = "diagnostics/diagnostic_wizard.html"

    def _context(self, diagnostic, session, area, form):
        idx = [a.id for a in AREAS].index(area.id)
        return {
            "diagnostic": diagnostic,
            "area": area,
            "area_number": idx + 1,
            "form": form,
            "rows": form.question_rows(),
            "area_nav": _area_nav(session, area.id),
            "area_progress": area_progress(session, area.id),
            "total_progress": total_progress(session),
            "previous_area": AREAS[idx - 1] if idx > 0 else None,
            "next_area": AREAS[idx + 1] if idx + 1 < len(AREAS) else None,
        }

    def _area(self, area_id):
        try:
            return get_area(area_id)
        except KeyError:
            raise Http404("Área inexistente")

    def get(self, request, pk, area_id):
        area = self._area(area_id)
        diagnostic, session = _load_or_404(pk)
        form = AreaResponsesForm(area.id, initial=AreaResponsesForm.initial_for(area.id, session))
        return render(request, self.template_name, self._context(diagnostic, session, area, form))

    def post(self, request, pk, area_id):
        area = self._area(area_id)
        diagnostic, session = _load_or_404(pk)
        form = AreaResponsesForm(area.id, request.POST)
        if not form.is_valid():
            return render(request, self.template_name, self._context(diagnostic, session, area, form))

        for question_id, option, observation, action_plan in form.entries():
            current = session.responses.get(question_id)
            shown_plan = current.action_plan if current else ""
            if option and (current is None or current.selected_option != option):
                session = record_answer(session, question_id, option)
                current = session.responses[question_id]
            if observation is not None and observation != (current.observation if current else ""):
                session = record_note(session, question_id, "observation", observation)
            # Only an edit of the text the page showed overrides the auto-filled suggestion
            if action_plan is not None and action_plan != shown_plan:
                session = record_note(session, question_id, "action_plan", action_plan)

        try:
            save_session(session)
        except PersistenceFailure as exc:
            messages.error(request, str(exc))
            return render(request, self.template_name, self._context(diagnostic, session, area, form))

        target = request.POST.get("go_to") or area.id
        if target == "report":
            return redirect("diagnostics:report", pk=diagnostic.pk)
        try:
            get_area(target)
        except KeyError:
            target = area.id
        return redirect("diagnostics:wizard", pk=diagnostic.pk, area_id=target)


class AnswerView(LoginRequiredMixin, View):
    """Single-question option click."""

    def post(self, request, pk):
        diagnostic, session = _load_or_404(pk)
        question_id = request.POST.get("question_id", "")
        try:
            session = record_answer(session, question_id, request.POST.get("option", ""))
        except (UnknownQuestion, ValueError) as exc:
            return HttpResponseBadRequest(str(exc))
        try:
            save_session(session)
        except PersistenceFailure as exc:
            messages.error(request, str(exc))
        area_id = get_question(question_id).area_id
        return redirect("diagnostics:wizard", pk=diagnostic.pk, area_id=area_id)


class NoteView(LoginRequiredMixin, View):
    def post(self, request, pk):
        diagnostic, session = _load_or_404(pk)
        question_id = request.POST.get("question_id", "")
        try:
            session = record_note(
                session, question_id, request.POST.get("field", ""), request.POST.get("text", ""),
            )
        except (UnknownQuestion, ValueError) as exc:
            return HttpResponseBadRequest(str(exc))
        try:
            save_session(session)
        except PersistenceFailure as exc:
            messages.error(request, str(exc))
        area_id = get_question(question_id).area_id
        return redirect("diagnostics:wizard", pk=diagnostic.pk, area_id=area_id)


class FinishView(LoginRequiredMixin, View):
    def post(self, request, pk):
        diagnostic, session = _load_or_404(pk)
        if total_progress(session) < 100:
            messages.error(request, "Responda todas as perguntas antes de finalizar o diagnóstico.")
            return redirect("diagnostics:wizard", pk=diagnostic.pk, area_id=AREAS[-1].id)
        try:
            save_session(finish(session))
        except PersistenceFailure as exc:
            messages.error(request, str(exc))
            return redirect("diagnostics:wizard", pk=diagnostic.pk, area_id=AREAS[-1].id)

        invalidate_dashboard_stats()
        messages.success(request, "Diagnóstico finalizado com sucesso.")
        return redirect("diagnostics:report", pk=diagnostic.pk)


class DiagnosticReportView(LoginRequiredMixin, View):
    """Scored report; the AI narrative is used once it is ready."""

    template_name = "diagnostics/diagnostic_report.html"

    def get(self, request, pk):
        diagnostic, session = _load_or_404(pk)
        insight = request_insight(diagnostic, session) if insight_eligible(session) else None
        report = build_report(session, ready_payload(insight), diagnostic.client_name)
        return render(request, self.template_name, {
            "diagnostic": diagnostic,
            "report": report,
            "insight": insight,
        })

    def post(self, request, pk):
        """Regenerate the AI narrative for the current responses."""
        diagnostic, session = _load_or_404(pk)
        if not insight_eligible(session):
            messages.error(request, "Responda mais perguntas antes de gerar a análise estratégica.")
            return redirect("diagnostics:report", pk=pk)
        request_insight(diagnostic, session, force=True)
        messages.success(request, "Análise estratégica enfileirada.")
        return redirect("diagnostics:report", pk=pk)
