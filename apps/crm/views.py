"""CRM dashboard view."""
from django.contrib.auth.mixins import LoginRequiredMixin
from django.views.generic import TemplateView

from apps.diagnostics.models import Diagnostic
from apps.diagnostics.scoring import total_progress

from .models import Contract, Lead
from .stats import get_dashboard_stats


class DashboardView(LoginRequiredMixin, TemplateView):
    template_name = "crm/dashboard.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["stats"] = get_dashboard_stats()
        ctx["recent_diagnostics"] = [
            {"diagnostic": d, "progress": total_progress(d.to_session())}
            for d in Diagnostic.objects.select_related("client")[:10]
        ]
        ctx["pipeline"] = [
            {"status": label, "leads": list(Lead.objects.filter(status=value)[:20])}
            for value, label in Lead.Status.choices
        ]
        ctx["contracts"] = Contract.objects.select_related("client").filter(
            status=Contract.Status.ACTIVE
        )[:10]
        return ctx
