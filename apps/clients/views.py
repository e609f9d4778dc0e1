"""Client views — CRUD and diagnostic history."""
import logging

from django.contrib.auth.mixins import LoginRequiredMixin
from django.db.models import Q
from django.urls import reverse_lazy
from django.views.generic import CreateView, DetailView, ListView, UpdateView

from apps.diagnostics.scoring import compute_area_results, total_progress

from .forms import ClientForm
from .models import Client

logger = logging.getLogger(__name__)


class ClientListView(LoginRequiredMixin, ListView):
    model = Client
    template_name = "clients/client_list.html"
    context_object_name = "clients"
    paginate_by = 25

    def get_queryset(self):
        qs = super().get_queryset()
        q = self.request.GET.get("q", "").strip()
        if q:
            qs = qs.filter(
                Q(nome_fantasia__icontains=q)
                | Q(razao_social__icontains=q)
                | Q(cnpj__icontains=q)
            )
        return qs


class ClientCreateView(LoginRequiredMixin, CreateView):
    model = Client
    form_class = ClientForm
    template_name = "clients/client_form.html"
    success_url = reverse_lazy("clients:list")


class ClientUpdateView(LoginRequiredMixin, UpdateView):
    model = Client
    form_class = ClientForm
    template_name = "clients/client_form.html"
    success_url = reverse_lazy("clients:list")


class ClientDetailView(LoginRequiredMixin, DetailView):
    model = Client
    template_name = "clients/client_detail.html"
    context_object_name = "client"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        rows = []
        for diagnostic in self.object.diagnostics.order_by("-updated_at")[:20]:
            session = diagnostic.to_session()
            results = compute_area_results(session)
            rows.append({
                "diagnostic": diagnostic,
                "progress": total_progress(session),
                "average": round(sum(r.score for r in results) / len(results)),
            })
        ctx["diagnostic_rows"] = rows
        return ctx
