"""Diagnostic URL patterns."""
from django.urls import path

from . import views

app_name = "diagnostics"

urlpatterns = [
    path("", views.DiagnosticListView.as_view(), name="list"),
    path("novo/", views.DiagnosticCreateView.as_view(), name="create"),
    path("<uuid:pk>/area/<slug:area_id>/", views.DiagnosticWizardView.as_view(), name="wizard"),
    path("<uuid:pk>/answer/", views.AnswerView.as_view(), name="answer"),
    path("<uuid:pk>/note/", views.NoteView.as_view(), name="note"),
    path("<uuid:pk>/finish/", views.FinishView.as_view(), name="finish"),
    path("<uuid:pk>/report/", views.DiagnosticReportView.as_view(), name="report"),
]
