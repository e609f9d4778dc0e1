"""Root URL configuration."""
from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path


def health_check(request):
    return JsonResponse({"status": "ok"})


urlpatterns = [
    path("health/", health_check, name="health_check"),
    path("admin/", admin.site.urls),
    path("accounts/", include("django.contrib.auth.urls")),
    path("clients/", include("apps.clients.urls", namespace="clients")),
    path("diagnostics/", include("apps.diagnostics.urls", namespace="diagnostics")),
    path("api/", include("apps.api.urls", namespace="api")),
    path("", include("apps.crm.urls", namespace="crm")),
]

admin.site.site_header = "Diagnóstico 360º Admin"
admin.site.site_title = "Diagnóstico 360º"
admin.site.index_title = "Painel Administrativo"
