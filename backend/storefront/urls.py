from pathlib import Path

from django.conf import settings
from django.http import FileResponse, JsonResponse
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from apps.common.views import live_health, ready_health

urlpatterns = [
    path("api/", include("apps.api.urls")),
    path("health/live", live_health, name="health-live"),
    path("health/ready", ready_health, name="health-ready"),
]


def static_schema(request):
    """Serve the exported OpenAPI document when the live generator is off."""
    schema_file = Path(settings.BASE_DIR) / "static" / settings.OPENAPI_STATIC_JSON
    if not schema_file.is_file():
        return JsonResponse(
            {
                "error": {
                    "code": "NOT_FOUND",
                    "message": "Static schema not found. Export it with spectacular or enable DEBUG.",
                    "status": 404,
                }
            },
            status=404,
        )
    return FileResponse(schema_file.open("rb"), content_type="application/json")


if settings.DEBUG:
    schema_view = SpectacularAPIView.as_view()
else:
    schema_view = static_schema

urlpatterns += [
    path("schema/", schema_view, name="schema"),
    path(
        "docs/swagger/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
]
