from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

from swimdq.apps.meets import views as meet_views

urlpatterns = [
    # Admin de Django (fuera de /admin/, que es la página de meets)
    path("django-admin/", admin.site.urls),
    path("accounts/", include("django.contrib.auth.urls")),

    # Home -> administración de meets
    path("", RedirectView.as_view(pattern_name="meets_admin", permanent=False), name="home"),

    # Crear / listar / cerrar meets
    path("admin/", include("swimdq.apps.meets.urls")),

    # Carga de DQs por meet
    path("submit/", include("swimdq.apps.dq.urls")),

    # API healthcheck
    path("api/health/", meet_views.health, name="api_health"),
]
