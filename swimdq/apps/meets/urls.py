from django.urls import path
from . import views

urlpatterns = [
    path("", views.admin_dashboard, name="meets_admin"),
    path("<int:meet_id>/close/", views.close, name="meets_close"),
]
