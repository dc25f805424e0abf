from django.urls import path
from . import views

urlpatterns = [
    path("<int:meet_id>/", views.submit, name="dq_submit"),
]
