"""URL configuration for hospital access codes."""

from django.urls import path

from . import views

app_name = "hospitals"

urlpatterns = [
    path("<uuid:hospital_id>/access-code/", views.api_access_code, name="access_code"),
    path(
        "<uuid:hospital_id>/access-code/validate/",
        views.api_validate_access_code,
        name="validate_access_code",
    ),
    path(
        "<uuid:hospital_id>/visit-access/",
        views.api_check_visit_access,
        name="check_visit_access",
    ),
]
