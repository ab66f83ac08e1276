"""URL configuration for config project."""

from django.urls import path
from django.views.generic import TemplateView

urlpatterns = [
    path("", TemplateView.as_view(template_name="sidebars/page.html"), name="page"),
]
