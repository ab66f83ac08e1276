"""App configuration for widgets and widget areas."""

from django.apps import AppConfig
from django.conf import settings


class WidgetsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.widgets"
    label = "widgets"
    verbose_name = "Widgets"

    def ready(self):
        from .text import load_text_widgets

        load_text_widgets(getattr(settings, "TEXT_WIDGETS", ()))
