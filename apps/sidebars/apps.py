"""App configuration for theme sidebars."""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class SidebarsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.sidebars"
    label = "sidebars"
    verbose_name = "Sidebars"

    sidebars = None

    def ready(self):
        from apps.widgets.services import widget_areas

        from .conf import configured_hooks, configured_sidebars, sidebars_supported
        from .core import Sidebars
        from .hooks import HookRegistry

        hooks = HookRegistry()
        hooks.load(configured_hooks())
        self.sidebars = Sidebars(widget_areas, hooks=hooks, sidebars=configured_sidebars())

        if not sidebars_supported():
            logger.debug("SIDEBARS is not configured; no sidebars registered")
            return
        self.sidebars.register_defaults()
