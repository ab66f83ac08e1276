from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from django.utils.html import escape

from .hooks import HookRegistry
from .specs import (
    RegistrationRecord,
    SidebarRegistration,
    SidebarSpec,
    coerce_editable,
)

logger = logging.getLogger(__name__)

REGISTER_FILTER = "sidebars-register"
BEFORE_WIDGET_FILTER = "sidebars-before-widget"
AFTER_WIDGET_FILTER = "sidebars-after-widget"
BEFORE_TITLE_FILTER = "sidebars-before-title"
AFTER_TITLE_FILTER = "sidebars-after-title"


class SidebarRegistry:
    """Forward configured sidebars to the widget area host."""

    def __init__(
        self,
        host,
        hooks: HookRegistry,
        sidebars: Iterable[SidebarSpec | Mapping[str, Any]] = (),
    ) -> None:
        self.host = host
        self.hooks = hooks
        self.configured = tuple(SidebarSpec.from_config(sidebar) for sidebar in sidebars)

    def register_defaults(self) -> None:
        if not self.configured:
            return

        for sidebar in self.configured:
            self.register(sidebar)

    def register(self, sidebar: SidebarSpec | Mapping[str, Any] | None = None) -> None:
        raw = SidebarSpec.from_config(sidebar or {})
        spec = SidebarSpec(
            id=str(escape(raw.id)),
            name=str(escape(raw.name)),
            description=str(escape(raw.description)),
            editable=coerce_editable(raw.editable),
        )
        defaults = RegistrationRecord()
        record = RegistrationRecord(
            before_widget=self.hooks.apply_filters(
                BEFORE_WIDGET_FILTER, defaults.before_widget, raw.id, raw
            ),
            after_widget=self.hooks.apply_filters(
                AFTER_WIDGET_FILTER, defaults.after_widget, raw.id, raw
            ),
            before_title=self.hooks.apply_filters(
                BEFORE_TITLE_FILTER, defaults.before_title, raw.id, raw
            ),
            after_title=self.hooks.apply_filters(
                AFTER_TITLE_FILTER, defaults.after_title, raw.id, raw
            ),
        )
        default = SidebarRegistration(spec=spec, record=record)
        registration = self.hooks.apply_filters(REGISTER_FILTER, default, raw)
        if not isinstance(registration, SidebarRegistration):
            logger.warning(
                "Ignoring %s result %r for sidebar %s", REGISTER_FILTER, registration, spec.id
            )
            registration = default
        logger.debug("Registering sidebar %s", registration.spec.id)
        self.host.register_area(registration.spec, registration.record)


__all__ = ["SidebarRegistry"]
