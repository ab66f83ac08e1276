from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from django.utils.safestring import SafeString

from .hooks import HookRegistry
from .registry import SidebarRegistry
from .rendering import SidebarRenderer
from .specs import SidebarSpec

logger = logging.getLogger(__name__)

INIT_ACTION = "sidebars-init"


class Sidebars:
    """Registry and renderer pair sharing one set of hooks.

    Build one per application and hand it to templates through the context.
    """

    def __init__(
        self,
        host,
        hooks: HookRegistry | None = None,
        sidebars: Iterable[SidebarSpec | Mapping[str, Any]] = (),
    ) -> None:
        self.host = host
        self.hooks = hooks or HookRegistry()
        self.registry = SidebarRegistry(host, self.hooks, sidebars)
        self.renderer = SidebarRenderer(host, self.hooks)
        self.hooks.do_action(INIT_ACTION, sidebars=self)

    @property
    def configured(self) -> tuple:
        return self.registry.configured

    def register_defaults(self) -> None:
        self.registry.register_defaults()

    def register(self, sidebar: SidebarSpec | Mapping[str, Any] | None = None) -> None:
        self.registry.register(sidebar)

    def render(self, location=None, sidebar=None, classes=None, **kwargs) -> SafeString:
        return self.renderer.render(location, sidebar, classes, **kwargs)

    def register_sidebar(
        self,
        name: str | None = None,
        id: str | None = None,
        description: str | None = None,
        editable: Any = False,
    ) -> None:
        self.registry.register(
            {"name": name, "id": id, "description": description, "editable": editable}
        )

    def render_sidebar(
        self,
        location: str | None = None,
        sidebar: str | None = None,
        classes: str | None = None,
        **kwargs,
    ) -> SafeString:
        return self.renderer.render(location, sidebar, classes, **kwargs)


__all__ = ["INIT_ACTION", "Sidebars"]
