from __future__ import annotations

import io
import logging
from typing import IO

from django.utils.html import escape
from django.utils.safestring import SafeString, mark_safe

from .hooks import HookRegistry
from .specs import RenderRequest

logger = logging.getLogger(__name__)

RENDER_FILTER = "sidebars-render"


class SidebarRenderer:
    """Write a sidebar's container, boundary hooks and widget output."""

    def __init__(self, host, hooks: HookRegistry) -> None:
        self.host = host
        self.hooks = hooks

    def resolve(self, location: str | None, sidebar: str | None = None, classes: str | None = None) -> RenderRequest:
        """Let listeners swap the sidebar shown at ``location``."""

        sidebar = self.hooks.apply_filters(RENDER_FILTER, sidebar, location)
        return RenderRequest(location=location or "", sidebar=sidebar, classes=classes)

    def is_renderable(self, render: RenderRequest) -> bool:
        return self.host.is_active(render.sidebar) or self.hooks.has_action(
            f"no-{render.location}-widgets"
        )

    def render(
        self,
        location: str | None = None,
        sidebar: str | None = None,
        classes: str | None = None,
        *,
        request=None,
        stream: IO[str] | None = None,
    ) -> SafeString:
        render = self.resolve(location, sidebar, classes)
        if not self.is_renderable(render):
            logger.debug("Sidebar %s has nothing to show at %s", render.sidebar, render.location)
            return mark_safe("")

        output = io.StringIO()
        self._write(render, output, request)
        markup = output.getvalue()
        if stream is not None:
            stream.write(markup)
        return mark_safe(markup)

    def _write(self, render: RenderRequest, output: io.StringIO, request) -> None:
        location = render.location
        safe_location = escape(location)
        hook_kwargs = {"output": output, "location": location, "sidebar": render.sidebar}

        self.hooks.do_action(f"before-{location}", **hook_kwargs)
        output.write(
            f'<div id="{safe_location}" class="aside {safe_location}-aside '
            f'{escape(render.classes or "")}" role="complementary">'
        )
        self.hooks.do_action(f"before-{location}-widgets", **hook_kwargs)

        html, rendered = self.host.render_area(render.sidebar, request=request)
        if rendered:
            output.write(html)
        else:
            self.hooks.do_action(f"no-{location}-widgets", **hook_kwargs)

        self.hooks.do_action(f"after-{location}-widgets", **hook_kwargs)
        output.write(f"</div><!-- #{safe_location} .aside-{safe_location} -->")
        self.hooks.do_action(f"after-{location}", **hook_kwargs)


__all__ = ["SidebarRenderer"]
