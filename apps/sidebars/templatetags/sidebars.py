from __future__ import annotations

import logging

from django import template

register = template.Library()
logger = logging.getLogger(__name__)


@register.simple_tag(takes_context=True)
def render_sidebar(context, location=None, sidebar=None, classes=None):
    sidebars = context.get("sidebars")
    if sidebars is None:
        logger.debug("No sidebars in the template context; skipping %s", location)
        return ""
    return sidebars.render_sidebar(location, sidebar, classes, request=context.get("request"))


@register.simple_tag(takes_context=True)
def sidebar_is_active(context, sidebar_id) -> bool:
    """Return whether ``sidebar_id`` has any widgets assigned."""

    sidebars = context.get("sidebars")
    if sidebars is None:
        return False
    return sidebars.host.is_active(sidebar_id)
