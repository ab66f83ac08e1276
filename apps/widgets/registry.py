from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

logger = logging.getLogger(__name__)

WidgetRenderer = Callable[..., "dict[str, Any] | None"]
WidgetPermission = Callable[..., bool]


@dataclass(slots=True)
class WidgetDefinition:
    """A widget renderer assigned to a widget area."""

    slug: str
    name: str
    zone: str
    template_name: str
    renderer: WidgetRenderer
    description: str = ""
    title: str = ""
    classname: str = ""
    order: int = 0
    permission: WidgetPermission | None = None
    sequence: int = field(default=0, compare=False)

    @property
    def renderer_path(self) -> str:
        module = getattr(self.renderer, "__module__", "")
        qualname = getattr(self.renderer, "__qualname__", repr(self.renderer))
        return f"{module}.{qualname}" if module else qualname

    @property
    def css_class(self) -> str:
        return self.classname or f"widget_{self.slug.replace('-', '_')}"


_REGISTRY: dict[str, WidgetDefinition] = {}
_SEQUENCE = 0


def register_widget(
    *,
    slug: str,
    name: str,
    zone: str,
    template_name: str,
    description: str = "",
    title: str = "",
    classname: str = "",
    order: int = 0,
    permission: WidgetPermission | None = None,
) -> Callable[[WidgetRenderer], WidgetRenderer]:
    """Register the decorated callable as the renderer for a widget.

    The renderer is called with ``widget`` (the definition), ``request`` and
    any extra context, and returns the template context as a dict. Returning
    ``None`` hides the widget for that render.
    """

    def decorator(renderer: WidgetRenderer) -> WidgetRenderer:
        global _SEQUENCE
        if slug in _REGISTRY:
            logger.debug("Replacing registered widget %s", slug)
        _SEQUENCE += 1
        _REGISTRY[slug] = WidgetDefinition(
            slug=slug,
            name=str(name),
            zone=zone,
            template_name=template_name,
            renderer=renderer,
            description=str(description),
            title=str(title),
            classname=classname,
            order=order,
            permission=permission,
            sequence=_SEQUENCE,
        )
        return renderer

    return decorator


def unregister_widget(slug: str) -> WidgetDefinition | None:
    return _REGISTRY.pop(slug, None)


def get_registered_widget(slug: str) -> WidgetDefinition | None:
    return _REGISTRY.get(slug)


def iter_registered_widgets(zone: str | None = None) -> Iterator[WidgetDefinition]:
    definitions = sorted(_REGISTRY.values(), key=lambda item: (item.order, item.sequence))
    for definition in definitions:
        if zone is None or definition.zone == zone:
            yield definition


__all__ = [
    "WidgetDefinition",
    "get_registered_widget",
    "iter_registered_widgets",
    "register_widget",
    "unregister_widget",
]
