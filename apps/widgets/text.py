from __future__ import annotations

from collections.abc import Iterable, Mapping

from django.core.exceptions import ImproperlyConfigured

from .registry import WidgetDefinition, get_registered_widget, register_widget

TEXT_TEMPLATE = "widgets/text.html"


def register_text_widget(
    *, slug: str, zone: str, title: str = "", text: str = "", order: int = 0
) -> WidgetDefinition:
    """Register a static text widget in ``zone``."""

    @register_widget(
        slug=slug,
        name=title or slug,
        zone=zone,
        template_name=TEXT_TEMPLATE,
        title=title,
        classname="widget_text",
        order=order,
    )
    def render_text(**_kwargs):
        return {"text": text}

    return get_registered_widget(slug)


def load_text_widgets(entries: Iterable[Mapping] | None) -> list[WidgetDefinition]:
    """Register the ``TEXT_WIDGETS`` setting entries."""

    definitions = []
    for entry in entries or ():
        if not isinstance(entry, Mapping) or not entry.get("slug") or not entry.get("zone"):
            raise ImproperlyConfigured(
                f"TEXT_WIDGETS entries need a slug and a zone, got {entry!r}"
            )
        definitions.append(
            register_text_widget(
                slug=entry["slug"],
                zone=entry["zone"],
                title=entry.get("title", ""),
                text=entry.get("text", ""),
                order=entry.get("order", 0),
            )
        )
    return definitions
