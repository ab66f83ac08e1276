from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator

from django.template.loader import render_to_string
from django.utils.html import escape

from .registry import WidgetDefinition, iter_registered_widgets

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WidgetArea:
    """A registered region that widgets can be assigned to."""

    id: str
    name: str = ""
    description: str = ""
    editable: int = 1
    before_widget: str = ""
    after_widget: str = ""
    before_title: str = ""
    after_title: str = ""


@dataclass(slots=True)
class RenderedWidget:
    definition: WidgetDefinition
    html: str


def _wrap(markup: str, definition: WidgetDefinition) -> str:
    return markup.replace("{widget_id}", escape(definition.slug)).replace(
        "{widget_class}", escape(definition.css_class)
    )


def _build_context(definition: WidgetDefinition, **kwargs) -> dict[str, Any] | None:
    try:
        context = definition.renderer(widget=definition, **kwargs)
    except Exception:
        logger.exception("Widget renderer failed for %s", definition.slug)
        return None

    if context is None:
        return None

    if not isinstance(context, dict):
        logger.warning("Widget renderer for %s did not return a dict", definition.slug)
        return None

    context.setdefault("widget", definition)
    context.setdefault("definition", definition)
    return context


def _permitted(definition: WidgetDefinition, request, extra_context: dict[str, Any]) -> bool:
    if definition.permission is None:
        return True
    try:
        return bool(definition.permission(request=request, widget=definition, **extra_context))
    except Exception:
        logger.exception("Widget permission check failed for %s", definition.slug)
        return False


class WidgetAreas:
    """In-process registry of widget areas and their widget output."""

    def __init__(self) -> None:
        self._areas: dict[str, WidgetArea] = {}

    def register_area(self, spec, record) -> WidgetArea | None:
        area_id = str(getattr(spec, "id", "") or "")
        if not area_id:
            logger.warning("Ignoring widget area registration without an id: %r", spec)
            return None
        area = WidgetArea(
            id=area_id,
            name=spec.name,
            description=spec.description,
            editable=spec.editable,
            before_widget=record.before_widget,
            after_widget=record.after_widget,
            before_title=record.before_title,
            after_title=record.after_title,
        )
        if area_id in self._areas:
            logger.warning("Widget area %s registered twice; replacing", area_id)
        self._areas[area_id] = area
        logger.debug("Registered widget area %s", area_id)
        return area

    def unregister_area(self, area_id: str) -> WidgetArea | None:
        return self._areas.pop(area_id, None)

    def get_area(self, area_id: str | None) -> WidgetArea | None:
        if not area_id:
            return None
        return self._areas.get(area_id)

    def iter_areas(self) -> Iterator[WidgetArea]:
        return iter(list(self._areas.values()))

    def widgets_for(self, area_id: str | None) -> list[WidgetDefinition]:
        if self.get_area(area_id) is None:
            return []
        return list(iter_registered_widgets(zone=area_id))

    def is_active(self, area_id: str | None) -> bool:
        return bool(self.widgets_for(area_id))

    def render_widgets(
        self, area_id: str | None, *, request=None, extra_context: dict[str, Any] | None = None
    ) -> list[RenderedWidget]:
        extra_context = extra_context or {}
        area = self.get_area(area_id)
        if area is None:
            logger.debug("No widget area registered for %s", area_id)
            return []

        rendered: list[RenderedWidget] = []
        for definition in iter_registered_widgets(zone=area.id):
            if not _permitted(definition, request, extra_context):
                continue

            context = _build_context(definition, request=request, **extra_context)
            if not context:
                continue
            context.setdefault("title", definition.title)
            context.setdefault("before_title", area.before_title)
            context.setdefault("after_title", area.after_title)
            try:
                body = render_to_string(definition.template_name, context=context, request=request)
            except Exception:
                logger.exception("Widget template failed for %s", definition.slug)
                continue
            html = f"{_wrap(area.before_widget, definition)}{body}{_wrap(area.after_widget, definition)}"
            rendered.append(RenderedWidget(definition=definition, html=html))

        return rendered

    def render_area(
        self, area_id: str | None, *, request=None, extra_context: dict[str, Any] | None = None
    ) -> tuple[str, bool]:
        """Return the area's widget markup and whether any widget was output."""

        widgets = self.render_widgets(area_id, request=request, extra_context=extra_context)
        return "".join(widget.html for widget in widgets), bool(widgets)


widget_areas = WidgetAreas()


__all__ = ["RenderedWidget", "WidgetArea", "WidgetAreas", "widget_areas"]
