from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_BEFORE_WIDGET = '<aside id="{widget_id}" class="widget {widget_class}">'
DEFAULT_AFTER_WIDGET = "</aside><!-- #{widget_id} -->"
DEFAULT_BEFORE_TITLE = '<h1 class="widget-title">'
DEFAULT_AFTER_TITLE = "</h1>"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def coerce_editable(value: Any) -> int:
    return 1 if value else 0


@dataclass(frozen=True, slots=True)
class SidebarSpec:
    """A sidebar declared by theme configuration.

    ``editable`` marks whether a custom sidebar may replace this one at
    render time.
    """

    id: str
    name: str = ""
    description: str = ""
    editable: int = 1

    @classmethod
    def from_config(cls, config: SidebarSpec | Mapping[str, Any]) -> SidebarSpec:
        if isinstance(config, SidebarSpec):
            return config
        return cls(
            id=_text(config.get("id")),
            name=_text(config.get("name")),
            description=_text(config.get("description")),
            editable=coerce_editable(config.get("editable", 1)),
        )


@dataclass(frozen=True, slots=True)
class RegistrationRecord:
    """Markup wrapped around each widget and widget title of a sidebar."""

    before_widget: str = DEFAULT_BEFORE_WIDGET
    after_widget: str = DEFAULT_AFTER_WIDGET
    before_title: str = DEFAULT_BEFORE_TITLE
    after_title: str = DEFAULT_AFTER_TITLE


@dataclass(frozen=True, slots=True)
class SidebarRegistration:
    spec: SidebarSpec
    record: RegistrationRecord


@dataclass(frozen=True, slots=True)
class RenderRequest:
    location: str
    sidebar: str | None = None
    classes: str | None = None


__all__ = [
    "RegistrationRecord",
    "RenderRequest",
    "SidebarRegistration",
    "SidebarSpec",
    "coerce_editable",
]
