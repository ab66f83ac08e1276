"""Widget registration and widget area output."""

from .registry import WidgetDefinition, register_widget

__all__ = ["WidgetDefinition", "register_widget"]
