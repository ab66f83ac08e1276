from __future__ import annotations

import os

import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")


@pytest.fixture
def widget_registry():
    """Give the test an empty widget registry and restore it afterwards."""

    from apps.widgets import registry

    saved = dict(registry._REGISTRY)
    registry._REGISTRY.clear()
    yield registry
    registry._REGISTRY.clear()
    registry._REGISTRY.update(saved)


@pytest.fixture
def host(widget_registry):
    from apps.widgets.services import WidgetAreas

    return WidgetAreas()


@pytest.fixture
def hooks():
    from apps.sidebars.hooks import HookRegistry

    return HookRegistry()
