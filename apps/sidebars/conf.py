"""Read sidebar configuration from Django settings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from django.conf import settings

from .exceptions import SidebarConfigurationError
from .specs import SidebarSpec


def sidebars_supported() -> bool:
    """Return whether the active theme declares any sidebar support."""

    return hasattr(settings, "SIDEBARS")


def parse_sidebars(entries: Any) -> tuple[SidebarSpec, ...]:
    if entries is None:
        return ()
    if isinstance(entries, (str, bytes, Mapping)) or not hasattr(entries, "__iter__"):
        raise SidebarConfigurationError("SIDEBARS must be a list of sidebar mappings")

    specs = []
    for entry in entries:
        if not isinstance(entry, (Mapping, SidebarSpec)):
            raise SidebarConfigurationError(f"SIDEBARS entries must be mappings, got {entry!r}")
        specs.append(SidebarSpec.from_config(entry))
    return tuple(specs)


def configured_sidebars() -> tuple[SidebarSpec, ...]:
    """Return the ``SIDEBARS`` entries in configuration order."""

    return parse_sidebars(getattr(settings, "SIDEBARS", None))


def configured_hooks() -> Mapping[str, Mapping[str, Any]]:
    return getattr(settings, "SIDEBAR_HOOKS", None) or {}
