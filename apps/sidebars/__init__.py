"""Theme sidebar registration and rendering."""

from .core import Sidebars
from .hooks import HookRegistry
from .specs import RegistrationRecord, RenderRequest, SidebarRegistration, SidebarSpec

__all__ = [
    "HookRegistry",
    "RegistrationRecord",
    "RenderRequest",
    "SidebarRegistration",
    "SidebarSpec",
    "Sidebars",
]
