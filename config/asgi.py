"""
ASGI config for config project.

It exposes the ASGI callable as a module-level variable named ``application``.
"""

import os

from django.core.asgi import get_asgi_application

from config.loadenv import loadenv


def create_asgi_application():
    loadenv()
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
    return get_asgi_application()


_application = None


def _get_application():
    global _application
    if _application is None:
        _application = create_asgi_application()
    return _application


def __getattr__(name):
    if name == "application":
        return _get_application()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
