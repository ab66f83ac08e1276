from django.apps import apps
from django.http import HttpRequest


def sidebars(request: HttpRequest):
    """Expose the application's :class:`~apps.sidebars.Sidebars` to templates.

    Returns a dict with the key ``sidebars``; the value is ``None`` when the
    sidebars app is not installed.
    """
    if not apps.is_installed("apps.sidebars"):
        return {"sidebars": None}
    return {"sidebars": apps.get_app_config("sidebars").sidebars}
