from django.core.exceptions import ImproperlyConfigured


class SidebarConfigurationError(ImproperlyConfigured):
    """Raised when the sidebar settings cannot be used."""
