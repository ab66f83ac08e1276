"""Django settings for the sidebars project."""

import os
from pathlib import Path

from django.core.management.utils import get_random_secret_key

from config.loadenv import loadenv

loadenv()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY") or get_random_secret_key()

DEBUG = os.environ.get("DJANGO_DEBUG", "0").lower() in {"1", "true", "yes"}

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "apps.widgets",
    "apps.sidebars",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "config.context_processors.sidebars",
            ],
        },
    },
]

ASGI_APPLICATION = "config.asgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Theme sidebars, registered in this order when the app is ready. Removing
# the setting turns sidebar support off.
SIDEBARS = [
    {
        "id": "primary",
        "name": "Primary Sidebar",
        "description": "Shown beside page content.",
    },
    {
        "id": "secondary",
        "name": "Secondary Sidebar",
        "description": "Alternate sidebar for wide layouts.",
    },
    {
        "id": "footer",
        "name": "Footer",
        "description": "Widgets above the site footer.",
        "editable": False,
    },
]

# Dotted-path listeners, e.g.
# {"actions": {"no-main-widgets": ["myapp.hooks.empty_main"]}, "filters": {}}
SIDEBAR_HOOKS = {}

TEXT_WIDGETS = [
    {
        "slug": "welcome",
        "zone": "primary",
        "title": "Welcome",
        "text": "Sidebars are configured in SIDEBARS.",
    },
]

LOG_DIR = Path(os.environ.get("SIDEBARS_LOG_DIR", BASE_DIR / "logs"))
LOG_LEVEL = os.environ.get("SIDEBARS_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
        "file": {
            "class": "config.logging.LogDirFileHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "apps": {
            "handlers": ["console", "file"],
            "level": LOG_LEVEL,
            "propagate": True,
        },
    },
}
