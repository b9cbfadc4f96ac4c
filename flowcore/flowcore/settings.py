"""
Django settings for flowcore project.

Every deploy-specific value comes from the environment; the defaults are for local development.
Service-level knobs (token TTLs, attachment limits, leave thresholds, behaviour switches)
are read once into core.config.ServiceConfig.
"""
import os
from pathlib import Path


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def env_list(name, default=""):
    return [item.strip() for item in os.environ.get(name, default).split(",") if item.strip()]


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-flowcore-dev-key")
DEBUG = env_bool("DJANGO_DEBUG", True)
ALLOWED_HOSTS = env_list("DJANGO_ALLOWED_HOSTS", "*")


# Application definition

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "drf_spectacular",
    "core",
    "accounts",
    "projects",
    "boards",
    "hr",
    "finance",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "core.middleware.RequestLoggingMiddleware",
]

ROOT_URLCONF = "flowcore.urls"

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
            ],
        },
    },
]

WSGI_APPLICATION = "flowcore.wsgi.application"


# Database

DATABASES = {
    "default": {
        "ENGINE": os.environ.get("DB_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.environ.get("DB_NAME", str(BASE_DIR / "db.sqlite3")),
        "USER": os.environ.get("DB_USER", ""),
        "PASSWORD": os.environ.get("DB_PASSWORD", ""),
        "HOST": os.environ.get("DB_HOST", ""),
        "PORT": os.environ.get("DB_PORT", ""),
    }
}

AUTH_USER_MODEL = "accounts.User"

AUTH_PASSWORD_VALIDATORS = []

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# Internationalization

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.environ.get("TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"


# REST framework / OpenAPI

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "accounts.authentication.BearerTokenAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "EXCEPTION_HANDLER": "core.exceptions.service_exception_handler",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Flowcore API",
    "DESCRIPTION": "Projects, boards, attendance, leave, finance and reviews",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "SECURITY": [{"BearerAuth": []}],
    "APPEND_COMPONENTS": {
        "securitySchemes": {
            "BearerAuth": {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"},
        }
    },
}


# Tokens

JWT_SECRET = os.environ.get("JWT_SECRET", SECRET_KEY)
JWT_ALGO = os.environ.get("JWT_ALGO", "HS256")
JWT_ACCESS_TTL_HOURS = float(os.environ.get("JWT_ACCESS_TTL_HOURS", 24))
PASSWORD_RESET_TTL_HOURS = float(os.environ.get("PASSWORD_RESET_TTL_HOURS", 24))
BOARD_INVITATION_TTL_HOURS = float(os.environ.get("BOARD_INVITATION_TTL_HOURS", 24))


# Links placed in emails

APP_BASE_URL = os.environ.get("APP_BASE_URL", "http://localhost:8000")
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")


# Email

EMAIL_BACKEND = os.environ.get("EMAIL_BACKEND", "django.core.mail.backends.console.EmailBackend")
EMAIL_HOST = os.environ.get("EMAIL_HOST", "localhost")
EMAIL_PORT = int(os.environ.get("EMAIL_PORT", 587))
EMAIL_HOST_USER = os.environ.get("EMAIL_HOST_USER", "")
EMAIL_HOST_PASSWORD = os.environ.get("EMAIL_HOST_PASSWORD", "")
EMAIL_USE_TLS = env_bool("EMAIL_USE_TLS", True)
DEFAULT_FROM_EMAIL = os.environ.get("DEFAULT_FROM_EMAIL", "no-reply@flowcore.local")
EMAIL_SUBJECT_PREFIX = os.environ.get("EMAIL_SUBJECT_PREFIX", "")


# Attachment storage

STORAGE_UPLOAD_URL = os.environ.get("STORAGE_UPLOAD_URL", "")
STORAGE_API_KEY = os.environ.get("STORAGE_API_KEY", "")
STORAGE_TIMEOUT = float(os.environ.get("STORAGE_TIMEOUT", 10))
CARD_MAX_ATTACHMENTS = int(os.environ.get("CARD_MAX_ATTACHMENTS", 10))
CARD_MAX_ATTACHMENT_BYTES = int(os.environ.get("CARD_MAX_ATTACHMENT_BYTES", 5 * 1024 * 1024))
CARD_ATTACHMENT_TYPES = env_list("CARD_ATTACHMENT_TYPES", "image/jpeg,image/png,image/gif,image/webp")


# Leave auto-approval

LEAVE_AUTO_APPROVE_MAX_DAYS = int(os.environ.get("LEAVE_AUTO_APPROVE_MAX_DAYS", 2))
LEAVE_AUTO_APPROVE_LIMIT = int(os.environ.get("LEAVE_AUTO_APPROVE_LIMIT", 20))


# Behaviour switches

PROJECT_DELETE_CASCADE = env_bool("PROJECT_DELETE_CASCADE", False)
ATOMIC_CARD_NUMBERS = env_bool("ATOMIC_CARD_NUMBERS", False)


# Logging

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "api": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "django.db.backends": {"level": "WARNING"},
    },
}
