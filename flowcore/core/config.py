# -*- coding: utf-8 -*-
"""
Runtime configuration for services.

Built once from Django settings and handed to every service constructor:
    config = get_config()
    service = BoardService(config)

Services never reach for ``django.conf.settings`` themselves.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import timedelta
from functools import lru_cache
from typing import FrozenSet

DEFAULT_IMAGE_TYPES = frozenset({"image/jpeg", "image/png", "image/gif", "image/webp"})


@dataclass(frozen=True)
class ServiceConfig:
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_ttl: timedelta = timedelta(hours=24)
    reset_token_ttl: timedelta = timedelta(hours=24)
    invitation_ttl: timedelta = timedelta(hours=24)

    app_base_url: str = "http://localhost:8000"
    frontend_url: str = "http://localhost:3000"
    mail_from: str = "no-reply@flowcore.local"
    mail_subject_prefix: str = ""

    storage_upload_url: str = ""
    storage_api_key: str = ""
    storage_timeout: float = 10.0

    max_attachments_per_card: int = 10
    max_attachment_bytes: int = 5 * 1024 * 1024
    allowed_attachment_types: FrozenSet[str] = field(default_factory=lambda: DEFAULT_IMAGE_TYPES)

    leave_auto_approve_max_days: int = 2
    leave_auto_approve_limit: int = 20

    # Behaviour switches; both default to the historical behaviour.
    project_delete_cascade: bool = False
    atomic_card_numbers: bool = False

    @classmethod
    def from_settings(cls, settings=None) -> "ServiceConfig":
        if settings is None:
            from django.conf import settings
        return cls(
            jwt_secret=settings.JWT_SECRET,
            jwt_algorithm=getattr(settings, "JWT_ALGO", "HS256"),
            access_token_ttl=timedelta(hours=float(getattr(settings, "JWT_ACCESS_TTL_HOURS", 24))),
            reset_token_ttl=timedelta(hours=float(getattr(settings, "PASSWORD_RESET_TTL_HOURS", 24))),
            invitation_ttl=timedelta(hours=float(getattr(settings, "BOARD_INVITATION_TTL_HOURS", 24))),
            app_base_url=getattr(settings, "APP_BASE_URL", "http://localhost:8000").rstrip("/"),
            frontend_url=getattr(settings, "FRONTEND_URL", "http://localhost:3000").rstrip("/"),
            mail_from=getattr(settings, "DEFAULT_FROM_EMAIL", None) or getattr(settings, "SERVER_EMAIL", ""),
            mail_subject_prefix=getattr(settings, "EMAIL_SUBJECT_PREFIX", ""),
            storage_upload_url=getattr(settings, "STORAGE_UPLOAD_URL", ""),
            storage_api_key=getattr(settings, "STORAGE_API_KEY", ""),
            storage_timeout=float(getattr(settings, "STORAGE_TIMEOUT", 10)),
            max_attachments_per_card=int(getattr(settings, "CARD_MAX_ATTACHMENTS", 10)),
            max_attachment_bytes=int(getattr(settings, "CARD_MAX_ATTACHMENT_BYTES", 5 * 1024 * 1024)),
            allowed_attachment_types=frozenset(getattr(settings, "CARD_ATTACHMENT_TYPES", DEFAULT_IMAGE_TYPES)),
            leave_auto_approve_max_days=int(getattr(settings, "LEAVE_AUTO_APPROVE_MAX_DAYS", 2)),
            leave_auto_approve_limit=int(getattr(settings, "LEAVE_AUTO_APPROVE_LIMIT", 20)),
            project_delete_cascade=bool(getattr(settings, "PROJECT_DELETE_CASCADE", False)),
            atomic_card_numbers=bool(getattr(settings, "ATOMIC_CARD_NUMBERS", False)),
        )


@lru_cache(maxsize=1)
def get_config() -> ServiceConfig:
    return ServiceConfig.from_settings()


def reset_config(**kwargs) -> None:
    """Drop the memoized config; connected to ``setting_changed``."""
    get_config.cache_clear()
