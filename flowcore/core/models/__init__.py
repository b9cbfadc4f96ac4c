# ============================================
# core/models/__init__.py
# ============================================
from .mixins import TimeStampedModel
from .notification import Notification

__all__ = [
    'TimeStampedModel',
    'Notification',
]
