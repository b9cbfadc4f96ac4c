# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
from typing import Iterable, Optional, Dict, Any

from django.core.mail import EmailMultiAlternatives
from django.utils import timezone

from core.errors import UpstreamError
from core.models import Notification

logger = logging.getLogger(__name__)


# -----------------------------
# Helpers
# -----------------------------
def _mk_subject(subject: str, prefix: str = "") -> str:
    return f"{prefix}{subject}" if prefix else subject


def _create_log(
    *,
    title: str,
    payload: Optional[Dict[str, Any]] = None,
    object_type: str = "",
    object_id: str = "",
    to_user: Optional[int] = None,
    to_email: str = "",
    delivered: bool,
    last_error: str = "",
) -> Notification:
    return Notification.objects.create(
        channel=Notification.Channel.EMAIL,
        title=title[:200],
        payload=payload or None,
        object_type=object_type or "",
        object_id=str(object_id or ""),
        to_user=to_user,
        to_email=to_email or "",
        delivered=delivered,
        delivered_at=timezone.now() if delivered else None,
        attempt_count=1,
        last_error=last_error or "",
    )


# -----------------------------
# Email
# -----------------------------
def send_email_notification(
    *,
    subject: str,
    text_body: str,
    to_emails: Iterable[str],
    from_email: str,
    subject_prefix: str = "",
    html_body: Optional[str] = None,
    raise_on_error: bool = True,
    # logging context
    object_type: str = "",
    object_id: str = "",
    to_user: Optional[int] = None,
) -> bool:
    """
    Send an email through Django's mail backend and record it in Notification.
    Returns True when delivered. A delivery failure is logged, recorded, and then
    raised as UpstreamError unless ``raise_on_error`` is False.
    """
    tos = [e for e in (to_emails or []) if e]
    title = _mk_subject(subject, subject_prefix)
    if not tos:
        logger.warning("[notify.email] No recipients; skip.")
        _create_log(
            title=title,
            payload={"kind": "email", "text": text_body},
            object_type=object_type,
            object_id=object_id,
            to_user=to_user,
            delivered=False,
            last_error="No recipients",
        )
        return False

    ok = False
    error_msg = ""
    try:
        msg = EmailMultiAlternatives(
            subject=title,
            body=text_body,
            from_email=from_email or None,
            to=tos,
        )
        if html_body:
            msg.attach_alternative(html_body, "text/html")
        msg.send(fail_silently=False)
        ok = True
        logger.info("[notify.email] sent '%s' to %s", title, ",".join(tos))
    except Exception as ex:
        error_msg = str(ex)
        logger.warning("[notify.email] send to %s failed: %s", ",".join(tos), ex)

    _create_log(
        title=title,
        payload={"kind": "email", "text": text_body, "has_html": bool(html_body), "tos": tos},
        object_type=object_type,
        object_id=object_id,
        to_user=to_user,
        to_email=",".join(tos),
        delivered=ok,
        last_error="" if ok else error_msg,
    )
    if not ok and raise_on_error:
        raise UpstreamError(f"Failed to send email: {error_msg}")
    return ok
