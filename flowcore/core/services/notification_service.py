# -*- coding: utf-8 -*-
"""
Mailer used by every service that needs to tell a user something
(board invitations, membership changes, card assignment/status, leave decisions, password reset).
"""
from __future__ import annotations
import logging
from typing import Iterable, Optional

from core.config import ServiceConfig
from core.utils.notify import send_email_notification

logger = logging.getLogger(__name__)


class Mailer:
    def __init__(self, config: ServiceConfig):
        self.config = config

    def send(
        self,
        *,
        to: Iterable[str],
        subject: str,
        text: str,
        object_type: str = "",
        object_id: str = "",
        to_user: Optional[int] = None,
    ) -> bool:
        return send_email_notification(
            subject=subject,
            text_body=text,
            to_emails=list(to),
            from_email=self.config.mail_from,
            subject_prefix=self.config.mail_subject_prefix,
            object_type=object_type,
            object_id=object_id,
            to_user=to_user,
        )

    def send_to_user(self, user, *, subject: str, text: str, object_type: str = "", object_id: str = "") -> bool:
        return self.send(
            to=[user.email],
            subject=subject,
            text=text,
            object_type=object_type,
            object_id=object_id,
            to_user=user.id,
        )
