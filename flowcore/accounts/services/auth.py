# -*- coding: utf-8 -*-
"""
Signup / login / password reset.
- signup: email unique (case-insensitive) -> ConflictError
- login: unknown email, wrong password, or role mismatch -> same "Invalid credentials"
- forgot password: always the same answer, mail only sent for known emails
"""
from __future__ import annotations
import logging
from typing import Dict, Optional

from django.db import IntegrityError, transaction

from accounts.models import User
from accounts.selectors.user import UserSelector
from accounts.services.token import TokenService
from accounts.services.user import UserDirectoryService
from core.config import ServiceConfig
from core.errors import AuthenticationFailedError, ConflictError
from core.services.notification_service import Mailer

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
FORGOT_PASSWORD_MESSAGE = "If the email is registered, a password reset link has been sent"


class AuthService:
    def __init__(self, config: ServiceConfig, tokens: Optional[TokenService] = None, mailer: Optional[Mailer] = None):
        self.config = config
        self.tokens = tokens or TokenService(config)
        self.mailer = mailer or Mailer(config)

    def signup(self, *, name: str, email: str, password: str, role: str) -> Dict:
        if UserSelector.get_user_by_email(email):
            raise ConflictError("Email already exists")
        try:
            with transaction.atomic():
                user = User.objects.create_user(email, password, name=name, role=role)
        except IntegrityError:
            raise ConflictError("Email already exists")

        logger.info("[auth] signup user=%s role=%s", user.id, user.role)
        return {"message": "Signup successfully", "access_token": self.tokens.issue_access_token(user)}

    def login(self, *, email: str, password: str, role: str) -> Dict:
        user = UserSelector.get_user_by_email(email)
        if not user or not user.is_active:
            raise AuthenticationFailedError(INVALID_CREDENTIALS)
        if not user.check_password(password):
            raise AuthenticationFailedError(INVALID_CREDENTIALS)
        if role != user.role:
            raise AuthenticationFailedError(INVALID_CREDENTIALS)

        return {"message": "Login successfully", "access_token": self.tokens.issue_access_token(user)}

    def forgot_password(self, *, email: str) -> Dict:
        user = UserSelector.get_user_by_email(email)
        if user and user.is_active:
            token = self.tokens.issue_reset_token(user)
            link = f"{self.config.frontend_url}/reset-password?token={token}"
            hours = int(self.config.reset_token_ttl.total_seconds() // 3600)
            self.mailer.send_to_user(
                user,
                subject="Password Reset Request",
                text=(
                    f"Hello {user.name},\n\n"
                    f"Use the link below to reset your password. It expires in {hours} hours.\n"
                    f"{link}\n\n"
                    "If you did not request a reset, you can ignore this email."
                ),
                object_type="password_reset",
                object_id=str(user.id),
            )
        else:
            logger.info("[auth] password reset requested for unknown email")
        return {"message": FORGOT_PASSWORD_MESSAGE}

    def reset_password(self, *, token: str, new_password: str) -> Dict:
        claims = self.tokens.verify_reset_token(token)
        user = UserSelector.get_user_by_id(claims.get("sub"))
        if not user:
            raise AuthenticationFailedError()

        UserDirectoryService.set_password(user=user, new_password=new_password)
        logger.info("[auth] password reset for user=%s", user.id)
        return {"message": "Password reset successfully"}
