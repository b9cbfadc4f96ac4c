# -*- coding: utf-8 -*-
"""
JWT issuing / verification.
- access token: {sub, email, type, iat, exp}
- password reset token: {sub, email, purpose="password-reset", iat, exp} with its own TTL
Every verification failure maps to the same AuthenticationFailedError.
"""
from __future__ import annotations
import time
from typing import Dict

import jwt

from core.config import ServiceConfig
from core.errors import AuthenticationFailedError

RESET_PURPOSE = "password-reset"


class TokenService:
    def __init__(self, config: ServiceConfig):
        self.secret = config.jwt_secret
        self.algorithm = config.jwt_algorithm
        self.access_ttl = int(config.access_token_ttl.total_seconds())
        self.reset_ttl = int(config.reset_token_ttl.total_seconds())

    # ===== encode =====
    def _encode(self, claims: Dict, ttl: int) -> str:
        now = int(time.time())
        payload = {**claims, "iat": now, "exp": now + ttl}
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def issue_access_token(self, user) -> str:
        return self._encode({"sub": str(user.id), "email": user.email, "type": user.role}, self.access_ttl)

    def issue_reset_token(self, user) -> str:
        return self._encode({"sub": str(user.id), "email": user.email, "purpose": RESET_PURPOSE}, self.reset_ttl)

    # ===== decode =====
    def _decode(self, token: str) -> Dict:
        if not token:
            raise AuthenticationFailedError()
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthenticationFailedError()
        except jwt.InvalidTokenError:
            raise AuthenticationFailedError()

    def verify_access_token(self, token: str) -> Dict:
        data = self._decode(token)
        if data.get("purpose"):
            raise AuthenticationFailedError()
        if not (data.get("sub") or data.get("id")):
            raise AuthenticationFailedError()
        return data

    def verify_reset_token(self, token: str) -> Dict:
        data = self._decode(token)
        if data.get("purpose") != RESET_PURPOSE:
            raise AuthenticationFailedError()
        return data
