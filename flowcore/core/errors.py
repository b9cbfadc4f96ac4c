# -*- coding: utf-8 -*-
"""
Typed service errors.

Services raise one of the ``ServiceError`` subclasses below; the DRF exception handler
(core.exceptions) turns the error kind into an HTTP status through ``HTTP_STATUS_BY_KIND``.
"""
from __future__ import annotations
from enum import Enum
from typing import Optional

from rest_framework import status


class ErrorKind(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UPSTREAM = "upstream"


# Not-found and upstream failures are reported as bad requests.
HTTP_STATUS_BY_KIND = {
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UPSTREAM: status.HTTP_400_BAD_REQUEST,
}


class ServiceError(Exception):
    kind = ErrorKind.VALIDATION
    default_message = "Bad request"

    def __init__(self, message: Optional[str] = None, *, kind: Optional[ErrorKind] = None):
        self.message = message or self.default_message
        if kind is not None:
            self.kind = kind
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]


class AuthenticationFailedError(ServiceError):
    kind = ErrorKind.UNAUTHENTICATED
    default_message = "Invalid or expired token"


class PermissionDeniedError(ServiceError):
    kind = ErrorKind.FORBIDDEN
    default_message = "You are not allowed to perform this action"


class ValidationFailedError(ServiceError):
    kind = ErrorKind.VALIDATION


class NotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Not found"


class ConflictError(ServiceError):
    kind = ErrorKind.CONFLICT
    default_message = "Already exists"


class UpstreamError(ServiceError):
    kind = ErrorKind.UPSTREAM
    default_message = "Upstream service failed"
