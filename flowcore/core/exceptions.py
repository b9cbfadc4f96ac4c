# -*- coding: utf-8 -*-
from __future__ import annotations
import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.errors import ServiceError

logger = logging.getLogger(__name__)


def _django_validation_message(exc: DjangoValidationError) -> str:
    messages = getattr(exc, "messages", None) or [str(exc)]
    return "; ".join(str(m) for m in messages)


def service_exception_handler(exc, context):
    """
    DRF EXCEPTION_HANDLER:
    - ServiceError -> {"detail": message} with the status mapped from its kind
    - django ValidationError -> 400, django PermissionDenied is left to DRF (403)
    - anything else -> DRF default handling
    """
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "-"

    if isinstance(exc, ServiceError):
        logger.warning("[%s] %s: %s", view_name, exc.kind.value, exc.message)
        return Response({"detail": exc.message}, status=exc.status_code)

    if isinstance(exc, DjangoValidationError):
        message = _django_validation_message(exc)
        logger.warning("[%s] validation: %s", view_name, message)
        return Response({"detail": message}, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, DjangoPermissionDenied):
        logger.warning("[%s] forbidden: %s", view_name, exc)

    return exception_handler(exc, context)
