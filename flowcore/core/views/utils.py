"""
drf-spectacular helpers shared by every app's views.

Error responses are derived from ``core.errors.HTTP_STATUS_BY_KIND`` so the documented
statuses are the ones ``service_exception_handler`` actually returns.
"""
from drf_spectacular.utils import (
    extend_schema, extend_schema_view,
    OpenApiParameter, OpenApiExample, OpenApiResponse, inline_serializer,
)
from drf_spectacular.types import OpenApiTypes
from rest_framework import serializers

from core.errors import ErrorKind, HTTP_STATUS_BY_KIND

ErrorSerializer = inline_serializer(name="Error", fields={"detail": serializers.CharField()})
MessageSerializer = inline_serializer(name="Message", fields={"message": serializers.CharField()})

# kinds every authenticated endpoint can produce
DEFAULT_ERROR_KINDS = (
    ErrorKind.VALIDATION,
    ErrorKind.NOT_FOUND,
    ErrorKind.UPSTREAM,
    ErrorKind.UNAUTHENTICATED,
    ErrorKind.FORBIDDEN,
)


def path_int(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.PATH, description=description)

def q_int(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.QUERY, required=False, description=description)

def q_str(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.QUERY, required=False, description=description)

def q_date(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.DATE, OpenApiParameter.QUERY, required=False, description=description)

PAGE_PARAMS = [
    q_int("page", "Page number (default 1)"),
    q_int("page_size", "Page size (default 20, max 200)"),
]


def responses_ok(serializer_cls, many: bool = False, code: int = 200):
    serializer = serializer_cls(many=many) if isinstance(serializer_cls, type) else serializer_cls
    return {code: OpenApiResponse(response=serializer, description="OK")}


def std_errors(*extra_kinds: ErrorKind):
    """
    {status: OpenApiResponse} for the default error kinds plus ``extra_kinds``.
    Kinds sharing a status are listed together in its description.
    """
    by_status = {}
    for kind in DEFAULT_ERROR_KINDS + extra_kinds:
        by_status.setdefault(HTTP_STATUS_BY_KIND[kind], []).append(kind.value)
    return {
        code: OpenApiResponse(ErrorSerializer, description=" / ".join(kinds))
        for code, kinds in sorted(by_status.items())
    }
