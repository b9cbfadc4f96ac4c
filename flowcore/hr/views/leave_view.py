# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from core.config import get_config
from core.utils.pagination import DefaultPagination
from core.views.utils import (
    extend_schema, extend_schema_view, OpenApiExample,
    PAGE_PARAMS, path_int, responses_ok, std_errors,
)
from hr.models import LeaveRequest
from hr.serializers.leave_serializer import (
    LeaveRequestReadSerializer,
    LeaveCreateSerializer,
    LeaveDecisionSerializer,
    MyLeavesSerializer,
)
from hr.services.leave_service import LeaveService


def _service() -> LeaveService:
    return LeaveService(get_config())


@extend_schema_view(
    list=extend_schema(
        tags=["Leave"],
        summary="My leave requests with totals",
        responses={**responses_ok(MyLeavesSerializer), **std_errors()},
    ),
    create=extend_schema(
        tags=["Leave"],
        summary="Submit a leave request",
        description=(
            "Auto-approved when quantity <= 2 and previously approved days < 20, otherwise pending. "
            "A member's request is mailed to every CEO and Manager, a manager's to every CEO."
        ),
        request=LeaveCreateSerializer,
        responses={**responses_ok(LeaveRequestReadSerializer, code=201), **std_errors()},
        examples=[
            OpenApiExample(
                "Two sick days",
                value={"type": "sick", "reason": "Flu", "quantity": 2, "start_date": "2025-10-09"},
                request_only=True,
            )
        ],
    ),
    partial_update=extend_schema(
        tags=["Leave"],
        summary="Approve / reject a pending request",
        description="Member requests: Manager or CEO. Manager requests: CEO. Never your own.",
        parameters=[path_int("id", "Leave request ID")],
        request=LeaveDecisionSerializer,
        responses={**responses_ok(LeaveRequestReadSerializer), **std_errors()},
    ),
)
class LeaveRequestViewSet(viewsets.GenericViewSet):
    queryset = LeaveRequest.objects.all()
    serializer_class = LeaveRequestReadSerializer
    pagination_class = DefaultPagination
    lookup_value_regex = r"\d+"

    def list(self, request):
        data = _service().list_my(actor=request.user)
        return Response(MyLeavesSerializer(data).data)

    def create(self, request):
        ser = LeaveCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        obj = _service().create_leave(actor=request.user, **ser.validated_data)
        return Response(LeaveRequestReadSerializer(obj).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        ser = LeaveDecisionSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        obj = _service().update_status(leave_id=pk, status=ser.validated_data["status"], actor=request.user)
        return Response(LeaveRequestReadSerializer(obj).data)

    @extend_schema(
        tags=["Leave"],
        summary="Pending requests I can decide",
        parameters=PAGE_PARAMS,
        responses={200: LeaveRequestReadSerializer(many=True)},
    )
    @action(detail=False, methods=["get"], url_path="pending")
    def pending(self, request):
        qs = _service().list_pending_for(actor=request.user)
        page = self.paginate_queryset(qs)
        if page is not None:
            ser = LeaveRequestReadSerializer(page, many=True)
            return self.get_paginated_response(ser.data)

        ser = LeaveRequestReadSerializer(qs, many=True)
        return Response(ser.data)
