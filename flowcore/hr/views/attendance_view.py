# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework.response import Response
from rest_framework.views import APIView

from core.views.utils import (
    extend_schema, extend_schema_view, OpenApiExample,
    MessageSerializer, responses_ok, std_errors,
)
from hr.serializers.attendance_serializer import (
    ClockSerializer,
    AttendanceReportQuerySerializer,
    AttendanceReportSerializer,
)
from hr.services.attendance_service import AttendanceService


@extend_schema_view(
    post=extend_schema(
        tags=["Attendance"],
        summary="Clock in or out (Manager/Member)",
        description=(
            "`clocked_in` opens a session, `clocked_out` closes the open one and recomputes "
            "`working_hours`. Refused on a day covered by an approved leave."
        ),
        request=ClockSerializer,
        responses={**responses_ok(MessageSerializer), **std_errors()},
        examples=[
            OpenApiExample("Clock in", value={"status": "clocked_in", "notes": "Late due to traffic"}, request_only=True),
        ],
    )
)
class ClockInOutView(APIView):
    def post(self, request):
        ser = ClockSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        result = AttendanceService().clock(actor=request.user, **ser.validated_data)
        return Response(result)


@extend_schema_view(
    post=extend_schema(
        tags=["Attendance"],
        summary="My attendance report for a date range",
        request=AttendanceReportQuerySerializer,
        responses={**responses_ok(AttendanceReportSerializer), **std_errors()},
        examples=[
            OpenApiExample("August", value={"start_date": "2025-08-01", "end_date": "2025-08-05"}, request_only=True),
        ],
    )
)
class AttendanceReportView(APIView):
    def post(self, request):
        ser = AttendanceReportQuerySerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        report = AttendanceService().report(actor=request.user, **ser.validated_data)
        return Response(AttendanceReportSerializer(report).data)
