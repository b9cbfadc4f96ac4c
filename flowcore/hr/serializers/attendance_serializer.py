# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import serializers
from hr.models import Attendance, AttendanceSession


class ClockSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[
        Attendance.Status.CLOCKED_IN,
        Attendance.Status.CLOCKED_OUT,
    ])
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class AttendanceReportQuerySerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()


class AttendanceSessionSerializer(serializers.ModelSerializer):
    class Meta:
        model = AttendanceSession
        fields = ["id", "clock_in_time", "clock_out_time", "session_hours"]


class AttendanceReadSerializer(serializers.ModelSerializer):
    sessions = AttendanceSessionSerializer(many=True, read_only=True)

    class Meta:
        model = Attendance
        fields = ["id", "date", "status", "working_hours", "notes", "sessions"]


class AttendanceReportSerializer(serializers.Serializer):
    attendances = AttendanceReadSerializer(many=True)
    absent_days = serializers.IntegerField()
    approved_leave_days = serializers.IntegerField()
