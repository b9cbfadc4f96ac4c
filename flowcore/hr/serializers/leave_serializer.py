# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import serializers
from accounts.serializers.user import UserBriefSerializer
from hr.models import MAX_LEAVE_DAYS, LeaveRequest


class LeaveRequestReadSerializer(serializers.ModelSerializer):
    user = UserBriefSerializer(read_only=True)
    end_date = serializers.DateField(read_only=True)
    type_display = serializers.CharField(source="get_type_display", read_only=True)
    status_display = serializers.CharField(source="get_status_display", read_only=True)
    decided_by = serializers.IntegerField(source="decided_by_id", read_only=True)

    class Meta:
        model = LeaveRequest
        fields = [
            "id",
            "user",
            "type",
            "type_display",
            "status",
            "status_display",
            "reason",
            "quantity",
            "start_date",
            "end_date",
            "decided_by",
            "decided_at",
            "created_at",
            "updated_at",
        ]


class LeaveCreateSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=LeaveRequest.LeaveType.choices)
    reason = serializers.CharField(max_length=500)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_LEAVE_DAYS)
    start_date = serializers.DateField(required=False, allow_null=True)


class LeaveDecisionSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[
        LeaveRequest.Status.APPROVED,
        LeaveRequest.Status.REJECTED,
    ])


class MyLeavesSerializer(serializers.Serializer):
    leaves = LeaveRequestReadSerializer(many=True)
    total_approved_leave = serializers.IntegerField()
    total_requested_leave = serializers.IntegerField()
