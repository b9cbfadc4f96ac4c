# -*- coding: utf-8 -*-
from __future__ import annotations
from datetime import date
from typing import Any, Dict, Optional
import logging

from django.db import transaction
from django.utils import timezone

from core.errors import ValidationFailedError
from core.policy import Policy, policy as default_policy
from hr.models import Attendance
from hr.repositories import attendance_repository as repo
from hr.repositories import leave_repository as leave_repo

logger = logging.getLogger(__name__)

LEAVE_BLOCK = "Cannot clock in on a day with an approved leave"


class AttendanceService:
    """
    Daily clock-in / clock-out.

    One Attendance row per user per calendar day, holding a list of sessions.
    A session is open until clock-out; at most one session is open at a time.
    """

    def __init__(self, policy: Optional[Policy] = None):
        self.policy = policy or default_policy

    @transaction.atomic
    def clock(self, *, actor, status: str, notes: str = "") -> Dict[str, str]:
        self.policy.require("attendance.clock", actor)
        if status not in (Attendance.Status.CLOCKED_IN, Attendance.Status.CLOCKED_OUT):
            raise ValidationFailedError("Invalid attendance status")

        now = timezone.now()
        today = timezone.localdate(now)
        if status == Attendance.Status.CLOCKED_IN and leave_repo.approved_covering(actor.id, today):
            raise ValidationFailedError(LEAVE_BLOCK)

        att = repo.get_or_create_for_day(actor.id, today, notes=notes)
        last = repo.last_session(att)

        if status == Attendance.Status.CLOCKED_IN:
            if last and last.is_open:
                raise ValidationFailedError("Must clock out before starting a new session")
            repo.open_session(att, now)
            repo.save_fields(att, status=Attendance.Status.CLOCKED_IN)
            logger.info("[attendance] user=%s clocked in date=%s", actor.id, today)
            return {"message": "Successfully clocked in"}

        if not last or not last.is_open:
            raise ValidationFailedError("Must clock in before clocking out")
        if now < last.clock_in_time:
            raise ValidationFailedError("Invalid clock-out time")
        repo.close_session(last, now)
        repo.save_fields(att, status=Attendance.Status.CLOCKED_OUT, working_hours=repo.total_hours(att))
        logger.info("[attendance] user=%s clocked out date=%s hours=%.2f", actor.id, today, att.working_hours)
        return {"message": "Successfully clocked out"}

    def report(self, *, actor, start_date: date, end_date: date) -> Dict[str, Any]:
        """Attendance rows in range plus absent and approved-leave day counts"""
        if end_date < start_date:
            raise ValidationFailedError("End date must not be before start date")

        attendances = list(repo.list_in_range(actor.id, start_date, end_date))
        leaves = leave_repo.approved_overlapping(actor.id, start_date, end_date)
        return {
            "attendances": attendances,
            "absent_days": sum(1 for a in attendances if a.status == Attendance.Status.ABSENT),
            "approved_leave_days": leave_repo.covered_days(leaves, start_date, end_date),
        }
