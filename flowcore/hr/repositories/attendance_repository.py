# -*- coding: utf-8 -*-
"""
Repository layer for Attendance (DB only): the per-day record and its sessions.
"""
from __future__ import annotations
from datetime import date, datetime
from typing import Optional

from django.db import IntegrityError, transaction, connection
from django.db.models import QuerySet, Sum

from hr.models import Attendance, AttendanceSession


def _supports_for_update() -> bool:
    return getattr(connection.features, "has_select_for_update", False)

def _for_update(qs):
    return qs.select_for_update() if _supports_for_update() else qs


def get_for_day_locked(user_id: int, day: date) -> Optional[Attendance]:
    """Must run inside a transaction"""
    return _for_update(Attendance.objects.filter(user_id=user_id, date=day)).first()

def get_or_create_for_day(user_id: int, day: date, notes: str = "") -> Attendance:
    """Must run inside a transaction; one row per (user, date)"""
    att = get_for_day_locked(user_id, day)
    if att:
        return att
    try:
        with transaction.atomic():
            return Attendance.objects.create(
                user_id=user_id,
                date=day,
                status=Attendance.Status.CLOCKED_IN,
                notes=notes or "",
            )
    except IntegrityError:
        # a concurrent request created it first
        return get_for_day_locked(user_id, day)

def last_session(att: Attendance) -> Optional[AttendanceSession]:
    return att.sessions.order_by("-clock_in_time", "-id").first()

def open_session(att: Attendance, at: datetime) -> AttendanceSession:
    return AttendanceSession.objects.create(attendance=att, clock_in_time=at)

def close_session(session: AttendanceSession, at: datetime) -> AttendanceSession:
    session.clock_out_time = at
    session.session_hours = (at - session.clock_in_time).total_seconds() / 3600
    session.save(update_fields=["clock_out_time", "session_hours"])
    return session

def total_hours(att: Attendance) -> float:
    agg = att.sessions.filter(session_hours__isnull=False).aggregate(total=Sum("session_hours"))
    return float(agg["total"] or 0)

def save_fields(att: Attendance, **fields) -> Attendance:
    for k, v in fields.items():
        setattr(att, k, v)
    att.save(update_fields=list(fields) + ["updated_at"])
    return att

def list_in_range(user_id: int, start: date, end: date) -> QuerySet[Attendance]:
    return (
        Attendance.objects
        .filter(user_id=user_id, date__gte=start, date__lte=end)
        .prefetch_related("sessions")
        .order_by("date")
    )
