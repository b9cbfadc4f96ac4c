# -*- coding: utf-8 -*-
"""
Repository layer for LeaveRequest (DB only):
- base queries, totals, coverage lookups
- create / decide under row lock
No business rules here (who may decide, auto-approval); the service decides.
"""
from __future__ import annotations
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from django.db import transaction, connection
from django.db.models import QuerySet, Sum
from django.utils import timezone

from hr.models import LeaveRequest


def _supports_for_update() -> bool:
    return getattr(connection.features, "has_select_for_update", False)

def _for_update(qs):
    return qs.select_for_update() if _supports_for_update() else qs


# ============================
# Base queries
# ============================
def base_qs() -> QuerySet[LeaveRequest]:
    return LeaveRequest.objects.select_related("user", "decided_by")

def get_or_none(leave_id: int) -> Optional[LeaveRequest]:
    try:
        return base_qs().filter(id=leave_id).first()
    except (ValueError, TypeError):
        return None

def list_my(user_id: int) -> QuerySet[LeaveRequest]:
    return base_qs().filter(user_id=user_id).order_by("-created_at")

def list_pending_from(requester_roles: Iterable[str], exclude_user_id: Optional[int] = None) -> QuerySet[LeaveRequest]:
    qs = base_qs().filter(status=LeaveRequest.Status.PENDING, user__role__in=list(requester_roles))
    if exclude_user_id is not None:
        qs = qs.exclude(user_id=exclude_user_id)
    return qs.order_by("start_date", "created_at")

def approved_total(user_id: int) -> int:
    agg = LeaveRequest.objects.filter(user_id=user_id, status=LeaveRequest.Status.APPROVED).aggregate(total=Sum("quantity"))
    return int(agg["total"] or 0)

def approved_overlapping(user_id: int, start: date, end: date) -> List[LeaveRequest]:
    """Approved leaves whose [start_date, end_date] touches [start, end]"""
    # end_date is derived, so narrow by start_date in SQL and finish in Python
    candidates = LeaveRequest.objects.filter(
        user_id=user_id,
        status=LeaveRequest.Status.APPROVED,
        start_date__lte=end,
    )
    return [lv for lv in candidates if lv.end_date >= start]

def approved_covering(user_id: int, day: date) -> Optional[LeaveRequest]:
    found = approved_overlapping(user_id, day, day)
    return found[0] if found else None

def covered_days(leaves: Iterable[LeaveRequest], start: date, end: date) -> int:
    """Distinct calendar days in [start, end] covered by the given leaves"""
    days = set()
    for lv in leaves:
        cur = max(lv.start_date, start)
        last = min(lv.end_date, end)
        while cur <= last:
            days.add(cur)
            cur += timedelta(days=1)
    return len(days)


# ============================
# Mutations
# ============================
@transaction.atomic
def create(data: Dict[str, Any]) -> LeaveRequest:
    return LeaveRequest.objects.create(**data)

@transaction.atomic
def decide(leave_id: int, *, status: str, decided_by, now: Optional[datetime] = None) -> LeaveRequest:
    obj = _for_update(LeaveRequest.objects.all()).get(id=leave_id)
    obj.status = status
    obj.decided_by = decided_by
    obj.decided_at = now or timezone.now()
    obj.save(update_fields=["status", "decided_by", "decided_at", "updated_at"])
    return obj
