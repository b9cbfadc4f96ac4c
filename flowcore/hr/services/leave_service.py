# -*- coding: utf-8 -*-
from __future__ import annotations
from datetime import date, timedelta
from typing import Any, Dict, List, Optional
import logging

from django.utils import timezone

from accounts.selectors.user import UserSelector
from core.config import ServiceConfig
from core.errors import NotFoundError, PermissionDeniedError, ValidationFailedError
from core.policy import CEO, MANAGER, MEMBER, SENIORITY, Policy, can_decide_leave, policy as default_policy
from core.services.notification_service import Mailer
from hr.models import MAX_LEAVE_DAYS, LeaveRequest
from hr.repositories import leave_repository as repo

logger = logging.getLogger(__name__)

NOT_ABLE = "You are not able to approve this leave"

# who hears about a new request, by requester role
APPROVER_ROLES = {
    MEMBER: [CEO, MANAGER],
    MANAGER: [CEO],
    CEO: [],
}


class LeaveService:

    def __init__(self, config: ServiceConfig, mailer: Optional[Mailer] = None, policy: Optional[Policy] = None):
        self.config = config
        self.mailer = mailer or Mailer(config)
        self.policy = policy or default_policy

    # ---------- create ----------
    def auto_status(self, *, user_id: int, quantity: int) -> str:
        """approved iff quantity <= max days and prior approved total < limit"""
        prior = repo.approved_total(user_id)
        if quantity <= self.config.leave_auto_approve_max_days and prior < self.config.leave_auto_approve_limit:
            return LeaveRequest.Status.APPROVED
        return LeaveRequest.Status.PENDING

    def create_leave(
        self,
        *,
        actor,
        type: str,
        reason: str,
        quantity: int,
        start_date: Optional[date] = None,
    ) -> LeaveRequest:
        if quantity < 1:
            raise ValidationFailedError("Quantity must be at least 1")
        if quantity > MAX_LEAVE_DAYS:
            raise ValidationFailedError(f"Quantity must be at most {MAX_LEAVE_DAYS}")
        if len(reason or "") > 500:
            raise ValidationFailedError("Reason must be at most 500 characters")

        start_date = start_date or timezone.localdate()
        try:
            start_date + timedelta(days=quantity - 1)
        except OverflowError:
            raise ValidationFailedError("Leave period ends outside the supported date range")

        status = self.auto_status(user_id=actor.id, quantity=quantity)
        data = {
            "user": actor,
            "type": type,
            "status": status,
            "reason": reason,
            "quantity": quantity,
            "start_date": start_date,
        }
        if status == LeaveRequest.Status.APPROVED:
            data["decided_at"] = timezone.now()
        leave = repo.create(data)
        logger.info("[leave] user=%s created leave=%s qty=%s status=%s", actor.id, leave.id, quantity, status)

        self._notify_approvers(leave, actor)
        return leave

    def _notify_approvers(self, leave: LeaveRequest, requester) -> None:
        roles = APPROVER_ROLES.get(requester.role, [])
        if not roles:
            return
        label = leave.get_type_display()
        for approver in UserSelector.get_users_by_roles(roles):
            self.mailer.send_to_user(
                approver,
                subject=f"{label} Leave Request",
                text=(
                    f"A new {leave.type} leave request has been submitted by {requester.name} ({requester.email}).\n\n"
                    f"Reason: {leave.reason}\n"
                    f"Start date: {leave.start_date:%Y-%m-%d}\n"
                    f"Quantity: {leave.quantity} day(s)\n"
                    f"Status: {leave.status}\n"
                ),
                object_type="leave_request",
                object_id=str(leave.id),
            )

    # ---------- read ----------
    def list_my(self, *, actor) -> Dict[str, Any]:
        leaves = list(repo.list_my(actor.id))
        return {
            "leaves": leaves,
            "total_approved_leave": sum(lv.quantity for lv in leaves if lv.status == LeaveRequest.Status.APPROVED),
            "total_requested_leave": sum(lv.quantity for lv in leaves),
        }

    def list_pending_for(self, *, actor):
        """Pending requests the actor is senior enough to decide"""
        rank = SENIORITY.get(actor.role, -1)
        junior_roles: List[str] = [role for role, r in SENIORITY.items() if r < rank]
        return repo.list_pending_from(junior_roles, exclude_user_id=actor.id)

    # ---------- decide ----------
    def update_status(self, *, leave_id, status: str, actor) -> LeaveRequest:
        if status not in (LeaveRequest.Status.APPROVED, LeaveRequest.Status.REJECTED):
            raise ValidationFailedError("Status must be approved or rejected")

        leave = repo.get_or_none(leave_id)
        if not leave:
            raise NotFoundError("Leave request not found")
        if not can_decide_leave(actor.role, leave.user.role, leave.user_id == actor.id):
            raise PermissionDeniedError(NOT_ABLE)
        if leave.status != LeaveRequest.Status.PENDING:
            raise ValidationFailedError("Only pending leave requests can be decided")

        leave = repo.decide(leave.id, status=status, decided_by=actor)
        logger.info("[leave] leave=%s %s by user=%s", leave.id, status, actor.id)

        owner = leave.user
        self.mailer.send_to_user(
            owner,
            subject=f"Your {leave.get_type_display()} Leave Request",
            text=f"Hello {owner.name},\n\nYour leave request for {leave.quantity} day(s) has been {status}.\n",
            object_type="leave_request",
            object_id=str(leave.id),
        )
        return leave
