from datetime import timedelta

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from core.models import TimeStampedModel

MAX_LEAVE_DAYS = 366


class LeaveRequest(TimeStampedModel):
    class LeaveType(models.TextChoices):
        CASUAL = "casual", "Casual"
        SICK = "sick", "Sick"
        ANNUAL = "annual", "Annual"

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="leave_requests")
    type = models.CharField(max_length=16, choices=LeaveType.choices)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING, db_index=True)
    reason = models.CharField(max_length=500)
    quantity = models.PositiveIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(MAX_LEAVE_DAYS)], help_text="Number of days"
    )
    # The request covers `quantity` consecutive days starting here
    start_date = models.DateField(default=timezone.localdate)

    decided_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="decided_leaves",
    )
    decided_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "leave_requests"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "status"]),
            models.Index(fields=["start_date"]),
        ]

    @property
    def end_date(self):
        return self.start_date + timedelta(days=self.quantity - 1)

    def covers(self, day) -> bool:
        return self.start_date <= day <= self.end_date

    def __str__(self):
        return f"{self.user_id} {self.type} x{self.quantity} ({self.status})"
