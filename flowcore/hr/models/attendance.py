from django.conf import settings
from django.db import models

from core.models import TimeStampedModel


class Attendance(TimeStampedModel):
    class Status(models.TextChoices):
        CLOCKED_IN = "clocked_in", "Clocked in"
        CLOCKED_OUT = "clocked_out", "Clocked out"
        ABSENT = "absent", "Absent"

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="attendances")
    date = models.DateField(db_index=True)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.ABSENT)
    working_hours = models.FloatField(default=0, help_text="Sum of closed session hours for the day")
    notes = models.TextField(blank=True, default="")

    class Meta:
        db_table = "attendances"
        ordering = ["date"]
        constraints = [
            models.UniqueConstraint(fields=["user", "date"], name="uniq_attendance_user_date"),
        ]

    def __str__(self):
        return f"{self.user_id} @ {self.date} ({self.status})"


class AttendanceSession(models.Model):
    attendance = models.ForeignKey("Attendance", on_delete=models.CASCADE, related_name="sessions")
    clock_in_time = models.DateTimeField()
    clock_out_time = models.DateTimeField(null=True, blank=True)
    session_hours = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = "attendance_sessions"
        ordering = ["clock_in_time", "id"]

    @property
    def is_open(self) -> bool:
        return self.clock_out_time is None
