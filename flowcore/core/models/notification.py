from django.db import models
from .mixins import TimeStampedModel


class Notification(TimeStampedModel):
    class Channel(models.IntegerChoices):
        INAPP = 0, "In-app"
        EMAIL = 1, "Email"

    object_type = models.CharField(max_length=64, blank=True, default="", help_text="e.g. board_invitation, leave_request, card")
    object_id = models.CharField(max_length=64, blank=True, default="", help_text="Related object ID (string)")

    to_user = models.IntegerField(null=True, blank=True, db_index=True)
    to_email = models.CharField(max_length=254, blank=True, default="")

    channel = models.IntegerField(choices=Channel.choices, default=Channel.EMAIL, db_index=True)
    title = models.CharField(max_length=200)
    payload = models.JSONField(null=True, blank=True, help_text="Payload that was sent")

    delivered = models.BooleanField(default=False, db_index=True)
    delivered_at = models.DateTimeField(null=True, blank=True)
    attempt_count = models.IntegerField(default=0)
    last_error = models.TextField(blank=True, default="")

    class Meta:
        db_table = "notifications"
        ordering = ["-created_at"]

    def __str__(self):
        state = "sent" if self.delivered else "failed"
        return f"NOTI[{self.get_channel_display()}] to={self.to_email or '-'} ({state})"
