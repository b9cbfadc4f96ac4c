# ============================================
# boards/models/comment.py
# ============================================
from django.conf import settings
from django.db import models
from django.utils import timezone

from core.models import TimeStampedModel


class Comment(TimeStampedModel):
    card = models.ForeignKey(
        'Card',
        on_delete=models.CASCADE,
        related_name='comments'
    )
    comment_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='card_comments'
    )
    text = models.TextField()
    time = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'card_comments'
        ordering = ['time', 'id']

    def __str__(self):
        return f"Comment by {self.comment_by_id} on card {self.card_id}"
