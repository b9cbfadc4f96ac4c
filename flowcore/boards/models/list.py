# ============================================
# boards/models/list.py
# ============================================
from django.conf import settings
from django.db import models

from core.models import TimeStampedModel


class BoardList(TimeStampedModel):
    name = models.CharField(max_length=255)
    board = models.ForeignKey(
        'Board',
        on_delete=models.CASCADE,
        related_name='lists'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='+'
    )

    class Meta:
        db_table = 'board_lists'
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"{self.board} / {self.name}"
