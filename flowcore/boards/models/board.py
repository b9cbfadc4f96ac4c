# ============================================
# boards/models/board.py
# ============================================
from django.conf import settings
from django.db import models

from core.models import TimeStampedModel


class Board(TimeStampedModel):
    name = models.CharField(max_length=255)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_boards'
    )
    members = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='boards',
        blank=True
    )
    invited_users = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='pending_boards',
        blank=True
    )
    last_card_number = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'boards'
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class BoardInvitation(TimeStampedModel):
    board = models.ForeignKey(
        'Board',
        on_delete=models.CASCADE,
        related_name='pending_invitations'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='board_invitations'
    )
    token = models.CharField(max_length=64, unique=True, db_index=True)
    expires_at = models.DateTimeField()

    class Meta:
        db_table = 'board_invitations'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['board', 'token']),
        ]

    def __str__(self):
        return f"{self.board_id} -> {self.user_id} (until {self.expires_at:%Y-%m-%d %H:%M})"
