# ============================================
# boards/models/card.py
# ============================================
from django.conf import settings
from django.db import models

from core.models import TimeStampedModel


class Card(TimeStampedModel):
    class CardStatus(models.TextChoices):
        PENDING = 'Pending', 'Pending'
        IN_PROGRESS = 'In Progress', 'In Progress'
        COMPLETED = 'Completed', 'Completed'

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    board_list = models.ForeignKey(
        'BoardList',
        on_delete=models.CASCADE,
        related_name='cards'
    )
    assigned_users = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='assigned_cards',
        blank=True
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='+'
    )
    status = models.CharField(
        max_length=16,
        choices=CardStatus.choices,
        default=CardStatus.PENDING
    )
    card_number = models.PositiveIntegerField(db_index=True)
    due_date = models.DateTimeField(null=True, blank=True)
    attachments = models.JSONField(default=list, blank=True)  # list of URLs

    class Meta:
        db_table = 'cards'
        ordering = ['card_number']

    def __str__(self):
        return f"#{self.card_number} {self.name}"

    @property
    def board(self):
        return self.board_list.board
