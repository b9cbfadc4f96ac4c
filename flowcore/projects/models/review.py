# ============================================
# projects/models/review.py
# ============================================
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.models import TimeStampedModel


class Review(TimeStampedModel):
    class ReviewType(models.TextChoices):
        USER = 'user', 'User'
        PROJECT = 'project', 'Project'

    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='reviews_given'
    )
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField(blank=True, default='')
    review_type = models.CharField(max_length=16, choices=ReviewType.choices)
    project = models.ForeignKey(
        'Project',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reviews'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='reviews_received'
    )

    class Meta:
        db_table = 'reviews'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['review_type', 'project']),
            models.Index(fields=['review_type', 'user']),
        ]

    def __str__(self):
        target = f"project {self.project_id}" if self.review_type == self.ReviewType.PROJECT else f"user {self.user_id}"
        return f"{self.rating}/5 for {target}"
