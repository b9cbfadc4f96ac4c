# ============================================
# projects/models/sprint.py
# ============================================
from django.conf import settings
from django.db import models

from core.models import TimeStampedModel


class Sprint(TimeStampedModel):
    class SprintStatus(models.TextChoices):
        TODO = 'To Do', 'To Do'
        IN_PROGRESS = 'In Progress', 'In Progress'
        COMPLETE = 'Complete', 'Complete'

    # Nullable: deleting a project detaches its sprints unless cascading is enabled
    project = models.ForeignKey(
        'Project',
        on_delete=models.SET_NULL,
        null=True,
        related_name='sprints'
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    status = models.CharField(
        max_length=16,
        choices=SprintStatus.choices,
        default=SprintStatus.TODO
    )
    start_time = models.DateTimeField()
    end_time = models.DateTimeField()
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='+'
    )

    class Meta:
        db_table = 'sprints'
        ordering = ['start_time', 'id']
        indexes = [
            models.Index(fields=['project', 'status']),
        ]

    def __str__(self):
        return f"{self.project_id} - {self.name}"
