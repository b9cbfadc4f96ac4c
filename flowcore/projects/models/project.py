# ============================================
# projects/models/project.py
# ============================================
from django.conf import settings
from django.db import models

from core.models import TimeStampedModel


class Project(TimeStampedModel):
    class ProjectStatus(models.TextChoices):
        TODO = 'ToDo', 'To Do'
        IN_PROGRESS = 'InProgress', 'In Progress'
        DONE = 'Done', 'Done'

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_projects'
    )
    project_manager = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='managed_projects'
    )
    frontend_devs = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='frontend_projects',
        blank=True
    )
    backend_devs = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='backend_projects',
        blank=True
    )
    status = models.CharField(
        max_length=16,
        choices=ProjectStatus.choices,
        default=ProjectStatus.TODO
    )
    board = models.OneToOneField(
        'boards.Board',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='project'
    )

    class Meta:
        db_table = 'projects'
        ordering = ['-created_at']

    def __str__(self):
        return self.name
