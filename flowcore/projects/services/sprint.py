# ============================================
# projects/services/sprint.py
# ============================================
import logging
from typing import List, Optional

from core.errors import NotFoundError, ValidationFailedError
from core.policy import Policy, Relation, policy as default_policy
from projects.models import Project, Sprint
from projects.selectors.project import SprintSelector
from projects.services.project import load_project

logger = logging.getLogger(__name__)

SPRINT_FIELDS = {'name', 'description', 'status', 'start_time', 'end_time'}


def _relations(project: Optional[Project], actor) -> List[Relation]:
    if project is not None and project.project_manager_id == actor.id:
        return [Relation.PROJECT_MANAGER]
    return []


class SprintService:

    def __init__(self, policy: Optional[Policy] = None):
        self.policy = policy or default_policy

    @staticmethod
    def _load(sprint_id) -> Sprint:
        sprint = SprintSelector.get_sprint_by_id(sprint_id)
        if not sprint:
            raise NotFoundError('Sprint not found')
        return sprint

    def create_sprint(
        self,
        *,
        project_id,
        actor,
        name: str,
        start_time,
        end_time,
        description: str = '',
        status: str = Sprint.SprintStatus.TODO,
    ) -> Sprint:
        """CEO, Manager, or the project's manager"""
        project = load_project(project_id)
        self.policy.require('sprint.manage', actor, _relations(project, actor))
        if end_time <= start_time:
            raise ValidationFailedError('End time must be after start time')

        sprint = Sprint.objects.create(
            project=project,
            name=name,
            description=description or '',
            status=status,
            start_time=start_time,
            end_time=end_time,
            created_by=actor,
        )
        logger.info("[sprint] created sprint=%s project=%s", sprint.id, project.id)
        return sprint

    def update_sprint(self, *, sprint_id, actor, **patch) -> Sprint:
        """Date order is only checked when both times are supplied"""
        sprint = self._load(sprint_id)
        self.policy.require('sprint.manage', actor, _relations(sprint.project, actor))

        changes = {k: v for k, v in patch.items() if k in SPRINT_FIELDS}
        if 'start_time' in changes and 'end_time' in changes:
            if changes['end_time'] <= changes['start_time']:
                raise ValidationFailedError('End time must be after start time')

        for field, value in changes.items():
            setattr(sprint, field, value)
        sprint.save()
        return sprint

    def delete_sprint(self, *, sprint_id, actor) -> None:
        sprint = self._load(sprint_id)
        self.policy.require('sprint.manage', actor, _relations(sprint.project, actor))
        sprint.delete()

    def get_sprint(self, *, sprint_id) -> Sprint:
        return self._load(sprint_id)

    def find_all_by_project(self, *, project_id):
        return SprintSelector.get_sprints_by_project(project_id)
