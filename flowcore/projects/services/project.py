# ============================================
# projects/services/project.py
# ============================================
import logging
from typing import Dict, List, Optional

from django.db import transaction

from accounts.selectors.user import UserSelector
from accounts.services.user import UserDirectoryService
from boards.services.board import BoardService
from core.config import ServiceConfig
from core.errors import NotFoundError, ValidationFailedError
from core.policy import Policy, policy as default_policy
from core.services.notification_service import Mailer
from projects.models import Project, Sprint
from projects.selectors.project import ProjectSelector

logger = logging.getLogger(__name__)

DEV_ROLES = {
    'frontend_devs': 'Frontend developer',
    'backend_devs': 'Backend developer',
}
UPDATABLE_FIELDS = {'name', 'description', 'status', 'project_manager', 'frontend_devs', 'backend_devs'}


def load_project(project_id) -> Project:
    project = ProjectSelector.get_project_by_id(project_id)
    if not project:
        raise NotFoundError('Project not found')
    return project


class ProjectService:

    def __init__(
        self,
        config: ServiceConfig,
        board_service: Optional[BoardService] = None,
        mailer: Optional[Mailer] = None,
        policy: Optional[Policy] = None,
    ):
        self.config = config
        self.mailer = mailer or Mailer(config)
        self.board_service = board_service or BoardService(config, mailer=self.mailer)
        self.policy = policy or default_policy

    # ---------- helpers ----------
    @staticmethod
    def _resolve_devs(field: str, user_ids) -> List:
        label = 'frontendDevs' if field == 'frontend_devs' else 'backendDevs'
        return UserDirectoryService.resolve_users(
            user_ids or [],
            duplicate_message=f'Duplicate user IDs provided in {label}',
            invalid_message=f'Invalid user IDs provided in {label}',
        )

    @staticmethod
    def _resolve_manager(user_id):
        if user_id is None:
            return None
        manager = UserSelector.get_user_by_id(user_id)
        if not manager:
            raise ValidationFailedError('Project manager not found')
        return manager

    # ---------- create / read ----------
    def create_project(
        self,
        *,
        actor,
        name: str,
        description: str = '',
        project_manager: Optional[int] = None,
        frontend_devs: Optional[List[int]] = None,
        backend_devs: Optional[List[int]] = None,
    ) -> Project:
        """
        Create a project together with its board.
        The board gets the project's name; the creator is a member and the manager and
        developers are invited. Runs in one transaction so a failed board never leaves
        a project behind.
        """
        self.policy.require('project.create', actor)

        manager = self._resolve_manager(project_manager)
        fe_users = self._resolve_devs('frontend_devs', frontend_devs)
        be_users = self._resolve_devs('backend_devs', backend_devs)

        with transaction.atomic():
            project = Project.objects.create(
                name=name,
                description=description or '',
                created_by=actor,
                project_manager=manager,
                status=Project.ProjectStatus.TODO,
            )
            project.frontend_devs.set(fe_users)
            project.backend_devs.set(be_users)

            board = self.board_service.create_board(name=name, actor=actor)
            invitees = []
            for user in [manager, *fe_users, *be_users]:
                if user is not None and user.id != actor.id and user not in invitees:
                    invitees.append(user)
            self.board_service.invite_users(board=board, users=invitees)

            project.board = board
            project.save(update_fields=['board', 'updated_at'])

        logger.info("[project] created project=%s board=%s by user=%s", project.id, board.id, actor.id)
        return project

    def find_all(self, *, actor):
        self.policy.require('project.view_all', actor)
        return ProjectSelector.get_projects_list()

    def find_my_projects(self, *, actor):
        return ProjectSelector.get_projects_by_user(actor.id)

    def get_project(self, *, project_id) -> Project:
        return load_project(project_id)

    # ---------- update ----------
    def update_project(self, *, project_id, actor, **patch) -> Project:
        """Whitelist merge: only provided fields are written"""
        self.policy.require('project.update', actor)
        project = load_project(project_id)

        changes = {k: v for k, v in patch.items() if k in UPDATABLE_FIELDS}
        dev_sets = {}
        for field in DEV_ROLES:
            if field in changes:
                dev_sets[field] = self._resolve_devs(field, changes.pop(field))
        if 'project_manager' in changes:
            changes['project_manager'] = self._resolve_manager(changes['project_manager'])
        if 'status' in changes and changes['status'] not in Project.ProjectStatus.values:
            raise ValidationFailedError('Invalid project status')

        with transaction.atomic():
            for field, value in changes.items():
                setattr(project, field, value)
            project.save()
            for field, users in dev_sets.items():
                getattr(project, field).set(users)

        return load_project(project.id)

    # ---------- members ----------
    def add_members(self, *, project_id, actor, frontend_devs=None, backend_devs=None) -> Project:
        """
        Add developers. Ids already in the list are skipped; every newly added user gets
        an email and an invitation to the project's board.
        """
        self.policy.require('project.members', actor)
        project = load_project(project_id)
        requested = {'frontend_devs': frontend_devs, 'backend_devs': backend_devs}
        resolved = {f: self._resolve_devs(f, ids) for f, ids in requested.items() if ids}
        if not resolved:
            raise ValidationFailedError('No members provided')

        added: Dict[str, List] = {}
        with transaction.atomic():
            for field, users in resolved.items():
                relation = getattr(project, field)
                current = set(relation.values_list('id', flat=True))
                new_users = [u for u in users if u.id not in current]
                if new_users:
                    relation.add(*new_users)
                    added[field] = new_users

        for field, users in added.items():
            for user in users:
                self._notify_membership(project, user, DEV_ROLES[field], added=True)

        if project.board_id:
            new_members = []
            for users in added.values():
                new_members.extend(u for u in users if u not in new_members)
            self.board_service.invite_users(board=project.board, users=new_members)

        return load_project(project.id)

    def remove_members(self, *, project_id, actor, frontend_devs=None, backend_devs=None) -> Project:
        """Remove developers; board membership is left as is"""
        self.policy.require('project.members', actor)
        project = load_project(project_id)
        requested = {'frontend_devs': frontend_devs, 'backend_devs': backend_devs}
        resolved = {f: self._resolve_devs(f, ids) for f, ids in requested.items() if ids}
        if not resolved:
            raise ValidationFailedError('No members provided')

        removed: Dict[str, List] = {}
        with transaction.atomic():
            for field, users in resolved.items():
                relation = getattr(project, field)
                current = set(relation.values_list('id', flat=True))
                gone = [u for u in users if u.id in current]
                if gone:
                    relation.remove(*gone)
                    removed[field] = gone

        for field, users in removed.items():
            for user in users:
                self._notify_membership(project, user, DEV_ROLES[field], added=False)

        return load_project(project.id)

    def _notify_membership(self, project: Project, user, role_label: str, *, added: bool) -> None:
        if added:
            subject = f"Added to Project: {project.name}"
            body = f"You have been added to the project \"{project.name}\" as {role_label}."
        else:
            subject = f"Removed from Project: {project.name}"
            body = f"You have been removed from the project \"{project.name}\" ({role_label})."
        self.mailer.send_to_user(
            user,
            subject=subject,
            text=f"Hello {user.name},\n\n{body}\n",
            object_type='project',
            object_id=str(project.id),
        )

    # ---------- delete ----------
    def delete_project(self, *, project_id, actor) -> None:
        """
        Hard delete.
        project_delete_cascade=False: sprints are detached and the board stays.
        project_delete_cascade=True: sprints and the board go with the project.
        """
        self.policy.require('project.delete', actor)
        project = load_project(project_id)
        board = project.board

        with transaction.atomic():
            if self.config.project_delete_cascade:
                Sprint.objects.filter(project=project).delete()
            project.delete()
            if self.config.project_delete_cascade and board is not None:
                self.board_service.delete_board(board=board)

        logger.info(
            "[project] deleted project=%s cascade=%s by user=%s",
            project_id, self.config.project_delete_cascade, actor.id,
        )
