# ============================================
# projects/selectors/project.py
# ============================================
from typing import Optional
from django.db.models import Q, QuerySet
from projects.models import Project, Sprint, Review


def _with_people(qs: QuerySet) -> QuerySet:
    return qs.select_related('created_by', 'project_manager').prefetch_related('frontend_devs', 'backend_devs')


class ProjectSelector:

    @staticmethod
    def get_project_by_id(project_id) -> Optional[Project]:
        """Get single project by ID"""
        try:
            return _with_people(Project.objects.all()).get(id=project_id)
        except (Project.DoesNotExist, ValueError, TypeError):
            return None

    @staticmethod
    def get_projects_list() -> QuerySet:
        return _with_people(Project.objects.all())

    @staticmethod
    def get_projects_by_user(user_id) -> QuerySet:
        """Projects where the user is creator, manager, or a developer"""
        return _with_people(
            Project.objects.filter(
                Q(created_by_id=user_id)
                | Q(project_manager_id=user_id)
                | Q(frontend_devs__id=user_id)
                | Q(backend_devs__id=user_id)
            ).distinct()
        )


class SprintSelector:

    @staticmethod
    def get_sprint_by_id(sprint_id) -> Optional[Sprint]:
        try:
            return Sprint.objects.select_related('project').get(id=sprint_id)
        except (Sprint.DoesNotExist, ValueError, TypeError):
            return None

    @staticmethod
    def get_sprints_by_project(project_id) -> QuerySet:
        return Sprint.objects.filter(project_id=project_id).order_by('start_time', 'id')


class ReviewSelector:

    @staticmethod
    def base_qs() -> QuerySet:
        return Review.objects.select_related('reviewed_by', 'project', 'user')

    @staticmethod
    def project_reviews(project_ids=None) -> QuerySet:
        qs = ReviewSelector.base_qs().filter(review_type=Review.ReviewType.PROJECT)
        if project_ids is not None:
            qs = qs.filter(project_id__in=list(project_ids))
        return qs

    @staticmethod
    def user_reviews(user_id=None) -> QuerySet:
        qs = ReviewSelector.base_qs().filter(review_type=Review.ReviewType.USER)
        if user_id is not None:
            qs = qs.filter(user_id=user_id)
        return qs
