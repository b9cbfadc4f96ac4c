# ============================================
# projects/services/review.py
# ============================================
from typing import Optional

from accounts.selectors.user import UserSelector
from core.errors import ValidationFailedError
from core.policy import Policy, policy as default_policy
from projects.models import Review
from projects.selectors.project import ProjectSelector, ReviewSelector


class ReviewService:

    def __init__(self, policy: Optional[Policy] = None):
        self.policy = policy or default_policy

    def create_review(
        self,
        *,
        actor,
        rating: int,
        comment: str = '',
        project_id: Optional[int] = None,
        user_id: Optional[int] = None,
    ) -> Review:
        """Review a project or a user (exactly one of the two)"""
        self.policy.require('review.create', actor)

        if project_id is None and user_id is None:
            raise ValidationFailedError('Either projectId or userId must be provided')
        if project_id is not None and user_id is not None:
            raise ValidationFailedError('Provide only one of projectId or userId')

        project = user = None
        if project_id is not None:
            project = ProjectSelector.get_project_by_id(project_id)
            if not project:
                raise ValidationFailedError('Project not found')
        else:
            user = UserSelector.get_user_by_id(user_id)
            if not user:
                raise ValidationFailedError('Reviewed user not found')

        return Review.objects.create(
            reviewed_by=actor,
            rating=rating,
            comment=comment or '',
            review_type=Review.ReviewType.PROJECT if project else Review.ReviewType.USER,
            project=project,
            user=user,
        )

    def list_project_reviews(self, *, actor, project_id: Optional[int] = None):
        self.policy.require('review.list_all', actor)
        return ReviewSelector.project_reviews([project_id] if project_id is not None else None)

    def list_user_reviews(self, *, actor, user_id: Optional[int] = None):
        self.policy.require('review.list_all', actor)
        return ReviewSelector.user_reviews(user_id)

    def my_reviews(self, *, actor):
        return ReviewSelector.user_reviews(actor.id)

    def my_project_reviews(self, *, actor):
        """Reviews of every project the user is linked to"""
        project_ids = list(ProjectSelector.get_projects_by_user(actor.id).values_list('id', flat=True))
        if not project_ids:
            raise ValidationFailedError('You are not linked to any projects')
        return ReviewSelector.project_reviews(project_ids)
