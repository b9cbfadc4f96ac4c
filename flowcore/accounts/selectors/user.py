# ============================================
# accounts/selectors/user.py
# ============================================
from typing import Iterable, List, Optional
from django.db.models import QuerySet
from accounts.models import User


class UserSelector:

    @staticmethod
    def get_user_by_id(user_id) -> Optional[User]:
        """Get single active user by ID"""
        try:
            return User.objects.get(id=user_id, is_active=True)
        except (User.DoesNotExist, ValueError, TypeError):
            return None

    @staticmethod
    def get_user_by_email(email: str) -> Optional[User]:
        """Case-insensitive email lookup"""
        if not email:
            return None
        return User.objects.filter(email__iexact=email.strip()).first()

    @staticmethod
    def get_users_by_ids(user_ids: Iterable[int]) -> List[User]:
        return list(User.objects.filter(id__in=list(user_ids), is_active=True))

    @staticmethod
    def get_users_by_roles(roles: Iterable[str]) -> QuerySet:
        return User.objects.filter(role__in=list(roles), is_active=True)
