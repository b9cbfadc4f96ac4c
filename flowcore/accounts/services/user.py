# ============================================
# accounts/services/user.py
# ============================================
from typing import Iterable, List
from accounts.models import User
from accounts.selectors.user import UserSelector
from core.errors import ValidationFailedError


class UserDirectoryService:

    @staticmethod
    def resolve_users(
        user_ids: Iterable[int],
        *,
        duplicate_message: str = 'Duplicate user IDs provided',
        invalid_message: str = 'Invalid user IDs provided',
    ) -> List[User]:
        """
        Resolve a batch of user ids.
        Rejects duplicates in the input and any id that does not match an active user.
        Keeps the input order.
        """
        ids = [int(uid) for uid in (user_ids or [])]
        if len(set(ids)) != len(ids):
            raise ValidationFailedError(duplicate_message)

        users = {u.id: u for u in UserSelector.get_users_by_ids(ids)}
        if len(users) != len(ids):
            raise ValidationFailedError(invalid_message)

        return [users[uid] for uid in ids]

    @staticmethod
    def set_password(*, user: User, new_password: str) -> User:
        user.set_password(new_password)
        user.save(update_fields=['password', 'updated_at'])
        return user
