# ============================================
# boards/services/card.py
# ============================================
import logging
from contextlib import nullcontext
from typing import Iterable, List, Optional

from django.db import transaction

from accounts.services.user import UserDirectoryService
from boards.models import Board, Card
from boards.repositories import board_repository as repo
from boards.selectors.board import BoardSelector
from boards.services.board import board_relations, load_list
from core.clients.storage_client import StorageClient
from core.config import ServiceConfig
from core.errors import NotFoundError, ValidationFailedError
from core.policy import Policy, policy as default_policy
from core.services.notification_service import Mailer

logger = logging.getLogger(__name__)

_UNSET = object()


def load_card(card_id) -> Card:
    card = BoardSelector.get_card_by_id(card_id)
    if not card:
        raise NotFoundError('Card not found')
    return card


class CardService:

    def __init__(
        self,
        config: ServiceConfig,
        mailer: Optional[Mailer] = None,
        storage: Optional[StorageClient] = None,
        policy: Optional[Policy] = None,
    ):
        self.config = config
        self.mailer = mailer or Mailer(config)
        self.storage = storage or StorageClient(config)
        self.policy = policy or default_policy

    def _authorize(self, card_or_board, actor) -> Board:
        board = card_or_board.board
        self.policy.require('card.manage', actor, board_relations(board, actor))
        return board

    def _require_board_members(self, board: Board, users: List) -> None:
        """Every user must currently be a board member"""
        member_ids = set(board.members.values_list('id', flat=True))
        if any(u.id not in member_ids for u in users):
            raise ValidationFailedError('One or more users are not members of this board')

    # ---------- create / read / delete ----------
    def create_card(self, *, list_id, name: str, actor, description: str = '', due_date=None) -> Card:
        """Create a card; it takes the next number of its board"""
        board_list = load_list(list_id)
        board = self._authorize(board_list, actor)

        lock = transaction.atomic() if self.config.atomic_card_numbers else nullcontext()
        with lock:
            number = repo.allocate_card_number(board, atomic=self.config.atomic_card_numbers)
            card = Card.objects.create(
                name=name,
                description=description or '',
                board_list=board_list,
                created_by=actor,
                due_date=due_date,
                card_number=number,
            )

        logger.info("[card] board=%s card=%s number=%s", board.id, card.id, number)
        return card

    def get_card_details(self, *, card_id, actor) -> Card:
        card = load_card(card_id)
        self._authorize(card, actor)
        return card

    def delete_card(self, *, card_id, actor) -> None:
        card = load_card(card_id)
        self._authorize(card, actor)
        card.delete()

    # ---------- members ----------
    def add_members(self, *, card_id, user_ids: Iterable[int], actor) -> Card:
        """Assign board members to a card; newly assigned users are notified"""
        card = load_card(card_id)
        board = self._authorize(card, actor)
        users = UserDirectoryService.resolve_users(user_ids)
        self._require_board_members(board, users)

        current = set(card.assigned_users.values_list('id', flat=True))
        new_users = [u for u in users if u.id not in current]
        if new_users:
            card.assigned_users.add(*new_users)
            self._notify_assigned(card, board, new_users)
        return card

    def remove_members(self, *, card_id, user_ids: Iterable[int], actor) -> Card:
        card = load_card(card_id)
        self._authorize(card, actor)
        users = UserDirectoryService.resolve_users(user_ids)
        card.assigned_users.remove(*users)
        return card

    # ---------- update ----------
    def update_card(
        self,
        *,
        card_id,
        actor,
        name: Optional[str] = None,
        description: Optional[str] = None,
        assigned_users=None,
        list_id=None,
        due_date=_UNSET,
        status: Optional[str] = None,
    ) -> Card:
        """
        Partial update.
        - assigned_users replaces the assignee set (all must be board members)
        - list_id moves the card to another list of the same board
        - due_date=None clears the due date
        - a status change notifies every assignee
        """
        card = load_card(card_id)
        board = self._authorize(card, actor)

        new_assignees = None
        if assigned_users is not None:
            new_assignees = UserDirectoryService.resolve_users(assigned_users)
            self._require_board_members(board, new_assignees)

        if list_id is not None and list_id != card.board_list_id:
            target = BoardSelector.get_list_by_id(list_id)
            if not target:
                raise NotFoundError('New list not found')
            if target.board_id != board.id:
                raise ValidationFailedError('New list must belong to the same board')
            card.board_list = target

        if name is not None:
            card.name = name
        if description is not None:
            card.description = description
        if due_date is not _UNSET:
            card.due_date = due_date

        old_status = card.status
        if status is not None:
            card.status = status

        with transaction.atomic():
            card.save()
            newly_assigned = []
            if new_assignees is not None:
                current = set(card.assigned_users.values_list('id', flat=True))
                newly_assigned = [u for u in new_assignees if u.id not in current]
                card.assigned_users.set(new_assignees)

        if newly_assigned:
            self._notify_assigned(card, board, newly_assigned)
        if status is not None and status != old_status:
            self._notify_status(card, board, old_status)
        return card

    # ---------- attachments ----------
    def add_attachments(self, *, card_id, files: List, actor) -> Card:
        """Validate every file first, then upload and append the URLs"""
        card = load_card(card_id)
        board = self._authorize(card, actor)

        if not files:
            raise ValidationFailedError('No files provided')
        limit = self.config.max_attachments_per_card
        if len(card.attachments) + len(files) > limit:
            raise ValidationFailedError(f'A card can have at most {limit} attachments')

        max_mb = self.config.max_attachment_bytes / (1024 * 1024)
        for f in files:
            if getattr(f, 'content_type', None) not in self.config.allowed_attachment_types:
                raise ValidationFailedError(f'Only image files are allowed ({f.name})')
            if f.size > self.config.max_attachment_bytes:
                raise ValidationFailedError(f'File {f.name} exceeds the {max_mb:g} MB limit')

        folder = f'boards/{board.id}/cards/{card.id}'
        urls = [
            self.storage.upload(content=f.read(), filename=f.name, content_type=f.content_type, folder=folder)
            for f in files
        ]
        card.attachments = list(card.attachments) + urls
        card.save(update_fields=['attachments', 'updated_at'])
        return card

    def remove_attachments(self, *, card_id, urls: List[str], actor) -> Card:
        card = load_card(card_id)
        self._authorize(card, actor)

        if any(url not in card.attachments for url in urls):
            raise ValidationFailedError('Attachment not found on card')
        to_remove = set(urls)
        card.attachments = [url for url in card.attachments if url not in to_remove]
        card.save(update_fields=['attachments', 'updated_at'])
        return card

    # ---------- notifications ----------
    def _notify_assigned(self, card: Card, board: Board, users: List) -> None:
        for user in users:
            self.mailer.send_to_user(
                user,
                subject=f"Assigned to Card: {card.name} on Board: {board.name}",
                text=(
                    f"Hello {user.name},\n\n"
                    f"You have been assigned to card #{card.card_number} \"{card.name}\" "
                    f"on board \"{board.name}\".\n"
                    f"Due date: {card.due_date or '-'}\n"
                ),
                object_type='card',
                object_id=str(card.id),
            )

    def _notify_status(self, card: Card, board: Board, old_status: str) -> None:
        for user in card.assigned_users.all():
            self.mailer.send_to_user(
                user,
                subject=f"Card status updated: {card.name}",
                text=(
                    f"Hello {user.name},\n\n"
                    f"Card #{card.card_number} \"{card.name}\" on board \"{board.name}\" "
                    f"moved from {old_status} to {card.status}.\n"
                ),
                object_type='card',
                object_id=str(card.id),
            )
