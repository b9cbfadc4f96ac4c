# ============================================
# boards/services/board.py
# ============================================
import logging
from typing import Dict, Iterable, List, Optional

from django.db import transaction
from django.utils import timezone

from accounts.services.user import UserDirectoryService
from boards.models import Board, BoardList
from boards.repositories import board_repository as repo
from boards.selectors.board import BoardSelector
from core.config import ServiceConfig
from core.errors import NotFoundError, ValidationFailedError
from core.policy import Policy, Relation, policy as default_policy
from core.services.notification_service import Mailer

logger = logging.getLogger(__name__)

INVALID_INVITATION = 'Invalid or expired invitation token'


def board_relations(board: Board, actor) -> List[Relation]:
    if actor is not None and BoardSelector.is_member(board, actor.id):
        return [Relation.BOARD_MEMBER]
    return []


def load_board(board_id) -> Board:
    board = BoardSelector.get_board_by_id(board_id)
    if not board:
        raise NotFoundError('Board not found')
    return board


def load_list(list_id) -> BoardList:
    board_list = BoardSelector.get_list_by_id(list_id)
    if not board_list:
        raise NotFoundError('List not found')
    return board_list


class BoardService:

    def __init__(self, config: ServiceConfig, mailer: Optional[Mailer] = None, policy: Optional[Policy] = None):
        self.config = config
        self.mailer = mailer or Mailer(config)
        self.policy = policy or default_policy

    # ---------- boards ----------
    def create_board(self, *, name: str, actor) -> Board:
        """Create a board; the creator becomes its first member"""
        self.policy.require('board.create', actor)

        with transaction.atomic():
            board = Board.objects.create(name=name, created_by=actor)
            board.members.add(actor)

        logger.info("[board] created board=%s by user=%s", board.id, actor.id)
        return board

    def add_users(self, *, board_id, user_ids: Iterable[int], actor) -> Dict[str, List[int]]:
        """Invite users to a board (CEO/Manager only)"""
        self.policy.require('board.invite', actor)
        board = load_board(board_id)
        users = UserDirectoryService.resolve_users(user_ids)
        invited = self.invite_users(board=board, users=users)
        return {
            'invited': [u.id for u in invited],
            'skipped': [u.id for u in users if u not in invited],
        }

    def invite_users(self, *, board: Board, users: Iterable) -> List:
        """
        Create an invitation per user who is neither a member nor already invited,
        then mail the accept link. Returns the users that were invited.
        """
        member_ids = set(board.members.values_list('id', flat=True))
        invited_ids = set(board.invited_users.values_list('id', flat=True))
        expires_at = timezone.now() + self.config.invitation_ttl

        invited = []
        for user in users:
            if user.id in member_ids or user.id in invited_ids:
                continue
            invitation = repo.create_invitation(board=board, user=user, expires_at=expires_at)
            invited_ids.add(user.id)
            invited.append(user)
            self._send_invitation(board, invitation)

        if invited:
            logger.info("[board] board=%s invited users=%s", board.id, [u.id for u in invited])
        return invited

    def _send_invitation(self, board: Board, invitation) -> None:
        link = f"{self.config.app_base_url}/trello-board/accept-invitation/{board.id}/{invitation.token}/"
        hours = int(self.config.invitation_ttl.total_seconds() // 3600)
        self.mailer.send_to_user(
            invitation.user,
            subject=f"Invitation to join board: {board.name}",
            text=(
                f"Hello {invitation.user.name},\n\n"
                f"You have been invited to join the board \"{board.name}\".\n"
                f"Accept the invitation within {hours} hours:\n{link}\n"
            ),
            object_type='board_invitation',
            object_id=str(invitation.id),
        )

    def accept_invitation(self, *, board_id, token: str) -> Board:
        """Link based; wrong and expired tokens give the same error"""
        board = BoardSelector.get_board_by_id(board_id)
        if not board:
            raise ValidationFailedError(INVALID_INVITATION)
        invitation = repo.find_valid_invitation(board=board, token=token)
        if not invitation:
            raise ValidationFailedError(INVALID_INVITATION)

        repo.consume_invitation(invitation)
        logger.info("[board] user=%s joined board=%s", invitation.user_id, board.id)
        return board

    def get_my_boards(self, *, actor):
        return BoardSelector.get_boards_for_user(actor.id)

    def get_board_members(self, *, board_id, actor):
        board = load_board(board_id)
        self.policy.require('board.view', actor, board_relations(board, actor))
        return board.members.order_by('name')

    def get_board_lists(self, *, board_id, actor):
        board = load_board(board_id)
        self.policy.require('board.view', actor, board_relations(board, actor))
        return BoardSelector.get_lists_with_cards(board)

    def delete_board(self, *, board: Board) -> None:
        """Hard delete a board with its lists, cards, comments and invitations"""
        logger.info("[board] deleting board=%s", board.id)
        board.delete()

    # ---------- lists ----------
    def create_list(self, *, board_id, name: str, actor) -> BoardList:
        board = load_board(board_id)
        self.policy.require('list.manage', actor, board_relations(board, actor))
        return BoardList.objects.create(name=name, board=board, created_by=actor)

    def update_list(self, *, list_id, name: str, actor) -> BoardList:
        board_list = load_list(list_id)
        self.policy.require('list.manage', actor, board_relations(board_list.board, actor))
        board_list.name = name
        board_list.save(update_fields=['name', 'updated_at'])
        return board_list

    def delete_list(self, *, list_id, actor) -> None:
        """Delete a list and every card in it"""
        board_list = load_list(list_id)
        self.policy.require('list.manage', actor, board_relations(board_list.board, actor))
        board_list.delete()
