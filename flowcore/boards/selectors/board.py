# ============================================
# boards/selectors/board.py
# ============================================
from typing import Optional
from django.db.models import QuerySet, Prefetch
from boards.models import Board, BoardList, Card, Comment


class BoardSelector:

    @staticmethod
    def get_board_by_id(board_id) -> Optional[Board]:
        """Get single board by ID"""
        try:
            return Board.objects.get(id=board_id)
        except (Board.DoesNotExist, ValueError, TypeError):
            return None

    @staticmethod
    def get_list_by_id(list_id) -> Optional[BoardList]:
        try:
            return BoardList.objects.select_related('board').get(id=list_id)
        except (BoardList.DoesNotExist, ValueError, TypeError):
            return None

    @staticmethod
    def get_card_by_id(card_id) -> Optional[Card]:
        """Card with its list and board loaded"""
        try:
            return Card.objects.select_related('board_list__board', 'created_by').get(id=card_id)
        except (Card.DoesNotExist, ValueError, TypeError):
            return None

    @staticmethod
    def get_comment_by_id(comment_id) -> Optional[Comment]:
        try:
            return Comment.objects.select_related('card__board_list__board', 'comment_by').get(id=comment_id)
        except (Comment.DoesNotExist, ValueError, TypeError):
            return None

    @staticmethod
    def get_boards_for_user(user_id) -> QuerySet:
        """Boards where the user is a member"""
        return Board.objects.filter(members__id=user_id).distinct().order_by('name')

    @staticmethod
    def get_lists_with_cards(board: Board) -> QuerySet:
        cards = Card.objects.order_by('card_number')
        return board.lists.prefetch_related(Prefetch('cards', queryset=cards)).order_by('created_at', 'id')

    @staticmethod
    def is_member(board: Board, user_id) -> bool:
        return board.members.filter(id=user_id).exists()

    @staticmethod
    def is_invited(board: Board, user_id) -> bool:
        return board.invited_users.filter(id=user_id).exists()
