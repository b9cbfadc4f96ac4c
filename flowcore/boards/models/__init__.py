# ============================================
# boards/models/__init__.py
# ============================================
from .board import Board, BoardInvitation
from .list import BoardList
from .card import Card
from .comment import Comment

__all__ = [
    'Board',
    'BoardInvitation',
    'BoardList',
    'Card',
    'Comment',
]
