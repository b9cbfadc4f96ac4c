# ============================================
# boards/services/comment.py
# ============================================
from typing import Optional

from boards.models import Comment
from boards.selectors.board import BoardSelector
from boards.services.board import board_relations
from boards.services.card import load_card
from core.errors import NotFoundError
from core.policy import Policy, Relation, policy as default_policy


class CommentService:

    def __init__(self, policy: Optional[Policy] = None):
        self.policy = policy or default_policy

    @staticmethod
    def _load(comment_id) -> Comment:
        comment = BoardSelector.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError('Comment not found')
        return comment

    def add_comment(self, *, card_id, text: str, actor) -> Comment:
        """Any board member (or CEO/Manager) can comment"""
        card = load_card(card_id)
        self.policy.require('comment.create', actor, board_relations(card.board, actor))
        return Comment.objects.create(card=card, comment_by=actor, text=text)

    def list_comments(self, *, card_id, actor):
        card = load_card(card_id)
        self.policy.require('board.view', actor, board_relations(card.board, actor))
        return card.comments.select_related('comment_by').order_by('time', 'id')

    def update_comment(self, *, comment_id, text: str, actor) -> Comment:
        """Only the author (or CEO/Manager) can edit"""
        comment = self._load(comment_id)
        relations = [Relation.AUTHOR] if comment.comment_by_id == actor.id else []
        self.policy.require('comment.modify', actor, relations)

        comment.text = text
        comment.save(update_fields=['text', 'updated_at'])
        return comment

    def delete_comment(self, *, comment_id, actor) -> None:
        comment = self._load(comment_id)
        relations = [Relation.AUTHOR] if comment.comment_by_id == actor.id else []
        self.policy.require('comment.modify', actor, relations)
        comment.delete()
