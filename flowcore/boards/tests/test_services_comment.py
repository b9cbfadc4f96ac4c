import pytest

from boards.models import Comment
from core.errors import PermissionDeniedError


@pytest.fixture
def card(card_service, board_list, member):
    return card_service.create_card(list_id=board_list.id, name="x", actor=member)


@pytest.mark.django_db
def test_members_comment_outsiders_cannot(comment_service, card, member, member2, ceo):
    comment = comment_service.add_comment(card_id=card.id, text="hi", actor=member)
    assert comment.comment_by_id == member.id
    assert comment.time is not None

    comment_service.add_comment(card_id=card.id, text="from the top", actor=ceo)
    with pytest.raises(PermissionDeniedError):
        comment_service.add_comment(card_id=card.id, text="let me in", actor=member2)

    texts = [c.text for c in comment_service.list_comments(card_id=card.id, actor=member)]
    assert texts == ["hi", "from the top"]


@pytest.mark.django_db
def test_only_author_or_privileged_modify(comment_service, board, card, manager, member, member2):
    board.members.add(member2)
    comment = comment_service.add_comment(card_id=card.id, text="hi", actor=member)

    # another board member is not the author
    with pytest.raises(PermissionDeniedError):
        comment_service.update_comment(comment_id=comment.id, text="hacked", actor=member2)
    with pytest.raises(PermissionDeniedError):
        comment_service.delete_comment(comment_id=comment.id, actor=member2)

    assert comment_service.update_comment(comment_id=comment.id, text="edited", actor=member).text == "edited"
    comment_service.delete_comment(comment_id=comment.id, actor=manager)
    assert not Comment.objects.exists()
