import pytest
from datetime import timedelta
from django.utils import timezone

from boards.models import Board, BoardInvitation, BoardList, Card
from core.errors import NotFoundError, PermissionDeniedError, ValidationFailedError


@pytest.mark.django_db
def test_creator_is_member(board_service, manager):
    board = board_service.create_board(name="B", actor=manager)
    assert list(board.members.values_list("id", flat=True)) == [manager.id]
    assert board.last_card_number == 0


@pytest.mark.django_db
def test_member_cannot_create_board(board_service, member):
    with pytest.raises(PermissionDeniedError):
        board_service.create_board(name="B", actor=member)
    assert Board.objects.count() == 0


@pytest.mark.django_db
def test_add_users_invites_and_mails(board_service, manager, member, member2, mailoutbox):
    board = board_service.create_board(name="B", actor=manager)
    result = board_service.add_users(board_id=board.id, user_ids=[member.id, member2.id], actor=manager)

    assert result == {"invited": [member.id, member2.id], "skipped": []}
    assert set(board.invited_users.values_list("id", flat=True)) == {member.id, member2.id}
    assert not board.members.filter(id=member.id).exists()

    inv = BoardInvitation.objects.get(board=board, user=member)
    assert len(inv.token) == 32
    delta = inv.expires_at - timezone.now()
    assert timedelta(hours=23) < delta <= timedelta(hours=24)
    assert len(mailoutbox) == 2
    assert f"/trello-board/accept-invitation/{board.id}/{inv.token}/" in mailoutbox[0].body


@pytest.mark.django_db
def test_add_users_is_idempotent(board_service, board, manager, member, member2, mailoutbox):
    board_service.add_users(board_id=board.id, user_ids=[member2.id], actor=manager)
    # member is already a board member, member2 already invited, manager is the creator
    result = board_service.add_users(board_id=board.id, user_ids=[member.id, member2.id, manager.id], actor=manager)

    assert result["invited"] == []
    assert sorted(result["skipped"]) == sorted([member.id, member2.id, manager.id])
    assert BoardInvitation.objects.filter(board=board).count() == 1
    assert len(mailoutbox) == 1


@pytest.mark.django_db
def test_add_users_rejects_duplicates_and_unknown(board_service, board, manager, member2):
    with pytest.raises(ValidationFailedError) as exc:
        board_service.add_users(board_id=board.id, user_ids=[member2.id, member2.id], actor=manager)
    assert exc.value.message == "Duplicate user IDs provided"

    with pytest.raises(ValidationFailedError) as exc:
        board_service.add_users(board_id=board.id, user_ids=[member2.id, 99999], actor=manager)
    assert exc.value.message == "Invalid user IDs provided"
    assert not BoardInvitation.objects.exists()


@pytest.mark.django_db
def test_add_users_requires_privileged_role(board_service, board, member, member2):
    with pytest.raises(PermissionDeniedError):
        board_service.add_users(board_id=board.id, user_ids=[member2.id], actor=member)


@pytest.mark.django_db
def test_accept_invitation_once(board_service, board, manager, member2):
    board_service.add_users(board_id=board.id, user_ids=[member2.id], actor=manager)
    token = BoardInvitation.objects.get(user=member2).token

    board_service.accept_invitation(board_id=board.id, token=token)
    assert board.members.filter(id=member2.id).exists()
    assert not board.invited_users.filter(id=member2.id).exists()
    assert not BoardInvitation.objects.exists()

    with pytest.raises(ValidationFailedError) as exc:
        board_service.accept_invitation(board_id=board.id, token=token)
    assert exc.value.message == "Invalid or expired invitation token"


@pytest.mark.django_db
def test_expired_and_wrong_tokens_look_the_same(board_service, board, manager, member2):
    board_service.add_users(board_id=board.id, user_ids=[member2.id], actor=manager)
    inv = BoardInvitation.objects.get(user=member2)
    BoardInvitation.objects.filter(id=inv.id).update(expires_at=timezone.now() - timedelta(seconds=1))

    messages = set()
    for token in (inv.token, "f" * 32):
        with pytest.raises(ValidationFailedError) as exc:
            board_service.accept_invitation(board_id=board.id, token=token)
        messages.add(exc.value.message)
    assert messages == {"Invalid or expired invitation token"}
    assert not board.members.filter(id=member2.id).exists()
    # expired invitations are left in place
    assert BoardInvitation.objects.filter(id=inv.id).exists()


@pytest.mark.django_db
def test_token_is_scoped_to_its_board(board_service, board, manager, member2):
    other = board_service.create_board(name="Other", actor=manager)
    board_service.add_users(board_id=board.id, user_ids=[member2.id], actor=manager)
    token = BoardInvitation.objects.get(user=member2).token

    with pytest.raises(ValidationFailedError):
        board_service.accept_invitation(board_id=other.id, token=token)


@pytest.mark.django_db
def test_lists_require_membership_or_privilege(board_service, board, member, member2, ceo):
    lst = board_service.create_list(board_id=board.id, name="Doing", actor=member)
    assert lst.board_id == board.id

    with pytest.raises(PermissionDeniedError):
        board_service.create_list(board_id=board.id, name="X", actor=member2)
    with pytest.raises(PermissionDeniedError):
        board_service.update_list(list_id=lst.id, name="X", actor=member2)

    # CEO is not a member but privileged
    renamed = board_service.update_list(list_id=lst.id, name="In progress", actor=ceo)
    assert renamed.name == "In progress"


@pytest.mark.django_db
def test_delete_list_removes_cards(board_service, card_service, board_list, member):
    card_service.create_card(list_id=board_list.id, name="c", actor=member)
    board_service.delete_list(list_id=board_list.id, actor=member)
    assert not BoardList.objects.exists()
    assert not Card.objects.exists()


@pytest.mark.django_db
def test_board_views(board_service, card_service, board, board_list, member, member2):
    card_service.create_card(list_id=board_list.id, name="c1", actor=member)
    lists = list(board_service.get_board_lists(board_id=board.id, actor=member))
    assert [c.name for c in lists[0].cards.all()] == ["c1"]

    assert {u.id for u in board_service.get_board_members(board_id=board.id, actor=member)} == {
        board.created_by_id, member.id,
    }
    assert [b.id for b in board_service.get_my_boards(actor=member)] == [board.id]

    with pytest.raises(PermissionDeniedError):
        board_service.get_board_lists(board_id=board.id, actor=member2)


@pytest.mark.django_db
def test_unknown_board(board_service, manager):
    with pytest.raises(NotFoundError):
        board_service.create_list(board_id=424242, name="x", actor=manager)
