import pytest
from dataclasses import replace
from unittest.mock import MagicMock

from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone

from boards.models import Card
from boards.services.card import CardService
from core.errors import NotFoundError, PermissionDeniedError, ValidationFailedError


def _image(name="a.png", size=10, content_type="image/png"):
    return SimpleUploadedFile(name, b"x" * size, content_type=content_type)


@pytest.mark.django_db
def test_card_numbers_increase_per_board(card_service, board_service, board, board_list, manager, member):
    first = card_service.create_card(list_id=board_list.id, name="one", actor=member)
    second = card_service.create_card(list_id=board_list.id, name="two", actor=member)
    assert (first.card_number, second.card_number) == (1, 2)

    # another list on the same board shares the sequence
    other_list = board_service.create_list(board_id=board.id, name="Done", actor=manager)
    third = card_service.create_card(list_id=other_list.id, name="three", actor=manager)
    assert third.card_number == 3

    # numbers are never reused after deletion
    card_service.delete_card(card_id=third.id, actor=manager)
    fourth = card_service.create_card(list_id=other_list.id, name="four", actor=manager)
    assert fourth.card_number == 4
    board.refresh_from_db()
    assert board.last_card_number == 4


@pytest.mark.django_db
def test_card_numbers_are_board_scoped(card_service, board_service, board_list, manager, member):
    card_service.create_card(list_id=board_list.id, name="one", actor=member)
    other = board_service.create_board(name="Other", actor=manager)
    other_list = board_service.create_list(board_id=other.id, name="L", actor=manager)
    assert card_service.create_card(list_id=other_list.id, name="x", actor=manager).card_number == 1


@pytest.mark.django_db
def test_atomic_card_numbers(config, board_list, member):
    service = CardService(replace(config, atomic_card_numbers=True))
    numbers = [service.create_card(list_id=board_list.id, name=str(i), actor=member).card_number for i in range(3)]
    assert numbers == [1, 2, 3]


@pytest.mark.django_db
def test_non_member_cannot_touch_cards(card_service, board_list, member, member2):
    with pytest.raises(PermissionDeniedError):
        card_service.create_card(list_id=board_list.id, name="x", actor=member2)
    card = card_service.create_card(list_id=board_list.id, name="x", actor=member)
    with pytest.raises(PermissionDeniedError):
        card_service.get_card_details(card_id=card.id, actor=member2)
    with pytest.raises(PermissionDeniedError):
        card_service.delete_card(card_id=card.id, actor=member2)


@pytest.mark.django_db
def test_assign_only_board_members(card_service, board_list, manager, member, member2, mailoutbox):
    card = card_service.create_card(list_id=board_list.id, name="x", actor=member)

    card_service.add_members(card_id=card.id, user_ids=[member.id], actor=manager)
    assert list(card.assigned_users.values_list("id", flat=True)) == [member.id]
    assert len(mailoutbox) == 1
    assert mailoutbox[0].to == [member.email]

    # member2 is not on the board: nothing is assigned, not even the valid user
    with pytest.raises(ValidationFailedError):
        card_service.add_members(card_id=card.id, user_ids=[manager.id, member2.id], actor=manager)
    assert list(card.assigned_users.values_list("id", flat=True)) == [member.id]
    assert len(mailoutbox) == 1


@pytest.mark.django_db
def test_reassigning_notifies_only_new_assignees(card_service, board_list, manager, member, mailoutbox):
    card = card_service.create_card(list_id=board_list.id, name="x", actor=member)
    card_service.add_members(card_id=card.id, user_ids=[member.id], actor=manager)
    mailoutbox.clear()

    card_service.update_card(card_id=card.id, actor=manager, assigned_users=[member.id, manager.id])
    assert [m.to for m in mailoutbox] == [[manager.email]]
    assert set(card.assigned_users.values_list("id", flat=True)) == {member.id, manager.id}


@pytest.mark.django_db
def test_update_card_with_non_member_leaves_assignees(card_service, board_list, manager, member, member2):
    card = card_service.create_card(list_id=board_list.id, name="x", actor=member)
    card_service.add_members(card_id=card.id, user_ids=[member.id], actor=manager)

    with pytest.raises(ValidationFailedError):
        card_service.update_card(card_id=card.id, actor=manager, assigned_users=[member2.id], name="renamed")
    card.refresh_from_db()
    assert card.name == "x"
    assert list(card.assigned_users.values_list("id", flat=True)) == [member.id]


@pytest.mark.django_db
def test_remove_members_without_notification(card_service, board_list, manager, member, mailoutbox):
    card = card_service.create_card(list_id=board_list.id, name="x", actor=member)
    card_service.add_members(card_id=card.id, user_ids=[member.id, manager.id], actor=manager)
    mailoutbox.clear()

    card_service.remove_members(card_id=card.id, user_ids=[member.id], actor=manager)
    assert list(card.assigned_users.values_list("id", flat=True)) == [manager.id]
    assert mailoutbox == []


@pytest.mark.django_db
def test_status_change_notifies_assignees(card_service, board_list, manager, member, mailoutbox):
    card = card_service.create_card(list_id=board_list.id, name="x", actor=member)
    card_service.add_members(card_id=card.id, user_ids=[member.id, manager.id], actor=manager)
    mailoutbox.clear()

    card_service.update_card(card_id=card.id, actor=member, status=Card.CardStatus.PENDING)
    assert mailoutbox == []

    card_service.update_card(card_id=card.id, actor=member, status=Card.CardStatus.IN_PROGRESS)
    assert sorted(m.to[0] for m in mailoutbox) == sorted([member.email, manager.email])
    assert "moved from Pending to In Progress" in mailoutbox[0].body


@pytest.mark.django_db
def test_move_card_within_board_only(card_service, board_service, board, board_list, manager, member):
    card = card_service.create_card(list_id=board_list.id, name="x", actor=member)
    done = board_service.create_list(board_id=board.id, name="Done", actor=manager)
    moved = card_service.update_card(card_id=card.id, actor=member, list_id=done.id)
    assert moved.board_list_id == done.id

    foreign_board = board_service.create_board(name="Other", actor=manager)
    foreign = board_service.create_list(board_id=foreign_board.id, name="L", actor=manager)
    with pytest.raises(ValidationFailedError):
        card_service.update_card(card_id=card.id, actor=manager, list_id=foreign.id)
    with pytest.raises(NotFoundError):
        card_service.update_card(card_id=card.id, actor=manager, list_id=987654)


@pytest.mark.django_db
def test_due_date_can_be_cleared(card_service, board_list, member):
    card = card_service.create_card(list_id=board_list.id, name="x", actor=member, due_date=timezone.now())
    card_service.update_card(card_id=card.id, actor=member, name="y")
    card.refresh_from_db()
    assert card.due_date is not None

    card_service.update_card(card_id=card.id, actor=member, due_date=None)
    card.refresh_from_db()
    assert card.due_date is None


# ---------- attachments ----------
@pytest.mark.django_db
def test_add_attachments_uploads_and_appends(config, board_list, member):
    storage = MagicMock()
    storage.upload.side_effect = ["http://cdn/1.png", "http://cdn/2.png"]
    service = CardService(config, storage=storage)
    card = service.create_card(list_id=board_list.id, name="x", actor=member)

    service.add_attachments(card_id=card.id, files=[_image("1.png"), _image("2.png")], actor=member)
    card.refresh_from_db()
    assert card.attachments == ["http://cdn/1.png", "http://cdn/2.png"]
    assert storage.upload.call_args.kwargs["folder"] == f"boards/{board_list.board_id}/cards/{card.id}"


@pytest.mark.django_db
@pytest.mark.parametrize("upload", [
    lambda: _image("doc.pdf", content_type="application/pdf"),
    lambda: _image("big.png", size=2048),
])
def test_attachment_type_and_size_checked_before_upload(config, board_list, member, upload):
    storage = MagicMock()
    service = CardService(replace(config, max_attachment_bytes=1024), storage=storage)
    card = service.create_card(list_id=board_list.id, name="x", actor=member)

    with pytest.raises(ValidationFailedError):
        service.add_attachments(card_id=card.id, files=[_image("ok.png"), upload()], actor=member)
    storage.upload.assert_not_called()


@pytest.mark.django_db
def test_attachment_count_limit(config, board_list, member):
    storage = MagicMock()
    service = CardService(replace(config, max_attachments_per_card=2), storage=storage)
    card = service.create_card(list_id=board_list.id, name="x", actor=member)
    Card.objects.filter(id=card.id).update(attachments=["http://cdn/a.png"])

    with pytest.raises(ValidationFailedError):
        service.add_attachments(card_id=card.id, files=[_image("1.png"), _image("2.png")], actor=member)
    storage.upload.assert_not_called()


@pytest.mark.django_db
def test_remove_attachments_requires_exact_match(card_service, board_list, member):
    card = card_service.create_card(list_id=board_list.id, name="x", actor=member)
    Card.objects.filter(id=card.id).update(attachments=["http://cdn/a.png", "http://cdn/b.png"])

    with pytest.raises(ValidationFailedError) as exc:
        card_service.remove_attachments(card_id=card.id, urls=["http://cdn/a.png", "http://cdn/zzz.png"], actor=member)
    assert exc.value.message == "Attachment not found on card"
    card.refresh_from_db()
    assert len(card.attachments) == 2

    card_service.remove_attachments(card_id=card.id, urls=["http://cdn/a.png"], actor=member)
    card.refresh_from_db()
    assert card.attachments == ["http://cdn/b.png"]
