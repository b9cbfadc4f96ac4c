import pytest
from dataclasses import replace
from datetime import datetime, timedelta, timezone as tz
from unittest.mock import patch

from boards.models import Board, BoardInvitation, BoardList
from core.errors import NotFoundError, PermissionDeniedError, UpstreamError, ValidationFailedError
from projects.models import Project, Sprint
from projects.services.project import ProjectService

START = datetime(2025, 1, 1, tzinfo=tz.utc)


@pytest.fixture
def service(config):
    return ProjectService(config)


@pytest.mark.django_db
def test_create_project_creates_board_with_invitations(service, manager, member, member2, mailoutbox):
    project = service.create_project(actor=manager, name="Apollo", frontend_devs=[member.id, member2.id])

    assert project.status == Project.ProjectStatus.TODO
    board = project.board
    assert board.name == "Apollo"
    # only the creator is an actual member; developers wait on their invitation
    assert list(board.members.values_list("id", flat=True)) == [manager.id]
    assert set(board.invited_users.values_list("id", flat=True)) == {member.id, member2.id}
    assert BoardInvitation.objects.filter(board=board).count() == 2
    assert len(mailoutbox) == 2


@pytest.mark.django_db
def test_project_manager_is_invited_too(service, ceo, manager, member):
    project = service.create_project(actor=ceo, name="P", project_manager=manager.id, backend_devs=[member.id])
    assert project.project_manager_id == manager.id
    assert set(project.board.invited_users.values_list("id", flat=True)) == {manager.id, member.id}


@pytest.mark.django_db
def test_member_cannot_create_project(service, member):
    with pytest.raises(PermissionDeniedError):
        service.create_project(actor=member, name="P")


@pytest.mark.django_db
@pytest.mark.parametrize("devs,message", [
    (lambda m: [m.id, m.id], "Duplicate user IDs provided in frontendDevs"),
    (lambda m: [m.id, 99999], "Invalid user IDs provided in frontendDevs"),
])
def test_create_validates_developer_ids(service, manager, member, devs, message):
    with pytest.raises(ValidationFailedError) as exc:
        service.create_project(actor=manager, name="P", frontend_devs=devs(member))
    assert exc.value.message == message
    assert not Project.objects.exists()


@pytest.mark.django_db
def test_failed_board_setup_rolls_back_project(service, manager, member):
    with patch("core.utils.notify.EmailMultiAlternatives.send", side_effect=OSError("smtp down")):
        with pytest.raises(UpstreamError):
            service.create_project(actor=manager, name="P", frontend_devs=[member.id])
    assert not Project.objects.exists()
    assert not Board.objects.exists()


@pytest.mark.django_db
def test_find_my_projects(service, ceo, manager, member, member2):
    p1 = service.create_project(actor=manager, name="A")
    p2 = service.create_project(actor=ceo, name="B", backend_devs=[member.id])
    p3 = service.create_project(actor=ceo, name="C", project_manager=member.id, frontend_devs=[member.id])
    service.create_project(actor=ceo, name="D")

    assert {p.id for p in service.find_my_projects(actor=member)} == {p2.id, p3.id}
    assert {p.id for p in service.find_my_projects(actor=manager)} == {p1.id}
    assert list(service.find_my_projects(actor=member2)) == []
    with pytest.raises(PermissionDeniedError):
        service.find_all(actor=member)
    assert service.find_all(actor=manager).count() == 4


@pytest.mark.django_db
def test_update_is_whitelisted(service, manager, member):
    project = service.create_project(actor=manager, name="A")
    updated = service.update_project(
        project_id=project.id, actor=manager,
        status=Project.ProjectStatus.IN_PROGRESS, backend_devs=[member.id], board=None,
    )
    assert updated.status == Project.ProjectStatus.IN_PROGRESS
    assert updated.name == "A"
    assert updated.board_id == project.board_id
    assert [u.id for u in updated.backend_devs.all()] == [member.id]

    with pytest.raises(ValidationFailedError):
        service.update_project(project_id=project.id, actor=manager, status="Archived")


@pytest.mark.django_db
def test_add_members_skips_existing_and_invites_to_board(service, manager, member, member2, mailoutbox):
    project = service.create_project(actor=manager, name="A", frontend_devs=[member.id])
    mailoutbox.clear()

    service.add_members(project_id=project.id, actor=manager, frontend_devs=[member.id, member2.id])

    assert set(project.frontend_devs.values_list("id", flat=True)) == {member.id, member2.id}
    # one "added" mail and one board invitation for member2 only
    assert sorted(m.subject for m in mailoutbox) == sorted(["Added to Project: A", "Invitation to join board: A"])
    assert all(m.to == [member2.email] for m in mailoutbox)
    assert project.board.invited_users.filter(id=member2.id).exists()


@pytest.mark.django_db
def test_add_members_validates_batch(service, manager, member):
    project = service.create_project(actor=manager, name="A")
    with pytest.raises(ValidationFailedError):
        service.add_members(project_id=project.id, actor=manager, backend_devs=[member.id, member.id])
    with pytest.raises(ValidationFailedError):
        service.add_members(project_id=project.id, actor=manager, backend_devs=[12345])
    assert not project.backend_devs.exists()


@pytest.mark.django_db
def test_remove_members(service, manager, member, member2, mailoutbox):
    project = service.create_project(actor=manager, name="A", backend_devs=[member.id])
    mailoutbox.clear()

    service.remove_members(project_id=project.id, actor=manager, backend_devs=[member.id, member2.id])
    assert not project.backend_devs.exists()
    assert [m.to for m in mailoutbox] == [[member.email]]
    assert mailoutbox[0].subject == "Removed from Project: A"


@pytest.mark.django_db
def test_delete_without_cascade_keeps_board_and_sprints(service, manager):
    project = service.create_project(actor=manager, name="A")
    board_id = project.board_id
    sprint = Sprint.objects.create(
        project=project, name="S1", start_time=START, end_time=START + timedelta(days=7), created_by=manager,
    )

    service.delete_project(project_id=project.id, actor=manager)
    assert not Project.objects.exists()
    assert Board.objects.filter(id=board_id).exists()
    sprint.refresh_from_db()
    assert sprint.project_id is None


@pytest.mark.django_db
def test_delete_with_cascade(config, manager):
    service = ProjectService(replace(config, project_delete_cascade=True))
    project = service.create_project(actor=manager, name="A")
    BoardList.objects.create(board=project.board, name="L", created_by=manager)
    Sprint.objects.create(
        project=project, name="S1", start_time=START, end_time=START + timedelta(days=7), created_by=manager,
    )

    service.delete_project(project_id=project.id, actor=manager)
    assert not Board.objects.exists()
    assert not BoardList.objects.exists()
    assert not Sprint.objects.exists()


@pytest.mark.django_db
def test_unknown_project(service, manager):
    with pytest.raises(NotFoundError):
        service.delete_project(project_id=4040, actor=manager)
