import pytest
from datetime import datetime, timedelta, timezone as tz

from core.errors import NotFoundError, PermissionDeniedError, ValidationFailedError
from projects.models import Sprint
from projects.services.project import ProjectService
from projects.services.sprint import SprintService

START = datetime(2025, 3, 1, 9, 0, tzinfo=tz.utc)


@pytest.fixture
def project(config, ceo, member):
    """Project whose designated manager is a plain member"""
    return ProjectService(config).create_project(actor=ceo, name="Apollo", project_manager=member.id)


@pytest.mark.django_db
@pytest.mark.parametrize("actor_name", ["ceo", "manager", "member"])
def test_privileged_or_project_manager_can_create(request, project, actor_name):
    actor = request.getfixturevalue(actor_name)
    sprint = SprintService().create_sprint(
        project_id=project.id, actor=actor, name="S1", start_time=START, end_time=START + timedelta(days=14),
    )
    assert sprint.status == Sprint.SprintStatus.TODO
    assert sprint.created_by_id == actor.id


@pytest.mark.django_db
def test_other_member_cannot_manage(project, member2, member):
    with pytest.raises(PermissionDeniedError):
        SprintService().create_sprint(
            project_id=project.id, actor=member2, name="S1", start_time=START, end_time=START + timedelta(days=1),
        )
    sprint = SprintService().create_sprint(
        project_id=project.id, actor=member, name="S1", start_time=START, end_time=START + timedelta(days=1),
    )
    with pytest.raises(PermissionDeniedError):
        SprintService().update_sprint(sprint_id=sprint.id, actor=member2, name="x")
    with pytest.raises(PermissionDeniedError):
        SprintService().delete_sprint(sprint_id=sprint.id, actor=member2)


@pytest.mark.django_db
@pytest.mark.parametrize("end", [START, START - timedelta(hours=1)])
def test_end_must_follow_start(project, manager, end):
    with pytest.raises(ValidationFailedError) as exc:
        SprintService().create_sprint(project_id=project.id, actor=manager, name="S", start_time=START, end_time=end)
    assert exc.value.message == "End time must be after start time"


@pytest.mark.django_db
def test_update_checks_order_only_when_both_given(project, manager):
    service = SprintService()
    sprint = service.create_sprint(
        project_id=project.id, actor=manager, name="S", start_time=START, end_time=START + timedelta(days=7),
    )

    # a lone start_time past the end is accepted as-is
    moved = service.update_sprint(sprint_id=sprint.id, actor=manager, start_time=START + timedelta(days=10))
    assert moved.start_time == START + timedelta(days=10)

    with pytest.raises(ValidationFailedError):
        service.update_sprint(
            sprint_id=sprint.id, actor=manager, start_time=START + timedelta(days=2), end_time=START + timedelta(days=1),
        )

    done = service.update_sprint(sprint_id=sprint.id, actor=manager, status=Sprint.SprintStatus.COMPLETE)
    assert done.status == Sprint.SprintStatus.COMPLETE


@pytest.mark.django_db
def test_find_all_by_project_and_delete(project, manager):
    service = SprintService()
    s2 = service.create_sprint(
        project_id=project.id, actor=manager, name="S2",
        start_time=START + timedelta(days=14), end_time=START + timedelta(days=28),
    )
    s1 = service.create_sprint(
        project_id=project.id, actor=manager, name="S1", start_time=START, end_time=START + timedelta(days=14),
    )
    assert [s.id for s in service.find_all_by_project(project_id=project.id)] == [s1.id, s2.id]

    service.delete_sprint(sprint_id=s1.id, actor=manager)
    with pytest.raises(NotFoundError):
        service.get_sprint(sprint_id=s1.id)


@pytest.mark.django_db
def test_sprint_endpoints(api, project, member, member2):
    payload = {"name": "S1", "start_time": "2025-03-01T09:00:00Z", "end_time": "2025-03-15T09:00:00Z"}
    r1 = api(member).post(f"/project/{project.id}/sprints/", payload, format="json")
    assert r1.status_code == 201, r1.content

    r2 = api(member2).post(f"/project/{project.id}/sprints/", payload, format="json")
    assert r2.status_code == 403

    # any authenticated user can read the project's sprints
    r3 = api(member2).get(f"/project/{project.id}/")
    assert r3.status_code == 200
    assert [s["name"] for s in r3.json()["sprints"]] == ["S1"]
