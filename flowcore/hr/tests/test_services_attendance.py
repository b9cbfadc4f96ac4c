import pytest
from datetime import date, datetime, timedelta, timezone as tz
from unittest.mock import patch

from core.errors import PermissionDeniedError, ValidationFailedError
from hr.models import Attendance, LeaveRequest
from hr.services.attendance_service import AttendanceService

DAY = datetime(2025, 9, 18, 8, 0, tzinfo=tz.utc)


def _clock_at(service, user, status, when):
    with patch("hr.services.attendance_service.timezone.now", return_value=when):
        return service.clock(actor=user, status=status)


@pytest.mark.django_db
def test_sessions_sum_into_working_hours(member):
    service = AttendanceService()
    _clock_at(service, member, "clocked_in", DAY)
    _clock_at(service, member, "clocked_out", DAY + timedelta(hours=4))
    _clock_at(service, member, "clocked_in", DAY + timedelta(hours=5))
    result = _clock_at(service, member, "clocked_out", DAY + timedelta(hours=8, minutes=30))
    assert result == {"message": "Successfully clocked out"}

    att = Attendance.objects.get(user=member)
    assert att.date == date(2025, 9, 18)
    assert att.status == Attendance.Status.CLOCKED_OUT
    assert att.working_hours == pytest.approx(7.5)
    assert [s.session_hours for s in att.sessions.all()] == [pytest.approx(4), pytest.approx(3.5)]


@pytest.mark.django_db
def test_double_clock_in_fails(member):
    service = AttendanceService()
    _clock_at(service, member, "clocked_in", DAY)
    with pytest.raises(ValidationFailedError) as exc:
        _clock_at(service, member, "clocked_in", DAY + timedelta(hours=1))
    assert exc.value.message == "Must clock out before starting a new session"
    assert Attendance.objects.get(user=member).sessions.count() == 1


@pytest.mark.django_db
def test_clock_out_without_open_session_fails(member):
    service = AttendanceService()
    with pytest.raises(ValidationFailedError) as exc:
        _clock_at(service, member, "clocked_out", DAY)
    assert exc.value.message == "Must clock in before clocking out"
    assert not Attendance.objects.exists()

    _clock_at(service, member, "clocked_in", DAY)
    _clock_at(service, member, "clocked_out", DAY + timedelta(hours=1))
    with pytest.raises(ValidationFailedError):
        _clock_at(service, member, "clocked_out", DAY + timedelta(hours=2))


@pytest.mark.django_db
def test_ceo_cannot_clock(ceo):
    with pytest.raises(PermissionDeniedError):
        AttendanceService().clock(actor=ceo, status="clocked_in")


@pytest.mark.django_db
def test_approved_leave_blocks_clock_in(member):
    LeaveRequest.objects.create(
        user=member, type="sick", status=LeaveRequest.Status.APPROVED,
        reason="flu", quantity=2, start_date=date(2025, 9, 17),
    )
    with pytest.raises(ValidationFailedError) as exc:
        _clock_at(AttendanceService(), member, "clocked_in", DAY)
    assert exc.value.message == "Cannot clock in on a day with an approved leave"

    # the day after the leave is free again
    _clock_at(AttendanceService(), member, "clocked_in", DAY + timedelta(days=1))


@pytest.mark.django_db
def test_pending_leave_does_not_block(member):
    LeaveRequest.objects.create(user=member, type="sick", reason="flu", quantity=5, start_date=date(2025, 9, 18))
    _clock_at(AttendanceService(), member, "clocked_in", DAY)


@pytest.mark.django_db
def test_report(member):
    service = AttendanceService()
    _clock_at(service, member, "clocked_in", DAY)
    _clock_at(service, member, "clocked_out", DAY + timedelta(hours=2))
    Attendance.objects.create(user=member, date=date(2025, 9, 19), status=Attendance.Status.ABSENT)
    LeaveRequest.objects.create(
        user=member, type="annual", status=LeaveRequest.Status.APPROVED,
        reason="trip", quantity=5, start_date=date(2025, 9, 20),
    )

    report = service.report(actor=member, start_date=date(2025, 9, 18), end_date=date(2025, 9, 22))
    assert [a.date for a in report["attendances"]] == [date(2025, 9, 18), date(2025, 9, 19)]
    assert report["absent_days"] == 1
    assert report["approved_leave_days"] == 3

    with pytest.raises(ValidationFailedError):
        service.report(actor=member, start_date=date(2025, 9, 22), end_date=date(2025, 9, 18))


@pytest.mark.django_db
def test_clock_endpoint(api, member):
    client = api(member)
    r1 = client.post("/attendance/inroll/", {"status": "clocked_in", "notes": "on site"}, format="json")
    assert r1.status_code == 200, r1.content
    r2 = client.post("/attendance/inroll/", {"status": "clocked_in"}, format="json")
    assert r2.status_code == 400
    assert r2.json() == {"detail": "Must clock out before starting a new session"}
    r3 = client.post("/attendance/inroll/", {"status": "absent"}, format="json")
    assert r3.status_code == 400
