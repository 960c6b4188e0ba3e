from __future__ import annotations

import pytest

from edumatrix.attendance.model import AttendanceRecord
from edumatrix.attendance.service import AttendanceService
from edumatrix.core.enums import AttendanceStatus
from edumatrix.core.exceptions import NotFoundError, PersistenceError, ValidationError


def rec(student_id: str, status, *, date: str = "2024-01-10", remarks: str = "") -> AttendanceRecord:
    return AttendanceRecord(record_id="", student_id=student_id, date=date, status=status, remarks=remarks)


class FailingAttendanceRepo:
    def __init__(self):
        self.calls = 0

    def upsert_many(self, records):
        self.calls += 1
        raise PersistenceError("Storage unavailable")


def test_save_same_batch_twice_is_idempotent(container):
    svc = container.attendance_service
    batch = [rec("s1", AttendanceStatus.PRESENT), rec("s2", AttendanceStatus.ABSENT, remarks="Fever")]

    svc.save_attendance(batch)
    once = list(container.attendance_repo.list_all())
    svc.save_attendance(batch)

    assert list(container.attendance_repo.list_all()) == once


def test_second_save_replaces_status(container):
    svc = container.attendance_service

    svc.save_attendance([rec("s1", AttendanceStatus.PRESENT)])
    svc.save_attendance([rec("s1", AttendanceStatus.LEAVE, remarks="Sick Leave")])

    rows = svc.get_attendance("2024-01-10", ["s1"])
    assert len(rows) == 1
    assert rows[0].status == AttendanceStatus.LEAVE
    assert rows[0].remarks == "Sick Leave"


def test_later_record_in_batch_wins(container):
    svc = container.attendance_service

    saved = svc.save_attendance([rec("s1", AttendanceStatus.PRESENT), rec("s1", AttendanceStatus.ABSENT)])

    assert saved == 2
    rows = svc.get_attendance("2024-01-10", ["s1"])
    assert [r.status for r in rows] == [AttendanceStatus.ABSENT]


def test_record_id_is_derived_from_key(container):
    svc = container.attendance_service
    svc.save_attendance([AttendanceRecord("whatever", "s3", "2024-01-09", AttendanceStatus.PRESENT)])

    (row,) = svc.get_attendance("2024-01-09", ["s3"])
    assert row.record_id == "2024-01-09_s3"


def test_status_accepts_value_or_name(container):
    svc = container.attendance_service
    svc.save_attendance([rec("s1", "Absent"), rec("s2", "leave")])

    rows = svc.get_attendance("2024-01-10", ["s1", "s2"])
    assert [r.status for r in rows] == [AttendanceStatus.ABSENT, AttendanceStatus.LEAVE]


def test_invalid_record_leaves_store_untouched(container):
    svc = container.attendance_service

    with pytest.raises(ValidationError):
        svc.save_attendance([rec("s1", AttendanceStatus.PRESENT), rec("s2", "Late")])

    assert container.attendance_repo.list_all() == []


@pytest.mark.parametrize("bad_date", ["2024-1-10", "2024-02-30", "10/01/2024", ""])
def test_malformed_date_rejected(container, bad_date):
    with pytest.raises(ValidationError):
        container.attendance_service.save_attendance([rec("s1", AttendanceStatus.PRESENT, date=bad_date)])


def test_empty_student_id_rejected(container):
    with pytest.raises(ValidationError):
        container.attendance_service.save_attendance([rec("  ", AttendanceStatus.PRESENT)])


def test_unknown_student_rejected(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.save_attendance([rec("s99", AttendanceStatus.PRESENT)])


def test_get_attendance_filters_by_date_and_ids(container):
    svc = container.attendance_service
    svc.save_attendance(
        [
            rec("s1", AttendanceStatus.PRESENT),
            rec("s2", AttendanceStatus.ABSENT),
            rec("s3", AttendanceStatus.PRESENT),
            rec("s1", AttendanceStatus.LEAVE, date="2024-01-09"),
        ]
    )

    rows = svc.get_attendance("2024-01-10", ["s2", "s1", "s1"])

    assert [r.student_id for r in rows] == ["s1", "s2"]


def test_replaced_record_moves_to_end(container):
    svc = container.attendance_service
    svc.save_attendance([rec("s1", AttendanceStatus.PRESENT), rec("s2", AttendanceStatus.PRESENT)])
    svc.save_attendance([rec("s1", AttendanceStatus.ABSENT)])

    rows = svc.get_attendance("2024-01-10", ["s1", "s2"])

    assert [r.student_id for r in rows] == ["s2", "s1"]


def test_get_attendance_rejects_bad_date(container):
    with pytest.raises(ValidationError):
        container.attendance_service.get_attendance("yesterday", ["s1"])


def test_history_is_newest_first(container):
    svc = container.attendance_service
    svc.save_attendance(
        [
            rec("s1", AttendanceStatus.PRESENT, date="2024-01-08"),
            rec("s1", AttendanceStatus.ABSENT, date="2024-01-10"),
            rec("s1", AttendanceStatus.LEAVE, date="2023-12-29"),
            rec("s1", AttendanceStatus.PRESENT, date="2024-01-09"),
            rec("s2", AttendanceStatus.PRESENT, date="2024-01-11"),
        ]
    )

    dates = [r.date for r in svc.get_student_attendance_history("s1")]

    assert dates == ["2024-01-10", "2024-01-09", "2024-01-08", "2023-12-29"]
    assert all(a >= b for a, b in zip(dates, dates[1:]))


def test_history_unknown_student(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.get_student_attendance_history("nope")


def test_persistence_failure_propagates(container):
    repo = FailingAttendanceRepo()
    svc = AttendanceService(repo, container.students_repo)

    with pytest.raises(PersistenceError):
        svc.save_attendance([rec("s1", AttendanceStatus.PRESENT)])
    assert repo.calls == 1


def test_empty_batch_is_noop(container):
    assert container.attendance_service.save_attendance([]) == 0
    assert container.attendance_repo.list_all() == []
