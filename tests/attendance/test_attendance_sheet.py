from __future__ import annotations

import pytest

from edumatrix.attendance.model import AttendanceRecord, SheetEntry
from edumatrix.attendance.service import entry_from_payload, record_from_payload
from edumatrix.core.enums import AttendanceStatus
from edumatrix.core.exceptions import ValidationError


def test_sheet_defaults_to_present_for_unrecorded_students(container, students):
    sheet = container.attendance_service.build_sheet("2024-01-10", students)

    assert sheet.date == "2024-01-10"
    assert len(sheet.rows) == 8
    assert all(r.status == AttendanceStatus.PRESENT and not r.recorded for r in sheet.rows)
    assert all(r.remarks == "" for r in sheet.rows)
    assert (sheet.tally.present, sheet.tally.absent, sheet.tally.leave) == (8, 0, 0)


def test_sheet_uses_stored_status_and_remarks(container, students):
    svc = container.attendance_service
    svc.save_attendance(
        [
            AttendanceRecord("", "s2", "2024-01-10", AttendanceStatus.ABSENT),
            AttendanceRecord("", "s5", "2024-01-10", AttendanceStatus.LEAVE, "Sick Leave"),
        ]
    )

    sheet = svc.build_sheet("2024-01-10", students)
    by_id = {r.student_id: r for r in sheet.rows}

    assert by_id["s2"].status == AttendanceStatus.ABSENT and by_id["s2"].recorded
    assert by_id["s5"].remarks == "Sick Leave"
    assert (sheet.tally.present, sheet.tally.absent, sheet.tally.leave) == (6, 1, 1)


def test_sheet_without_date_uses_today(container, students):
    sheet = container.attendance_service.build_sheet(None, students)
    assert sheet.date == "2024-01-10"


def test_save_sheet_writes_one_record_per_entry(container):
    svc = container.attendance_service
    entries = [
        SheetEntry("s1", AttendanceStatus.PRESENT),
        SheetEntry("s2", AttendanceStatus.LEAVE, "Family event"),
    ]

    assert svc.save_sheet("2024-01-08", entries) == 2

    rows = svc.get_attendance("2024-01-08", ["s1", "s2"])
    assert [r.record_id for r in rows] == ["2024-01-08_s1", "2024-01-08_s2"]
    assert rows[1].remarks == "Family event"


def test_record_from_payload_accepts_camel_case():
    record = record_from_payload({"studentId": "s1", "date": "2024-01-10", "status": "Present", "remarks": " ok "})

    assert record.student_id == "s1"
    assert record.record_id == "2024-01-10_s1"
    assert record.status == AttendanceStatus.PRESENT
    assert record.remarks == "ok"


def test_record_from_payload_requires_student_id():
    with pytest.raises(ValidationError):
        record_from_payload({"date": "2024-01-10", "status": "Present"})


def test_entry_from_payload_defaults_to_present():
    entry = entry_from_payload({"student_id": "s4"})
    assert entry.status == AttendanceStatus.PRESENT
    assert entry.remarks == ""


def test_entry_from_payload_rejects_non_object():
    with pytest.raises(ValidationError):
        entry_from_payload(["s1", "Present"])
