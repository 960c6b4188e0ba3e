from __future__ import annotations

import logging
from datetime import date as Date
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import to_iso, today_local
from ..common.validators import optional_text, require_iso_date, require_non_empty, require_status
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, PersistenceError, ValidationError
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import AttendanceRecord, AttendanceSheet, SheetEntry, SheetRow, StatusTally, make_record_id
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def tally_statuses(statuses: Iterable[AttendanceStatus]) -> StatusTally:
    counts = {status: 0 for status in AttendanceStatus}
    for status in statuses:
        counts[status] += 1
    return StatusTally(
        present=counts[AttendanceStatus.PRESENT],
        absent=counts[AttendanceStatus.ABSENT],
        leave=counts[AttendanceStatus.LEAVE],
    )


def record_from_payload(data: Mapping[str, Any]) -> AttendanceRecord:
    """Build a record from a JSON object (camelCase or snake_case keys)."""
    if not isinstance(data, Mapping):
        raise ValidationError("Each record must be an object")

    student_id = require_non_empty(data.get("student_id", data.get("studentId")), "student_id")
    date = require_iso_date(data.get("date"))
    return AttendanceRecord(
        record_id=make_record_id(date, student_id),
        student_id=student_id,
        date=date,
        status=require_status(data.get("status")),
        remarks=optional_text(data.get("remarks"), "remarks"),
    )


def entry_from_payload(data: Mapping[str, Any]) -> SheetEntry:
    if not isinstance(data, Mapping):
        raise ValidationError("Each entry must be an object")

    return SheetEntry(
        student_id=require_non_empty(data.get("student_id", data.get("studentId")), "student_id"),
        status=require_status(data.get("status", AttendanceStatus.PRESENT)),
        remarks=optional_text(data.get("remarks"), "remarks"),
    )


class AttendanceService:
    """Use cases over the daily attendance store: lookups, upserts, sheets."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        clock: Optional[Callable[[], Date]] = None,
    ):
        self._attendance = attendance
        self._students = students
        self._clock = clock or today_local

    def today(self) -> str:
        return to_iso(self._clock())

    def get_attendance(self, date: str, student_ids: Iterable[str]) -> list[AttendanceRecord]:
        date = require_iso_date(date)
        return list(self._attendance.find_by_date(date, student_ids))

    def save_attendance(self, records: Iterable[AttendanceRecord]) -> int:
        """Upsert a batch by (date, student_id); later records with the same key win.

        Every record is validated before anything is written, so an invalid
        batch leaves the store unchanged.
        """
        batch = [self._validated(r) for r in records]
        if not batch:
            return 0

        try:
            self._attendance.upsert_many(batch)
        except PersistenceError:
            logger.error("Attendance batch of %d record(s) was not saved", len(batch), exc_info=True)
            raise

        logger.info(
            "Saved %d attendance record(s) for %s",
            len(batch),
            ", ".join(sorted({r.date for r in batch})),
        )
        return len(batch)

    def get_student_attendance_history(self, student_id: str) -> list[AttendanceRecord]:
        if not self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")
        rows = list(self._attendance.find_by_student(student_id))
        rows.sort(key=lambda r: r.date, reverse=True)
        return rows

    def build_sheet(self, date: Optional[str], students: Sequence[Student]) -> AttendanceSheet:
        """Attendance form for a date: stored status per student, PRESENT when none is recorded."""
        date = require_iso_date(date) if date else self.today()
        existing = {
            r.student_id: r for r in self._attendance.find_by_date(date, [s.student_id for s in students])
        }

        rows = []
        for s in students:
            rec = existing.get(s.student_id)
            rows.append(
                SheetRow(
                    student_id=s.student_id,
                    name=s.name,
                    roll_no=s.roll_no,
                    status=rec.status if rec else AttendanceStatus.PRESENT,
                    remarks=(rec.remarks if rec else "") or "",
                    recorded=rec is not None,
                )
            )

        return AttendanceSheet(date=date, rows=rows, tally=tally_statuses(r.status for r in rows))

    def save_sheet(self, date: str, entries: Iterable[SheetEntry]) -> int:
        date = require_iso_date(date)
        records = [
            AttendanceRecord(
                record_id=make_record_id(date, e.student_id),
                student_id=e.student_id,
                date=date,
                status=e.status,
                remarks=e.remarks,
            )
            for e in entries
        ]
        return self.save_attendance(records)

    def _validated(self, rec: AttendanceRecord) -> AttendanceRecord:
        student_id = require_non_empty(rec.student_id, "student_id")
        date = require_iso_date(rec.date)
        status = require_status(rec.status)
        remarks = optional_text(rec.remarks, "remarks")

        if not self._students.get_by_id(student_id):
            raise NotFoundError(f"Student {student_id} not found")

        return AttendanceRecord(
            record_id=make_record_id(date, student_id),
            student_id=student_id,
            date=date,
            status=status,
            remarks=remarks,
        )
