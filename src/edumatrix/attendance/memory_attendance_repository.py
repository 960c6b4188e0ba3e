from __future__ import annotations

import threading
from typing import Iterable, Sequence

from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Attendance store indexed by date.

    Layout: {date: {student_id: record}}. Day-scoped queries touch only that
    day's bucket. Within a bucket, dict order is insertion order; a replaced
    record moves to the end.
    """

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._by_date: dict[str, dict[str, AttendanceRecord]] = {}
        self._lock = threading.Lock()
        initial = list(records)
        if initial:
            self.upsert_many(initial)

    def find_by_date(self, date: str, student_ids: Iterable[str]) -> Sequence[AttendanceRecord]:
        wanted = set(student_ids)
        with self._lock:
            day = self._by_date.get(date, {})
            return [r for sid, r in day.items() if sid in wanted]

    def find_all_by_date(self, date: str) -> Sequence[AttendanceRecord]:
        with self._lock:
            return list(self._by_date.get(date, {}).values())

    def find_by_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        with self._lock:
            return [day[student_id] for day in self._by_date.values() if student_id in day]

    def list_all(self) -> Sequence[AttendanceRecord]:
        with self._lock:
            return [r for day in self._by_date.values() for r in day.values()]

    def upsert_many(self, records: Sequence[AttendanceRecord]) -> None:
        with self._lock:
            # Stage touched days on copies and swap them in together.
            staged: dict[str, dict[str, AttendanceRecord]] = {}
            for rec in records:
                day = staged.get(rec.date)
                if day is None:
                    day = dict(self._by_date.get(rec.date, {}))
                    staged[rec.date] = day
                day.pop(rec.student_id, None)
                day[rec.student_id] = rec
            self._by_date.update(staged)

    def count(self) -> int:
        with self._lock:
            return sum(len(day) for day in self._by_date.values())
