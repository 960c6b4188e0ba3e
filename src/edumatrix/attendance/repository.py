from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def find_by_date(self, date: str, student_ids: Iterable[str]) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def find_all_by_date(self, date: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def find_by_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert_many(self, records: Sequence[AttendanceRecord]) -> None:
        """Insert or replace by (date, student_id), in input order.

        Raises PersistenceError if the batch could not be written; in that case
        no record of the batch is visible.
        """

        raise NotImplementedError
