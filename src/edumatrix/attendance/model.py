from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


def make_record_id(date: str, student_id: str) -> str:
    return f"{date}_{student_id}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance on one day.

    Identity is the (date, student_id) pair; `date` is a zero-padded ISO string,
    so lexical order is chronological order.
    """

    record_id: str
    student_id: str
    date: str
    status: AttendanceStatus
    remarks: str = ""

    @property
    def key(self) -> tuple[str, str]:
        return (self.date, self.student_id)


@dataclass(frozen=True)
class SheetEntry:
    """One student's input on the attendance sheet form."""

    student_id: str
    status: AttendanceStatus
    remarks: str = ""


@dataclass(frozen=True)
class SheetRow:
    student_id: str
    name: str
    roll_no: str
    status: AttendanceStatus
    remarks: str
    recorded: bool


@dataclass(frozen=True)
class StatusTally:
    present: int = 0
    absent: int = 0
    leave: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent + self.leave


@dataclass(frozen=True)
class AttendanceSheet:
    """Read-model for the attendance form of one date."""

    date: str
    rows: list[SheetRow]
    tally: StatusTally
