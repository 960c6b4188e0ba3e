from __future__ import annotations

import random
from datetime import date
from typing import Iterable

from ..attendance.model import AttendanceRecord, make_record_id
from ..common.datetime_utils import to_iso, trailing_days
from ..core.constants import DEFAULT_SEED_HISTORY_DAYS, DEFAULT_SEED_RANDOM_SEED, SEED_LEAVE_REMARK
from ..core.enums import AttendanceStatus
from ..students.model import Student

# Upper bounds on a uniform draw; anything above the last bound is ABSENT.
_PRESENT_BELOW = 0.85
_LEAVE_BELOW = 0.92


def _pick_status(rng: random.Random) -> AttendanceStatus:
    roll = rng.random()
    if roll < _PRESENT_BELOW:
        return AttendanceStatus.PRESENT
    if roll < _LEAVE_BELOW:
        return AttendanceStatus.LEAVE
    return AttendanceStatus.ABSENT


def build_demo_attendance(
    students: Iterable[Student],
    *,
    today: date,
    days: int = DEFAULT_SEED_HISTORY_DAYS,
    seed: int = DEFAULT_SEED_RANDOM_SEED,
) -> list[AttendanceRecord]:
    """Synthetic history: one record per student for each of the last `days` days.

    Statuses are weighted towards PRESENT and reproducible for a given seed.
    """
    rng = random.Random(seed)
    roster = list(students)
    records: list[AttendanceRecord] = []

    for day in trailing_days(today, days):
        iso = to_iso(day)
        for s in roster:
            status = _pick_status(rng)
            records.append(
                AttendanceRecord(
                    record_id=make_record_id(iso, s.student_id),
                    student_id=s.student_id,
                    date=iso,
                    status=status,
                    remarks=SEED_LEAVE_REMARK if status == AttendanceStatus.LEAVE else "",
                )
            )
    return records
