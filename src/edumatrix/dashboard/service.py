from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from ..attendance.repository import AttendanceRepository
from ..attendance.service import tally_statuses
from ..common.datetime_utils import month_day_label, to_iso, today_local, trailing_days
from ..common.math_utils import percentage
from ..core.constants import LOW_ATTENDANCE_THRESHOLD, WEEKLY_WINDOW_DAYS
from ..core.enums import AttendanceStatus, Role
from ..students.repository import StudentRepository
from ..users.repository import UserRepository
from .model import StatusDistribution, SystemStats, WeeklyDatapoint


class DashboardService:
    """Aggregates attendance into KPIs and chart series.

    Every call recomputes from the attendance repository; nothing is cached.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        users: UserRepository,
        *,
        clock: Optional[Callable[[], date]] = None,
    ):
        self._attendance = attendance
        self._students = students
        self._users = users
        self._clock = clock or today_local

    def get_system_stats(self) -> SystemStats:
        total_students = len(self._students.list_all())
        total_teachers = len(self._users.list_by_role(Role.TEACHER))

        today = to_iso(self._clock())
        present_today = sum(
            1 for r in self._attendance.find_all_by_date(today) if r.status == AttendanceStatus.PRESENT
        )

        return SystemStats(
            total_students=total_students,
            total_teachers=total_teachers,
            today_percentage=percentage(present_today, total_students),
            low_attendance_alerts=self.count_low_attendance(),
        )

    def count_low_attendance(self, *, threshold: int = LOW_ATTENDANCE_THRESHOLD) -> int:
        """Roster students present on less than `threshold` percent of their recorded days this week.

        Students with no record in the window are not counted.
        """
        roster = {s.student_id for s in self._students.list_all()}
        present: dict[str, int] = {}
        recorded: dict[str, int] = {}

        for day in trailing_days(self._clock(), WEEKLY_WINDOW_DAYS):
            for r in self._attendance.find_all_by_date(to_iso(day)):
                if r.student_id not in roster:
                    continue
                recorded[r.student_id] = recorded.get(r.student_id, 0) + 1
                if r.status == AttendanceStatus.PRESENT:
                    present[r.student_id] = present.get(r.student_id, 0) + 1

        return sum(
            1 for sid, days in recorded.items() if 100 * present.get(sid, 0) < threshold * days
        )

    def get_weekly_data(self) -> list[WeeklyDatapoint]:
        """Seven datapoints, oldest first, ending today inclusive."""
        out = []
        for day in trailing_days(self._clock(), WEEKLY_WINDOW_DAYS):
            iso = to_iso(day)
            tally = tally_statuses(r.status for r in self._attendance.find_all_by_date(iso))
            out.append(
                WeeklyDatapoint(
                    date=iso,
                    label=month_day_label(iso),
                    present=tally.present,
                    absent=tally.absent,
                    leave=tally.leave,
                )
            )
        return out

    def get_status_distribution(self) -> StatusDistribution:
        tally = tally_statuses(r.status for r in self._attendance.list_all())
        return StatusDistribution(
            present=tally.present,
            absent=tally.absent,
            leave=tally.leave,
            present_percentage=percentage(tally.present, tally.total),
            absent_percentage=percentage(tally.absent, tally.total),
            leave_percentage=percentage(tally.leave, tally.total),
        )
