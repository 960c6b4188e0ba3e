from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemStats:
    """Dashboard KPIs. Derived on every request, never stored."""

    total_students: int
    total_teachers: int
    today_percentage: int
    low_attendance_alerts: int = 0


@dataclass(frozen=True)
class WeeklyDatapoint:
    """One bar group of the weekly chart; `label` is MM-DD."""

    date: str
    label: str
    present: int
    absent: int
    leave: int


@dataclass(frozen=True)
class StatusDistribution:
    present: int
    absent: int
    leave: int
    present_percentage: int
    absent_percentage: int
    leave_percentage: int

    @property
    def total(self) -> int:
        return self.present + self.absent + self.leave
