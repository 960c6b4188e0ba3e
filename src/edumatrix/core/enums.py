from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for capability checks."""

    ADMIN = "ADMIN"
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"


class AttendanceStatus(str, Enum):
    """Daily attendance status as exchanged with clients."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LEAVE = "Leave"


class Resource(str, Enum):
    """Areas of the dashboard a role may view or change."""

    DASHBOARD = "dashboard"
    ATTENDANCE = "attendance"
    STUDENTS = "students"
    REPORTS = "reports"
