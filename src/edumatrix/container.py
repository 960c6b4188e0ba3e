from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, Mapping, Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import today_local
from .core.constants import DEFAULT_SEED_HISTORY_DAYS, DEFAULT_SEED_RANDOM_SEED
from .dashboard.service import DashboardService
from .seed.bootstrap import build_demo_attendance
from .seed.roster import DEMO_STUDENTS, DEMO_USERS
from .students.memory_student_repository import InMemoryStudentRepository
from .students.model import Student
from .students.service import StudentService
from .users.memory_user_repository import InMemoryUserRepository
from .users.model import User
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: InMemoryUserRepository
    students_repo: InMemoryStudentRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    student_service: StudentService
    attendance_service: AttendanceService
    dashboard_service: DashboardService


def build_container(
    *,
    settings: Mapping[str, Any],
    clock: Optional[Callable[[], date]] = None,
    users: Optional[Iterable[User]] = None,
    students: Optional[Iterable[Student]] = None,
    attendance_repo: Optional[AttendanceRepository] = None,
) -> Container:
    """Wire a fresh set of repositories and services.

    Each call returns independent state; nothing is shared between containers.
    """
    clock = clock or today_local

    users_repo = InMemoryUserRepository(DEMO_USERS if users is None else users)
    students_repo = InMemoryStudentRepository(DEMO_STUDENTS if students is None else students)

    if attendance_repo is None:
        seed_records = []
        if settings.get("SEED_DEMO_DATA"):
            seed_records = build_demo_attendance(
                students_repo.list_all(),
                today=clock(),
                days=int(settings.get("SEED_HISTORY_DAYS", DEFAULT_SEED_HISTORY_DAYS)),
                seed=int(settings.get("SEED_RANDOM_SEED", DEFAULT_SEED_RANDOM_SEED)),
            )
        attendance_repo = InMemoryAttendanceRepository(seed_records)

    auth_service = AuthService(users_repo)
    student_service = StudentService(students_repo, users_repo)
    attendance_service = AttendanceService(attendance_repo, students_repo, clock=clock)
    dashboard_service = DashboardService(attendance_repo, students_repo, users_repo, clock=clock)

    return Container(
        users_repo=users_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        student_service=student_service,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
    )
