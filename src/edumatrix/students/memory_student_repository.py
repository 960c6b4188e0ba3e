from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .model import Student
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    def __init__(self, students: Iterable[Student]):
        self._students: tuple[Student, ...] = tuple(students)

    def list_all(self) -> Sequence[Student]:
        return list(self._students)

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return next((s for s in self._students if s.student_id == student_id), None)

    def list_by_teacher(self, teacher_id: str) -> Sequence[Student]:
        return [s for s in self._students if s.teacher_id == teacher_id]
