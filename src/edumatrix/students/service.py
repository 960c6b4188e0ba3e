from __future__ import annotations

from ..core.enums import Role
from ..core.exceptions import NotFoundError
from ..users.model import User
from ..users.repository import UserRepository
from .model import Student
from .repository import StudentRepository


class StudentService:
    """Use case: read the student roster."""

    def __init__(self, students: StudentRepository, users: UserRepository):
        self._students = students
        self._users = users

    def get_all_students(self) -> list[Student]:
        return list(self._students.list_all())

    def get_students_by_teacher(self, teacher_id: str) -> list[Student]:
        teacher = self._users.get_by_id(teacher_id)
        if not teacher or teacher.role != Role.TEACHER:
            raise NotFoundError("Teacher not found")
        return list(self._students.list_by_teacher(teacher_id))

    def get_student(self, student_id: str) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def students_for(self, user: User) -> list[Student]:
        """Students whose attendance `user` records: a teacher's own class, everyone for admins."""
        if user.role == Role.TEACHER:
            return list(self._students.list_by_teacher(user.user_id))
        if user.role == Role.ADMIN:
            return self.get_all_students()
        return []
