"""Demo roster loaded at start-up: one admin, one teacher, one student login,
and the teacher's class of eight students."""

from __future__ import annotations

from ..core.enums import Role
from ..students.model import Student
from ..users.model import User

DEMO_USERS: tuple[User, ...] = (
    User(
        user_id="u1",
        username="admin",
        full_name="James Anderson",
        role=Role.ADMIN,
        email="admin@edumatrix.com",
        avatar="https://picsum.photos/200/200?random=1",
    ),
    User(
        user_id="u2",
        username="teacher",
        full_name="Sarah Jenkins",
        role=Role.TEACHER,
        email="sarah.j@edumatrix.com",
        avatar="https://picsum.photos/200/200?random=2",
    ),
    User(
        user_id="u3",
        username="student",
        full_name="Michael Key",
        role=Role.STUDENT,
        email="michael.k@edumatrix.com",
        avatar="https://picsum.photos/200/200?random=3",
    ),
)


def _student(n: int, name: str) -> Student:
    return Student(
        student_id=f"s{n}",
        name=name,
        roll_no=str(100 + n),
        class_name="10",
        section="A",
        teacher_id="u2",
    )


DEMO_STUDENTS: tuple[Student, ...] = (
    _student(1, "Aarav Patel"),
    _student(2, "Aditi Sharma"),
    _student(3, "Benjamin Hayes"),
    _student(4, "Chloe Kim"),
    _student(5, "David Loop"),
    _student(6, "Emily Chen"),
    _student(7, "Frank Wright"),
    _student(8, "Grace Ho"),
)
