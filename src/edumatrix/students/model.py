from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: a student on the roster.

    `teacher_id` only relates the student to a TEACHER user; it does not own it.
    """

    student_id: str
    name: str
    roll_no: str
    class_name: str
    section: str
    teacher_id: str
