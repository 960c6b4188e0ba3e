from __future__ import annotations

from flask import Flask

from ..common.web import Guards, ok
from ..container import Container
from ..core.enums import Resource
from .model import Student


def student_to_json(student: Student) -> dict:
    return {
        "id": student.student_id,
        "name": student.name,
        "roll_no": student.roll_no,
        "class": student.class_name,
        "section": student.section,
        "teacher_id": student.teacher_id,
    }


def register(app: Flask, container: Container) -> None:
    guards = Guards(container.auth_service)

    @app.route("/api/students", endpoint="students_list")
    @guards.can_view(Resource.STUDENTS)
    def students_list():
        students = container.student_service.get_all_students()
        return ok({"students": [student_to_json(s) for s in students]})

    @app.route("/api/students/<student_id>", endpoint="student_detail")
    @guards.can_view(Resource.STUDENTS)
    def student_detail(student_id: str):
        return ok({"student": student_to_json(container.student_service.get_student(student_id))})

    @app.route("/api/teachers/<teacher_id>/students", endpoint="teacher_students")
    @guards.can_view(Resource.STUDENTS)
    def teacher_students(teacher_id: str):
        students = container.student_service.get_students_by_teacher(teacher_id)
        return ok({"students": [student_to_json(s) for s in students]})
