from __future__ import annotations

from datetime import date

import pytest

from edumatrix.container import build_container
from edumatrix.core.enums import Role
from edumatrix.main import create_app
from edumatrix.students.model import Student
from edumatrix.users.model import User


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 1, 10)


@pytest.fixture
def clock(fixed_today):
    return lambda: fixed_today


@pytest.fixture
def users() -> list[User]:
    return [
        User(user_id="a1", username="admin", full_name="Ada Admin", role=Role.ADMIN),
        User(user_id="t1", username="teacher", full_name="Tom Teacher", role=Role.TEACHER),
        User(user_id="t2", username="teacher2", full_name="Tina Teacher", role=Role.TEACHER),
        User(user_id="st1", username="student", full_name="Sam Student", role=Role.STUDENT),
    ]


@pytest.fixture
def make_students():
    def _make(count: int, *, teacher_id: str = "t1", start: int = 1) -> list[Student]:
        return [
            Student(
                student_id=f"s{n}",
                name=f"Student {n}",
                roll_no=str(100 + n),
                class_name="10",
                section="A",
                teacher_id=teacher_id,
            )
            for n in range(start, start + count)
        ]

    return _make


@pytest.fixture
def students(make_students) -> list[Student]:
    return make_students(8)


@pytest.fixture
def container(clock, users, students):
    return build_container(settings={"SEED_DEMO_DATA": False}, clock=clock, users=users, students=students)


@pytest.fixture
def make_app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    def _make(c):
        return create_app({"TESTING": True}, container=c)

    return _make


@pytest.fixture
def client(make_app, container):
    return make_app(container).test_client()


@pytest.fixture
def login(client):
    def _login(username: str):
        resp = client.post("/api/login", json={"username": username})
        assert resp.status_code == 200, resp.get_json()
        return resp

    return _login
