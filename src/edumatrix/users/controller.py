from __future__ import annotations

from flask import Flask, g, request, session

from ..common.web import Guards, ok
from ..core.exceptions import ValidationError
from ..core.permissions import navigation_for
from ..container import Container
from .model import User


def user_to_json(user: User) -> dict:
    return {
        "id": user.user_id,
        "username": user.username,
        "full_name": user.full_name,
        "role": user.role.value,
        "email": user.email,
        "avatar": user.avatar,
    }


def _navigation(user: User) -> list[dict]:
    return [{"id": item.id, "label": item.label} for item in navigation_for(user.role)]


def register(app: Flask, container: Container) -> None:
    guards = Guards(container.auth_service)

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        user = container.auth_service.login(str(data.get("username", "")))

        session.clear()
        session.permanent = bool(data.get("remember_me"))
        session["user_id"] = user.user_id
        session["role"] = user.role.value

        return ok({"user": user_to_json(user), "navigation": _navigation(user)})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok({"message": "Logged out"})

    @app.route("/api/me", endpoint="me")
    @guards.login_required
    def me():
        user = g.current_user
        return ok({"user": user_to_json(user), "navigation": _navigation(user)})
