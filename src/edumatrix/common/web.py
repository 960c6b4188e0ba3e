from __future__ import annotations

from functools import wraps
from typing import Any, Callable

from flask import g, jsonify, session

from ..core.enums import Resource
from ..core.exceptions import AuthenticationError, NotFoundError
from ..core.permissions import require_view, require_write
from ..users.model import User
from ..users.service import AuthService


class Guards:
    """Route decorators that resolve the session user and check capabilities.

    Failures raise domain errors; the app's error handlers turn them into
    401/403 responses.
    """

    def __init__(self, auth: AuthService):
        self._auth = auth

    def current_user(self) -> User:
        user_id = session.get("user_id")
        if not user_id:
            raise AuthenticationError("Please log in to continue")
        try:
            return self._auth.get_user(str(user_id))
        except NotFoundError:
            session.clear()
            raise AuthenticationError("Please log in to continue") from None

    def login_required(self, view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.current_user = self.current_user()
            return view(*args, **kwargs)

        return wrapper

    def can_view(self, resource: Resource):
        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                user = self.current_user()
                require_view(user.role, resource)
                g.current_user = user
                return view(*args, **kwargs)

            return wrapper

        return decorator

    def can_write(self, resource: Resource):
        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                user = self.current_user()
                require_write(user.role, resource)
                g.current_user = user
                return view(*args, **kwargs)

            return wrapper

        return decorator


def ok(payload: dict | None = None, status: int = 200):
    body = {"success": True}
    body.update(payload or {})
    return jsonify(body), status


def fail(message: str, status: int, **extra: Any):
    body = {"success": False, "message": message}
    body.update(extra)
    return jsonify(body), status
