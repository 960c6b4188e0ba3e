from __future__ import annotations

import logging

from ..core.constants import DEMO_USERNAMES
from ..core.exceptions import NotFoundError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


def _demo_hint() -> str:
    names = list(DEMO_USERNAMES)
    return ", ".join(names[:-1]) + f", or {names[-1]}"


class AuthService:
    """Use case: log a user in by username.

    There is no credential check: the roster is demo data.
    """

    def __init__(self, users: UserRepository):
        self._users = users

    def login(self, username: str) -> User:
        user = self._users.get_by_username((username or "").strip())
        if not user:
            logger.warning("Login rejected for unknown username %r", username)
            raise NotFoundError(f"Invalid username. Try: {_demo_hint()}")
        logger.info("User %s logged in as %s", user.username, user.role.value)
        return user

    def get_user(self, user_id: str) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user
