from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import Role
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Static roster of users; lookups are linear scans."""

    def __init__(self, users: Iterable[User]):
        self._users: tuple[User, ...] = tuple(users)

    def get_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self._users if u.user_id == user_id), None)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users if u.username == username), None)

    def list_by_role(self, role: Role) -> Sequence[User]:
        return [u for u in self._users if u.role == role]
