from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a dashboard user.

    Note: plain data object, no storage access.
    """

    user_id: str
    username: str
    full_name: str
    role: Role
    email: str = ""
    avatar: str = ""
