from __future__ import annotations

from dataclasses import dataclass

from .enums import Resource, Role
from .exceptions import AuthorizationError

_ALL_ROLES = frozenset(Role)

_VIEW_POLICY: dict[Resource, frozenset[Role]] = {
    Resource.DASHBOARD: _ALL_ROLES,
    Resource.ATTENDANCE: frozenset({Role.ADMIN, Role.TEACHER}),
    Resource.STUDENTS: frozenset({Role.ADMIN, Role.TEACHER}),
    Resource.REPORTS: _ALL_ROLES,
}

_WRITE_POLICY: dict[Resource, frozenset[Role]] = {
    Resource.ATTENDANCE: frozenset({Role.ADMIN, Role.TEACHER}),
}

_NAV_LABELS: dict[Resource, str] = {
    Resource.DASHBOARD: "Dashboard",
    Resource.ATTENDANCE: "Attendance",
    Resource.STUDENTS: "Students",
    Resource.REPORTS: "Reports",
}


@dataclass(frozen=True)
class NavItem:
    id: str
    label: str


def can_view(role: Role, resource: Resource) -> bool:
    return role in _VIEW_POLICY.get(resource, frozenset())


def can_write(role: Role, resource: Resource) -> bool:
    """Capability check consulted before any mutation.

    Resources without a write policy are read-only for every role.
    """
    return role in _WRITE_POLICY.get(resource, frozenset())


def require_view(role: Role, resource: Resource) -> None:
    if not can_view(role, resource):
        raise AuthorizationError("Access Restricted")


def require_write(role: Role, resource: Resource) -> None:
    if not can_write(role, resource):
        raise AuthorizationError("Access Restricted")


def navigation_for(role: Role) -> list[NavItem]:
    """Menu entries visible to a role, in display order."""
    return [NavItem(id=r.value, label=_NAV_LABELS[r]) for r in Resource if can_view(role, r)]
