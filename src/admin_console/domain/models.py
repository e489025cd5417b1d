"""Creation inputs for users, roles, permissions and hierarchy nodes.

Each draft mirrors what a create dialog collects. ``validate`` raises
``ValidationError`` naming the first offending field; ``to_record`` turns a
valid draft into the mapping stored in a collection (the id is assigned by
the record store).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

__all__ = [
    "ValidationError",
    "USER_ROLES",
    "USER_STATUSES",
    "PERMISSION_CATEGORIES",
    "PERMISSION_CATALOG",
    "HIERARCHY_TYPES",
    "UserDraft",
    "RoleDraft",
    "PermissionDraft",
    "HierarchyNodeDraft",
]

USER_ROLES: Tuple[str, ...] = ("Admin", "Editor", "Viewer")
USER_STATUSES: Tuple[str, ...] = ("Active", "Inactive")
PERMISSION_CATEGORIES: Tuple[str, ...] = ("Users", "Content", "Settings")
PERMISSION_CATALOG: Tuple[str, ...] = (
    "user:create",
    "user:edit",
    "content:create",
    "content:edit",
    "settings:view",
)
HIERARCHY_TYPES: Tuple[str, ...] = ("Organization", "Department", "Team")


class ValidationError(ValueError):
    def __init__(self, field_name: str, message: str):
        super().__init__(f"{field_name}: {message}")
        self.field_name = field_name


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_text(field_name: str, value: str) -> None:
    if not (value or "").strip():
        raise ValidationError(field_name, "is required")


def _require_choice(field_name: str, value: str, choices: Tuple[str, ...]) -> None:
    if value not in choices:
        raise ValidationError(field_name, f"must be one of {', '.join(choices)}")


@dataclass
class UserDraft:
    name: str = ""
    email: str = ""
    role: str = "Viewer"
    status: str = "Active"

    def validate(self) -> None:
        _require_text("name", self.name)
        _require_text("email", self.email)
        _require_choice("role", self.role, USER_ROLES)
        _require_choice("status", self.status, USER_STATUSES)

    def to_record(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        self.validate()
        stamp = (now or _utcnow()).isoformat()
        return {
            "name": self.name.strip(),
            "email": self.email.strip(),
            "role": self.role,
            "status": self.status,
            "lastLogin": stamp,
        }


@dataclass
class RoleDraft:
    name: str = ""
    description: str = ""

    def validate(self) -> None:
        _require_text("name", self.name)

    def to_record(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        self.validate()
        return {
            "name": self.name.strip(),
            "description": self.description.strip(),
            "usersCount": 0,
            "createdAt": (now or _utcnow()).date().isoformat(),
            "permissions": [],
        }


@dataclass
class PermissionDraft:
    name: str = ""
    description: str = ""
    category: str = "Users"
    assigned_to: List[str] = field(default_factory=list)

    def validate(self) -> None:
        _require_text("name", self.name)
        _require_choice("category", self.category, PERMISSION_CATEGORIES)
        for role in self.assigned_to:
            _require_choice("assigned_to", role, USER_ROLES)

    def to_record(self) -> Dict[str, Any]:
        self.validate()
        return {
            "name": self.name.strip(),
            "description": self.description.strip(),
            "category": self.category,
            "assignedTo": list(dict.fromkeys(self.assigned_to)),
        }


@dataclass
class HierarchyNodeDraft:
    name: str = ""
    type: str = "Department"
    parent: Optional[str] = None
    members: int = 0

    def validate(self) -> None:
        _require_text("name", self.name)
        _require_choice("type", self.type, HIERARCHY_TYPES)
        if not isinstance(self.members, int) or self.members < 0:
            raise ValidationError("members", "must be a non-negative integer")

    def to_record(self) -> Dict[str, Any]:
        self.validate()
        parent = (self.parent or "").strip() or None
        return {
            "name": self.name.strip(),
            "type": self.type,
            "parent": parent,
            "members": self.members,
        }
