"""Domain models for roles and identities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


DEFAULT_ROLE = Role.GUEST


@dataclass(slots=True)
class RoleAssignment:
    identity: str
    role: Role
