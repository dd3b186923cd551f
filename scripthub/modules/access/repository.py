"""Repository protocol for role assignments."""

from __future__ import annotations

from typing import Protocol

from .models import Role, RoleAssignment


class RoleRepository(Protocol):
    """Abstract repository interface for role persistence."""

    async def get_role(self, identity: str) -> Role | None:
        ...

    async def set_role(self, identity: str, role: Role) -> RoleAssignment:
        ...

    async def commit(self) -> None:
        ...
