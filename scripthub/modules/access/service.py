"""Role directory: who holds which role."""

from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from scripthub.core.locks import KeyedLockRegistry, record_locks, role_key

from .models import DEFAULT_ROLE, Role, RoleAssignment
from .policy import Operation, ensure_allowed
from .repository import RoleRepository

logger = logging.getLogger(__name__)


class RoleService:
    """Resolves and assigns roles. Unknown identities are guests."""

    def __init__(self, repository: RoleRepository, locks: KeyedLockRegistry = record_locks) -> None:
        self._repository = repository
        self._locks = locks

    @classmethod
    def with_session(cls, session: AsyncSession) -> "RoleService":
        # deferred to avoid a circular import with the repository module
        from scripthub.infrastructure.database.repositories.role_repository import SqlRoleRepository

        return cls(SqlRoleRepository(session))

    async def get_role(self, identity: str) -> Role:
        role = await self._repository.get_role(identity)
        return role if role is not None else DEFAULT_ROLE

    async def is_admin(self, identity: str) -> bool:
        return await self.get_role(identity) is Role.ADMIN

    async def assign_role(self, caller: str, target: str, role: Role) -> RoleAssignment:
        ensure_allowed(Operation.ASSIGN_ROLE, caller, await self.get_role(caller))
        async with self._locks.hold(role_key(target)):
            assignment = await self._repository.set_role(target, role)
            await self._repository.commit()
        logger.info("Role of %s set to %s by %s", target, role.value, caller)
        return assignment

    async def seed_admins(self, identities: Iterable[str]) -> list[str]:
        """Grant admin to each identity that is not one yet. Returns the newly promoted ones."""
        promoted: list[str] = []
        for identity in identities:
            identity = identity.strip()
            if not identity:
                continue
            async with self._locks.hold(role_key(identity)):
                if await self.get_role(identity) is Role.ADMIN:
                    continue
                await self._repository.set_role(identity, Role.ADMIN)
                await self._repository.commit()
            promoted.append(identity)
            logger.info("Bootstrap admin granted to %s", identity)
        return promoted
