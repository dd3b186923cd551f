"""Lifecycle of shared scripts: create, update, soft delete, restore, purge.

Every mutation runs under the per-script lock, re-reads the record, asks
the authorization policy, writes, and commits before releasing the lock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from scripthub.core.clock import advance, now_ns
from scripthub.core.locks import KeyedLockRegistry, record_locks, script_key
from scripthub.modules.access import Operation, RoleService, ensure_allowed

from .exceptions import InvalidScriptStateError, ScriptNotFoundError
from .models import Script, ScriptInput
from .repository import ScriptRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScriptService:
    repository: ScriptRepository
    roles: RoleService
    locks: KeyedLockRegistry = field(default=record_locks)

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ScriptService":
        # deferred to avoid a circular import with the repository module
        from scripthub.infrastructure.database.repositories.script_repository import SqlScriptRepository

        return cls(SqlScriptRepository(session), RoleService.with_session(session))

    async def create_script(self, caller: str, fields: ScriptInput) -> Script:
        ensure_allowed(Operation.CREATE, caller, await self.roles.get_role(caller))
        script = await self.repository.create(author=caller, fields=fields, timestamp=now_ns())
        await self.repository.commit()
        logger.info("Script %s created by %s", script.id, caller)
        return script

    async def update_script(self, caller: str, script_id: str, fields: ScriptInput) -> Script:
        role = await self.roles.get_role(caller)
        async with self.locks.hold(script_key(script_id)):
            current = await self._require(script_id)
            if current.is_deleted():
                raise ScriptNotFoundError(script_id)
            ensure_allowed(Operation.UPDATE, caller, role, is_owner=current.is_authored_by(caller))
            script = await self.repository.update_fields(
                script_id,
                fields=fields,
                updated_at=advance(current.updated_at),
            )
            await self.repository.commit()
        logger.info("Script %s updated by %s", script_id, caller)
        return script

    async def soft_delete_script(self, caller: str, script_id: str) -> Script:
        role = await self.roles.get_role(caller)
        async with self.locks.hold(script_key(script_id)):
            current = await self._require(script_id)
            ensure_allowed(Operation.SOFT_DELETE, caller, role, is_owner=current.is_authored_by(caller))
            if current.is_deleted():
                return current
            script = await self.repository.set_deleted_at(script_id, now_ns())
            await self.repository.commit()
        logger.info("Script %s moved to trash by %s", script_id, caller)
        return script

    async def restore_script(self, caller: str, script_id: str) -> Script:
        role = await self.roles.get_role(caller)
        async with self.locks.hold(script_key(script_id)):
            current = await self._require(script_id)
            ensure_allowed(Operation.RESTORE, caller, role, is_owner=current.is_authored_by(caller))
            if not current.is_deleted():
                raise ScriptNotFoundError(script_id)
            script = await self.repository.set_deleted_at(script_id, None)
            await self.repository.commit()
        logger.info("Script %s restored by %s", script_id, caller)
        return script

    async def purge_script(self, caller: str, script_id: str) -> None:
        # ownership is irrelevant here, so the check needs no record
        ensure_allowed(Operation.PURGE, caller, await self.roles.get_role(caller))
        async with self.locks.hold(script_key(script_id)):
            current = await self._require(script_id)
            if not current.is_deleted():
                raise InvalidScriptStateError(f"script {script_id} must be deleted before it can be purged")
            await self.repository.delete(script_id)
            await self.repository.commit()
        logger.info("Script %s permanently deleted by %s", script_id, caller)

    async def _require(self, script_id: str) -> Script:
        script = await self.repository.get_by_id(script_id, for_update=True)
        if script is None:
            raise ScriptNotFoundError(script_id)
        return script
