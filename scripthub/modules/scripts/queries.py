"""Read-only projections over the script store."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from scripthub.modules.access import Operation, RoleService, check, ensure_allowed

from .exceptions import ScriptNotFoundError
from .models import Script
from .repository import ScriptRepository


@dataclass(slots=True)
class ScriptQueryService:
    repository: ScriptRepository
    roles: RoleService

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ScriptQueryService":
        # deferred to avoid a circular import with the repository module
        from scripthub.infrastructure.database.repositories.script_repository import SqlScriptRepository

        return cls(SqlScriptRepository(session), RoleService.with_session(session))

    async def get_script(self, caller: str, script_id: str) -> Script:
        """Fetch one script by id.

        Deleted scripts are only visible to their author and to admins;
        everyone else gets the same answer as for an unknown id.
        """
        script = await self.repository.get_by_id(script_id)
        if script is None:
            raise ScriptNotFoundError(script_id)
        if script.is_deleted():
            role = await self.roles.get_role(caller)
            if not check(Operation.READ_DELETED, role, is_owner=script.is_authored_by(caller)):
                raise ScriptNotFoundError(script_id)
        return script

    async def list_scripts(self) -> list[Script]:
        return list(await self.repository.list_active())

    async def list_by_author(self, author: str) -> list[Script]:
        return list(await self.repository.list_active(author=author))

    async def list_by_category(self, category: str) -> list[Script]:
        return list(await self.repository.list_active(category=category))

    async def search_by_title(self, query: str) -> list[Script]:
        # a blank query means nothing to search for, not everything
        if not query.strip():
            return []
        # matched here rather than in SQL: SQLite's lower() only folds ASCII
        needle = query.casefold()
        return [script for script in await self.repository.list_active() if needle in script.title.casefold()]

    async def list_deleted(self, caller: str) -> list[Script]:
        ensure_allowed(Operation.LIST_DELETED, caller, await self.roles.get_role(caller))
        return list(await self.repository.list_deleted())

    async def list_categories(self) -> list[str]:
        return list(await self.repository.list_categories())
