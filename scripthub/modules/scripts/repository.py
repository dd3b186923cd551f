"""Repository protocol for script persistence."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .models import Script, ScriptInput


class ScriptRepository(Protocol):
    async def create(self, *, author: str, fields: ScriptInput, timestamp: int) -> Script:
        ...

    async def get_by_id(self, script_id: str, *, for_update: bool = False) -> Script | None:
        ...

    async def update_fields(self, script_id: str, *, fields: ScriptInput, updated_at: int) -> Script:
        ...

    async def set_deleted_at(self, script_id: str, deleted_at: Optional[int]) -> Script:
        ...

    async def delete(self, script_id: str) -> None:
        ...

    async def list_active(
        self,
        *,
        author: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Sequence[Script]:
        ...

    async def list_deleted(self) -> Sequence[Script]:
        ...

    async def list_categories(self) -> Sequence[str]:
        ...

    async def commit(self) -> None:
        ...
