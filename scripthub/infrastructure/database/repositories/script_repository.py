"""SQLAlchemy implementation of the script repository."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from scripthub.db.models import Script as ScriptModel
from scripthub.modules.scripts.exceptions import ScriptNotFoundError
from scripthub.modules.scripts.models import Script, ScriptInput
from scripthub.modules.scripts.repository import ScriptRepository

_STABLE_ORDER = (ScriptModel.created_at.asc(), ScriptModel.id.asc())


class SqlScriptRepository(ScriptRepository):
    """Script repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, author: str, fields: ScriptInput, timestamp: int) -> Script:
        model = ScriptModel(
            title=fields.title,
            description=fields.description,
            category=fields.category,
            content=fields.content,
            author=author,
            created_at=timestamp,
            updated_at=timestamp,
            deleted_at=None,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def get_by_id(self, script_id: str, *, for_update: bool = False) -> Script | None:
        model = await self._get_model(script_id, for_update=for_update)
        return self._to_domain(model) if model is not None else None

    async def update_fields(self, script_id: str, *, fields: ScriptInput, updated_at: int) -> Script:
        model = await self._require_model(script_id)
        model.title = fields.title
        model.description = fields.description
        model.category = fields.category
        model.content = fields.content
        model.updated_at = updated_at
        await self._session.flush()
        return self._to_domain(model)

    async def set_deleted_at(self, script_id: str, deleted_at: Optional[int]) -> Script:
        model = await self._require_model(script_id)
        model.deleted_at = deleted_at
        await self._session.flush()
        return self._to_domain(model)

    async def delete(self, script_id: str) -> None:
        await self._session.execute(delete(ScriptModel).where(ScriptModel.id == script_id))

    async def list_active(
        self,
        *,
        author: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Sequence[Script]:
        stmt = select(ScriptModel).where(ScriptModel.deleted_at.is_(None))
        if author is not None:
            stmt = stmt.where(ScriptModel.author == author)
        if category is not None:
            stmt = stmt.where(ScriptModel.category == category)
        result = await self._session.execute(stmt.order_by(*_STABLE_ORDER))
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_deleted(self) -> Sequence[Script]:
        stmt = (
            select(ScriptModel)
            .where(ScriptModel.deleted_at.is_not(None))
            .order_by(ScriptModel.deleted_at.desc(), ScriptModel.id.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_categories(self) -> Sequence[str]:
        stmt = (
            select(ScriptModel.category)
            .where(ScriptModel.deleted_at.is_(None))
            .distinct()
            .order_by(ScriptModel.category)
        )
        result = await self._session.execute(stmt)
        return [row[0] for row in result.all()]

    async def commit(self) -> None:
        await self._session.commit()

    async def _get_model(self, script_id: str, *, for_update: bool = False) -> ScriptModel | None:
        stmt = select(ScriptModel).where(ScriptModel.id == script_id)
        if for_update:
            # sessions keep objects across commits, so refresh them from the locked row
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _require_model(self, script_id: str) -> ScriptModel:
        model = await self._get_model(script_id)
        if model is None:
            raise ScriptNotFoundError(script_id)
        return model

    @staticmethod
    def _to_domain(model: ScriptModel) -> Script:
        return Script(
            id=str(model.id),
            title=model.title,
            description=model.description or "",
            category=model.category,
            content=model.content or "",
            author=model.author,
            created_at=int(model.created_at),
            updated_at=int(model.updated_at),
            deleted_at=int(model.deleted_at) if model.deleted_at is not None else None,
        )
