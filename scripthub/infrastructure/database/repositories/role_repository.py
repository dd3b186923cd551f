"""SQLAlchemy implementation of the role repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from scripthub.db.models import UserRole as UserRoleModel
from scripthub.modules.access.models import Role, RoleAssignment
from scripthub.modules.access.repository import RoleRepository


class SqlRoleRepository(RoleRepository):
    """Role repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_role(self, identity: str) -> Role | None:
        stmt = select(UserRoleModel.role).where(UserRoleModel.identity == identity)
        result = await self._session.execute(stmt)
        value = result.scalar_one_or_none()
        return Role(value) if value is not None else None

    async def set_role(self, identity: str, role: Role) -> RoleAssignment:
        model = await self._session.get(UserRoleModel, identity, with_for_update=True)
        if model is None:
            model = UserRoleModel(identity=identity, role=role.value)
            self._session.add(model)
        else:
            model.role = role.value
        await self._session.flush()
        return RoleAssignment(identity=identity, role=role)

    async def commit(self) -> None:
        await self._session.commit()
