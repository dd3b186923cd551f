"""SQLAlchemy implementation of the profile repository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from scripthub.db.models import UserProfile as UserProfileModel
from scripthub.modules.profiles.models import UserProfile
from scripthub.modules.profiles.repository import ProfileRepository


class SqlProfileRepository(ProfileRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, identity: str) -> UserProfile | None:
        model = await self._session.get(UserProfileModel, identity, populate_existing=True)
        if model is None:
            return None
        return UserProfile(identity=model.identity, name=model.name)

    async def save(self, identity: str, name: str) -> UserProfile:
        model = await self._session.get(UserProfileModel, identity, with_for_update=True)
        if model is None:
            model = UserProfileModel(identity=identity, name=name)
            self._session.add(model)
        else:
            model.name = name
        await self._session.flush()
        return UserProfile(identity=identity, name=name)

    async def commit(self) -> None:
        await self._session.commit()
