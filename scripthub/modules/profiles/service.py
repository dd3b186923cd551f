"""Display profiles keyed by identity."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from scripthub.core.locks import KeyedLockRegistry, profile_key, record_locks
from scripthub.modules.access import DEFAULT_ROLE, Operation, ensure_allowed

from .models import UserProfile
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProfileService:
    repository: ProfileRepository
    locks: KeyedLockRegistry = field(default=record_locks)

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ProfileService":
        # deferred to avoid a circular import with the repository module
        from scripthub.infrastructure.database.repositories.profile_repository import SqlProfileRepository

        return cls(SqlProfileRepository(session))

    async def get_profile(self, identity: str) -> UserProfile | None:
        return await self.repository.get(identity)

    async def save_profile(self, caller: str, identity: str, name: str) -> UserProfile:
        # ownership alone decides, so the caller's role is never consulted
        ensure_allowed(Operation.SAVE_PROFILE, caller, DEFAULT_ROLE, is_owner=caller == identity)
        async with self.locks.hold(profile_key(identity)):
            profile = await self.repository.save(identity, name)
            await self.repository.commit()
        logger.info("Profile of %s saved", identity)
        return profile
