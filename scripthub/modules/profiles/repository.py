"""Repository protocol for user profiles."""

from __future__ import annotations

from typing import Protocol

from .models import UserProfile


class ProfileRepository(Protocol):
    async def get(self, identity: str) -> UserProfile | None:
        ...

    async def save(self, identity: str, name: str) -> UserProfile:
        ...

    async def commit(self) -> None:
        ...
