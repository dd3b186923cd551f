"""Per-key mutual exclusion for mutations on shared records."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Dict


class _Entry:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = asyncio.Lock()
        self.users = 0


class KeyedLockRegistry:
    """Serializes work per key while letting different keys run concurrently.

    An entry lives only while some task holds or waits for its lock, so the
    registry does not grow with the number of keys ever seen.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, _Entry] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        entry = self._entries.get(key)
        if entry is None:
            entry = self._entries[key] = _Entry()
        entry.users += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.users -= 1
            if entry.users == 0:
                self._entries.pop(key, None)

    def is_locked(self, key: str) -> bool:
        entry = self._entries.get(key)
        return entry is not None and entry.lock.locked()

    def active_keys(self) -> int:
        return len(self._entries)


def script_key(script_id: str) -> str:
    return f"script:{script_id}"


def role_key(identity: str) -> str:
    return f"role:{identity}"


def profile_key(identity: str) -> str:
    return f"profile:{identity}"


record_locks = KeyedLockRegistry()

__all__ = ["KeyedLockRegistry", "record_locks", "script_key", "role_key", "profile_key"]
