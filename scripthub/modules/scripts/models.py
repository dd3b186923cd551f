"""Domain models for shared scripts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ScriptState(str, Enum):
    ACTIVE = "active"
    SOFT_DELETED = "soft_deleted"


@dataclass(slots=True)
class Script:
    id: str
    title: str
    description: str
    category: str
    content: str
    author: str
    created_at: int
    updated_at: int
    deleted_at: Optional[int] = None

    @property
    def state(self) -> ScriptState:
        return ScriptState.SOFT_DELETED if self.deleted_at is not None else ScriptState.ACTIVE

    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_authored_by(self, identity: str) -> bool:
        return self.author == identity


@dataclass(slots=True)
class ScriptInput:
    """The caller-editable fields of a script."""

    title: str
    description: str
    category: str
    content: str
