"""Domain models for user profiles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class UserProfile:
    identity: str
    name: str
