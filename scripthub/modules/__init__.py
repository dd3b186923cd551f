"""Feature modules and their public exports."""

from . import access, profiles, scripts

__all__ = [
    "access",
    "profiles",
    "scripts",
]
