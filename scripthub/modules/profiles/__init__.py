"""User profile services."""

from .models import UserProfile
from .service import ProfileService

__all__ = ["ProfileService", "UserProfile"]
