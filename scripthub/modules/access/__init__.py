"""Role directory and authorization policy."""

from .exceptions import AccessError, UnauthenticatedError, UnauthorizedError
from .models import DEFAULT_ROLE, Role, RoleAssignment
from .policy import Decision, Operation, check, ensure_allowed
from .service import RoleService

__all__ = [
    "AccessError",
    "DEFAULT_ROLE",
    "Decision",
    "Operation",
    "Role",
    "RoleAssignment",
    "RoleService",
    "UnauthenticatedError",
    "UnauthorizedError",
    "check",
    "ensure_allowed",
]
