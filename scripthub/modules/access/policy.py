"""Authorization policy for every operation that touches shared state.

``POLICY`` is the only place where role and ownership rules live. Services
never compare roles themselves; they describe the request as an
``Operation`` plus the caller's role and ownership, and ask ``check``.
An operation missing from the table is denied.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .exceptions import UnauthorizedError
from .models import Role

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    SOFT_DELETE = "soft_delete"
    RESTORE = "restore"
    PURGE = "purge"
    ASSIGN_ROLE = "assign_role"
    LIST_DELETED = "list_deleted"
    READ = "read"
    READ_DELETED = "read_deleted"
    SAVE_PROFILE = "save_profile"


class Requirement(str, Enum):
    ANYONE = "anyone"
    OWNER = "owner"
    OWNER_OR_ADMIN = "owner_or_admin"
    ADMIN = "admin"


POLICY: Mapping[Operation, Requirement] = {
    Operation.CREATE: Requirement.ANYONE,
    Operation.UPDATE: Requirement.OWNER,
    Operation.SOFT_DELETE: Requirement.OWNER_OR_ADMIN,
    Operation.RESTORE: Requirement.OWNER_OR_ADMIN,
    Operation.PURGE: Requirement.ADMIN,
    Operation.ASSIGN_ROLE: Requirement.ADMIN,
    Operation.LIST_DELETED: Requirement.ADMIN,
    Operation.READ: Requirement.ANYONE,
    Operation.READ_DELETED: Requirement.OWNER_OR_ADMIN,
    Operation.SAVE_PROFILE: Requirement.OWNER,
}

_DENY_REASONS: Mapping[Requirement, str] = {
    Requirement.OWNER: "only the owner may {op}",
    Requirement.OWNER_OR_ADMIN: "only the owner or an admin may {op}",
    Requirement.ADMIN: "only an admin may {op}",
}


@dataclass(frozen=True, slots=True)
class Decision:
    allowed: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.allowed


ALLOW = Decision(allowed=True)


def _satisfied(requirement: Requirement, role: Role, is_owner: bool) -> bool:
    if requirement is Requirement.ANYONE:
        return True
    if requirement is Requirement.OWNER:
        return is_owner
    if requirement is Requirement.OWNER_OR_ADMIN:
        return is_owner or role is Role.ADMIN
    if requirement is Requirement.ADMIN:
        return role is Role.ADMIN
    return False


def check(operation: Operation, role: Role, is_owner: bool = False) -> Decision:
    """Evaluate ``operation`` for a caller holding ``role``.

    ``is_owner`` is true when the caller is the author of the target record
    (or, for profiles, the identity the profile belongs to).
    """
    requirement = POLICY.get(operation)
    if requirement is None:
        return Decision(allowed=False, reason=f"operation {operation.value} is not permitted")
    if _satisfied(requirement, role, is_owner):
        return ALLOW
    template = _DENY_REASONS.get(requirement, "operation {op} is not permitted")
    return Decision(allowed=False, reason=template.format(op=operation.value.replace("_", " ")))


def ensure_allowed(operation: Operation, caller: str, role: Role, is_owner: bool = False) -> None:
    """Raise ``UnauthorizedError`` unless ``check`` allows the operation."""
    decision = check(operation, role, is_owner)
    if not decision.allowed:
        logger.warning("Denied %s for %s (role=%s): %s", operation.value, caller, role.value, decision.reason)
        raise UnauthorizedError(decision.reason or "unauthorized")


__all__ = [
    "ALLOW",
    "Decision",
    "Operation",
    "POLICY",
    "Requirement",
    "check",
    "ensure_allowed",
]
