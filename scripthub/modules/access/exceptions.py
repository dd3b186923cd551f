"""Access control specific exceptions."""


class AccessError(Exception):
    """Base class for access control errors."""


class UnauthenticatedError(AccessError):
    """Raised when no verifiable caller identity accompanies a request."""


class UnauthorizedError(AccessError):
    """Raised when an authenticated caller lacks the role or ownership an operation requires."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
