"""Bearer token helpers: the identity provider's tokens carry the caller principal in ``sub``."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from scripthub.core.config import get_settings
from scripthub.modules.access import UnauthenticatedError

MAX_IDENTITY_LENGTH = 255


def create_access_token(identity: str, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": identity,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_identity(token: str) -> str:
    """Return the verified caller identity carried by ``token``."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise UnauthenticatedError("could not validate credentials") from exc

    identity = payload.get("sub")
    if not isinstance(identity, str) or not identity.strip() or len(identity) > MAX_IDENTITY_LENGTH:
        raise UnauthenticatedError("token does not carry a caller identity")
    return identity
