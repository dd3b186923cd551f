"""Reusable FastAPI dependencies."""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from scripthub.core.security import decode_identity
from scripthub.infrastructure.database import get_session as get_db_session
from scripthub.modules.access import RoleService, UnauthenticatedError
from scripthub.modules.profiles import ProfileService
from scripthub.modules.scripts import ScriptQueryService, ScriptService

# auto_error is off so a missing header yields 401 rather than FastAPI's default
security = HTTPBearer(auto_error=False)


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_identity(credentials.credentials)
    except UnauthenticatedError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def get_role_service(db: AsyncSession = Depends(get_db_session)) -> RoleService:
    return RoleService.with_session(db)


def get_script_service(db: AsyncSession = Depends(get_db_session)) -> ScriptService:
    return ScriptService.with_session(db)


def get_script_query_service(db: AsyncSession = Depends(get_db_session)) -> ScriptQueryService:
    return ScriptQueryService.with_session(db)


def get_profile_service(db: AsyncSession = Depends(get_db_session)) -> ProfileService:
    return ProfileService.with_session(db)


__all__ = [
    "get_current_identity",
    "get_db_session",
    "get_profile_service",
    "get_role_service",
    "get_script_query_service",
    "get_script_service",
]
