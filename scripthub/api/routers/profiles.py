"""Profile endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from scripthub.api.deps import get_current_identity, get_profile_service
from scripthub.modules.access import UnauthorizedError
from scripthub.modules.profiles import ProfileService
from scripthub.schemas import SuccessResponse, UserProfilePayload, UserProfileResponse

router = APIRouter()


@router.get("/me", response_model=Optional[UserProfileResponse], summary="当前用户资料")
async def get_caller_user_profile(
    caller: str = Depends(get_current_identity),
    profiles: ProfileService = Depends(get_profile_service),
):
    profile = await profiles.get_profile(caller)
    return UserProfileResponse.model_validate(profile) if profile else None


@router.put("/me", response_model=SuccessResponse, summary="保存当前用户资料")
async def save_caller_user_profile(
    payload: UserProfilePayload,
    caller: str = Depends(get_current_identity),
    profiles: ProfileService = Depends(get_profile_service),
):
    try:
        await profiles.save_profile(caller, caller, payload.name)
    except UnauthorizedError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"权限不足: {exc.reason}") from exc
    return SuccessResponse(message="资料已保存")


@router.get("/{identity}", response_model=Optional[UserProfileResponse], summary="用户资料")
async def get_user_profile(
    identity: str,
    caller: str = Depends(get_current_identity),
    profiles: ProfileService = Depends(get_profile_service),
):
    profile = await profiles.get_profile(identity)
    return UserProfileResponse.model_validate(profile) if profile else None
