"""Role endpoints: the caller's own role and admin role assignment."""
from fastapi import APIRouter, Depends, HTTPException, status

from scripthub.api.deps import get_current_identity, get_role_service
from scripthub.modules.access import RoleService, UnauthorizedError
from scripthub.schemas import AdminStatusResponse, RoleAssignRequest, RoleResponse, SuccessResponse

router = APIRouter()


@router.get("/me", response_model=RoleResponse, summary="当前角色")
async def get_caller_user_role(
    caller: str = Depends(get_current_identity),
    roles: RoleService = Depends(get_role_service),
):
    return RoleResponse(role=await roles.get_role(caller))


@router.get("/me/admin", response_model=AdminStatusResponse, summary="是否管理员")
async def is_caller_admin(
    caller: str = Depends(get_current_identity),
    roles: RoleService = Depends(get_role_service),
):
    return AdminStatusResponse(is_admin=await roles.is_admin(caller))


@router.put("/{identity}", response_model=SuccessResponse, summary="分配角色（管理员）")
async def assign_caller_user_role(
    identity: str,
    payload: RoleAssignRequest,
    caller: str = Depends(get_current_identity),
    roles: RoleService = Depends(get_role_service),
):
    try:
        assignment = await roles.assign_role(caller, identity, payload.role)
    except UnauthorizedError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"权限不足: {exc.reason}") from exc
    return SuccessResponse(message="角色已更新", data={"identity": assignment.identity, "role": assignment.role.value})
