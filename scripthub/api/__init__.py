from fastapi import APIRouter

from scripthub.api.routers import profiles, roles, scripts


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(scripts.router, prefix="/scripts", tags=["脚本"])
    router.include_router(roles.router, prefix="/roles", tags=["角色"])
    router.include_router(profiles.router, prefix="/profiles", tags=["用户资料"])
    return router


__all__ = [
    "create_api_router",
]
