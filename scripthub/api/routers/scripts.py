"""Script endpoints: publishing, browsing, searching and the trash lifecycle."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from scripthub.api.deps import get_current_identity, get_script_query_service, get_script_service
from scripthub.modules.access import UnauthorizedError
from scripthub.modules.scripts import (
    InvalidScriptStateError,
    ScriptInput,
    ScriptNotFoundError,
    ScriptQueryService,
    ScriptService,
)
from scripthub.schemas import (
    CategoryListResponse,
    ScriptCreate,
    ScriptCreatedResponse,
    ScriptResponse,
    ScriptUpdate,
    SuccessResponse,
)

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="脚本不存在")


def _forbidden(exc: UnauthorizedError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"权限不足: {exc.reason}")


@router.post("", response_model=ScriptCreatedResponse, status_code=status.HTTP_201_CREATED, summary="发布脚本")
async def create_script(
    payload: ScriptCreate,
    caller: str = Depends(get_current_identity),
    service: ScriptService = Depends(get_script_service),
):
    try:
        script = await service.create_script(caller, ScriptInput(**payload.model_dump()))
    except UnauthorizedError as exc:
        raise _forbidden(exc) from exc
    return ScriptCreatedResponse(id=script.id)


@router.get("", response_model=List[ScriptResponse], summary="全部脚本")
async def get_all_scripts(
    caller: str = Depends(get_current_identity),
    queries: ScriptQueryService = Depends(get_script_query_service),
):
    scripts = await queries.list_scripts()
    return [ScriptResponse.model_validate(script) for script in scripts]


@router.get("/search", response_model=List[ScriptResponse], summary="按标题搜索")
async def search_scripts_by_title(
    title: str = Query("", description="case-insensitive title fragment"),
    caller: str = Depends(get_current_identity),
    queries: ScriptQueryService = Depends(get_script_query_service),
):
    scripts = await queries.search_by_title(title)
    return [ScriptResponse.model_validate(script) for script in scripts]


@router.get("/categories", response_model=CategoryListResponse, summary="分类列表")
async def list_script_categories(
    caller: str = Depends(get_current_identity),
    queries: ScriptQueryService = Depends(get_script_query_service),
):
    return CategoryListResponse(categories=await queries.list_categories())


@router.get("/category/{category}", response_model=List[ScriptResponse], summary="按分类筛选")
async def filter_scripts_by_category(
    category: str,
    caller: str = Depends(get_current_identity),
    queries: ScriptQueryService = Depends(get_script_query_service),
):
    scripts = await queries.list_by_category(category)
    return [ScriptResponse.model_validate(script) for script in scripts]


@router.get("/author/{identity}", response_model=List[ScriptResponse], summary="按作者筛选")
async def get_scripts_by_author(
    identity: str,
    caller: str = Depends(get_current_identity),
    queries: ScriptQueryService = Depends(get_script_query_service),
):
    scripts = await queries.list_by_author(identity)
    return [ScriptResponse.model_validate(script) for script in scripts]


@router.get("/deleted", response_model=List[ScriptResponse], summary="回收站（管理员）")
async def get_deleted_scripts(
    caller: str = Depends(get_current_identity),
    queries: ScriptQueryService = Depends(get_script_query_service),
):
    try:
        scripts = await queries.list_deleted(caller)
    except UnauthorizedError as exc:
        raise _forbidden(exc) from exc
    return [ScriptResponse.model_validate(script) for script in scripts]


@router.get("/{script_id}", response_model=ScriptResponse, summary="脚本详情")
async def get_script(
    script_id: str,
    caller: str = Depends(get_current_identity),
    queries: ScriptQueryService = Depends(get_script_query_service),
):
    try:
        script = await queries.get_script(caller, script_id)
    except ScriptNotFoundError as exc:
        raise _not_found() from exc
    return ScriptResponse.model_validate(script)


@router.put("/{script_id}", response_model=SuccessResponse, summary="编辑脚本")
async def update_script(
    script_id: str,
    payload: ScriptUpdate,
    caller: str = Depends(get_current_identity),
    service: ScriptService = Depends(get_script_service),
):
    try:
        await service.update_script(caller, script_id, ScriptInput(**payload.model_dump()))
    except ScriptNotFoundError as exc:
        raise _not_found() from exc
    except UnauthorizedError as exc:
        raise _forbidden(exc) from exc
    return SuccessResponse(message="脚本已更新")


@router.delete("/{script_id}", response_model=SuccessResponse, summary="删除脚本（移入回收站）")
async def delete_script(
    script_id: str,
    caller: str = Depends(get_current_identity),
    service: ScriptService = Depends(get_script_service),
):
    try:
        await service.soft_delete_script(caller, script_id)
    except ScriptNotFoundError as exc:
        raise _not_found() from exc
    except UnauthorizedError as exc:
        raise _forbidden(exc) from exc
    return SuccessResponse(message="脚本已移入回收站")


@router.post("/{script_id}/restore", response_model=SuccessResponse, summary="恢复脚本")
async def restore_script(
    script_id: str,
    caller: str = Depends(get_current_identity),
    service: ScriptService = Depends(get_script_service),
):
    try:
        await service.restore_script(caller, script_id)
    except ScriptNotFoundError as exc:
        raise _not_found() from exc
    except UnauthorizedError as exc:
        raise _forbidden(exc) from exc
    return SuccessResponse(message="脚本已恢复")


@router.delete("/{script_id}/permanent", response_model=SuccessResponse, summary="彻底删除脚本（管理员）")
async def permanently_delete_script(
    script_id: str,
    caller: str = Depends(get_current_identity),
    service: ScriptService = Depends(get_script_service),
):
    try:
        await service.purge_script(caller, script_id)
    except ScriptNotFoundError as exc:
        raise _not_found() from exc
    except UnauthorizedError as exc:
        raise _forbidden(exc) from exc
    except InvalidScriptStateError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return SuccessResponse(message="脚本已彻底删除")
