"""Pydantic schemas used across the project."""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from scripthub.modules.access import Role


class ScriptPayload(BaseModel):
    title: str = Field(..., max_length=255)
    description: str = ""
    category: str = Field(..., max_length=100)
    content: str = ""


class ScriptCreate(ScriptPayload):
    pass


class ScriptUpdate(ScriptPayload):
    pass


class ScriptCreatedResponse(BaseModel):
    id: str


class ScriptResponse(BaseModel):
    id: str
    title: str
    description: str
    category: str
    content: str
    author: str
    created_at: int = Field(..., description="nanoseconds since the Unix epoch")
    updated_at: int = Field(..., description="nanoseconds since the Unix epoch")
    deleted_at: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class CategoryListResponse(BaseModel):
    categories: list[str] = Field(default_factory=list)


class RoleResponse(BaseModel):
    role: Role


class AdminStatusResponse(BaseModel):
    is_admin: bool


class RoleAssignRequest(BaseModel):
    role: Role


class UserProfilePayload(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class UserProfileResponse(BaseModel):
    name: str

    model_config = ConfigDict(from_attributes=True)


class SuccessResponse(BaseModel):
    success: bool = True
    message: str = "ok"
    data: Optional[Any] = None
