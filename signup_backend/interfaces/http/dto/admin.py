from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True, serialize_by_alias=True)

    id: str
    name: str | None = None
    email: str | None = None
    whatsapp: str | None = None
    telegram: str | None = None
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")


class UserListDTO(BaseModel):
    count: int
    users: list[UserDTO]


class SignupSuccessDTO(BaseModel):
    ok: bool = True
    user: UserDTO


class DeleteSuccessDTO(BaseModel):
    ok: bool = True
    deleted: str


class LoginFormDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str | None = None
    password: str | None = None
