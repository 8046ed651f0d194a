# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import NewUser, User


class UserRepository(Protocol):
    def add(self, user: NewUser) -> User: ...
    def list_all(self) -> list[User]: ...
    def delete_by_id(self, user_id: str) -> bool: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str | None) -> bool: ...


class SessionStore(Protocol):
    def create(self) -> str: ...
    def is_valid(self, token: str | None) -> bool: ...
    def revoke(self, token: str | None) -> None: ...
