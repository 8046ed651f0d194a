# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from signup_backend.domain.users.exceptions import UserNotFoundError
from signup_backend.domain.users.repositories import UserRepository
from signup_backend.shared.errors.base import UserIdRequiredError


class DeleteUserUseCase:
    def __init__(self, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: str | None) -> str:
        user_id = (user_id or "").strip()
        if not user_id:
            raise UserIdRequiredError()
        if not self._users.delete_by_id(user_id):
            raise UserNotFoundError(user_id)
        return user_id


__all__ = ["DeleteUserUseCase"]
