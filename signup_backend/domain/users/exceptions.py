# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from signup_backend.shared.errors.base import DomainError, NotFoundError


class InvalidCredentialsError(DomainError):
    default_code = "invalid_credentials"
    default_status = HTTPStatus.UNAUTHORIZED


class UserNotFoundError(NotFoundError):
    default_code = "user_not_found"

    def __init__(self, user_id: str) -> None:
        super().__init__(context={"id": user_id})
