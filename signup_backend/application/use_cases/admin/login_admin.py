# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hmac

from signup_backend.domain.users.exceptions import InvalidCredentialsError
from signup_backend.domain.users.repositories import SessionStore


def _matches(supplied: str | None, expected: str) -> bool:
    return hmac.compare_digest((supplied or "").encode("utf-8"), expected.encode("utf-8"))


class AdminLoginUseCase:
    """Checks the single configured admin credential pair and opens a session."""

    def __init__(self, *, username: str, password: str, sessions: SessionStore) -> None:
        self._username = username
        self._password = password
        self._sessions = sessions

    def execute(self, username: str | None, password: str | None) -> str:
        # Both comparisons always run so timing does not reveal which one failed.
        user_ok = _matches(username, self._username)
        password_ok = _matches(password, self._password)
        if not (user_ok and password_ok):
            raise InvalidCredentialsError()
        return self._sessions.create()


__all__ = ["AdminLoginUseCase"]
