# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from signup_backend.domain.users.repositories import PasswordHasher

DEFAULT_METHOD = "scrypt"
DEFAULT_SALT_LENGTH = 16


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashes in werkzeug's ``method$salt$hash`` format."""

    def __init__(self, method: str = DEFAULT_METHOD, salt_length: int = DEFAULT_SALT_LENGTH) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method, salt_length=self._salt_length)

    def verify(self, password: str, hashed: str | None) -> bool:
        # Rows imported without a password carry no hash and can never match.
        if not hashed:
            return False
        return check_password_hash(hashed, password)


__all__ = ["DEFAULT_METHOD", "DEFAULT_SALT_LENGTH", "WerkzeugPasswordHasher"]
