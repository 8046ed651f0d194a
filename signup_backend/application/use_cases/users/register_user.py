# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from signup_backend.domain.users.entities import NewUser, User
from signup_backend.domain.users.repositories import PasswordHasher, UserRepository
from signup_backend.shared.utils.tokens import random_token


@dataclass(slots=True, frozen=True)
class SignupCommand:
    telegram: str
    password: str
    name: str | None = None
    email: str | None = None
    whatsapp: str | None = None


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        id_factory: Callable[[], str] = random_token,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._id_factory = id_factory

    def execute(self, command: SignupCommand) -> User:
        hashed = self._password_hasher.hash(command.password)
        record = NewUser(
            id=self._id_factory(),
            name=command.name,
            email=command.email,
            whatsapp=command.whatsapp,
            telegram=command.telegram,
            password_hash=hashed,
        )
        return self._users.add(record)


__all__ = ["RegisterUserUseCase", "SignupCommand"]
