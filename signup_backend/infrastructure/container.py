# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from signup_backend.application.services.password_hashing import WerkzeugPasswordHasher
from signup_backend.application.use_cases.admin.delete_user import DeleteUserUseCase
from signup_backend.application.use_cases.admin.export_users import ExportUsersUseCase
from signup_backend.application.use_cases.admin.list_users import ListUsersUseCase
from signup_backend.application.use_cases.admin.login_admin import AdminLoginUseCase
from signup_backend.application.use_cases.admin.logout_admin import AdminLogoutUseCase
from signup_backend.application.use_cases.users.register_user import RegisterUserUseCase
from signup_backend.domain.users.repositories import PasswordHasher, UserRepository
from signup_backend.infrastructure.admin_middleware import AdminGuard
from signup_backend.infrastructure.auth.session_registry import Clock, SessionRegistry
from signup_backend.infrastructure.db import create_db_engine, make_session_factory
from signup_backend.infrastructure.observability import RequestMetrics
from signup_backend.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from signup_backend.interfaces.http.controllers.admin_auth_controller import (
    AdminAuthController,
)
from signup_backend.interfaces.http.controllers.admin_users_controller import (
    AdminUsersController,
)
from signup_backend.interfaces.http.controllers.misc_controller import MiscController
from signup_backend.interfaces.http.controllers.signup_controller import SignupController
from signup_backend.shared.config import AppConfig


class Container:
    """Wires one application instance; every component is built lazily once."""

    def __init__(
        self,
        config: AppConfig,
        *,
        clock: Clock = time.monotonic,
        users: UserRepository | None = None,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self.config = config
        self._clock = clock
        self._users = users
        self._password_hasher = password_hasher

    @cached_property
    def engine(self) -> Engine:
        return create_db_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return make_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return self._password_hasher or WerkzeugPasswordHasher()

    @cached_property
    def user_repository(self) -> UserRepository:
        return self._users or SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def session_registry(self) -> SessionRegistry:
        return SessionRegistry(self.config.session_ttl_seconds, clock=self._clock)

    @cached_property
    def admin_guard(self) -> AdminGuard:
        assert self.config.session_cookie is not None
        return AdminGuard(self.session_registry, self.config.session_cookie)

    @cached_property
    def metrics(self) -> RequestMetrics:
        return RequestMetrics()

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(self.user_repository)

    @cached_property
    def delete_user_use_case(self) -> DeleteUserUseCase:
        return DeleteUserUseCase(self.user_repository)

    @cached_property
    def export_users_use_case(self) -> ExportUsersUseCase:
        return ExportUsersUseCase(self.list_users_use_case)

    @cached_property
    def admin_login_use_case(self) -> AdminLoginUseCase:
        assert self.config.admin_username is not None
        return AdminLoginUseCase(
            username=self.config.admin_username,
            password=self.config.admin_secret,
            sessions=self.session_registry,
        )

    @cached_property
    def admin_logout_use_case(self) -> AdminLogoutUseCase:
        return AdminLogoutUseCase(sessions=self.session_registry)

    # Controllers

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine, service_name=self.config.service_name)

    @cached_property
    def signup_controller(self) -> SignupController:
        return SignupController(register_use_case=self.register_user_use_case)

    @cached_property
    def admin_auth_controller(self) -> AdminAuthController:
        return AdminAuthController(
            guard=self.admin_guard,
            login_use_case=self.admin_login_use_case,
            logout_use_case=self.admin_logout_use_case,
            cookie_secure=self.config.cookie_secure,
        )

    @cached_property
    def admin_users_controller(self) -> AdminUsersController:
        return AdminUsersController(
            guard=self.admin_guard,
            list_users=self.list_users_use_case,
            delete_user=self.delete_user_use_case,
            export_users=self.export_users_use_case,
        )


__all__ = ["Container"]
