# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, redirect, request
from pydantic import ValidationError

from signup_backend.application.use_cases.admin.login_admin import AdminLoginUseCase
from signup_backend.application.use_cases.admin.logout_admin import AdminLogoutUseCase
from signup_backend.domain.users.exceptions import InvalidCredentialsError
from signup_backend.infrastructure.admin_middleware import LOGIN_PATH, AdminGuard
from signup_backend.interfaces.http.dto.admin import LoginFormDTO
from signup_backend.shared.logging import logger
from signup_backend.shared.utils.http import client_ip

ADMIN_HOME = "/admin"

_LOGIN_PAGE = """<!doctype html>
<html lang="en">
<head><meta charset="utf-8"><title>Admin login</title></head>
<body>
  <h1>Admin login</h1>
  {notice}
  <form method="post" action="/admin/login">
    <label>Username <input name="username" autocomplete="username" required></label>
    <label>Password <input name="password" type="password" autocomplete="current-password" required></label>
    <button type="submit">Sign in</button>
  </form>
</body>
</html>
"""

_ERROR_NOTICE = '<p role="alert">Invalid username or password.</p>'

_HOME_PAGE = """<!doctype html>
<html lang="en">
<head><meta charset="utf-8"><title>Admin</title></head>
<body>
  <h1>Registered users</h1>
  <p><a href="/api/users">Users (JSON)</a> | <a href="/api/export?format=csv">Export CSV</a></p>
  <form method="post" action="/admin/logout"><button type="submit">Sign out</button></form>
</body>
</html>
"""


def _html(body: str) -> Response:
    return Response(body, mimetype="text/html")


class AdminAuthController:
    def __init__(
        self,
        *,
        guard: AdminGuard,
        login_use_case: AdminLoginUseCase,
        logout_use_case: AdminLogoutUseCase,
        cookie_secure: bool,
    ) -> None:
        self._guard = guard
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._cookie_secure = cookie_secure

    def login_page(self) -> Response:
        notice = _ERROR_NOTICE if request.args.get("error") else ""
        return _html(_LOGIN_PAGE.format(notice=notice))

    def home(self) -> Response:
        return _html(_HOME_PAGE)

    def _login_form(self) -> LoginFormDTO:
        if request.is_json:
            data = request.get_json(silent=True)
            data = data if isinstance(data, dict) else {}
        else:
            data = request.form.to_dict()
        try:
            return LoginFormDTO.model_validate(data)
        except ValidationError:
            return LoginFormDTO()

    def login(self) -> Response:
        form = self._login_form()

        try:
            token = self._login_use_case.execute(form.username, form.password)
        except InvalidCredentialsError:
            logger.warning(f"admin.login: failure on {request.path} from {client_ip()}")
            return redirect(f"{LOGIN_PATH}?error=1")

        response = redirect(ADMIN_HOME)
        response.set_cookie(
            self._guard.cookie_name,
            token,
            path="/",
            httponly=True,
            samesite="Lax",
            secure=self._cookie_secure,
        )
        logger.info(f"admin.login: ok from {client_ip()}")
        return response

    def logout(self) -> Response:
        self._logout_use_case.execute(self._guard.session_token(request))

        response = redirect(LOGIN_PATH)
        response.delete_cookie(
            self._guard.cookie_name,
            path="/",
            httponly=True,
            samesite="Lax",
            secure=self._cookie_secure,
        )
        logger.info(f"admin.logout: ok from {client_ip()}")
        return response

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("admin_auth", __name__, url_prefix=ADMIN_HOME)
        bp.add_url_rule("/login", view_func=self.login_page, methods=["GET"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("", view_func=self._guard.require_admin(self.home), methods=["GET"])
        return bp


__all__ = ["ADMIN_HOME", "AdminAuthController"]
