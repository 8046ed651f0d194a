# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from http import HTTPStatus
from typing import Any, Literal
from urllib.parse import unquote

from flask import Blueprint, Request, Response, jsonify, redirect, request

from signup_backend.domain.users.repositories import SessionStore
from signup_backend.shared.logging import logger
from signup_backend.shared.utils.http import client_ip, wants_html

LOGIN_PATH = "/admin/login"


@dataclass(slots=True, frozen=True)
class Authenticated:
    token: str


@dataclass(slots=True, frozen=True)
class Unauthenticated:
    reason: Literal["missing_cookie", "invalid_session"]


AuthResult = Authenticated | Unauthenticated


def parse_cookie_header(header: str | None) -> dict[str, str]:
    cookies: dict[str, str] = {}
    if not header or not isinstance(header, str):
        return cookies
    for part in header.split(";"):
        name, sep, value = part.strip().partition("=")
        name = name.strip()
        if not name or not sep:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        cookies[name] = unquote(value)
    return cookies


class AdminGuard:
    """Gates admin-scoped routes behind a valid session cookie."""

    def __init__(self, sessions: SessionStore, cookie_name: str) -> None:
        self._sessions = sessions
        self._cookie_name = cookie_name

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def session_token(self, req: Request) -> str | None:
        return parse_cookie_header(req.headers.get("Cookie")).get(self._cookie_name) or None

    def authenticate(self, req: Request) -> AuthResult:
        token = self.session_token(req)
        if token is None:
            return Unauthenticated(reason="missing_cookie")
        if not self._sessions.is_valid(token):
            return Unauthenticated(reason="invalid_session")
        return Authenticated(token=token)

    def reject(self, result: Unauthenticated) -> Response:
        logger.warning(
            f"admin.auth: unauthorized {request.method} {request.path} from {client_ip()}"
        )
        logger.debug(f"admin.auth: rejection reason={result.reason}")
        if wants_html():
            return redirect(LOGIN_PATH)
        response = jsonify({"ok": False, "error": "unauthorized"})
        response.status_code = HTTPStatus.UNAUTHORIZED
        return response

    def enforce(self) -> Response | None:
        # CORS preflight never carries the session cookie.
        if request.method == "OPTIONS":
            return None
        result = self.authenticate(request)
        if isinstance(result, Unauthenticated):
            return self.reject(result)
        return None

    def protect(self, bp: Blueprint) -> Blueprint:
        bp.before_request(self.enforce)
        return bp

    def require_admin(self, func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            rejection = self.enforce()
            if rejection is not None:
                return rejection
            return func(*args, **kwargs)

        return wrapper


__all__ = [
    "AdminGuard",
    "AuthResult",
    "Authenticated",
    "LOGIN_PATH",
    "Unauthenticated",
    "parse_cookie_header",
]
