# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from signup_backend.shared.logging import logger
from signup_backend.shared.utils.http import client_ip

from .base import AppError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def register_error_handler(
    app: Flask, *, default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        if exc.code is None or exc.code < 400:
            return exc
        code = (exc.name or "http_error").lower().replace(" ", "_")
        response = jsonify({"ok": False, "error": code})
        response.status_code = exc.code or default_status
        return response

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        debug_mode = bool(app.config.get("DEBUG_LOGGING"))
        ip_address = client_ip()

        if debug_mode:
            logger.opt(exception=exc).error(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {ip_address}, query={dict(request.args)}, "
                f"body_size={request.content_length or 0}"
            )
        else:
            logger.opt(exception=exc).error(
                f"Unhandled {type(exc).__name__} on {request.method} {request.path} "
                f"from {ip_address}"
            )

        response = jsonify({"ok": False, "error": "internal_error"})
        return response, default_status


__all__ = ["handle_app_error", "register_error_handler"]
