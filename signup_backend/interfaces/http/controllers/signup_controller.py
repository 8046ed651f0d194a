# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from signup_backend.application.use_cases.users.register_user import (
    RegisterUserUseCase,
    SignupCommand,
)
from signup_backend.interfaces.http.dto.admin import SignupSuccessDTO, UserDTO
from signup_backend.interfaces.http.dto.signup import SignupRequestDTO
from signup_backend.shared.errors.validation import raise_validation_error
from signup_backend.shared.logging import logger
from signup_backend.shared.utils.http import client_ip


class SignupController:
    def __init__(self, *, register_use_case: RegisterUserUseCase) -> None:
        self._register_use_case = register_use_case

    def signup(self) -> tuple[Response, int]:
        payload = request.get_json(silent=True)
        try:
            dto = SignupRequestDTO.model_validate(payload if isinstance(payload, dict) else {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(
            SignupCommand(
                telegram=dto.telegram,
                password=dto.password,
                name=dto.name,
                email=dto.email,
                whatsapp=dto.whatsapp,
            )
        )

        logger.info(f"signup: ok id={user.id} from {client_ip()}")
        body = SignupSuccessDTO(user=UserDTO.model_validate(user))
        return jsonify(body.model_dump(mode="json", by_alias=True)), 201

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("signup", __name__)
        bp.add_url_rule("/api/signup", view_func=self.signup, methods=["POST"])
        return bp


__all__ = ["SignupController"]
