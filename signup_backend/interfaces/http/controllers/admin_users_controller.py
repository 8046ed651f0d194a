# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from signup_backend.application.use_cases.admin.delete_user import DeleteUserUseCase
from signup_backend.application.use_cases.admin.export_users import ExportUsersUseCase
from signup_backend.application.use_cases.admin.list_users import ListUsersUseCase
from signup_backend.infrastructure.admin_middleware import AdminGuard
from signup_backend.interfaces.http.dto.admin import DeleteSuccessDTO, UserDTO, UserListDTO
from signup_backend.shared.logging import logger

EXPORT_FILENAME = "users.csv"


class AdminUsersController:
    def __init__(
        self,
        *,
        guard: AdminGuard,
        list_users: ListUsersUseCase,
        delete_user: DeleteUserUseCase,
        export_users: ExportUsersUseCase,
    ) -> None:
        self._guard = guard
        self._list_users = list_users
        self._delete_user = delete_user
        self._export_users = export_users

    def users(self) -> tuple[Response, int]:
        users = self._list_users.execute()
        result = UserListDTO(
            count=len(users),
            users=[UserDTO.model_validate(user) for user in users],
        )
        logger.info(f"admin.users: returned {len(users)} users")
        return jsonify(result.model_dump(mode="json", by_alias=True)), 200

    def delete(self, user_id: str) -> tuple[Response, int]:
        deleted = self._delete_user.execute(user_id)
        logger.info(f"admin.delete_user: deleted id={deleted}")
        return jsonify(DeleteSuccessDTO(deleted=deleted).model_dump()), 200

    def export(self) -> Response:
        body = self._export_users.execute(request.args.get("format", "csv"))
        logger.info("admin.export: csv export generated")
        response = Response(body, mimetype="text/csv")
        response.headers["Content-Disposition"] = f'attachment; filename="{EXPORT_FILENAME}"'
        return response

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("admin_users", __name__, url_prefix="/api")
        bp.add_url_rule("/users", view_func=self.users, methods=["GET"])
        bp.add_url_rule(
            "/users/", view_func=self.delete, methods=["DELETE"], defaults={"user_id": ""}
        )
        bp.add_url_rule("/users/<user_id>", view_func=self.delete, methods=["DELETE"])
        bp.add_url_rule("/export", view_func=self.export, methods=["GET"])
        return self._guard.protect(bp)


__all__ = ["AdminUsersController"]
