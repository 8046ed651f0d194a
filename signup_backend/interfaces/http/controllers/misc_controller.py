# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify
from sqlalchemy.engine import Engine

from signup_backend.infrastructure.health import check_database
from signup_backend.shared.logging import logger


class MiscController:
    def __init__(self, *, engine: Engine, service_name: str) -> None:
        self._engine = engine
        self._service_name = service_name

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True, "service": self._service_name}
        try:
            check_database(self._engine)
            status["database"] = "ok"
        except Exception as exc:
            logger.warning(f"health: database check failed: {type(exc).__name__}")
            status["ok"] = False
            status["database"] = f"error: {type(exc).__name__}"
            return jsonify(status), 503
        return jsonify(status), 200
