# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys

from flask import Flask
from flask_cors import CORS

from signup_backend.infrastructure.container import Container
from signup_backend.infrastructure.db import init_db
from signup_backend.infrastructure.observability import configure_metrics
from signup_backend.shared.config import AppConfig, load_config
from signup_backend.shared.errors import ConfigurationError, register_error_handler
from signup_backend.shared.logging import logger, setup_logging
from signup_backend.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or (container.config if container else load_config())
    setup_logging(config.log_level, config.log_file, service=config.service_name)
    container = container or Container(config)

    init_db(container.engine)

    app = Flask(__name__)
    app.config.update(DEBUG_LOGGING=config.debug_logging)
    app.extensions["signup_backend.container"] = container

    # Registered first: its timer starts before and its recorder runs after every other hook.
    configure_metrics(app, container.metrics)
    configure_request_logging(app, debug_mode=config.debug_logging)
    register_error_handler(app)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.allowed_origins}},
        methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.signup_controller.as_blueprint())
    app.register_blueprint(container.admin_auth_controller.as_blueprint())
    app.register_blueprint(container.admin_users_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        return resp

    logger.info(f"{config.service_name}: Flask app initialized")
    return app


def main() -> int:
    try:
        config = load_config()
    except ConfigurationError as exc:
        setup_logging()
        logger.error(f"configuration error: {exc}")
        return 1

    app = create_app(config)
    logger.info(f"{config.service_name}: listening on {config.host}:{config.port}")
    logger.info("admin UI ready at /admin")
    app.run(host=config.host, port=config.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
