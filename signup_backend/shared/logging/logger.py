# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Loguru setup for the signup service.

Every record carries the service name and the correlation id of the request
being handled ("-" outside a request). Records from the stdlib ``logging``
module (werkzeug, SQLAlchemy) are forwarded into loguru so that a single set
of sinks and redaction rules applies to all output.
"""

from __future__ import annotations

import inspect
import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

DEFAULT_SERVICE = "signup-backend"

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "{extra[service]} | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_QUIET_LIBRARIES = {"werkzeug": logging.INFO, "sqlalchemy.engine": logging.WARNING}

_request_id: ContextVar[str] = ContextVar("signup_backend_correlation_id", default="-")

_logger.configure(extra={"correlation_id": "-", "service": DEFAULT_SERVICE})


class _StdlibBridge(logging.Handler):
    """Re-emits stdlib log records through loguru at the caller's frame."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame is not None and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        _logger.opt(depth=depth, exception=record.exc_info).bind(
            correlation_id=_request_id.get()
        ).log(level, record.getMessage())


class ContextualLogger:
    """Loguru facade that stamps the current correlation id on each call."""

    def __getattr__(self, name: str) -> Any:
        return getattr(_logger.bind(correlation_id=_request_id.get()), name)


def set_correlation_id(value: str | None) -> None:
    _request_id.set(value or "-")


def get_correlation_id() -> str:
    return _request_id.get()


def clear_correlation_id() -> None:
    _request_id.set("-")


def _sink_options(level: str) -> dict[str, Any]:
    return {
        "level": level,
        "format": _FMT,
        "filter": sanitize_record,
        "backtrace": False,
        "diagnose": False,
    }


def setup_logging(
    level: str | None = None,
    log_file: Path | str | None = None,
    *,
    service: str = DEFAULT_SERVICE,
) -> None:
    level = (level or "INFO").upper()

    _logger.remove()
    _logger.configure(extra={"correlation_id": "-", "service": service})
    _logger.add(sys.stderr, colorize=True, **_sink_options(level))

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            path,
            colorize=False,
            enqueue=True,
            encoding="utf-8",
            rotation="10 MB",
            retention=5,
            **_sink_options(level),
        )

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)
    for name, lib_level in _QUIET_LIBRARIES.items():
        logging.getLogger(name).setLevel(lib_level)


logger = ContextualLogger()

__all__ = [
    "DEFAULT_SERVICE",
    "clear_correlation_id",
    "get_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
