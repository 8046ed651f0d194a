# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar

SUPPORTED_EXPORT_FORMATS: tuple[str, ...] = ("csv",)


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing or invalid."""


@dataclass(slots=True)
class AppError(Exception):
    """Error that is reported to the client as ``{"ok": false, "error": code}``."""

    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"ok": False, "error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class _PresetError(AppError):
    """AppError whose code and status default to class-level presets."""

    default_code: ClassVar[str]
    default_status: ClassVar[HTTPStatus]

    def __init__(
        self, code: str | None = None, *, context: Mapping[str, Any] | None = None
    ) -> None:
        AppError.__init__(
            self, code or self.default_code, self.default_status, context
        )


class DomainError(_PresetError):
    default_code = "domain_error"
    default_status = HTTPStatus.BAD_REQUEST


class ValidationError(_PresetError):
    default_code = "validation_error"
    default_status = HTTPStatus.BAD_REQUEST


class NotFoundError(_PresetError):
    default_code = "not_found"
    default_status = HTTPStatus.NOT_FOUND


class UnsupportedExportFormatError(ValidationError):
    default_code = "unsupported_export_format"

    def __init__(self, export_format: str) -> None:
        super().__init__(
            context={"format": export_format, "supported": list(SUPPORTED_EXPORT_FORMATS)}
        )


class UserIdRequiredError(ValidationError):
    default_code = "id_required"
