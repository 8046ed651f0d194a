# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import csv
import io
import re
from datetime import datetime

from signup_backend.application.use_cases.admin.list_users import ListUsersUseCase
from signup_backend.domain.users.entities import User
from signup_backend.shared.errors.base import (
    SUPPORTED_EXPORT_FORMATS,
    UnsupportedExportFormatError,
)

EXPORT_COLUMNS: tuple[str, ...] = ("name", "email", "whatsapp", "telegram", "createdAt", "id")
SUPPORTED_FORMATS: frozenset[str] = frozenset(SUPPORTED_EXPORT_FORMATS)

_LINE_BREAKS = re.compile(r"\r\n|[\r\n]")


def _cell(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        value = value.isoformat()
    return _LINE_BREAKS.sub(" ", str(value))


def _row(user: User) -> list[str]:
    values = {
        "name": user.name,
        "email": user.email,
        "whatsapp": user.whatsapp,
        "telegram": user.telegram,
        "createdAt": user.created_at,
        "id": user.id,
    }
    return [_cell(values[column]) for column in EXPORT_COLUMNS]


class ExportUsersUseCase:
    """Renders the admin user listing as a downloadable document."""

    def __init__(self, list_users: ListUsersUseCase) -> None:
        self._list_users = list_users

    def execute(self, export_format: str | None = "csv") -> str:
        export_format = (export_format or "csv").strip().lower()
        if export_format not in SUPPORTED_FORMATS:
            raise UnsupportedExportFormatError(export_format)

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
        writer.writerow(EXPORT_COLUMNS)
        for user in self._list_users.execute():
            writer.writerow(_row(user))
        return buffer.getvalue().rstrip("\n")


__all__ = ["EXPORT_COLUMNS", "ExportUsersUseCase", "SUPPORTED_FORMATS"]
