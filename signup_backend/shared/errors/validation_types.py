# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    PASSWORD_REQUIRED = "password_required"
    TELEGRAM_REQUIRED = "telegram_required"
    TELEGRAM_INVALID = "telegram_invalid"


__all__ = ["ValidationErrorType"]
