# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

REDACTED = "***REDACTED***"

_I = re.IGNORECASE

# Applied in order; each entry is (pattern, replacement).
_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    # Credentials carried in headers
    (re.compile(r"((?:set-)?cookie\s*:\s*)[^\r\n]+", _I), rf"\1{REDACTED}"),
    (re.compile(r"(authorization\s*:\s*['\"]?)[^'\"\r\n]{10,}", _I), rf"\1{REDACTED}"),
    (re.compile(r"(bearer\s+)[\w\-.]{20,}", _I), rf"\1{REDACTED}"),
    # key=value secrets
    (re.compile(r"((?:password|passwd|admin_pass)\s*[:=]\s*['\"]?)[^'\"\s,}]+", _I), rf"\1{REDACTED}"),
    (re.compile(r"((?:token|secret)\s*[:=]\s*['\"]?)[\w\-.]{16,}", _I), rf"\1{REDACTED}"),
    (re.compile(r"(session[_-]?(?:id|token|cookie)?\s*[:=]\s*['\"]?)[\w\-.]{16,}", _I), rf"\1{REDACTED}"),
    # Database URLs with an inline password
    (re.compile(r"\b((?:postgres(?:ql)?|mysql|mariadb)(?:\+\w+)?://[^:/@\s]+:)[^@\s]+@"), rf"\1{REDACTED}@"),
    # Signup contact details
    (re.compile(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,})"), r"***@\1"),
)


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru filter: rewrites the message in place and never drops a record."""
    record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["REDACTED", "sanitize_message", "sanitize_record"]
