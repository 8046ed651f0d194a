# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import request


def client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def wants_html() -> bool:
    """True when the client declared HTML as an acceptable response type."""
    return bool(request.accept_mimetypes.accept_html)


__all__ = ["client_ip", "wants_html"]
