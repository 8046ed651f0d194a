# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class NewUser:
    id: str
    telegram: str
    password_hash: str
    name: str | None = None
    email: str | None = None
    whatsapp: str | None = None


@dataclass(slots=True, frozen=True)
class User:
    """Public shape of a stored user; the password hash never leaves the store."""

    id: str
    name: str | None
    email: str | None
    whatsapp: str | None
    telegram: str | None
    created_at: datetime | None
