# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

TOKEN_BYTES = 16


def random_token(nbytes: int = TOKEN_BYTES) -> str:
    return secrets.token_hex(nbytes)


__all__ = ["TOKEN_BYTES", "random_token"]
