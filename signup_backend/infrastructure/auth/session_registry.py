# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Process-local registry of admin session tokens.

Sessions live only in memory: a restart invalidates every token and forces
admins to sign in again. Expired entries are evicted lazily on access and
swept whenever a new session is created.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock
from typing import ClassVar

from signup_backend.shared.errors.base import ConfigurationError
from signup_backend.shared.logging import logger
from signup_backend.shared.utils.tokens import random_token

Clock = Callable[[], float]
TokenFactory = Callable[[], str]


@dataclass(slots=True, frozen=True)
class Session:
    token: str
    expires_at: float


class TokenCollisionError(RuntimeError):
    pass


class SessionRegistry:
    MAX_CREATE_ATTEMPTS: ClassVar[int] = 5

    def __init__(
        self,
        ttl_seconds: float,
        *,
        clock: Clock = time.monotonic,
        token_factory: TokenFactory = random_token,
    ) -> None:
        if ttl_seconds <= 0:
            raise ConfigurationError(f"session TTL must be positive, got {ttl_seconds}")
        self._ttl = float(ttl_seconds)
        self._clock = clock
        self._token_factory = token_factory
        self._sessions: dict[str, Session] = {}
        self._lock = Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def create(self) -> str:
        with self._lock:
            self._purge_expired_locked()
            for _ in range(self.MAX_CREATE_ATTEMPTS):
                token = self._token_factory()
                if token in self._sessions:
                    logger.warning("sessions: token collision, regenerating")
                    continue
                self._sessions[token] = Session(
                    token=token, expires_at=self._clock() + self._ttl
                )
                logger.debug(f"sessions: created, active={len(self._sessions)}")
                return token
        raise TokenCollisionError(
            f"could not generate a unique session token in {self.MAX_CREATE_ATTEMPTS} attempts"
        )

    def is_valid(self, token: str | None) -> bool:
        if not token or not isinstance(token, str):
            return False
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return False
            if session.expires_at <= self._clock():
                del self._sessions[token]
                logger.debug("sessions: evicted expired session on access")
                return False
            return True

    def revoke(self, token: str | None) -> None:
        if not token or not isinstance(token, str):
            return
        with self._lock:
            self._sessions.pop(token, None)

    def purge_expired(self) -> int:
        with self._lock:
            return self._purge_expired_locked()

    def _purge_expired_locked(self) -> int:
        now = self._clock()
        expired = [token for token, s in self._sessions.items() if s.expires_at <= now]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.debug(f"sessions: purged {len(expired)} expired sessions")
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


__all__ = ["Clock", "Session", "SessionRegistry", "TokenCollisionError", "TokenFactory"]
