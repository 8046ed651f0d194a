"""Use-case for revoking admin sessions."""

from __future__ import annotations

from signup_backend.domain.users.repositories import SessionStore


class AdminLogoutUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self, token: str | None) -> None:
        if token:
            self._sessions.revoke(token)
