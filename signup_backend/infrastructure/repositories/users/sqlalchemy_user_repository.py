# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from signup_backend.domain.users.entities import NewUser, User
from signup_backend.domain.users.repositories import UserRepository
from signup_backend.infrastructure.db.models import UserRecord
from signup_backend.infrastructure.db.session import session_scope


def _to_domain(row: UserRecord) -> User:
    created_at = row.created_at
    if created_at is not None and created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return User(
        id=row.id,
        name=row.name,
        email=row.email,
        whatsapp=row.whatsapp,
        telegram=row.telegram,
        created_at=created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def add(self, user: NewUser) -> User:
        with session_scope(self._session_factory) as session:
            row = UserRecord(
                id=user.id,
                name=user.name,
                email=user.email,
                whatsapp=user.whatsapp,
                telegram=user.telegram,
                password_hash=user.password_hash,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def list_all(self) -> list[User]:
        with session_scope(self._session_factory) as session:
            rows = session.scalars(
                select(UserRecord).order_by(UserRecord.created_at.desc(), UserRecord.id)
            ).all()
            return [_to_domain(row) for row in rows]

    def delete_by_id(self, user_id: str) -> bool:
        with session_scope(self._session_factory) as session:
            result = session.execute(delete(UserRecord).where(UserRecord.id == user_id))
            return bool(result.rowcount)


__all__ = ["SqlAlchemyUserRepository"]
