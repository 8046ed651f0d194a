from __future__ import annotations

from datetime import UTC

import pytest

from signup_backend.domain.users.entities import NewUser
from signup_backend.infrastructure.db import create_db_engine, init_db, make_session_factory
from signup_backend.infrastructure.health import check_database
from signup_backend.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from signup_backend.shared.config import DatabaseConfig


@pytest.fixture()
def repository() -> SqlAlchemyUserRepository:
    engine = create_db_engine(DatabaseConfig(DATABASE_URL="sqlite://"))
    init_db(engine)
    assert check_database(engine)
    return SqlAlchemyUserRepository(make_session_factory(engine))


def _new_user(user_id: str, telegram: str = "@someone") -> NewUser:
    return NewUser(id=user_id, telegram=telegram, password_hash=f"hash-{user_id}")


def test_add_returns_public_record_with_utc_timestamp(
    repository: SqlAlchemyUserRepository,
) -> None:
    user = repository.add(_new_user("a1", "@alpha_user"))

    assert user.id == "a1"
    assert user.telegram == "@alpha_user"
    assert user.created_at is not None
    assert user.created_at.tzinfo is not None
    assert user.created_at.utcoffset() == UTC.utcoffset(None)


def test_list_all_returns_every_user(repository: SqlAlchemyUserRepository) -> None:
    repository.add(_new_user("a1"))
    repository.add(_new_user("b2"))

    assert {user.id for user in repository.list_all()} == {"a1", "b2"}


def test_delete_by_id_reports_whether_a_row_was_removed(
    repository: SqlAlchemyUserRepository,
) -> None:
    repository.add(_new_user("a1"))

    assert repository.delete_by_id("a1") is True
    assert repository.delete_by_id("a1") is False
    assert repository.list_all() == []
