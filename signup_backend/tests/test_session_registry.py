from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from itertools import chain, repeat

import pytest

from signup_backend.infrastructure.auth.session_registry import (
    SessionRegistry,
    TokenCollisionError,
)
from signup_backend.shared.errors import ConfigurationError
from signup_backend.tests.support import FakeClock


@pytest.fixture()
def registry(clock: FakeClock) -> SessionRegistry:
    return SessionRegistry(3600, clock=clock)


@pytest.mark.parametrize("token", ["", "unknown", "0" * 32, None])
def test_unissued_tokens_are_invalid(registry: SessionRegistry, token: str | None) -> None:
    assert registry.is_valid(token) is False


def test_created_token_is_valid_until_ttl_elapses(
    registry: SessionRegistry, clock: FakeClock
) -> None:
    token = registry.create()

    assert len(token) == 32
    assert registry.is_valid(token) is True

    clock.advance(3599)
    assert registry.is_valid(token) is True

    clock.advance(1)
    assert registry.is_valid(token) is False


def test_expired_token_is_evicted_on_access(
    registry: SessionRegistry, clock: FakeClock
) -> None:
    token = registry.create()
    clock.advance(4000)

    assert len(registry) == 1
    assert registry.is_valid(token) is False
    assert len(registry) == 0


def test_revoke_invalidates_any_token(registry: SessionRegistry, clock: FakeClock) -> None:
    issued = registry.create()
    expired = registry.create()
    clock.advance(3600)
    fresh = registry.create()

    for token in (issued, expired, fresh, "never-issued"):
        registry.revoke(token)
        assert registry.is_valid(token) is False

    # Revoking twice is a no-op.
    registry.revoke(fresh)
    registry.revoke(None)
    assert registry.is_valid(fresh) is False


def test_relogin_issues_new_token(registry: SessionRegistry) -> None:
    first = registry.create()
    second = registry.create()

    assert first != second
    assert registry.is_valid(first) and registry.is_valid(second)


def test_concurrent_creates_yield_distinct_valid_tokens(registry: SessionRegistry) -> None:
    with ThreadPoolExecutor(max_workers=16) as pool:
        tokens = list(pool.map(lambda _: registry.create(), range(200)))

    assert len(set(tokens)) == 200
    assert all(registry.is_valid(token) for token in tokens)


def test_concurrent_validate_and_revoke_are_consistent(registry: SessionRegistry) -> None:
    tokens = [registry.create() for _ in range(50)]
    barrier = threading.Barrier(4)
    errors: list[BaseException] = []

    def validate() -> None:
        barrier.wait()
        try:
            for _ in range(20):
                for token in tokens:
                    registry.is_valid(token)
        except BaseException as exc:  # pragma: no cover
            errors.append(exc)

    def revoke() -> None:
        barrier.wait()
        try:
            for token in tokens:
                registry.revoke(token)
        except BaseException as exc:  # pragma: no cover
            errors.append(exc)

    threads = [threading.Thread(target=fn) for fn in (validate, validate, revoke, revoke)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(registry) == 0
    assert not any(registry.is_valid(token) for token in tokens)


def test_collision_is_retried(clock: FakeClock) -> None:
    values = iter(["dup", "dup", "other"])
    registry = SessionRegistry(60, clock=clock, token_factory=lambda: next(values))

    assert registry.create() == "dup"
    assert registry.create() == "other"


def test_collision_retries_are_bounded(clock: FakeClock) -> None:
    values = chain(["dup"], repeat("dup"))
    registry = SessionRegistry(60, clock=clock, token_factory=lambda: next(values))
    registry.create()

    with pytest.raises(TokenCollisionError):
        registry.create()


def test_create_purges_expired_sessions(registry: SessionRegistry, clock: FakeClock) -> None:
    registry.create()
    registry.create()
    clock.advance(3600)

    registry.create()

    assert len(registry) == 1


def test_purge_expired_reports_removed_count(
    registry: SessionRegistry, clock: FakeClock
) -> None:
    registry.create()
    clock.advance(10)
    registry.create()
    clock.advance(3595)

    assert registry.purge_expired() == 1
    assert len(registry) == 1


@pytest.mark.parametrize("ttl", [0, -5])
def test_non_positive_ttl_is_a_configuration_error(ttl: int) -> None:
    with pytest.raises(ConfigurationError):
        SessionRegistry(ttl)
