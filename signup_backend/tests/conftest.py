from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from loguru import logger

from signup_backend.app import create_app
from signup_backend.infrastructure.container import Container
from signup_backend.shared.config import AppConfig
from signup_backend.shared.logging.sensitive_filter import sanitize_record
from signup_backend.tests.support import DeterministicHasher, FakeClock, make_config


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def config() -> AppConfig:
    return make_config()


@pytest.fixture()
def container(config: AppConfig, clock: FakeClock) -> Container:
    return Container(config, clock=clock, password_hasher=DeterministicHasher())


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container=container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def log_messages(app: Flask) -> Iterator[list[str]]:
    messages: list[str] = []
    sink_id = logger.add(
        lambda message: messages.append(str(message)),
        level="DEBUG",
        format="{level} {message}",
        filter=sanitize_record,
    )
    yield messages
    logger.remove(sink_id)
