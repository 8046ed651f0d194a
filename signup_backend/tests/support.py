from __future__ import annotations

from flask.testing import FlaskClient

from signup_backend.shared.config import AppConfig, DatabaseConfig, build_config

ADMIN_USER = "admin"
ADMIN_PASS = "password"
SESSION_COOKIE = "admin_session"


class FakeClock:
    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class DeterministicHasher:
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


def make_config(**overrides: object) -> AppConfig:
    values: dict[str, object] = {
        "_env_file": None,
        "ADMIN_USER": ADMIN_USER,
        "ADMIN_PASS": ADMIN_PASS,
        "SESSION_COOKIE": SESSION_COOKIE,
        "APP_ENV": "test",
        "LOG_LEVEL": "WARNING",
        "database": DatabaseConfig(DATABASE_URL="sqlite://"),
    }
    values.update(overrides)
    return build_config(**values)


def login(client: FlaskClient, username: str = ADMIN_USER, password: str = ADMIN_PASS):
    return client.post("/admin/login", data={"username": username, "password": password})


def signup(client: FlaskClient, **payload: object):
    body: dict[str, object] = {"telegram": "@sample_user", "password": "AnotherSecret1"}
    body.update(payload)
    return client.post("/api/signup", json=body)
