from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from signup_backend.infrastructure.container import Container
from signup_backend.infrastructure.db.models import UserRecord
from signup_backend.tests.support import login, signup


def test_signup_returns_created_user_without_password(client: FlaskClient) -> None:
    response = signup(client, telegram="@abcde", password="x")

    assert response.status_code == 201
    body = response.get_json()
    assert body["ok"] is True
    user = body["user"]
    assert user["telegram"] == "@abcde"
    assert user["id"]
    assert user["createdAt"]
    assert "password" not in user
    assert "passwordHash" not in user
    assert "password_hash" not in user


def test_signup_stores_optional_contact_fields(client: FlaskClient) -> None:
    response = signup(
        client,
        name="  Ada Lovelace ",
        email="ada@example.com",
        whatsapp="",
        telegram="ada_lovelace",
    )

    user = response.get_json()["user"]
    assert user["name"] == "Ada Lovelace"
    assert user["email"] == "ada@example.com"
    assert user["whatsapp"] is None
    assert user["telegram"] == "@ada_lovelace"


def test_signup_hashes_password_before_storing(
    client: FlaskClient, container: Container
) -> None:
    signup(client, telegram="@hashed_user", password="plain-text")

    with container.session_factory() as session:
        record = session.query(UserRecord).one()

    assert record.password_hash == "hashed:plain-text"


def test_signup_ids_are_unique(client: FlaskClient) -> None:
    first = signup(client, telegram="@first_user").get_json()["user"]["id"]
    second = signup(client, telegram="@second_user").get_json()["user"]["id"]

    assert first != second
    assert len(first) >= 32


@pytest.mark.parametrize(
    ("payload", "field", "error_type"),
    [
        ({"telegram": "@abcd"}, "telegram", "telegram_invalid"),
        ({"telegram": "@@abcde"}, "telegram", "telegram_invalid"),
        ({"telegram": "has space"}, "telegram", "telegram_invalid"),
        ({"telegram": "x" * 33}, "telegram", "telegram_invalid"),
        ({"telegram": "   "}, "telegram", "telegram_required"),
        ({"telegram": None}, "telegram", "telegram_required"),
        ({"password": ""}, "password", "password_required"),
        ({"password": None}, "password", "password_required"),
        ({"password": 12345}, "password", "password_required"),
    ],
)
def test_signup_rejects_invalid_payload(
    client: FlaskClient, payload: dict, field: str, error_type: str
) -> None:
    response = signup(client, **payload)

    assert response.status_code == 400
    body = response.get_json()
    assert body["ok"] is False
    assert body["error"] == "validation_error"
    assert field in body["context"]["fields"]
    assert {"field": field, "type": error_type} in body["context"]["errors"]


def test_signup_reports_every_missing_field(client: FlaskClient) -> None:
    response = client.post("/api/signup", json={})

    assert response.status_code == 400
    assert response.get_json()["context"]["fields"] == ["password", "telegram"]


def test_signup_rejects_non_json_body(client: FlaskClient) -> None:
    response = client.post("/api/signup", data="not json", content_type="text/plain")

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"


def test_failed_signup_does_not_store_user(client: FlaskClient) -> None:
    signup(client, telegram="bad")
    login(client)

    listing = client.get("/api/users", headers={"Accept": "application/json"}).get_json()

    assert listing == {"count": 0, "users": []}


def test_signup_is_not_auth_gated(client: FlaskClient) -> None:
    assert signup(client).status_code == 201
