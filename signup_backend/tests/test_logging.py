from __future__ import annotations

from signup_backend.shared.logging import sanitize_message


def test_passwords_and_session_values_are_redacted() -> None:
    message = sanitize_message("login password=hunter2 session_id=abcdef0123456789abcd")

    assert "hunter2" not in message
    assert "abcdef0123456789abcd" not in message
    assert message.count("***REDACTED***") == 2


def test_cookie_header_is_redacted() -> None:
    message = sanitize_message("headers Cookie: admin_session=abc; theme=dark")

    assert "admin_session=abc" not in message


def test_database_credentials_are_masked() -> None:
    message = sanitize_message("connecting to postgresql+psycopg://app:s3cr3t@db/signup")

    assert "s3cr3t" not in message
    assert "postgresql+psycopg://app:***REDACTED***@db/signup" in message


def test_emails_are_partially_masked() -> None:
    assert sanitize_message("signup from ada@example.com") == "signup from ***@example.com"


def test_plain_messages_are_untouched() -> None:
    text = "Response: GET /api/health status=200, duration=0.001s"

    assert sanitize_message(text) == text
