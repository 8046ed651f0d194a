from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from signup_backend.shared.errors.validation_types import ValidationErrorType

TELEGRAM_HANDLE = re.compile(r"^[A-Za-z0-9_]{5,32}$")


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class SignupRequestDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    whatsapp: str | None = None
    telegram: str = Field(None, validate_default=True)
    password: str = Field(None, validate_default=True, repr=False)

    @field_validator("name", "email", "whatsapp", mode="before")
    @classmethod
    def _strip_optional(cls, value: object) -> str | None:
        return _optional_text(value)

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, value: object) -> str:
        if value is None or value == "" or not isinstance(value, str):
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_REQUIRED,
                "Password is required",
                {},
            )
        return value

    @field_validator("telegram", mode="before")
    @classmethod
    def normalize_telegram(cls, value: object) -> str:
        raw = _optional_text(value)
        if raw is None:
            raise PydanticCustomError(
                ValidationErrorType.TELEGRAM_REQUIRED,
                "Telegram username is required",
                {},
            )

        handle = raw[1:] if raw.startswith("@") else raw
        if not TELEGRAM_HANDLE.match(handle):
            raise PydanticCustomError(
                ValidationErrorType.TELEGRAM_INVALID,
                "Telegram username must be 5-32 letters, digits or underscores",
                {"pattern": TELEGRAM_HANDLE.pattern},
            )

        return f"@{handle}"
