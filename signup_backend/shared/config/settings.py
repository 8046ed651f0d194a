# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, SecretStr, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict, SettingsError

from signup_backend.shared.errors.base import ConfigurationError

REQUIRED_SETTINGS: tuple[tuple[str, str], ...] = (
    ("admin_username", "ADMIN_USER"),
    ("admin_password", "ADMIN_PASS"),
    ("session_cookie", "SESSION_COOKIE"),
)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///signup.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")

    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def is_memory(self) -> bool:
        return self.url in ("sqlite://", "sqlite:///:memory:")


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    service_name: str = Field("signup-backend", alias="SERVICE_NAME")

    # Admin access
    admin_username: str | None = Field(None, alias="ADMIN_USER")
    admin_password: SecretStr | None = Field(None, alias="ADMIN_PASS")
    session_cookie: str | None = Field(None, alias="SESSION_COOKIE")
    session_ttl_seconds: int = Field(3600, gt=0, alias="SESSION_TTL_SEC")

    # HTTP
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(5050, ge=1, le=65535, alias="PORT")
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("admin_username", "session_cookie", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("admin_password", mode="before")
    @classmethod
    def _blank_password_as_missing(cls, value: str | SecretStr | None) -> str | SecretStr | None:
        if isinstance(value, str) and not value:
            return None
        return value

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def _require_admin_settings(self) -> "AppConfig":
        missing = [env for field, env in REQUIRED_SETTINGS if getattr(self, field) is None]
        if missing:
            raise ValueError(f"{', '.join(missing)} must be set")
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    @property
    def cookie_secure(self) -> bool:
        return self.is_production()

    @property
    def admin_secret(self) -> str:
        return self.admin_password.get_secret_value() if self.admin_password else ""


def build_config(**overrides: object) -> AppConfig:
    try:
        return AppConfig(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(problems) from exc
    except SettingsError as exc:
        raise ConfigurationError(str(exc)) from exc


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return build_config()


__all__ = ["AppConfig", "DatabaseConfig", "build_config", "load_config"]
