"""Application configuration loading and validation."""

from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mysql2struct.db.connection import DEFAULT_PORT, ConnectionParams


DEFAULT_GO_PACKAGE = "newpackage"


class ConfigError(ValueError):
    """Raised when configuration cannot be loaded safely."""


class Settings(BaseModel):
    """Runtime settings loaded from environment variables and CLI flags."""

    model_config = ConfigDict(frozen=True)

    mysql_user: str = Field(min_length=1)
    mysql_password: str = ""
    mysql_host: str = "localhost"
    mysql_port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    mysql_database: str | None = None
    go_package: str = DEFAULT_GO_PACKAGE

    @field_validator("mysql_user", "mysql_host", "go_package")
    @classmethod
    def validate_non_empty(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("value cannot be empty.")
        return normalized

    @field_validator("mysql_database")
    @classmethod
    def validate_database(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    def connection_params(self, database: str | None = None) -> ConnectionParams:
        """Build connection parameters, optionally for another schema."""
        target = (database or "").strip() or self.mysql_database
        if not target:
            raise ConfigError(
                "No database selected. Set MYSQL_DATABASE or pass --database."
            )
        return ConnectionParams(
            user=self.mysql_user,
            password=self.mysql_password or None,
            host=self.mysql_host,
            port=self.mysql_port,
            database=target,
        )


def _env_value(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name, default)
    if value is None:
        return None
    return value.strip()


def load_settings(overrides: Mapping[str, Any] | None = None) -> Settings:
    """Load settings from environment variables; non-None overrides win."""
    payload: dict[str, Any] = {
        "mysql_user": _env_value("MYSQL_USER"),
        "mysql_password": _env_value("MYSQL_PASSWORD", ""),
        "mysql_host": _env_value("MYSQL_HOST", "localhost"),
        "mysql_port": _env_value("MYSQL_PORT", str(DEFAULT_PORT)),
        "mysql_database": _env_value("MYSQL_DATABASE"),
        "go_package": _env_value("GO_PACKAGE", DEFAULT_GO_PACKAGE),
    }
    for key, value in (overrides or {}).items():
        if value is not None:
            payload[key] = value

    if not payload["mysql_user"]:
        raise ConfigError(
            "Missing required setting: MYSQL_USER (or --user).\n"
            "Example: MYSQL_USER=readonly_user MYSQL_DATABASE=app_db"
        )

    try:
        return Settings.model_validate(payload)
    except ValidationError as exc:
        messages = []
        for err in exc.errors():
            field = ".".join(str(item) for item in err["loc"])
            messages.append(f"- {field}: {err['msg']}")
        raise ConfigError(
            "Invalid configuration values:\n" + "\n".join(messages)
        ) from exc


def load_go_package(override: str | None = None) -> str:
    """Resolve the Go package name without requiring database settings."""
    value = override if override is not None else _env_value("GO_PACKAGE", DEFAULT_GO_PACKAGE)
    normalized = (value or "").strip()
    if not normalized:
        raise ConfigError("Invalid configuration values:\n- go_package: value cannot be empty.")
    return normalized
