# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = Path(__file__).resolve().parents[2]


class DatabaseConfig(BaseModel):
    url: str = Field("sqlite:///commentboard.db", alias="DATABASE_URL")
    pool_size: int = Field(5, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = ConfigDict(validate_by_name=True)


class SessionConfig(BaseModel):
    secret_key_file: Path = Field(Path("site_key.txt"), alias="SESSION_KEY_FILE")
    cookie_name: str = Field("sess", alias="SESSION_COOKIE_NAME")
    timeout_seconds: int = Field(3600, ge=1, alias="SESSION_TIMEOUT")

    model_config = ConfigDict(validate_by_name=True)


class SecurityConfig(BaseModel):
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Lax", alias="COOKIE_SAMESITE")

    enable_rate_limit: bool = Field(False, alias="ENABLE_RATE_LIMIT")
    login_rate_limit: int = Field(10, ge=1, alias="RL_LIMIT")
    rate_limit_window: float = Field(60.0, ge=0.1, alias="RL_WINDOW")

    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = ConfigDict(validate_by_name=True)

    @field_validator("cookie_secure", "enable_rate_limit", "enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


class LoggingConfig(BaseModel):
    level: str = Field("INFO", alias="LOG_LEVEL")
    file: Path | None = Field(None, alias="LOG_FILE")
    debug: bool = Field(False, alias="DEBUG_LOGGING")

    model_config = ConfigDict(validate_by_name=True)

    @field_validator("level", mode="after")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _session_config_factory() -> SessionConfig:
    return SessionConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


def _logging_config_factory() -> LoggingConfig:
    return LoggingConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    static_folder: Path = Field(_PACKAGE_DIR / "static", alias="STATIC_FOLDER")
    template_folder: Path = Field(_PACKAGE_DIR / "templates", alias="TEMPLATE_FOLDER")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    session: SessionConfig = Field(default_factory=_session_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)
    logging: LoggingConfig = Field(default_factory=_logging_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_by_name=True,
        validate_assignment=True,
    )

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if str(self.session.secret_key_file) in ("", "."):
            print(
                "\n❌ CRITICAL SECURITY ERROR: no session key file configured in production!\n"
                "   Set SESSION__SECRET_KEY_FILE to a path readable by the server.\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if not self.security.cookie_secure:
            warnings.append("⚠️  Cookie Secure flag is DISABLED (use HTTPS!)")
        if not self.security.enable_hsts:
            warnings.append("⚠️  HSTS is DISABLED (recommended for HTTPS)")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()


__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "LoggingConfig",
    "SecurityConfig",
    "SessionConfig",
    "load_config",
]
