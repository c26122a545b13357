"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Application settings loaded from environment variables and .env file.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gatekeeper.app.core.policy import AuthMode, PolicyConfig, SecondaryMode

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


class Settings(BaseSettings):
    """Application settings populated from environment variables / .env file."""

    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    port: int = 3004
    url_prefix: str = ""
    cors_origins: str = "*"

    # Secret store
    vault_addr: Optional[str] = None
    vault_token: Optional[str] = None
    vault_db_secret_path: Optional[str] = None
    vault_db_kv_path: Optional[str] = None
    vault_timeout: float = Field(default=10.0, gt=0)

    # Database
    db_type: Optional[str] = None
    db_host: Optional[str] = None
    db_port: Optional[int] = None
    db_name: Optional[str] = None
    db_username: Optional[str] = None
    db_password: Optional[str] = None
    db_tls: bool = False
    db_connect_timeout: float = Field(default=10.0, gt=0)

    # Gating
    db_auth_mode: AuthMode = AuthMode.PREFERRED
    db_secondary_mode: SecondaryMode = SecondaryMode.DISABLED

    # Items endpoint
    default_items_limit: int = Field(default=100, ge=1)
    max_items_limit: int = Field(default=500, ge=1)

    @field_validator("db_port", mode="before")
    @classmethod
    def _blank_port(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("db_tls", mode="before")
    @classmethod
    def _blank_tls(cls, value):
        if isinstance(value, str) and not value.strip():
            return False
        return value

    @field_validator("db_auth_mode", "db_secondary_mode", mode="before")
    @classmethod
    def _lower_mode(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def secret_path(self) -> Optional[str]:
        """VAULT_DB_SECRET_PATH, falling back to VAULT_DB_KV_PATH."""

        return self.vault_db_secret_path or self.vault_db_kv_path or None

    @property
    def allowed_origins(self) -> list[str]:
        """CORS origins as a list."""

        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()


def get_policy_config() -> PolicyConfig:
    """Return the credential policy populated from environment variables."""

    return PolicyConfig(
        auth_mode=settings.db_auth_mode,
        secondary_mode=settings.db_secondary_mode,
        vault_addr=settings.vault_addr,
        vault_token=settings.vault_token,
        secret_path=settings.secret_path,
        username=settings.db_username,
        password=settings.db_password,
        vault_timeout=settings.vault_timeout,
    )
