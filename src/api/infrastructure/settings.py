"""Environment-driven configuration for the bulletin API.

Every section reads ``BULLETIN_*`` variables (or a local ``.env``). The
defaults run against a local Postgres; deployments override the database
password and the session signing key.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_SESSION_SECRET = "dev-only-insecure-session-key"


def _env(prefix: str) -> SettingsConfigDict:
    return SettingsConfigDict(
        env_prefix=prefix,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class DatabaseSettings(BaseSettings):
    """Postgres connection and pool sizing (``BULLETIN_DB_*``).

    Both the write and the read engine size their pools from
    ``pool_max_connections``.
    """

    model_config = _env("BULLETIN_DB_")

    host: str = Field(default="localhost", description="Postgres host")
    port: int = Field(default=5432, description="Postgres port")
    database: str = Field(default="bulletin", description="Database holding users, boards and replies")
    username: str = Field(default="bulletin", description="Role the API connects as")
    password: SecretStr = Field(default=SecretStr(""), description="Password for that role")
    pool_min_connections: int = Field(default=2, ge=1, le=100)
    pool_max_connections: int = Field(default=10, ge=1, le=100)

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Reject a pool whose ceiling is below its floor."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Connection target for log lines; never includes the password."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class SessionSettings(BaseSettings):
    """Signed session cookie options (``BULLETIN_SESSION_*``).

    The cookie is signed, not encrypted, and carries only the signed-in
    user's id and username.
    """

    model_config = _env("BULLETIN_SESSION_")

    secret_key: SecretStr = Field(
        default=SecretStr(DEV_SESSION_SECRET),
        description="Signing key for the session cookie",
    )
    cookie_name: str = Field(default="bulletin_session", min_length=1)
    max_age_seconds: int = Field(
        default=14 * 24 * 60 * 60,
        ge=60,
        description="Seconds until a signed-in browser must log in again",
    )
    same_site: Literal["lax", "strict", "none"] = "lax"
    https_only: bool = False

    @property
    def uses_default_secret(self) -> bool:
        """True while the cookie is still signed with the development key."""
        return self.secret_key.get_secret_value() == DEV_SESSION_SECRET


class Settings(BaseSettings):
    """Top-level settings (``BULLETIN_*``) with the sections hung off it."""

    model_config = _env("BULLETIN_")

    app_name: str = "Bulletin API"
    debug: bool = Field(default=False, description="Also emit debug-level log events")

    @property
    def database(self) -> DatabaseSettings:
        return get_database_settings()

    @property
    def session(self) -> SessionSettings:
        return get_session_settings()


@lru_cache
def get_settings() -> Settings:
    """Settings are read from the environment once per process."""
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    return DatabaseSettings()


@lru_cache
def get_session_settings() -> SessionSettings:
    return SessionSettings()
