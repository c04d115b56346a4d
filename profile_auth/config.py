"""
Settings - Process-wide configuration loaded from the environment.

Usage:
    from profile_auth.config import get_settings

    settings = get_settings()
    print(settings.BACKEND_URL)

Values come from system environment variables and, if present, a .env file
in the working directory. Everything has a development default.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Shared by the client (backend URL, session store) and the reference
    server (CORS origin, token signing, bind address).
    """

    # -------------------------------------------------------------------------
    # Client
    # -------------------------------------------------------------------------

    BACKEND_URL: str = Field(
        default="http://localhost:3000",
        description="Base URL of the auth backend (login, register, user/me)"
    )

    HTTP_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        description="Timeout applied to every backend request"
    )

    SESSION_STORE_BACKEND: Literal["memory", "file", "redis"] = Field(
        default="file",
        description="Where the bearer credential is persisted"
    )

    SESSION_STORE_PATH: Path = Field(
        default=Path("~/.profile_auth/session.json"),
        description="JSON document used by the file session store"
    )

    SESSION_STORE_KEY: str = Field(
        default="token",
        min_length=1,
        description="Key the credential is stored under"
    )

    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL for the redis session store"
    )

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    FRONTEND_URL: str = Field(
        default="http://localhost:5173",
        description="Origin allowed by CORS"
    )

    JWT_SECRET: str = Field(
        default="dev-secret-key-change-in-production",
        min_length=16,
        description="Secret key for signing bearer tokens"
    )

    JWT_ALGORITHM: str = Field(default="HS256")

    JWT_ISSUER: str = Field(default="profile-auth")

    TOKEN_TTL_SECONDS: int = Field(
        default=3600,
        ge=60,
        description="Lifetime of issued bearer tokens"
    )

    API_HOST: str = Field(default="0.0.0.0")

    API_PORT: int = Field(default=3000, ge=1, le=65535)

    DEBUG: bool = Field(
        default=False,
        description="Enable verbose logging"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def backend_base_url(self) -> str:
        """BACKEND_URL without a trailing slash."""
        return self.BACKEND_URL.rstrip("/")

    @property
    def session_store_path(self) -> Path:
        return self.SESSION_STORE_PATH.expanduser()

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse FRONTEND_URL into a list of origins.

        Example: "http://localhost:5173, https://app.example.com"
        """
        return [origin.strip() for origin in self.FRONTEND_URL.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    The environment is parsed and validated once per process.
    """
    return Settings()
