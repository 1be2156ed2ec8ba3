"""
Centralized configuration for the Bastion backend.

All settings are loaded from environment variables (or a .env file).
The token signing secret and the token lifetime have no defaults: a
process started without them fails while loading settings, before any
request is accepted.
"""

import re
from datetime import timedelta
from functools import lru_cache
from typing import Literal, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Compact duration strings such as "30s", "15m", "1h", "7d", "2w".
_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([smhdw])\s*$", re.IGNORECASE)
_DURATION_UNITS = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
    "w": "weeks",
}

SUPPORTED_JWT_ALGORITHMS = ("HS256", "HS384", "HS512")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Bastion API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 9999
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Token signing (required)
    jwt_secret: SecretStr
    jwt_expires_in: timedelta
    jwt_algorithm: str = "HS256"

    # Password hashing (argon2id)
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536  # KiB
    argon2_parallelism: int = 4

    # Identity directory
    directory_backend: Literal["memory", "supabase"] = "memory"
    accounts_table: str = "accounts"

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: Optional[str] = None

    @field_validator("jwt_secret")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        return v

    @field_validator("jwt_expires_in", mode="before")
    @classmethod
    def parse_compact_duration(cls, v):
        if isinstance(v, str):
            match = _DURATION_PATTERN.match(v)
            if match:
                amount, unit = match.groups()
                return timedelta(**{_DURATION_UNITS[unit.lower()]: int(amount)})
        return v

    @field_validator("jwt_expires_in")
    @classmethod
    def validate_jwt_expires_in(cls, v: timedelta) -> timedelta:
        if v <= timedelta(0):
            raise ValueError("JWT_EXPIRES_IN must be a positive duration")
        return v

    @field_validator("jwt_algorithm")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in SUPPORTED_JWT_ALGORITHMS:
            raise ValueError(
                f"JWT_ALGORITHM must be one of {', '.join(SUPPORTED_JWT_ALGORITHMS)}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be a standard logging level name")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
