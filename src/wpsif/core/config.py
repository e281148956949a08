"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class SifConfig(BaseSettings):
    """SIF format configuration."""

    model_config = {"env_prefix": "WPSIF_SIF_"}

    # Character class of the 21-char IBAN account segment
    iban_account_charset: Literal["alphanumeric", "numeric"] = "alphanumeric"


class SessionConfig(BaseSettings):
    """Session storage configuration."""

    model_config = {"env_prefix": "WPSIF_SESSION_"}

    backend: Literal["memory", "redis"] = "memory"
    session_id: str = "default"
    ttl_seconds: int = 8 * 60 * 60


class RedisConfig(BaseSettings):
    """Redis session backend configuration."""

    model_config = {"env_prefix": "WPSIF_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "WPSIF_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    # Sub-configs read their own env prefixes at construction time
    sif: SifConfig = Field(default_factory=SifConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    redis: RedisConfig = Field(default_factory=RedisConfig)


@lru_cache()
def get_settings() -> AppSettings:
    """Cached application settings, read from the environment once."""
    return AppSettings()
