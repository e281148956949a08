"""Pluggable session storage and the workspace that owns session state."""

from __future__ import annotations

from wpsif.core.config import AppSettings
from wpsif.core.protocols import ISessionStore
from wpsif.session.memory_backend import MemorySessionStore
from wpsif.session.redis_backend import RedisSessionStore
from wpsif.session.workspace import PayrollWorkspace


def create_session_store(settings: AppSettings | None = None) -> ISessionStore:
    """Create the session store selected by application settings."""
    if settings is None:
        settings = AppSettings()

    if settings.session.backend == "redis":
        return RedisSessionStore(
            session_id=settings.session.session_id,
            ttl_seconds=settings.session.ttl_seconds,
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
        )
    return MemorySessionStore()


__all__ = [
    "MemorySessionStore",
    "PayrollWorkspace",
    "RedisSessionStore",
    "create_session_store",
]
