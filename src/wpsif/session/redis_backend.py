"""Redis session store implementing ISessionStore.

Keys are namespaced per session and expire after the configured TTL, so
nothing outlives the session.
"""

from __future__ import annotations

import redis

from wpsif.core.exceptions import SessionStoreError


class RedisSessionStore:
    """ISessionStore backed by Redis."""

    def __init__(
        self,
        session_id: str,
        ttl_seconds: int,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
    ) -> None:
        self._prefix = f"wps:{session_id}:"
        self._ttl = ttl_seconds
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> str | None:
        try:
            return self._client.get(self._key(key))
        except Exception as exc:
            raise SessionStoreError(f"Redis GET failed for key={key!r}: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            self._client.setex(self._key(key), self._ttl, value)
        except Exception as exc:
            raise SessionStoreError(f"Redis SETEX failed for key={key!r}: {exc}") from exc

    def clear(self) -> None:
        try:
            keys = list(self._client.scan_iter(match=f"{self._prefix}*"))
            if keys:
                self._client.delete(*keys)
        except Exception as exc:
            raise SessionStoreError(f"Redis clear failed for {self._prefix!r}: {exc}") from exc

    def has_data(self) -> bool:
        try:
            return next(iter(self._client.scan_iter(match=f"{self._prefix}*")), None) is not None
        except Exception as exc:
            raise SessionStoreError(f"Redis SCAN failed for {self._prefix!r}: {exc}") from exc
