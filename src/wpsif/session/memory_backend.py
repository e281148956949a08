"""In-memory session store: dict-backed, lives as long as the process."""

from __future__ import annotations


class MemorySessionStore:
    """Dict-backed ISessionStore."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def clear(self) -> None:
        self._store.clear()

    def has_data(self) -> bool:
        return bool(self._store)
