"""Protocol interfaces for the WPS SIF collaborators.

The core codec, validators and calculator are pure functions; the only
abstraction they are wired against is session storage.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Persistence: Session Store
# ---------------------------------------------------------------------------

@runtime_checkable
class ISessionStore(Protocol):
    """Ephemeral, session-scoped key/value storage."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def clear(self) -> None: ...

    def has_data(self) -> bool: ...
