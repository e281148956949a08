"""WPS SIF exception hierarchy."""

from __future__ import annotations


class WpsError(Exception):
    """Base exception for all WPS SIF errors."""


class SifFormatError(WpsError):
    """SIF text is structurally malformed."""


class SifEncodingError(WpsError):
    """A value cannot be written into the comma-separated SIF layout."""

    def __init__(self, record: str, column: str) -> None:
        self.record = record
        self.column = column
        super().__init__(
            f"{record}: {column} contains a comma or line break, which the SIF format cannot carry"
        )


class EmptyPayrollError(WpsError):
    """SIF generation was requested for no employees."""


class ImportFormatError(WpsError):
    """Imported file contents could not be turned into records."""

    INVALID_FORMAT = "invalid format"
    NOT_AN_ARRAY = "not an array"
    TOO_FEW_LINES = "too few lines"

    def __init__(self, reason: str, detail: str = "") -> None:
        self.reason = reason
        self.detail = detail
        message = f"Import failed: {reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class GenerationBlockedError(WpsError):
    """Validation failures prevent SIF generation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"SIF generation blocked by {len(errors)} validation error(s)")


class SessionStoreError(WpsError):
    """Session storage operation failed."""


class EmployeeNotFoundError(WpsError):
    """No employee with the given id in the workspace."""

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee {employee_id} not found")
