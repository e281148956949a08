"""Business-rule validators for employees, employers and payroll runs."""

from __future__ import annotations

from wpsif.validation.iban import validate_iban
from wpsif.validation.rules import (
    validate_employee,
    validate_employer_settings,
    validate_payroll_run,
)

__all__ = [
    "validate_employee",
    "validate_employer_settings",
    "validate_iban",
    "validate_payroll_run",
]
