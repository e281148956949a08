"""Field-level and cross-field business rules.

Every validator returns the complete, ordered list of violation messages
(empty when valid) and never raises. Callers render the list and decide
whether to block a save or a SIF generation.
"""

from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from wpsif.models.employee import (
    DeductionReasonCode,
    Employee,
    EmployerSettings,
    PaymentType,
    PayrollRun,
    SalaryFrequency,
)
from wpsif.sif.layout import MAX_AMOUNT, SIF_VERSION, format_amount
from wpsif.validation.iban import validate_iban

MAX_NAME_LENGTH = 70
MAX_VISA_ID_LENGTH = 12
MAX_BANK_SHORT_NAME_LENGTH = 4
MAX_NOTES_LENGTH = 300
MAX_EXTRA_HOURS = Decimal("999.99")
MAX_WORKING_DAYS = 999

_QID = re.compile(r"[0-9]{11}")
_YEAR_MONTH = re.compile(r"[0-9]{4}(0[1-9]|1[0-2])")
_DATE = re.compile(r"[0-9]{8}")
_TIME = re.compile(r"([01][0-9]|2[0-3])[0-5][0-9]")
_SEPARATORS = (",", "\r", "\n")


def _is_member(enum_cls: type[Enum], value: Any) -> bool:
    try:
        enum_cls(value)
    except (ValueError, TypeError):
        return False
    return True


def validate_qid(qid: str | None) -> bool:
    """QID is optional when a Visa ID is given; if present it is 11 digits."""
    if not qid:
        return True
    return _QID.fullmatch(qid.strip()) is not None


def validate_visa_id(visa_id: str | None) -> bool:
    if not visa_id:
        return True
    return len(visa_id.strip()) <= MAX_VISA_ID_LENGTH


def validate_employee_name(name: str | None) -> bool:
    if not name:
        return False
    return 0 < len(name.strip()) <= MAX_NAME_LENGTH


def validate_bank_short_name(code: str | None) -> bool:
    if not code:
        return False
    return 0 < len(code.strip()) <= MAX_BANK_SHORT_NAME_LENGTH


def validate_notes(notes: str | None, reason_code: Any = None) -> bool:
    """Notes are mandatory for reason code 99 and never longer than 300 chars."""
    if reason_code == DeductionReasonCode.OTHER and (not notes or not notes.strip()):
        return False
    if notes and len(notes) > MAX_NOTES_LENGTH:
        return False
    return True


def has_separator(value: str | None) -> bool:
    """True if a value would break the comma-separated SIF line."""
    return bool(value) and any(ch in value for ch in _SEPARATORS)


def validate_extra_hours(hours: Decimal) -> bool:
    return 0 <= hours <= MAX_EXTRA_HOURS


def validate_employee(employee: Employee, account_charset: str | None = None) -> list[str]:
    """Check one employee record against every SIF field rule.

    ``account_charset`` overrides the configured IBAN account segment class.
    """
    errors: list[str] = []

    # Employee Name - TEXT(70), mandatory
    if not validate_employee_name(employee.employee_name):
        errors.append("Employee name is required and must be 70 characters or less")

    # QID / Visa ID - at least one
    if not employee.employee_qid and not employee.employee_visa_id:
        errors.append("Either QID or Visa ID must be provided")

    if employee.employee_qid and not validate_qid(employee.employee_qid):
        errors.append("QID must be exactly 11 digits")

    if employee.employee_visa_id and not validate_visa_id(employee.employee_visa_id):
        errors.append("Visa ID must be 12 characters or less")

    # Employee Bank Short Name - TEXT(4), mandatory
    if not validate_bank_short_name(employee.employee_short_name):
        errors.append("Employee bank short name is required and must be 4 characters or less")

    # Employee IBAN - TEXT(29), mandatory
    if not validate_iban(employee.employee_iban, account_charset):
        errors.append(
            "Invalid IBAN format (should be QA followed by 2 digits, 4 letters, and 21 characters)"
        )

    if not _is_member(SalaryFrequency, employee.salary_frequency):
        errors.append("Salary frequency must be 'M' (Monthly) or 'B' (Bi-weekly)")

    if not _is_member(PaymentType, employee.payment_type):
        errors.append("Payment type must be one of: " + ", ".join(p.value for p in PaymentType))

    # Working Days - NUMBER(3)
    if not 0 <= employee.working_days <= MAX_WORKING_DAYS:
        errors.append("Working days must be between 0 and 999")

    # Basic Salary - DECIMAL(18,2), > 0 even when on leave
    if employee.basic_salary <= 0:
        errors.append("Basic salary must be greater than zero")

    # Extra Hours - DECIMAL(3,2)
    if not validate_extra_hours(employee.extra_hours):
        errors.append("Extra hours must be between 0 and 999.99")

    if employee.extra_income < 0:
        errors.append("Extra income cannot be negative")

    if employee.deductions < 0:
        errors.append("Deductions cannot be negative")

    allowances = employee.allowances.model_dump()
    negative = [name for name, amount in allowances.items() if amount < 0]
    if negative:
        errors.append("Allowances cannot be negative: " + ", ".join(negative))

    amounts = {
        "basic_salary": employee.basic_salary,
        "extra_income": employee.extra_income,
        "deductions": employee.deductions,
        **allowances,
    }
    oversized = [name for name, amount in amounts.items() if amount > MAX_AMOUNT]
    if oversized:
        errors.append(
            f"Amounts cannot exceed {format_amount(MAX_AMOUNT)}: " + ", ".join(oversized)
        )

    # Deduction Reason Code - NUMBER(2), mandatory when deductions > 0
    code = employee.deduction_reason_code
    if code is not None and not _is_member(DeductionReasonCode, code):
        errors.append("Deduction reason code must be one of 1, 2, 3, 4 or 99")
    if employee.deductions > 0 and code is None:
        errors.append("Deduction reason code is required when deductions > 0")

    # Notes/Comments - TEXT(300), mandatory when reason code is 99
    notes = employee.notes or ""
    if len(notes) > MAX_NOTES_LENGTH:
        errors.append("Notes must be 300 characters or less")
    elif not validate_notes(notes, code):
        errors.append("Notes are required when deduction reason code is 99 (Other)")

    for label, value in (
        ("Visa ID", employee.employee_visa_id),
        ("Employee name", employee.employee_name),
        ("Notes", employee.notes),
    ):
        if has_separator(value):
            errors.append(f"{label} cannot contain commas or line breaks")

    return errors


def validate_employer_settings(
    settings: EmployerSettings, account_charset: str | None = None,
) -> list[str]:
    """Check the paying entity before a SIF is generated."""
    errors: list[str] = []

    if not (settings.employer_id or "").strip():
        errors.append("Employer ID (Computer card number) is required")

    if not (settings.payer_eid or "").strip():
        errors.append("Payer EID is required")

    if not (settings.payer_bank_short_name or "").strip():
        errors.append("Payer bank short name (BSI) is required")

    if not validate_iban(settings.payer_iban, account_charset):
        errors.append("Invalid payer IBAN format")

    if settings.sif_version != SIF_VERSION:
        errors.append(f"SIF version must be {SIF_VERSION}")

    if settings.payer_qid and not validate_qid(settings.payer_qid):
        errors.append("Payer QID must be exactly 11 digits")

    for label, value in (
        ("Employer ID", settings.employer_id),
        ("Payer EID", settings.payer_eid),
        ("Payer bank short name", settings.payer_bank_short_name),
    ):
        if has_separator(value):
            errors.append(f"{label} cannot contain commas or line breaks")

    return errors


def validate_payroll_run(run: PayrollRun) -> list[str]:
    errors: list[str] = []

    if not _YEAR_MONTH.fullmatch(run.salary_year_month or ""):
        errors.append("Salary month must be in YYYYMM format")

    if not _is_date(run.file_creation_date):
        errors.append("File creation date must be in YYYYMMDD format")

    if not _TIME.fullmatch(run.file_creation_time or ""):
        errors.append("File creation time must be in HHmm format")

    return errors


def _is_date(value: str | None) -> bool:
    if not value or not _DATE.fullmatch(value):
        return False
    try:
        datetime.strptime(value, "%Y%m%d")
    except ValueError:
        return False
    return True
