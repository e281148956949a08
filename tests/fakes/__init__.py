"""Shared test doubles and sample records."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from wpsif.models.employee import (
    DeductionReasonCode,
    Employee,
    EmployeeAllowances,
    EmployerSettings,
    PayrollRun,
)
from wpsif.session.memory_backend import MemorySessionStore

# Checksum-valid Qatari IBANs
EMPLOYEE_IBAN = "QA58DOHB00001234567890ABCDEFG"
SECOND_IBAN = "QA25CBQA000000001234567890123"
PAYER_IBAN = "QA54QNBA000000000000693123456"


def make_employee(**overrides: Any) -> Employee:
    """A valid employee: net salary 6100.00."""
    fields: dict[str, Any] = {
        "employee_qid": "28412345678",
        "employee_name": "Ahmed Hassan",
        "employee_short_name": "DOHB",
        "employee_iban": EMPLOYEE_IBAN,
        "working_days": 30,
        "basic_salary": Decimal("5000"),
        "extra_hours": Decimal("4.5"),
        "extra_income": Decimal("200"),
        "deductions": Decimal("100"),
        "deduction_reason_code": DeductionReasonCode.ADVANCES,
        "allowances": EmployeeAllowances(housing=Decimal("1000")),
    }
    fields.update(overrides)
    return Employee(**fields)


def make_employer(**overrides: Any) -> EmployerSettings:
    fields: dict[str, Any] = {
        "employer_id": "1234567",
        "payer_eid": "1234567",
        "payer_bank_short_name": "QNB",
        "payer_iban": PAYER_IBAN,
    }
    fields.update(overrides)
    return EmployerSettings(**fields)


def make_run(**overrides: Any) -> PayrollRun:
    fields: dict[str, Any] = {
        "salary_year_month": "202510",
        "file_creation_date": "20251031",
        "file_creation_time": "0930",
    }
    fields.update(overrides)
    return PayrollRun(**fields)


__all__ = [
    "EMPLOYEE_IBAN",
    "MemorySessionStore",
    "PAYER_IBAN",
    "SECOND_IBAN",
    "make_employee",
    "make_employer",
    "make_run",
]
