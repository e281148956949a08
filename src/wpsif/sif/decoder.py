"""SIF decoder: CSV text -> employees and employer settings."""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, TypeVar

from wpsif.core.exceptions import SifFormatError
from wpsif.models.employee import (
    DeductionReasonCode,
    Employee,
    EmployeeAllowances,
    EmployerSettings,
    PaymentType,
    PayrollRun,
    SalaryFrequency,
)
from wpsif.models.sif import SifDocument
from wpsif.sif import layout
from wpsif.validation.iban import iban_bank_code

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def parse_sif(text: str) -> SifDocument:
    """Decode a SIF file.

    Blank lines are ignored. Numeric fields that are missing, unparseable or
    too large for DECIMAL(18,2) decode to zero and missing optional text to
    ``None``. Each employee gets a fresh id and ``on_leave=False``, since the
    format carries neither.

    Raises:
        SifFormatError: fewer than the three header lines plus one record.
    """
    lines = [line for line in _LINE_BREAK.split(text) if line.strip()]
    if len(lines) < layout.MIN_LINE_COUNT:
        raise SifFormatError(
            f"Invalid SIF CSV format: expected at least {layout.MIN_LINE_COUNT} lines, "
            f"found {len(lines)}"
        )

    header = _fields(lines[1], layout.HEADER_COLUMN_COUNT, line_number=2)
    employer = EmployerSettings(
        employer_id=header[layout.HDR_EMPLOYER_ID],
        payer_eid=header[layout.HDR_PAYER_EID],
        payer_qid=header[layout.HDR_PAYER_QID] or None,
        payer_bank_short_name=header[layout.HDR_PAYER_BANK_SHORT_NAME],
        payer_iban=header[layout.HDR_PAYER_IBAN],
        sif_version=_to_int(header[layout.HDR_SIF_VERSION]) or layout.SIF_VERSION,
    )
    run = PayrollRun(
        salary_year_month=header[layout.HDR_SALARY_YEAR_MONTH],
        file_creation_date=header[layout.HDR_FILE_CREATION_DATE],
        file_creation_time=header[layout.HDR_FILE_CREATION_TIME],
    )

    employees: list[Employee] = []
    declared_net = Decimal("0")
    for offset, line in enumerate(lines[layout.HEADER_LINE_COUNT:]):
        row = _fields(line, layout.EMPLOYEE_COLUMN_COUNT, offset + layout.HEADER_LINE_COUNT + 1)
        employees.append(_employee(row))
        declared_net += _to_decimal(row[layout.COL_NET_SALARY])

    warnings = _reconcile(header, employees, declared_net)
    logger.info("Parsed SIF with %d employee records", len(employees))
    return SifDocument(employees=employees, employer=employer, payroll_run=run, warnings=warnings)


def _employee(row: list[str]) -> Employee:
    iban = row[layout.COL_IBAN]
    return Employee(
        employee_qid=row[layout.COL_QID] or None,
        employee_visa_id=row[layout.COL_VISA_ID] or None,
        employee_name=row[layout.COL_NAME],
        employee_short_name=row[layout.COL_BANK_SHORT_NAME] or iban_bank_code(iban),
        employee_iban=iban,
        salary_frequency=_to_enum(
            SalaryFrequency, row[layout.COL_SALARY_FREQUENCY], SalaryFrequency.MONTHLY
        ),
        working_days=_to_int(row[layout.COL_WORKING_DAYS]),
        basic_salary=_to_decimal(row[layout.COL_BASIC_SALARY]),
        extra_hours=_to_decimal(row[layout.COL_EXTRA_HOURS]),
        extra_income=_to_decimal(row[layout.COL_EXTRA_INCOME]),
        deductions=_to_decimal(row[layout.COL_DEDUCTIONS]),
        deduction_reason_code=_to_reason_code(row[layout.COL_DEDUCTION_REASON]),
        payment_type=_to_enum(PaymentType, row[layout.COL_PAYMENT_TYPE], PaymentType.NORMAL),
        notes=row[layout.COL_NOTES] or None,
        allowances=EmployeeAllowances(
            housing=_to_decimal(row[layout.COL_HOUSING]),
            food=_to_decimal(row[layout.COL_FOOD]),
            transportation=_to_decimal(row[layout.COL_TRANSPORTATION]),
            overtime_allowance=_to_decimal(row[layout.COL_OVERTIME]),
            extra1=_to_decimal(row[layout.COL_EXTRA1]),
            extra2=_to_decimal(row[layout.COL_EXTRA2]),
        ),
        on_leave=False,
    )


def _reconcile(header: list[str], employees: list[Employee], declared_net: Decimal) -> list[str]:
    """Compare the header totals with the records that follow it."""
    warnings: list[str] = []
    declared_records = _to_int(header[layout.HDR_TOTAL_RECORDS])
    if declared_records != len(employees):
        warnings.append(
            f"Header declares {declared_records} records but the file contains {len(employees)}"
        )
    declared_total = header[layout.HDR_TOTAL_SALARIES]
    if layout.format_amount(_to_decimal(declared_total)) != layout.format_amount(declared_net):
        warnings.append(
            f"Header total salaries {declared_total} does not match the sum of record "
            f"net salaries {layout.format_amount(declared_net)}"
        )
    for warning in warnings:
        logger.warning(warning)
    return warnings


def _fields(line: str, expected: int, line_number: int) -> list[str]:
    parts = [part.strip() for part in line.split(layout.SEPARATOR)]
    if len(parts) < expected:
        logger.warning(
            "SIF line %d has %d of %d columns; missing values use defaults",
            line_number, len(parts), expected,
        )
        parts.extend([""] * (expected - len(parts)))
    return parts


def _to_decimal(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation:
        return Decimal("0")
    if not amount.is_finite() or abs(amount) > layout.MAX_AMOUNT:
        return Decimal("0")
    return amount


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return int(_to_decimal(value))


def _to_enum(enum_cls: type[E], value: str, default: E) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        return default


def _to_reason_code(value: str) -> Optional[DeductionReasonCode]:
    code = _to_int(value)
    if code == 0:
        return None
    try:
        return DeductionReasonCode(code)
    except ValueError:
        logger.warning("Ignoring unknown deduction reason code %r", value)
        return None
