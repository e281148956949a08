"""SIF encoder: employees + employer + payroll run -> CSV text."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from wpsif.core.exceptions import EmptyPayrollError, SifEncodingError
from wpsif.models.employee import Employee, EmployerSettings, PayrollRun
from wpsif.models.sif import SifExport
from wpsif.payroll.calculator import calculate_net_salary
from wpsif.sif import layout

logger = logging.getLogger(__name__)

_FORBIDDEN = (",", "\r", "\n")


def sif_filename(employer: EmployerSettings, run: PayrollRun) -> str:
    """SIF_<employer>_<bank>_<YYYYMMDD>_<HHmm>.csv, stable for identical inputs."""
    parts = [
        layout.FILENAME_PREFIX,
        employer.employer_id,
        employer.payer_bank_short_name,
        run.file_creation_date,
        run.file_creation_time,
    ]
    return layout.FILENAME_DELIMITER.join(parts) + ".csv"


def generate_sif(
    employees: Sequence[Employee],
    employer: EmployerSettings,
    run: PayrollRun,
) -> SifExport:
    """Serialize employees, in input order, into a SIF file.

    Every employee given is written; on-leave employees contribute a zero
    net salary. Choosing who is paid is the caller's job.

    Raises:
        EmptyPayrollError: no employees were given.
        SifEncodingError: a value contains a comma or line break.
    """
    employees = list(employees)
    if not employees:
        raise EmptyPayrollError("At least one employee is required to generate a SIF")

    net_salaries = [calculate_net_salary(e) for e in employees]
    total = sum(net_salaries, Decimal("0"))

    header = [
        employer.employer_id,
        run.file_creation_date,
        run.file_creation_time,
        employer.payer_eid,
        employer.payer_qid or "",
        employer.payer_bank_short_name,
        employer.payer_iban,
        run.salary_year_month,
        layout.format_amount(total),
        str(len(employees)),
        str(employer.sif_version),
    ]
    _check_fields("Header record", header, layout.HEADER_LABELS)

    lines = [layout.HEADER_LABELS, layout.SEPARATOR.join(header), layout.COLUMN_HEADERS]
    for index, (employee, net) in enumerate(zip(employees, net_salaries), start=1):
        row = _employee_row(index, employee, net)
        _check_fields(f"Record {row[layout.COL_SEQUENCE]}", row, layout.COLUMN_HEADERS)
        lines.append(layout.SEPARATOR.join(row))

    filename = sif_filename(employer, run)
    logger.info("Generated %s with %d records", filename, len(employees))
    return SifExport(
        content=layout.LINE_TERMINATOR.join(lines),
        filename=filename,
        mime_type=layout.MIME_TYPE,
    )


def _employee_row(sequence: int, employee: Employee, net_salary: Decimal) -> list[str]:
    allowances = employee.allowances
    reason = employee.deduction_reason_code
    return [
        str(sequence).zfill(layout.SEQUENCE_WIDTH),
        employee.employee_qid or "",
        employee.employee_visa_id or "",
        employee.employee_name,
        "",  # Employee bank short name column is left blank
        employee.employee_iban,
        str(employee.salary_frequency),
        str(employee.working_days),
        layout.format_amount(net_salary),
        layout.format_amount(employee.basic_salary),
        layout.format_amount(employee.extra_hours),
        layout.format_amount(employee.extra_income),
        layout.format_amount(employee.deductions),
        str(employee.payment_type),
        employee.notes or "",
        layout.format_amount(allowances.housing),
        layout.format_amount(allowances.food),
        layout.format_amount(allowances.transportation),
        layout.format_amount(allowances.overtime_allowance),
        str(int(reason)) if reason is not None else layout.NO_REASON_CODE,
        layout.format_amount(allowances.extra1),
        layout.format_amount(allowances.extra2),
    ]


def _check_fields(record: str, fields: list[str], labels_line: str) -> None:
    labels = layout.split_labels(labels_line)
    for position, value in enumerate(fields):
        if any(ch in value for ch in _FORBIDDEN):
            raise SifEncodingError(record, labels[position])
