"""Produce downloadable files; writing them out is the caller's job."""

from __future__ import annotations

import logging
from typing import Sequence

from pydantic import TypeAdapter

from wpsif.core.exceptions import GenerationBlockedError
from wpsif.models.employee import Employee, EmployerSettings, PayrollRun
from wpsif.models.sif import SifExport
from wpsif.sif.encoder import generate_sif
from wpsif.validation.rules import (
    validate_employee,
    validate_employer_settings,
    validate_payroll_run,
)

logger = logging.getLogger(__name__)

EMPLOYEES_JSON_FILENAME = "employees.json"
JSON_MIME_TYPE = "application/json"

_EMPLOYEE_LIST = TypeAdapter(list[Employee])


def export_employees_json(employees: Sequence[Employee]) -> SifExport:
    """Pretty-printed JSON array using the session's camelCase field names."""
    content = _EMPLOYEE_LIST.dump_json(list(employees), by_alias=True, indent=2)
    return SifExport(
        content=content.decode("utf-8"),
        filename=EMPLOYEES_JSON_FILENAME,
        mime_type=JSON_MIME_TYPE,
    )


def generation_errors(
    employees: Sequence[Employee],
    employer: EmployerSettings,
    run: PayrollRun,
    account_charset: str | None = None,
) -> list[str]:
    """Every reason the given selection cannot be written to a SIF yet."""
    errors = list(validate_employer_settings(employer, account_charset))
    errors.extend(validate_payroll_run(run))
    if not employees:
        errors.append("Please select at least one employee")
    for index, employee in enumerate(employees, start=1):
        label = f"Record {index:06d} ({employee.employee_name or 'unnamed'})"
        messages = validate_employee(employee, account_charset)
        errors.extend(f"{label}: {message}" for message in messages)
    return errors


def prepare_sif_export(
    employees: Sequence[Employee],
    employer: EmployerSettings,
    run: PayrollRun,
    account_charset: str | None = None,
) -> SifExport:
    """Validate, then generate the SIF for the selected employees.

    Raises:
        GenerationBlockedError: with the full list of validation messages.
    """
    errors = generation_errors(employees, employer, run, account_charset)
    if errors:
        logger.info("SIF generation blocked by %d validation error(s)", len(errors))
        raise GenerationBlockedError(errors)
    return generate_sif(employees, employer, run)
