"""Turn uploaded file contents into records.

Nothing here applies an import: the result says how many existing records
it would replace, and the caller confirms before swapping its state.
"""

from __future__ import annotations

import json
import logging

from pydantic import TypeAdapter, ValidationError

from wpsif.core.exceptions import ImportFormatError, SifFormatError
from wpsif.models.employee import Employee
from wpsif.models.sif import ImportResult
from wpsif.sif.decoder import parse_sif

logger = logging.getLogger(__name__)

_EMPLOYEE_LIST = TypeAdapter(list[Employee])


def decode_upload(data: bytes) -> str:
    """Uploaded bytes as text; a UTF-8 byte order mark is dropped.

    Raises:
        ImportFormatError: reason ``invalid format`` when the bytes are not UTF-8.
    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ImportFormatError(
            ImportFormatError.INVALID_FORMAT, "file is not UTF-8 text"
        ) from exc


def import_sif(text: str, existing_count: int = 0) -> ImportResult:
    """Decode a SIF upload.

    Raises:
        ImportFormatError: reason ``too few lines``.
    """
    try:
        document = parse_sif(text)
    except SifFormatError as exc:
        raise ImportFormatError(ImportFormatError.TOO_FEW_LINES, str(exc)) from exc
    logger.info("SIF import decoded %d employees", len(document.employees))
    return ImportResult(
        employees=document.employees,
        employer=document.employer,
        replaces=existing_count,
    )


def import_employees_json(text: str, existing_count: int = 0) -> ImportResult:
    """Decode a JSON array of employee objects.

    Employees without an ``employeeId`` get a fresh one.

    Raises:
        ImportFormatError: reason ``invalid format`` or ``not an array``.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ImportFormatError(ImportFormatError.INVALID_FORMAT, exc.msg) from exc

    if not isinstance(data, list):
        raise ImportFormatError(
            ImportFormatError.NOT_AN_ARRAY, "expected an array of employees"
        )

    try:
        employees = _EMPLOYEE_LIST.validate_python(data)
    except ValidationError as exc:
        raise ImportFormatError(
            ImportFormatError.INVALID_FORMAT, f"{exc.error_count()} invalid field(s)"
        ) from exc

    logger.info("JSON import decoded %d employees", len(employees))
    return ImportResult(employees=employees, replaces=existing_count)
