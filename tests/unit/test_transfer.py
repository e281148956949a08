"""Tests for the import/export boundary."""

from __future__ import annotations

import json
from decimal import Decimal

import pytest

from tests.fakes import EMPLOYEE_IBAN, PAYER_IBAN, make_employee, make_employer, make_run
from wpsif.core.exceptions import GenerationBlockedError, ImportFormatError
from wpsif.sif import generate_sif
from wpsif.transfer import (
    decode_upload,
    export_employees_json,
    import_employees_json,
    import_sif,
    prepare_sif_export,
)


class TestDecodeUpload:
    def test_byte_order_mark_is_dropped(self):
        assert decode_upload(b"\xef\xbb\xbfa,b") == "a,b"

    def test_non_utf8_bytes_are_invalid_format(self):
        with pytest.raises(ImportFormatError) as excinfo:
            decode_upload(b"\xff\xfe\xfa garbage")
        assert excinfo.value.reason == "invalid format"


class TestImportSif:
    def test_reports_records_it_would_replace(self, employee, employer, run):
        text = generate_sif([employee], employer, run).content
        result = import_sif(text, existing_count=3)
        assert len(result.employees) == 1
        assert result.employer == employer
        assert result.replaces == 3
        assert result.requires_confirmation is True

    def test_empty_session_needs_no_confirmation(self, employee, employer, run):
        text = generate_sif([employee], employer, run).content
        assert import_sif(text).requires_confirmation is False

    def test_too_few_lines(self):
        with pytest.raises(ImportFormatError) as excinfo:
            import_sif("only one line")
        assert excinfo.value.reason == "too few lines"


class TestImportJson:
    def test_browser_export_format(self):
        payload = [
            {
                "employeeId": "abc-123",
                "employeeName": "Ahmed Hassan",
                "employeeShortName": "DOHB",
                "employeeQid": "28412345678",
                "employeeIban": EMPLOYEE_IBAN,
                "salaryFrequency": "M",
                "workingDays": 30,
                "basicSalary": 5000,
                "extraHours": 0,
                "extraIncome": 200.5,
                "deductions": 0,
                "paymentType": "Normal Payment",
                "allowances": {"housing": 1000, "overtimeAllowance": 50},
                "onLeave": True,
            }
        ]
        result = import_employees_json(json.dumps(payload), existing_count=0)
        [employee] = result.employees
        assert employee.employee_id == "abc-123"
        assert employee.extra_income == Decimal("200.5")
        assert employee.allowances.overtime_allowance == Decimal("50")
        assert employee.on_leave is True
        assert result.employer is None

    def test_missing_id_gets_one(self):
        result = import_employees_json('[{"employeeName": "New"}]')
        assert result.employees[0].employee_id

    def test_invalid_json(self):
        with pytest.raises(ImportFormatError) as excinfo:
            import_employees_json("{not json")
        assert excinfo.value.reason == "invalid format"

    def test_not_an_array(self):
        with pytest.raises(ImportFormatError) as excinfo:
            import_employees_json('{"employees": []}')
        assert excinfo.value.reason == "not an array"

    def test_unknown_reason_code_is_invalid_format(self):
        with pytest.raises(ImportFormatError) as excinfo:
            import_employees_json('[{"deductionReasonCode": 7}]')
        assert excinfo.value.reason == "invalid format"


class TestExportJson:
    def test_export_uses_camel_case_numbers(self, employee):
        export = export_employees_json([employee])
        assert export.filename == "employees.json"
        assert export.mime_type == "application/json"
        [data] = json.loads(export.content)
        assert data["employeeName"] == "Ahmed Hassan"
        assert data["basicSalary"] == 5000.0
        assert data["allowances"]["housing"] == 1000.0
        assert data["deductionReasonCode"] == 4

    def test_export_then_import_keeps_records(self, employee):
        export = export_employees_json([employee])
        [restored] = import_employees_json(export.content).employees
        assert restored == employee


class TestPrepareSifExport:
    def test_valid_inputs_generate(self, employee, employer, run):
        export = prepare_sif_export([employee], employer, run)
        assert export.filename == "SIF_1234567_QNB_20251031_0930.csv"

    def test_collects_every_blocking_error(self, employee):
        broken = make_employee(employee_name="Sara", basic_salary=Decimal("0"))
        with pytest.raises(GenerationBlockedError) as excinfo:
            prepare_sif_export(
                [employee, broken],
                make_employer(payer_eid=""),
                make_run(salary_year_month="2025"),
            )
        assert excinfo.value.errors == [
            "Payer EID is required",
            "Salary month must be in YYYYMM format",
            "Record 000002 (Sara): Basic salary must be greater than zero",
        ]

    def test_no_selection_is_blocked(self, employer, run):
        with pytest.raises(GenerationBlockedError) as excinfo:
            prepare_sif_export([], employer, run)
        assert excinfo.value.errors == ["Please select at least one employee"]

    def test_unencodable_values_are_blocking_errors(self, employer, run):
        employee = make_employee(employee_name="Hassan, Ahmed")
        with pytest.raises(GenerationBlockedError) as excinfo:
            prepare_sif_export([employee], employer, run)
        assert excinfo.value.errors == [
            "Record 000001 (Hassan, Ahmed): Employee name cannot contain commas or line breaks"
        ]

    def test_oversized_amounts_are_blocking_errors(self, employer, run):
        employee = make_employee(basic_salary=Decimal("1e30"))
        with pytest.raises(GenerationBlockedError) as excinfo:
            prepare_sif_export([employee], employer, run)
        assert excinfo.value.errors == [
            "Record 000001 (Ahmed Hassan): Amounts cannot exceed 9999999999999999.99: basic_salary"
        ]

    def test_iban_account_charset_is_applied(self, employer, run):
        with pytest.raises(GenerationBlockedError) as excinfo:
            prepare_sif_export([make_employee()], employer, run, account_charset="numeric")
        [error] = excinfo.value.errors
        assert error.startswith("Record 000001 (Ahmed Hassan): Invalid IBAN format")

        employee = make_employee(employee_iban=PAYER_IBAN)
        export = prepare_sif_export([employee], employer, run, account_charset="numeric")
        assert PAYER_IBAN in export.content
