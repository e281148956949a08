"""Tests for scripts/check_sif.py."""

from __future__ import annotations

import os
import sys
from decimal import Decimal

from tests.fakes import make_employee, make_employer, make_run
from wpsif.sif import generate_sif

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "scripts"))
from check_sif import check, main  # noqa: E402


def test_clean_file_has_no_problems():
    text = generate_sif([make_employee()], make_employer(), make_run()).content
    assert check(text) == []


def test_record_problems_are_numbered():
    employees = [make_employee(), make_employee(basic_salary=Decimal("0"))]
    text = generate_sif(employees, make_employer(), make_run()).content
    assert check(text) == ["Record 000002: Basic salary must be greater than zero"]


def test_non_utf8_file_is_a_format_failure(tmp_path, monkeypatch, capsys):
    path = tmp_path / "SIF_bad.csv"
    path.write_bytes(b"\xff\xfe\xfa garbage")
    monkeypatch.setattr(sys, "argv", ["check_sif.py", str(path)])
    assert main() == 2
    assert "invalid format" in capsys.readouterr().out


def test_main_reports_ok_for_clean_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "SIF_ok.csv"
    path.write_bytes(generate_sif([make_employee()], make_employer(), make_run()).content.encode())
    monkeypatch.setattr(sys, "argv", ["check_sif.py", str(path)])
    assert main() == 0
    assert "OK" in capsys.readouterr().out
