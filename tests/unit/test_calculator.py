"""Tests for net salary and payroll summary."""

from __future__ import annotations

from decimal import Decimal

from tests.fakes import make_employee
from wpsif.models.employee import EmployeeAllowances
from wpsif.payroll import calculate_net_salary, summarize_payroll


def test_net_salary_sums_components(employee):
    # 5000 + 200 + 1000 housing - 100
    assert calculate_net_salary(employee) == Decimal("6100")


def test_on_leave_forces_zero(employee):
    employee.on_leave = True
    assert calculate_net_salary(employee) == Decimal("0")


def test_all_allowances_count():
    employee = make_employee(
        extra_income=Decimal("0"),
        deductions=Decimal("0"),
        allowances=EmployeeAllowances(
            housing=Decimal("1"), food=Decimal("2"), transportation=Decimal("3"),
            overtime_allowance=Decimal("4"), extra1=Decimal("5"), extra2=Decimal("6"),
        ),
    )
    assert calculate_net_salary(employee) == Decimal("5021")


def test_missing_allowances_count_as_zero():
    employee = make_employee(allowances=None)
    assert calculate_net_salary(employee) == Decimal("5100")


def test_negative_result_is_not_floored():
    employee = make_employee(
        basic_salary=Decimal("100"), extra_income=Decimal("0"),
        allowances=EmployeeAllowances(), deductions=Decimal("250.50"),
    )
    assert calculate_net_salary(employee) == Decimal("-150.50")


def test_two_decimal_amounts_are_exact():
    employee = make_employee(
        basic_salary=Decimal("0.10"), extra_income=Decimal("0.20"),
        allowances=EmployeeAllowances(), deductions=Decimal("0"),
    )
    assert calculate_net_salary(employee) == Decimal("0.30")


class TestSummarizePayroll:
    def test_totals(self):
        active = make_employee()
        on_leave = make_employee(on_leave=True, deductions=Decimal("0"))
        summary = summarize_payroll([active, on_leave])
        assert summary.total_employees == 2
        assert summary.total_basic_salary == Decimal("10000")
        assert summary.total_deductions == Decimal("100")
        assert summary.total_net_salary == Decimal("6100")

    def test_empty(self):
        summary = summarize_payroll([])
        assert summary.total_employees == 0
        assert summary.total_net_salary == Decimal("0")
