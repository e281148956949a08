"""Net salary and payroll summary computation."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from wpsif.models.employee import Employee
from wpsif.models.sif import PayrollSummary


def calculate_net_salary(employee: Employee) -> Decimal:
    """basic + extra income + allowances - deductions; zero when on leave.

    The result is not floored: deductions larger than income give a
    negative net salary.
    """
    if employee.on_leave:
        return Decimal("0")
    return (
        Decimal(employee.basic_salary)
        + Decimal(employee.extra_income)
        + employee.allowances.total
        - Decimal(employee.deductions)
    )


def summarize_payroll(employees: Iterable[Employee]) -> PayrollSummary:
    """Totals over the given employees, typically the ones selected for payment."""
    summary = PayrollSummary()
    for employee in employees:
        summary.total_employees += 1
        summary.total_basic_salary += employee.basic_salary
        summary.total_deductions += employee.deductions
        summary.total_net_salary += calculate_net_salary(employee)
    return summary
