"""Net salary calculation and payroll-level aggregates."""

from __future__ import annotations

from wpsif.payroll.calculator import calculate_net_salary, summarize_payroll
from wpsif.payroll.selection import default_selection, search_employees, select_employees

__all__ = [
    "calculate_net_salary",
    "default_selection",
    "search_employees",
    "select_employees",
    "summarize_payroll",
]
