"""Employee selection and search helpers used by the workspace views."""

from __future__ import annotations

from typing import Iterable

from wpsif.models.employee import Employee


def default_selection(employees: Iterable[Employee]) -> list[str]:
    """IDs pre-selected for payment: everyone not on leave."""
    return [e.employee_id for e in employees if not e.on_leave]


def select_employees(employees: Iterable[Employee], ids: Iterable[str]) -> list[Employee]:
    """Employees whose id is in ``ids``, in their original order."""
    wanted = set(ids)
    return [e for e in employees if e.employee_id in wanted]


def search_employees(employees: Iterable[Employee], query: str) -> list[Employee]:
    """Case-insensitive substring match on name, QID, Visa ID and IBAN."""
    employees = list(employees)
    if not query:
        return employees
    needle = query.lower()
    return [
        e for e in employees
        if needle in e.employee_name.lower()
        or needle in (e.employee_qid or "").lower()
        or needle in (e.employee_visa_id or "").lower()
        or needle in e.employee_iban.lower()
    ]
