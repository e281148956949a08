"""PayrollWorkspace: owns the session's employees and employer settings.

The codec and validators never touch this state: the workspace hands out
copies and takes new values back, persisting each change to its store.
"""

from __future__ import annotations

import logging
import uuid
from typing import Iterable, Optional

from pydantic import TypeAdapter, ValidationError

from wpsif.core.exceptions import EmployeeNotFoundError
from wpsif.core.protocols import ISessionStore
from wpsif.models.employee import Employee, EmployerSettings
from wpsif.models.sif import ImportResult

logger = logging.getLogger(__name__)

EMPLOYEES_KEY = "wps_employees"
EMPLOYER_KEY = "wps_employer"

_EMPLOYEE_LIST = TypeAdapter(list[Employee])


class PayrollWorkspace:
    """Session-scoped employee list and employer settings."""

    def __init__(self, store: ISessionStore) -> None:
        self._store = store
        self._employees: list[Employee] = []
        self._employer: Optional[EmployerSettings] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Read state from the store; unreadable entries load as empty."""
        self._employees = []
        self._employer = None

        raw = self._store.get(EMPLOYEES_KEY)
        if raw:
            try:
                self._employees = _EMPLOYEE_LIST.validate_json(raw)
            except ValidationError:
                logger.warning("Discarding unreadable %s session entry", EMPLOYEES_KEY)

        raw = self._store.get(EMPLOYER_KEY)
        if raw:
            try:
                self._employer = EmployerSettings.model_validate_json(raw)
            except ValidationError:
                logger.warning("Discarding unreadable %s session entry", EMPLOYER_KEY)

    # ------------------------------------------------------------------
    # Employees
    # ------------------------------------------------------------------

    @property
    def employees(self) -> list[Employee]:
        return [e.model_copy(deep=True) for e in self._employees]

    def get_employee(self, employee_id: str) -> Employee:
        return self._find(employee_id).model_copy(deep=True)

    def replace_employees(self, employees: Iterable[Employee]) -> None:
        self._employees = [e.model_copy(deep=True) for e in employees]
        self._save_employees()

    def add_employee(self, employee: Employee) -> Employee:
        """Append a copy of ``employee`` under a freshly generated id."""
        added = employee.model_copy(deep=True, update={"employee_id": str(uuid.uuid4())})
        self._employees.append(added)
        self._save_employees()
        return added.model_copy(deep=True)

    def update_employee(self, employee: Employee) -> Employee:
        for index, current in enumerate(self._employees):
            if current.employee_id == employee.employee_id:
                self._employees[index] = employee.model_copy(deep=True)
                self._save_employees()
                return employee.model_copy(deep=True)
        raise EmployeeNotFoundError(employee.employee_id)

    def delete_employees(self, employee_ids: Iterable[str]) -> int:
        """Remove the given ids; returns how many were removed."""
        doomed = set(employee_ids)
        before = len(self._employees)
        self._employees = [e for e in self._employees if e.employee_id not in doomed]
        removed = before - len(self._employees)
        if removed:
            self._save_employees()
        return removed

    # ------------------------------------------------------------------
    # Employer
    # ------------------------------------------------------------------

    @property
    def employer(self) -> Optional[EmployerSettings]:
        return self._employer.model_copy() if self._employer else None

    def set_employer(self, employer: EmployerSettings) -> None:
        self._employer = employer.model_copy()
        self._store.set(EMPLOYER_KEY, self._employer.model_dump_json(by_alias=True))

    # ------------------------------------------------------------------
    # Whole session
    # ------------------------------------------------------------------

    def apply_import(self, result: ImportResult) -> None:
        """Replace the employee list (and employer, if the file carried one)."""
        self.replace_employees(result.employees)
        if result.employer is not None:
            self.set_employer(result.employer)
        logger.info("Applied import of %d employees", len(result.employees))

    def clear_all(self) -> None:
        self._employees = []
        self._employer = None
        self._store.clear()

    def has_data(self) -> bool:
        return self._store.has_data()

    def _find(self, employee_id: str) -> Employee:
        for employee in self._employees:
            if employee.employee_id == employee_id:
                return employee
        raise EmployeeNotFoundError(employee_id)

    def _save_employees(self) -> None:
        self._store.set(
            EMPLOYEES_KEY,
            _EMPLOYEE_LIST.dump_json(self._employees, by_alias=True).decode("utf-8"),
        )
