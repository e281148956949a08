"""Tests for PayrollWorkspace session state."""

from __future__ import annotations

from decimal import Decimal

import pytest

from tests.fakes import MemorySessionStore, make_employee, make_employer
from wpsif.core.config import AppSettings, SessionConfig
from wpsif.core.exceptions import EmployeeNotFoundError
from wpsif.models.sif import ImportResult
from wpsif.session import create_session_store
from wpsif.session.redis_backend import RedisSessionStore
from wpsif.session.workspace import EMPLOYEES_KEY, EMPLOYER_KEY, PayrollWorkspace


@pytest.fixture
def store():
    return MemorySessionStore()


@pytest.fixture
def workspace(store):
    ws = PayrollWorkspace(store)
    ws.load()
    return ws


class TestEmployees:
    def test_add_assigns_fresh_id_and_persists(self, workspace, store):
        employee = make_employee()
        added = workspace.add_employee(employee)
        assert added.employee_id != employee.employee_id
        assert store.get(EMPLOYEES_KEY) is not None
        assert [e.employee_id for e in workspace.employees] == [added.employee_id]

    def test_employees_are_copies(self, workspace):
        added = workspace.add_employee(make_employee())
        workspace.employees[0].basic_salary = Decimal("1")
        assert workspace.get_employee(added.employee_id).basic_salary == Decimal("5000")

    def test_update_replaces_in_place(self, workspace):
        first = workspace.add_employee(make_employee(employee_name="First"))
        second = workspace.add_employee(make_employee(employee_name="Second"))
        edited = first.model_copy(update={"employee_name": "First Edited"})
        workspace.update_employee(edited)
        assert [e.employee_name for e in workspace.employees] == ["First Edited", "Second"]
        assert workspace.get_employee(second.employee_id).employee_name == "Second"

    def test_update_unknown_raises(self, workspace):
        with pytest.raises(EmployeeNotFoundError):
            workspace.update_employee(make_employee())

    def test_get_unknown_raises(self, workspace):
        with pytest.raises(EmployeeNotFoundError):
            workspace.get_employee("missing")

    def test_delete_selected(self, workspace):
        a = workspace.add_employee(make_employee())
        b = workspace.add_employee(make_employee())
        c = workspace.add_employee(make_employee())
        assert workspace.delete_employees([a.employee_id, c.employee_id, "missing"]) == 2
        assert [e.employee_id for e in workspace.employees] == [b.employee_id]


class TestPersistence:
    def test_reload_restores_state(self, workspace, store):
        added = workspace.add_employee(make_employee())
        workspace.set_employer(make_employer())

        reloaded = PayrollWorkspace(store)
        reloaded.load()
        assert reloaded.employees == [added]
        assert reloaded.employer == make_employer()

    def test_unreadable_entries_load_empty(self, store):
        store.set(EMPLOYEES_KEY, "not json")
        store.set(EMPLOYER_KEY, "{broken")
        ws = PayrollWorkspace(store)
        ws.load()
        assert ws.employees == []
        assert ws.employer is None

    def test_clear_all(self, workspace):
        workspace.add_employee(make_employee())
        workspace.set_employer(make_employer())
        assert workspace.has_data() is True
        workspace.clear_all()
        assert workspace.employees == []
        assert workspace.employer is None
        assert workspace.has_data() is False


class TestApplyImport:
    def test_replaces_employees_and_employer(self, workspace):
        workspace.add_employee(make_employee())
        imported = [make_employee(employee_name="Imported")]
        workspace.apply_import(
            ImportResult(employees=imported, employer=make_employer(employer_id="999"), replaces=1)
        )
        assert [e.employee_name for e in workspace.employees] == ["Imported"]
        assert workspace.employer.employer_id == "999"

    def test_json_import_keeps_existing_employer(self, workspace):
        workspace.set_employer(make_employer())
        workspace.apply_import(ImportResult(employees=[]))
        assert workspace.employer == make_employer()


class TestCreateSessionStore:
    def test_memory_by_default(self):
        assert isinstance(create_session_store(AppSettings()), MemorySessionStore)

    def test_redis_when_configured(self):
        settings = AppSettings(session=SessionConfig(backend="redis"))
        assert isinstance(create_session_store(settings), RedisSessionStore)
