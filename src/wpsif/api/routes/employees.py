"""Employee list endpoints: CRUD, search, JSON import/export."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from wpsif.api.deps import apply_import, file_response, get_iban_charset, get_workspace
from wpsif.api.schemas import DeleteEmployeesRequest
from wpsif.models.employee import Employee
from wpsif.payroll import calculate_net_salary, search_employees
from wpsif.session import PayrollWorkspace
from wpsif.sif.layout import format_amount
from wpsif.transfer import decode_upload, export_employees_json, import_employees_json
from wpsif.validation import validate_employee

router = APIRouter(tags=["employees"])


@router.get("", response_model=list[Employee])
async def list_employees(
    q: str = Query(default="", description="Name, QID, Visa ID or IBAN fragment"),
    workspace: PayrollWorkspace = Depends(get_workspace),
) -> list[Employee]:
    return search_employees(workspace.employees, q)


@router.post("", response_model=Employee, status_code=201)
async def add_employee(
    employee: Employee,
    workspace: PayrollWorkspace = Depends(get_workspace),
    iban_charset: str = Depends(get_iban_charset),
) -> Employee:
    errors = validate_employee(employee, iban_charset)
    if errors:
        raise HTTPException(status_code=422, detail=errors)
    return workspace.add_employee(employee)


@router.get("/export")
async def export_employees(workspace: PayrollWorkspace = Depends(get_workspace)) -> Response:
    return file_response(export_employees_json(workspace.employees))


@router.post("/import")
async def import_employees(
    request: Request,
    confirm: bool = False,
    workspace: PayrollWorkspace = Depends(get_workspace),
) -> dict:
    """Replace the employee list with a JSON array upload."""
    text = decode_upload(await request.body())
    result = import_employees_json(text, existing_count=len(workspace.employees))
    return apply_import(workspace, result, confirm)


@router.post("/delete")
async def delete_employees(
    body: DeleteEmployeesRequest, workspace: PayrollWorkspace = Depends(get_workspace),
) -> dict:
    return {"deleted": workspace.delete_employees(body.employee_ids)}


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: str, workspace: PayrollWorkspace = Depends(get_workspace),
) -> Employee:
    return workspace.get_employee(employee_id)


@router.get("/{employee_id}/net-salary")
async def get_net_salary(
    employee_id: str, workspace: PayrollWorkspace = Depends(get_workspace),
) -> dict:
    employee = workspace.get_employee(employee_id)
    return {"employeeId": employee_id, "netSalary": format_amount(calculate_net_salary(employee))}


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: str,
    employee: Employee,
    workspace: PayrollWorkspace = Depends(get_workspace),
    iban_charset: str = Depends(get_iban_charset),
) -> Employee:
    errors = validate_employee(employee, iban_charset)
    if errors:
        raise HTTPException(status_code=422, detail=errors)
    return workspace.update_employee(employee.model_copy(update={"employee_id": employee_id}))


@router.delete("/{employee_id}")
async def delete_employee(
    employee_id: str, workspace: PayrollWorkspace = Depends(get_workspace),
) -> dict:
    workspace.get_employee(employee_id)  # 404 when unknown
    return {"deleted": workspace.delete_employees([employee_id])}
