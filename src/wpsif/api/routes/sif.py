"""SIF generation, import and pre-generation summary."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from wpsif.api.deps import apply_import, file_response, get_iban_charset, get_workspace
from wpsif.api.schemas import SelectionRequest
from wpsif.models.employee import Employee, PayrollRun
from wpsif.models.sif import PayrollSummary
from wpsif.payroll import default_selection, select_employees, summarize_payroll
from wpsif.session import PayrollWorkspace
from wpsif.transfer import decode_upload, import_sif, prepare_sif_export

router = APIRouter(tags=["sif"])


def _selected(workspace: PayrollWorkspace, body: SelectionRequest) -> list[Employee]:
    employees = workspace.employees
    ids = body.employee_ids if body.employee_ids is not None else default_selection(employees)
    return select_employees(employees, ids)


@router.get("/defaults")
async def generation_defaults(workspace: PayrollWorkspace = Depends(get_workspace)) -> dict:
    """Payroll run for the current time and the default payee selection."""
    return {
        "payrollRun": PayrollRun.for_moment().model_dump(by_alias=True),
        "employeeIds": default_selection(workspace.employees),
    }


@router.post("/summary", response_model=PayrollSummary)
async def payroll_summary(
    body: SelectionRequest, workspace: PayrollWorkspace = Depends(get_workspace),
) -> PayrollSummary:
    return summarize_payroll(_selected(workspace, body))


@router.post("/generate")
async def generate(
    body: SelectionRequest,
    workspace: PayrollWorkspace = Depends(get_workspace),
    iban_charset: str = Depends(get_iban_charset),
) -> Response:
    """Validate and return the SIF CSV for the selected employees."""
    employer = workspace.employer
    if employer is None:
        raise HTTPException(status_code=422, detail=["Employer settings are required"])
    run = body.payroll_run or PayrollRun.for_moment()
    export = prepare_sif_export(_selected(workspace, body), employer, run, iban_charset)
    return file_response(export)


@router.post("/import")
async def import_file(
    request: Request,
    confirm: bool = False,
    workspace: PayrollWorkspace = Depends(get_workspace),
) -> dict:
    """Replace the session with the contents of an uploaded SIF."""
    text = decode_upload(await request.body())
    result = import_sif(text, existing_count=len(workspace.employees))
    return apply_import(workspace, result, confirm)
