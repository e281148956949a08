"""Request-scoped dependencies."""

from __future__ import annotations

from fastapi import HTTPException, Request, Response

from wpsif.models.sif import ImportResult, SifExport
from wpsif.session import PayrollWorkspace


def get_workspace(request: Request) -> PayrollWorkspace:
    return request.app.state.workspace


def get_iban_charset(request: Request) -> str:
    """IBAN account segment class of the settings the app was built with."""
    return request.app.state.settings.sif.iban_account_charset


def file_response(export: SifExport) -> Response:
    """Hand a generated file to the client as a download."""
    return Response(
        content=export.content,
        media_type=export.mime_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


def apply_import(workspace: PayrollWorkspace, result: ImportResult, confirm: bool) -> dict:
    """Apply an import unless it would silently replace existing records."""
    if result.requires_confirmation and not confirm:
        raise HTTPException(
            status_code=409,
            detail=f"Import would replace {result.replaces} existing records; resend with confirm=true",
        )
    workspace.apply_import(result)
    return {"imported": len(result.employees), "replaced": result.replaces}
