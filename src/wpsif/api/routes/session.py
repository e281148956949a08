"""Whole-session endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wpsif.api.deps import get_workspace
from wpsif.session import PayrollWorkspace

router = APIRouter(tags=["session"])


@router.get("")
async def session_status(workspace: PayrollWorkspace = Depends(get_workspace)) -> dict:
    return {"hasData": workspace.has_data(), "employeeCount": len(workspace.employees)}


@router.delete("")
async def clear_session(workspace: PayrollWorkspace = Depends(get_workspace)) -> dict:
    """Drop every employee and the employer settings."""
    workspace.clear_all()
    return {"cleared": True}
