"""Employer settings endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from wpsif.api.deps import get_iban_charset, get_workspace
from wpsif.models.employee import EmployerSettings
from wpsif.session import PayrollWorkspace
from wpsif.validation import validate_employer_settings

router = APIRouter(tags=["employer"])


@router.get("", response_model=Optional[EmployerSettings])
async def get_employer(
    workspace: PayrollWorkspace = Depends(get_workspace),
) -> Optional[EmployerSettings]:
    return workspace.employer


@router.put("", response_model=EmployerSettings)
async def save_employer(
    settings: EmployerSettings,
    workspace: PayrollWorkspace = Depends(get_workspace),
    iban_charset: str = Depends(get_iban_charset),
) -> EmployerSettings:
    errors = validate_employer_settings(settings, iban_charset)
    if errors:
        raise HTTPException(status_code=422, detail=errors)
    workspace.set_employer(settings)
    return settings
