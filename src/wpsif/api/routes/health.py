"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wpsif.api.deps import get_workspace
from wpsif.session import PayrollWorkspace

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(workspace: PayrollWorkspace = Depends(get_workspace)) -> dict[str, str]:
    workspace.has_data()  # SessionStoreError -> 503
    return {"status": "ready"}
