"""Request bodies for the API routes."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from wpsif.models.employee import PayrollRun

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class DeleteEmployeesRequest(BaseModel):
    employee_ids: list[str] = Field(default_factory=list)

    model_config = _CAMEL


class SelectionRequest(BaseModel):
    """Which employees to pay; defaults to everyone not on leave."""

    employee_ids: Optional[list[str]] = None
    payroll_run: Optional[PayrollRun] = None

    model_config = _CAMEL
