"""Codec results and boundary payloads."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from wpsif.models.employee import Employee, EmployerSettings, Money, PayrollRun


class SifExport(BaseModel):
    """A file ready to be handed to a download/writer collaborator."""

    content: str
    filename: str
    mime_type: str = "text/csv"


class SifDocument(BaseModel):
    """Decoded contents of a SIF file."""

    employees: list[Employee] = Field(default_factory=list)
    employer: Optional[EmployerSettings] = None
    payroll_run: Optional[PayrollRun] = None
    warnings: list[str] = Field(default_factory=list)  # Header totals that do not reconcile


class ImportResult(BaseModel):
    """Records decoded from an import, plus how many existing records they replace."""

    employees: list[Employee] = Field(default_factory=list)
    employer: Optional[EmployerSettings] = None
    replaces: int = 0

    @property
    def requires_confirmation(self) -> bool:
        """True when applying the import would discard existing records."""
        return self.replaces > 0


class PayrollSummary(BaseModel):
    """Totals shown before generating a SIF."""

    total_employees: int = 0
    total_basic_salary: Money = Decimal("0")
    total_deductions: Money = Decimal("0")
    total_net_salary: Money = Decimal("0")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
