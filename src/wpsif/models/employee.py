"""Employee, employer and payroll-run models.

Models accept transient invalid states (negative amounts, blank names,
malformed IBANs) so a record can be held while it is being edited. Business
rules are enforced by ``wpsif.validation``, not at construction time.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from enum import IntEnum, StrEnum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

# Monetary amounts serialize as JSON numbers to match browser session exports
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
Hours = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True, "str_strip_whitespace": True}


class SalaryFrequency(StrEnum):
    MONTHLY = "M"
    BI_WEEKLY = "B"


class DeductionReasonCode(IntEnum):
    WORKING_HOURS = 1
    WORK_ARRANGEMENTS = 2
    HARM_OR_DAMAGE = 3
    ADVANCES = 4
    OTHER = 99

    @property
    def label(self) -> str:
        return DEDUCTION_REASON_LABELS[self]


DEDUCTION_REASON_LABELS: dict[DeductionReasonCode, str] = {
    DeductionReasonCode.WORKING_HOURS: "Working hours related",
    DeductionReasonCode.WORK_ARRANGEMENTS: "Work arrangements",
    DeductionReasonCode.HARM_OR_DAMAGE: "Harm or damage",
    DeductionReasonCode.ADVANCES: "Advances",
    DeductionReasonCode.OTHER: "Other",
}


class PaymentType(StrEnum):
    NORMAL = "Normal Payment"
    SETTLEMENT = "Settlement Payment"
    PARTIAL = "Partial Payment"
    DELAYED = "Delayed Payment"
    FINAL_SETTLEMENT = "Final Settlement"


class EmployeeAllowances(BaseModel):
    """Named allowance amounts; absent values count as zero."""

    housing: Money = Decimal("0")
    food: Money = Decimal("0")
    transportation: Money = Decimal("0")
    overtime_allowance: Money = Decimal("0")
    extra1: Money = Decimal("0")
    extra2: Money = Decimal("0")

    model_config = _CAMEL

    @field_validator("*", mode="before")
    @classmethod
    def _none_is_zero(cls, value: Any) -> Any:
        return Decimal("0") if value is None else value

    @property
    def total(self) -> Decimal:
        return (
            self.housing + self.food + self.transportation
            + self.overtime_allowance + self.extra1 + self.extra2
        )


class Employee(BaseModel):
    """Single payee record."""

    # --- Identity (local only, never written to a SIF) ---
    employee_id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    # --- Identification ---
    employee_qid: Optional[str] = None
    employee_visa_id: Optional[str] = None
    employee_name: str = ""
    employee_short_name: str = ""  # Bank short identifier (BSI)
    employee_iban: str = ""

    # --- Payment ---
    salary_frequency: SalaryFrequency = SalaryFrequency.MONTHLY
    working_days: int = 0
    basic_salary: Money = Decimal("0")
    extra_hours: Hours = Decimal("0")
    extra_income: Money = Decimal("0")
    deductions: Money = Decimal("0")
    deduction_reason_code: Optional[DeductionReasonCode] = None
    payment_type: PaymentType = PaymentType.NORMAL
    notes: Optional[str] = None
    allowances: EmployeeAllowances = Field(default_factory=EmployeeAllowances)

    # --- UI-only flag, not carried by the SIF format ---
    on_leave: bool = False

    model_config = _CAMEL

    @field_validator("allowances", mode="before")
    @classmethod
    def _missing_allowances(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("deduction_reason_code", mode="before")
    @classmethod
    def _zero_reason_is_absent(cls, value: Any) -> Any:
        if value in (0, "0", ""):
            return None
        return value

    @field_validator("on_leave", mode="before")
    @classmethod
    def _missing_on_leave(cls, value: Any) -> Any:
        return False if value is None else value


class EmployerSettings(BaseModel):
    """The paying entity; one per session."""

    employer_id: str = ""  # Computer card number
    payer_eid: str = ""
    payer_qid: Optional[str] = None
    payer_bank_short_name: str = ""
    payer_iban: str = ""
    sif_version: int = 1

    model_config = _CAMEL


class PayrollRun(BaseModel):
    """Parameters of a single SIF generation."""

    salary_year_month: str  # YYYYMM
    file_creation_date: str  # YYYYMMDD
    file_creation_time: str  # HHmm

    model_config = _CAMEL

    @classmethod
    def for_moment(cls, moment: datetime | None = None) -> PayrollRun:
        """Default run parameters for the given (or current local) time."""
        if moment is None:
            moment = datetime.now()
        return cls(
            salary_year_month=moment.strftime("%Y%m"),
            file_creation_date=moment.strftime("%Y%m%d"),
            file_creation_time=moment.strftime("%H%M"),
        )
