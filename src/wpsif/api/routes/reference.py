"""Reference data for forms."""

from __future__ import annotations

from fastapi import APIRouter

from wpsif.models.employee import DeductionReasonCode, PaymentType, SalaryFrequency
from wpsif.models.reference import QATAR_BANKS
from wpsif.sif.layout import SIF_VERSION

router = APIRouter(tags=["reference"])


@router.get("/reference")
async def get_reference() -> dict:
    return {
        "banks": [bank.model_dump() for bank in QATAR_BANKS],
        "deductionReasonCodes": [
            {"code": int(code), "label": code.label} for code in DeductionReasonCode
        ],
        "paymentTypes": [p.value for p in PaymentType],
        "salaryFrequencies": [f.value for f in SalaryFrequency],
        "sifVersion": SIF_VERSION,
    }
