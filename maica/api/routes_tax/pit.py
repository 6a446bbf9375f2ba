"""
Personal Income Tax Route.

Progressive PIT on a single annual income, with a per-bracket breakdown for display.
"""

import logging

from fastapi import APIRouter, Request

from maica.api.dependencies import CurrentUserDep
from maica.api.rate_limit import RATE_LIMITS, limiter
from maica.core.exceptions import TaxCalculationError
from maica.metrics import tax_calculation_failure, tax_calculation_record
from maica.services.tax import summarize_pit

from .schemas import PITIn, PITOut

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/pit", response_model=PITOut)
@limiter.limit(RATE_LIMITS["tax_pit"])
async def calculate_pit(
    request: Request,
    current_user: CurrentUserDep,
    payload: PITIn | None = None,
):
    """Total, monthly-equivalent and effective-rate PIT for ``annualIncome``."""
    annual_income = payload.annual_income if payload is not None else None
    try:
        response = PITOut.from_summary(summarize_pit(annual_income))
    except Exception as exc:
        logger.exception("PIT calculation error user=%s", current_user.user_id)
        tax_calculation_failure("pit")
        raise TaxCalculationError("Failed to calculate PIT", endpoint="pit") from exc
    tax_calculation_record("pit")
    return response
