"""
Business Tax Estimate Route.

Combines CIT, VAT, education tax, NITDA levy and optional PAYE into one estimate.
"""

import logging

from fastapi import APIRouter, Request

from maica.api.dependencies import CurrentUserDep
from maica.api.rate_limit import RATE_LIMITS, limiter
from maica.core.exceptions import TaxCalculationError
from maica.metrics import tax_calculation_failure, tax_calculation_record
from maica.services.tax import compute_tax_summary

from .schemas import TaxCalculateIn, TaxCalculateOut

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/calculate", response_model=TaxCalculateOut)
@limiter.limit(RATE_LIMITS["tax_calculate"])
async def calculate_taxes(
    request: Request,
    current_user: CurrentUserDep,
    payload: TaxCalculateIn | None = None,
):
    """
    Estimate the annual tax position of a business.

    Profit is revenue minus expenses minus salaries. VAT is reported as
    ``vatCollectable`` and is not part of ``totalEstimatedTax``.
    Unparseable figures are treated as zero.
    """
    body = payload.model_dump() if payload is not None else {}
    try:
        result = compute_tax_summary(body)
        response = TaxCalculateOut.from_result(result)
    except Exception as exc:
        logger.exception("Tax calculation error user=%s", current_user.user_id)
        tax_calculation_failure("calculate")
        raise TaxCalculationError("Failed to calculate taxes", endpoint="calculate") from exc
    tax_calculation_record("calculate")
    return response
