"""
Sale-line VAT Route.

Tax and total for a single sale line, as shown on the add-sale screen.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from fastapi import APIRouter, HTTPException, Query, Request

from maica.api.dependencies import CurrentUserDep
from maica.api.rate_limit import RATE_LIMITS, limiter
from maica.core.exceptions import TaxCalculationError
from maica.metrics import tax_calculation_failure, tax_calculation_record
from maica.services.tax import DEFAULT_TAX_RATE, calc_subtotal, calc_tax, calc_total

from .schemas import VATLineOut

logger = logging.getLogger(__name__)
router = APIRouter()

_CENT = Decimal("0.01")


def _money(value: Decimal) -> float:
    return float(value.quantize(_CENT, rounding=ROUND_HALF_UP))


@router.get("/vat/calculate", response_model=VATLineOut)
@limiter.limit(RATE_LIMITS["tax_vat_line"])
async def calculate_line_vat(
    request: Request,
    current_user: CurrentUserDep,
    amount: float | None = Query(None, ge=0, description="Line amount in Naira"),
    quantity: float = Query(1, gt=0, description="Units sold, used with unitPrice"),
    unit_price: float | None = Query(None, ge=0, alias="unitPrice", description="Price per unit in Naira"),
    tax_rate: float = Query(float(DEFAULT_TAX_RATE), ge=0, le=100, alias="taxRate", description="Rate in percent"),
    inclusive: bool = Query(False, description="Amount already includes tax"),
    discount: float = Query(0, ge=0, description="Discount in Naira"),
):
    """
    Calculate tax for one sale line.

    Pass either ``amount`` or ``quantity`` and ``unitPrice``. For exclusive
    pricing tax is added on top of the discounted amount; for inclusive
    pricing it is extracted from it.
    """
    if amount is None and unit_price is None:
        raise HTTPException(status_code=400, detail="Provide amount or unitPrice")
    try:
        gross = Decimal(str(amount)) if amount is not None else calc_subtotal(quantity, unit_price)
        base = gross - Decimal(str(discount))
        tax = calc_tax(base, tax_rate, inclusive=inclusive)
        if inclusive:
            subtotal, total = base - tax, base
        else:
            subtotal, total = base, calc_total(gross, tax_rate, discount)
        response = VATLineOut(
            subtotal=_money(subtotal),
            tax_rate=tax_rate,
            tax_amount=_money(tax),
            total=_money(total),
            inclusive=inclusive,
        )
    except Exception as exc:
        logger.exception("Sale-line VAT error user=%s", current_user.user_id)
        tax_calculation_failure("vat_line")
        raise TaxCalculationError("Failed to calculate VAT", endpoint="vat_line") from exc
    tax_calculation_record("vat_line")
    return response
