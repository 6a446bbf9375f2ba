"""Sale-line tax helpers used when recording a sale.

Rates here are percentages (7.5 means 7.5%), matching what the sale form sends.
Results are unrounded; callers quantize for display.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any

from .coercion import coerce_number

DEFAULT_TAX_RATE = Decimal("7.5")

_HUNDRED = Decimal("100")


def calc_tax(amount: Any, tax_rate: Any = DEFAULT_TAX_RATE, inclusive: bool = False) -> Decimal:
    """Tax portion of *amount*.

    When *inclusive* the amount already contains the tax, so the tax is
    extracted as ``amount * rate / (100 + rate)``.
    """
    amount = coerce_number(amount)
    rate = coerce_number(tax_rate)
    if inclusive:
        divisor = _HUNDRED + rate
        if divisor == 0:
            return Decimal("0")
        return amount * rate / divisor
    return amount * rate / _HUNDRED


def calc_total(amount: Any, tax_rate: Any = DEFAULT_TAX_RATE, discount: Any = 0) -> Decimal:
    discounted = coerce_number(amount) - coerce_number(discount)
    return discounted + calc_tax(discounted, tax_rate, inclusive=False)


def calc_subtotal(quantity: Any, unit_price: Any) -> Decimal:
    return coerce_number(quantity) * coerce_number(unit_price)
