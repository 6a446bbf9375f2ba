"""Boundary coercion for client-supplied tax inputs.

Mobile clients send whatever the form fields hold: numbers, numeric strings,
empty strings, nulls. Nothing here raises; unusable values become zero (or
the flag default).
"""
from __future__ import annotations

import math
from decimal import ROUND_FLOOR, Decimal
from typing import Any

_FALSE_STRINGS = frozenset({"", "false", "0", "no", "off"})
_HALF = Decimal("0.5")


def coerce_number(value: Any) -> Decimal:
    """Convert *value* to a finite Decimal, or zero when that is not possible.

    Sign is preserved (profit can legitimately be negative).
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return Decimal("0")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return Decimal("0")
    if not math.isfinite(number):
        return Decimal("0")
    if isinstance(value, (int, Decimal)) and not isinstance(value, bool):
        return Decimal(value)
    return Decimal(str(number))


def coerce_amount(value: Any) -> Decimal:
    """Like :func:`coerce_number` but floors negatives to zero."""
    number = coerce_number(value)
    return number if number > 0 else Decimal("0")


def coerce_flag(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    if isinstance(value, (int, float, Decimal)):
        return bool(value) and not (isinstance(value, float) and math.isnan(value))
    return bool(value)


def coerce_company_size(value: Any) -> str:
    if value is None:
        return "auto"
    text = str(value).strip().lower()
    return text or "auto"


def round_naira(value: Decimal) -> int:
    """Round to whole Naira; halves round toward positive infinity."""
    return int((value + _HALF).to_integral_value(rounding=ROUND_FLOOR))
