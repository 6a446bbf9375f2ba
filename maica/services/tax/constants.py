"""Nigerian tax rate tables used by the estimator.

Tables are plain immutable data; the engine walks them rather than branching
on hard-coded limits.
"""
from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType

from .models import CITTier, TaxBracket

# Personal Income Tax: progressive bands from ₦0 upward
PIT_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(Decimal("0"), Decimal("300000"), Decimal("0.07")),
    TaxBracket(Decimal("300000"), Decimal("600000"), Decimal("0.11")),
    TaxBracket(Decimal("600000"), Decimal("1100000"), Decimal("0.15")),
    TaxBracket(Decimal("1100000"), Decimal("1600000"), Decimal("0.19")),
    TaxBracket(Decimal("1600000"), Decimal("3200000"), Decimal("0.21")),
    TaxBracket(Decimal("3200000"), None, Decimal("0.24")),
)

# Company Income Tax tiers, ascending by threshold
CIT_TIERS: tuple[CITTier, ...] = (
    CITTier("small", Decimal("25000000"), Decimal("0")),
    CITTier("medium", Decimal("100000000"), Decimal("0.20")),
    CITTier("large", None, Decimal("0.30")),
)
CIT_TIERS_BY_NAME = MappingProxyType({tier.name: tier for tier in CIT_TIERS})
CIT_FALLBACK_TIER = "medium"

VAT_RATE = Decimal("0.075")
VAT_THRESHOLD = Decimal("25000000")

EDUCATION_TAX_RATE = Decimal("0.02")

NITDA_LEVY_RATE = Decimal("0.01")
NITDA_LEVY_THRESHOLD = Decimal("100000000")

VAT_NOT_APPLICABLE_REASON = "Below VAT threshold or not registered"
EDUCATION_TAX_NOTE = "Tertiary Education Tax (2% of assessable profit)"
NITDA_LEVY_NOTE = "NITDA Levy (1% of profit before tax for companies with turnover >= ₦100M)"
PAYE_NOTE = (
    "PAYE is calculated on individual employee salaries. "
    "This is an estimate based on total salaries."
)

TAX_DISCLAIMER = (
    "This is an estimate for informational purposes only. Tax calculations may vary "
    "based on specific circumstances, exemptions, and current FIRS regulations. "
    "Please consult a qualified tax professional or contact FIRS for official tax computation."
)
PIT_DISCLAIMER = (
    "This is an estimate based on standard PIT rates. Actual tax may vary based on "
    "reliefs, allowances, and other factors. Consult a tax professional for accurate computation."
)

# Descriptions served by GET /tax/rates
VAT_DESCRIPTION = "Value Added Tax - applicable to goods and services above threshold"
CIT_DESCRIPTION = "Company Income Tax rates based on company turnover"
PIT_DESCRIPTION = "Personal Income Tax progressive brackets"
EDUCATION_TAX_DESCRIPTION = "Tertiary Education Tax on assessable profit"
NITDA_LEVY_DESCRIPTION = "NITDA Levy for companies with turnover >= ₦100M"
