"""Tax estimation engine.

Pure computation for Nigerian business tax estimates: PIT brackets (also used
for the PAYE approximation), CIT tiers, VAT, Tertiary Education Tax and the
NITDA levy. No I/O; every function returns a fresh frozen record.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from .coercion import coerce_amount, coerce_company_size, coerce_flag, coerce_number, round_naira
from .constants import (
    CIT_FALLBACK_TIER,
    CIT_TIERS,
    CIT_TIERS_BY_NAME,
    EDUCATION_TAX_NOTE,
    EDUCATION_TAX_RATE,
    NITDA_LEVY_NOTE,
    NITDA_LEVY_RATE,
    NITDA_LEVY_THRESHOLD,
    PAYE_NOTE,
    PIT_BRACKETS,
    PIT_DISCLAIMER,
    TAX_DISCLAIMER,
    VAT_NOT_APPLICABLE_REASON,
    VAT_RATE,
    VAT_THRESHOLD,
)
from .models import (
    BracketSlice,
    CITResult,
    EducationTaxResult,
    NITDALevyResult,
    PAYEResult,
    PITSummary,
    TaxBracket,
    TaxInput,
    TaxResult,
    VATResult,
)

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def _walk_brackets(income: Decimal, brackets: Sequence[TaxBracket]):
    """Yield ``(bracket, taxable_in_bracket)`` for each bracket the income reaches."""
    remaining = income
    for bracket in brackets:
        if remaining <= 0:
            break
        width = bracket.width
        taxable = remaining if width is None else min(remaining, width)
        yield bracket, taxable
        remaining -= taxable


def calculate_progressive_tax(
    annual_income: Any,
    brackets: Sequence[TaxBracket] = PIT_BRACKETS,
) -> int:
    """
    Calculate progressive Personal Income Tax on an annual income.

    Brackets are walked from the lowest upward and iteration stops as soon as
    the income is exhausted. Negative or non-numeric income is treated as 0.

    Args:
        annual_income: Annual income in Naira
        brackets: Ordered, contiguous bracket table (last one unbounded)

    Returns:
        Tax in whole Naira
    """
    income = coerce_amount(annual_income)
    tax = _ZERO
    for bracket, taxable in _walk_brackets(income, brackets):
        tax += taxable * bracket.rate
    return round_naira(tax)


def pit_breakdown(
    annual_income: Any,
    brackets: Sequence[TaxBracket] = PIT_BRACKETS,
) -> list[BracketSlice]:
    """Per-bracket display rows for the brackets *annual_income* reaches."""
    income = coerce_amount(annual_income)
    return [
        BracketSlice(
            range_label=bracket.range_label,
            rate_label=bracket.rate_label,
            taxable_amount=taxable,
            tax=round_naira(taxable * bracket.rate),
        )
        for bracket, taxable in _walk_brackets(income, brackets)
    ]


def summarize_pit(annual_income: Any) -> PITSummary:
    income = coerce_amount(annual_income)
    tax = calculate_progressive_tax(income)
    if income > 0:
        effective_rate = f"{Decimal(tax) / income * _HUNDRED:.2f}%"
    else:
        effective_rate = "0%"
    return PITSummary(
        annual_income=income,
        total_tax=tax,
        monthly_tax=round_naira(Decimal(tax) / 12),
        effective_rate=effective_rate,
        breakdown=tuple(pit_breakdown(income)),
        disclaimer=PIT_DISCLAIMER,
    )


def _classify_by_profit(profit: Decimal):
    for tier in CIT_TIERS:
        if tier.threshold is None or profit <= tier.threshold:
            return tier
    return CIT_TIERS[-1]


def calculate_cit(annual_profit: Any, company_size: Any = "auto") -> CITResult:
    """
    Calculate Company Income Tax.

    A loss (profit <= 0) short-circuits to zero tax with category "loss".
    With ``company_size="auto"`` the tier is picked by comparing the *profit*
    against the tier thresholds. An explicit tier name is trusted as given;
    an unrecognised one falls back to the medium tier.

    Returns:
        CITResult with tax in whole Naira and rate as a percentage
    """
    profit = coerce_number(annual_profit)
    if profit <= 0:
        return CITResult(tax=0, rate=_ZERO, category="loss")

    size = coerce_company_size(company_size)
    if size == "auto":
        tier = _classify_by_profit(profit)
    elif size in CIT_TIERS_BY_NAME:
        tier = CIT_TIERS_BY_NAME[size]
    else:
        logger.warning("Unknown company size %r, using %s tier rate", size, CIT_FALLBACK_TIER)
        tier = CIT_TIERS_BY_NAME[CIT_FALLBACK_TIER]

    return CITResult(
        tax=round_naira(profit * tier.rate),
        rate=tier.rate * _HUNDRED,
        category=tier.name,
    )


def calculate_vat(revenue: Any, is_vat_registered: Any = True) -> VATResult:
    """VAT collectable: only for registered businesses with revenue at or above the threshold."""
    amount = coerce_amount(revenue)
    if not coerce_flag(is_vat_registered, default=True) or amount < VAT_THRESHOLD:
        return VATResult(vat=0, applicable=False, reason=VAT_NOT_APPLICABLE_REASON)
    return VATResult(
        vat=round_naira(amount * VAT_RATE),
        applicable=True,
        rate=VAT_RATE * _HUNDRED,
    )


def calculate_education_tax(profit: Any) -> EducationTaxResult:
    profit = coerce_number(profit)
    amount = round_naira(profit * EDUCATION_TAX_RATE) if profit > 0 else 0
    return EducationTaxResult(amount=amount, rate=EDUCATION_TAX_RATE * _HUNDRED, note=EDUCATION_TAX_NOTE)


def calculate_nitda_levy(revenue: Any, profit: Any) -> NITDALevyResult:
    # Gated on turnover, charged on profit
    applicable = coerce_amount(revenue) >= NITDA_LEVY_THRESHOLD
    amount = round_naira(coerce_number(profit) * NITDA_LEVY_RATE) if applicable else 0
    return NITDALevyResult(
        amount=amount,
        applicable=applicable,
        rate=NITDA_LEVY_RATE * _HUNDRED,
        note=NITDA_LEVY_NOTE,
    )


def estimate_paye(total_salaries: Any) -> PAYEResult:
    """Approximate PAYE by running the whole payroll through the PIT brackets."""
    return PAYEResult(estimated_paye=calculate_progressive_tax(total_salaries), note=PAYE_NOTE)


def compute_tax_summary(tax_input: TaxInput | Mapping[str, Any] | None) -> TaxResult:
    """
    Compose every tax into a single estimate.

    Aggregation order: CIT, VAT, education tax, NITDA levy, then PAYE when
    requested and salaries are non-zero. VAT is reported as collectable and
    is never part of ``total_estimated_tax``.

    Args:
        tax_input: A TaxInput, or a raw request mapping (wire or snake_case keys)

    Returns:
        TaxResult with all sub-results, the total and the disclaimer
    """
    if not isinstance(tax_input, TaxInput):
        tax_input = TaxInput.from_mapping(tax_input if isinstance(tax_input, Mapping) else None)

    revenue = tax_input.revenue
    expenses = tax_input.expenses
    salaries = tax_input.salaries
    profit = revenue - expenses - salaries

    cit = calculate_cit(profit, tax_input.company_size)
    vat = calculate_vat(revenue, tax_input.is_vat_registered)
    education_tax = calculate_education_tax(profit)
    nitda_levy = calculate_nitda_levy(revenue, profit)

    paye = None
    if tax_input.include_paye and salaries > 0:
        paye = estimate_paye(salaries)

    total = cit.tax + education_tax.amount + nitda_levy.amount
    if tax_input.include_paye and paye is not None:
        total += paye.estimated_paye

    logger.debug(
        "Tax summary computed profit=%s cit=%s vat=%s edu=%s nitda=%s paye=%s total=%s",
        profit,
        cit.tax,
        vat.vat,
        education_tax.amount,
        nitda_levy.amount,
        paye.estimated_paye if paye else None,
        total,
    )

    return TaxResult(
        revenue=revenue,
        expenses=expenses,
        salaries=salaries,
        profit=profit,
        company_income_tax=cit,
        vat=vat,
        education_tax=education_tax,
        nitda_levy=nitda_levy,
        paye=paye,
        total_estimated_tax=total,
        disclaimer=TAX_DISCLAIMER,
    )
