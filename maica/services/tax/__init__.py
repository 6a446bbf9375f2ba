"""Tax Estimation Module.

Sub-modules:
- constants: PIT brackets, CIT tiers, VAT / education tax / NITDA rates
- models: frozen value records for inputs and results
- coercion: boundary coercion of client-supplied values
- engine: bracket walker, CIT/VAT/levy calculators and the aggregator
- sales: sale-line tax helpers
"""
from .constants import (
    CIT_TIERS,
    PIT_BRACKETS,
    VAT_RATE,
    VAT_THRESHOLD,
)
from .engine import (
    calculate_cit,
    calculate_education_tax,
    calculate_nitda_levy,
    calculate_progressive_tax,
    calculate_vat,
    compute_tax_summary,
    estimate_paye,
    pit_breakdown,
    summarize_pit,
)
from .models import TaxInput, TaxResult
from .sales import DEFAULT_TAX_RATE, calc_subtotal, calc_tax, calc_total

__all__ = [
    # Constants
    "CIT_TIERS",
    "PIT_BRACKETS",
    "VAT_RATE",
    "VAT_THRESHOLD",
    "DEFAULT_TAX_RATE",
    # Engine
    "calculate_progressive_tax",
    "pit_breakdown",
    "summarize_pit",
    "calculate_cit",
    "calculate_vat",
    "calculate_education_tax",
    "calculate_nitda_levy",
    "estimate_paye",
    "compute_tax_summary",
    # Sale-line helpers
    "calc_tax",
    "calc_total",
    "calc_subtotal",
    # Records
    "TaxInput",
    "TaxResult",
]
