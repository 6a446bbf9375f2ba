"""
Shared Pydantic schemas for tax routes.

Wire keys are camelCase to match the mobile client. Request models accept
any JSON value for numeric fields; coercion happens in the tax engine so a
malformed figure never turns into a 422.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from maica.services.tax.models import BracketSlice, PITSummary, TaxResult


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class LenientIn(CamelModel):
    """Request body that treats any non-object JSON value as an empty object."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _non_object_is_empty(cls, data: Any) -> Any:
        if isinstance(data, BaseModel):
            return data
        return data if isinstance(data, dict) else {}


class TaxCalculateIn(LenientIn):
    """Business figures for a full tax estimate. Every field is optional."""

    revenue: Any = None
    expenses: Any = None
    salaries: Any = None
    company_size: Any = None
    is_vat_registered: Any = Field(None, alias="isVATRegistered")
    calculate_paye: Any = Field(None, alias="calculatePAYE")


class PITIn(LenientIn):
    annual_income: Any = None


# ---------------------------------------------------------------------------
# POST /tax/calculate
# ---------------------------------------------------------------------------

class SummaryOut(CamelModel):
    revenue: float
    expenses: float
    salaries: float
    profit: float


class CompanyIncomeTaxOut(CamelModel):
    tax: int
    rate: float
    category: str


class VATOut(CamelModel):
    vat: int
    applicable: bool
    rate: float | None = None
    reason: str | None = None


class PAYEOut(CamelModel):
    estimated_paye: int = Field(alias="estimatedPAYE")
    note: str


class EducationTaxOut(CamelModel):
    amount: int
    rate: float
    note: str


class NITDALevyOut(CamelModel):
    amount: int
    applicable: bool
    rate: float
    note: str


class TaxesOut(CamelModel):
    company_income_tax: CompanyIncomeTaxOut
    vat: VATOut
    paye: PAYEOut | None
    education_tax: EducationTaxOut
    nitda_levy: NITDALevyOut


class TaxCalculateOut(CamelModel):
    ok: bool = True
    summary: SummaryOut
    taxes: TaxesOut
    total_estimated_tax: int
    vat_collectable: int
    disclaimer: str

    @classmethod
    def from_result(cls, result: TaxResult) -> TaxCalculateOut:
        cit = result.company_income_tax
        paye = None
        if result.paye is not None:
            paye = PAYEOut(estimated_paye=result.paye.estimated_paye, note=result.paye.note)
        return cls(
            summary=SummaryOut(
                revenue=result.revenue,
                expenses=result.expenses,
                salaries=result.salaries,
                profit=result.profit,
            ),
            taxes=TaxesOut(
                company_income_tax=CompanyIncomeTaxOut(tax=cit.tax, rate=cit.rate, category=cit.category),
                vat=VATOut(
                    vat=result.vat.vat,
                    applicable=result.vat.applicable,
                    rate=result.vat.rate,
                    reason=result.vat.reason,
                ),
                paye=paye,
                education_tax=EducationTaxOut(
                    amount=result.education_tax.amount,
                    rate=result.education_tax.rate,
                    note=result.education_tax.note,
                ),
                nitda_levy=NITDALevyOut(
                    amount=result.nitda_levy.amount,
                    applicable=result.nitda_levy.applicable,
                    rate=result.nitda_levy.rate,
                    note=result.nitda_levy.note,
                ),
            ),
            total_estimated_tax=result.total_estimated_tax,
            vat_collectable=result.vat_collectable,
            disclaimer=result.disclaimer,
        )


# ---------------------------------------------------------------------------
# POST /tax/pit
# ---------------------------------------------------------------------------

class BracketSliceOut(CamelModel):
    range_label: str = Field(alias="range")
    rate_label: str = Field(alias="rate")
    taxable_amount: float
    tax: int

    @classmethod
    def from_slice(cls, row: BracketSlice) -> BracketSliceOut:
        return cls(
            range_label=row.range_label,
            rate_label=row.rate_label,
            taxable_amount=row.taxable_amount,
            tax=row.tax,
        )


class PITOut(CamelModel):
    ok: bool = True
    annual_income: float
    total_tax: int
    monthly_tax: int
    effective_rate: str
    breakdown: list[BracketSliceOut]
    disclaimer: str

    @classmethod
    def from_summary(cls, summary: PITSummary) -> PITOut:
        return cls(
            annual_income=summary.annual_income,
            total_tax=summary.total_tax,
            monthly_tax=summary.monthly_tax,
            effective_rate=summary.effective_rate,
            breakdown=[BracketSliceOut.from_slice(row) for row in summary.breakdown],
            disclaimer=summary.disclaimer,
        )


# ---------------------------------------------------------------------------
# GET /tax/rates
# ---------------------------------------------------------------------------

class VATRateOut(CamelModel):
    rate: float
    threshold: int
    description: str


class CITTierOut(CamelModel):
    threshold: int | None
    rate: float


class CITRatesOut(CamelModel):
    small: CITTierOut
    medium: CITTierOut
    large: CITTierOut
    description: str


class PITBracketOut(CamelModel):
    range_label: str = Field(alias="range")
    rate_label: str = Field(alias="rate")


class PITRatesOut(CamelModel):
    brackets: list[PITBracketOut]
    description: str


class EducationTaxRateOut(CamelModel):
    rate: float
    description: str


class NITDALevyRateOut(CamelModel):
    rate: float
    threshold: int
    description: str


class OtherRatesOut(CamelModel):
    education_tax: EducationTaxRateOut
    nitda_levy: NITDALevyRateOut


class TaxRatesOut(CamelModel):
    ok: bool = True
    vat: VATRateOut
    cit: CITRatesOut
    pit: PITRatesOut
    other: OtherRatesOut
    last_updated: str
    source: str


# ---------------------------------------------------------------------------
# GET /tax/vat/calculate
# ---------------------------------------------------------------------------

class VATLineOut(CamelModel):
    ok: bool = True
    subtotal: float
    tax_rate: float
    tax_amount: float
    total: float
    inclusive: bool
