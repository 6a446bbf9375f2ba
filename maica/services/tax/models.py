"""Value records for the tax engine.

Every record is frozen: the engine builds fresh ones per call and never
mutates them afterwards.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from .coercion import coerce_amount, coerce_company_size, coerce_flag


@dataclass(frozen=True)
class TaxBracket:
    lower: Decimal
    upper: Decimal | None  # None = unbounded
    rate: Decimal

    @property
    def width(self) -> Decimal | None:
        if self.upper is None:
            return None
        return self.upper - self.lower

    @property
    def range_label(self) -> str:
        if self.upper is None:
            return f"Above ₦{int(self.lower):,}"
        return f"₦{int(self.lower):,} - ₦{int(self.upper):,}"

    @property
    def rate_label(self) -> str:
        return f"{self.rate * 100:.0f}%"


@dataclass(frozen=True)
class CITTier:
    name: str
    threshold: Decimal | None  # None = no upper threshold
    rate: Decimal


@dataclass(frozen=True)
class CITResult:
    tax: int
    rate: Decimal  # percent, 0-100
    category: str


@dataclass(frozen=True)
class VATResult:
    vat: int
    applicable: bool
    rate: Decimal | None = None  # percent, only when applicable
    reason: str | None = None


@dataclass(frozen=True)
class EducationTaxResult:
    amount: int
    rate: Decimal
    note: str


@dataclass(frozen=True)
class NITDALevyResult:
    amount: int
    applicable: bool
    rate: Decimal
    note: str


@dataclass(frozen=True)
class PAYEResult:
    estimated_paye: int
    note: str


@dataclass(frozen=True)
class TaxInput:
    revenue: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    salaries: Decimal = Decimal("0")
    company_size: str = "auto"
    is_vat_registered: bool = True
    include_paye: bool = False

    def __post_init__(self) -> None:
        # Direct construction gets the same coercion as request bodies
        object.__setattr__(self, "revenue", coerce_amount(self.revenue))
        object.__setattr__(self, "expenses", coerce_amount(self.expenses))
        object.__setattr__(self, "salaries", coerce_amount(self.salaries))
        object.__setattr__(self, "company_size", coerce_company_size(self.company_size))
        object.__setattr__(self, "is_vat_registered", coerce_flag(self.is_vat_registered, default=True))
        object.__setattr__(self, "include_paye", coerce_flag(self.include_paye, default=False))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> TaxInput:
        """Build an input from a request body, accepting wire or snake_case keys.

        Missing keys take the defaults; unusable values coerce to zero.
        """
        data = data or {}

        def pick(*keys: str) -> Any:
            for key in keys:
                if key in data:
                    return data[key]
            return None

        return cls(
            revenue=pick("revenue"),
            expenses=pick("expenses"),
            salaries=pick("salaries"),
            company_size=pick("companySize", "company_size"),
            is_vat_registered=pick("isVATRegistered", "is_vat_registered"),
            include_paye=pick("calculatePAYE", "calculate_paye", "include_paye"),
        )


@dataclass(frozen=True)
class TaxResult:
    revenue: Decimal
    expenses: Decimal
    salaries: Decimal
    profit: Decimal
    company_income_tax: CITResult
    vat: VATResult
    education_tax: EducationTaxResult
    nitda_levy: NITDALevyResult
    paye: PAYEResult | None
    total_estimated_tax: int
    disclaimer: str

    @property
    def vat_collectable(self) -> int:
        return self.vat.vat


@dataclass(frozen=True)
class BracketSlice:
    range_label: str
    rate_label: str
    taxable_amount: Decimal
    tax: int


@dataclass(frozen=True)
class PITSummary:
    annual_income: Decimal
    total_tax: int
    monthly_tax: int
    effective_rate: str
    breakdown: tuple[BracketSlice, ...] = field(default_factory=tuple)
    disclaimer: str = ""
