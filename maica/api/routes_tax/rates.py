"""
Tax Rates Route.

Serves the static rate tables so the client can render them.
"""

import logging

from fastapi import APIRouter, Request

from maica.api.dependencies import CurrentUserDep
from maica.api.rate_limit import RATE_LIMITS, limiter
from maica.core.config import settings
from maica.services.tax import constants

from .schemas import (
    CITRatesOut,
    CITTierOut,
    EducationTaxRateOut,
    NITDALevyRateOut,
    OtherRatesOut,
    PITBracketOut,
    PITRatesOut,
    TaxRatesOut,
    VATRateOut,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def _cit_tier(name: str) -> CITTierOut:
    tier = constants.CIT_TIERS_BY_NAME[name]
    return CITTierOut(
        threshold=int(tier.threshold) if tier.threshold is not None else None,
        rate=tier.rate * 100,
    )


def build_rates() -> TaxRatesOut:
    return TaxRatesOut(
        vat=VATRateOut(
            rate=constants.VAT_RATE * 100,
            threshold=int(constants.VAT_THRESHOLD),
            description=constants.VAT_DESCRIPTION,
        ),
        cit=CITRatesOut(
            small=_cit_tier("small"),
            medium=_cit_tier("medium"),
            large=_cit_tier("large"),
            description=constants.CIT_DESCRIPTION,
        ),
        pit=PITRatesOut(
            brackets=[
                PITBracketOut(range_label=b.range_label, rate_label=b.rate_label)
                for b in constants.PIT_BRACKETS
            ],
            description=constants.PIT_DESCRIPTION,
        ),
        other=OtherRatesOut(
            education_tax=EducationTaxRateOut(
                rate=constants.EDUCATION_TAX_RATE * 100,
                description=constants.EDUCATION_TAX_DESCRIPTION,
            ),
            nitda_levy=NITDALevyRateOut(
                rate=constants.NITDA_LEVY_RATE * 100,
                threshold=int(constants.NITDA_LEVY_THRESHOLD),
                description=constants.NITDA_LEVY_DESCRIPTION,
            ),
        ),
        last_updated=settings.TAX_RATES_LAST_UPDATED,
        source=settings.TAX_RATES_SOURCE,
    )


@router.get("/rates", response_model=TaxRatesOut)
@limiter.limit(RATE_LIMITS["tax_rates"])
async def get_tax_rates(request: Request, current_user: CurrentUserDep):
    """VAT, CIT, PIT, education tax and NITDA levy tables."""
    return build_rates()
