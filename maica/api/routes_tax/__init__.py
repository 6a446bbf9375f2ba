"""
Tax API Routes Module.

All routes are prefixed with /tax and require a Bearer token.

Sub-modules:
- calculate: full business tax estimate (CIT, VAT, education tax, NITDA, PAYE)
- pit: personal income tax with per-bracket breakdown
- rates: static rate tables for display
- vat: sale-line VAT calculation
"""
from __future__ import annotations

from fastapi import APIRouter

from .calculate import router as calculate_router
from .pit import router as pit_router
from .rates import router as rates_router
from .vat import router as vat_router

# Main router with /tax prefix
router = APIRouter(prefix="/tax", tags=["tax"])

# Include all sub-routers
router.include_router(calculate_router)
router.include_router(pit_router)
router.include_router(rates_router)
router.include_router(vat_router)

__all__ = ["router"]
