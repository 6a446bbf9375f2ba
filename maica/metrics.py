"""Metrics facade.

Service code should ONLY call the semantic helpers here so the exported
metric names stay in one place.

Metrics:
- tax_calculations_total{endpoint}          Tax estimates served
- tax_calculation_failures_total{endpoint}  Tax requests that failed unexpectedly
"""

from __future__ import annotations

import logging

from prometheus_client import Counter

logger = logging.getLogger("metrics")

_TAX_CALCULATIONS = Counter(
    "tax_calculations_total", "Tax estimates served", ["endpoint"]
)
_TAX_CALCULATION_FAILURES = Counter(
    "tax_calculation_failures_total", "Tax requests that failed unexpectedly", ["endpoint"]
)


def tax_calculation_record(endpoint: str) -> None:
    _TAX_CALCULATIONS.labels(endpoint=endpoint).inc()
    logger.debug("metric tax_calculations_total{endpoint=%s} += 1", endpoint)


def tax_calculation_failure(endpoint: str) -> None:
    _TAX_CALCULATION_FAILURES.labels(endpoint=endpoint).inc()
