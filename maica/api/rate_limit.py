import logging

from prometheus_client import Counter
from slowapi import Limiter
from slowapi.util import get_remote_address

from maica.core.config import settings

logger = logging.getLogger(__name__)

_PROM_RATE_LIMIT = Counter("maica_rate_limit_exceeded_events", "Rate limit exceeded events (handler invocations)")

# Tax endpoints are pure computation; per-process memory storage is enough
limiter = Limiter(key_func=get_remote_address, storage_uri="memory://")
logger.info("Rate limiter using in-memory storage (%s mode)", settings.ENV)

RATE_LIMITS = {
    "tax_calculate": settings.TAX_RATE_LIMIT,
    "tax_pit": settings.TAX_RATE_LIMIT,
    "tax_rates": settings.TAX_RATE_LIMIT,
    "tax_vat_line": settings.TAX_RATE_LIMIT,
}


def increment_rate_limit_exceeded():
    _PROM_RATE_LIMIT.inc()
