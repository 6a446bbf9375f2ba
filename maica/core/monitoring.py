"""Sentry error reporting.

Tax requests carry a business's revenue, expenses and payroll, and every
request carries a bearer token. Neither may leave the process in an event.
"""
import logging
from typing import Any

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

from maica.core.config import settings

logger = logging.getLogger(__name__)

FILTERED = "[Filtered]"
_SENSITIVE_HEADERS = frozenset({"authorization", "cookie"})

_initialized = False


def scrub_event(event: dict[str, Any], hint: dict[str, Any] | None = None) -> dict[str, Any]:
    """Drop request bodies and credentials from a Sentry event before sending."""
    request = event.get("request")
    if isinstance(request, dict):
        if "data" in request:
            request["data"] = FILTERED
        headers = request.get("headers")
        if isinstance(headers, dict):
            for name in list(headers):
                if name.lower() in _SENSITIVE_HEADERS:
                    headers[name] = FILTERED
    return event


def init_monitoring() -> None:
    global _initialized
    if _initialized:
        return
    dsn = settings.SENTRY_DSN
    if dsn:
        try:
            sentry_sdk.init(
                dsn=dsn,
                integrations=[FastApiIntegration()],
                traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
                send_default_pii=False,
                before_send=scrub_event,
                environment=settings.ENV,
                release=f"maica-backend@{settings.ENV}",
            )
            logger.info("Sentry initialized (env=%s)", settings.ENV)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Failed to init Sentry: %s", exc)
    else:
        logger.debug("SENTRY_DSN not set; error reporting disabled")
    _initialized = True
