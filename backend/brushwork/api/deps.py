"""Dependency construction for FastAPI endpoints."""

from __future__ import annotations

import logging
import math
import os

from brushwork.services.price_lookup import PriceLookupService

logger = logging.getLogger(__name__)

DEFAULT_PRICE_LOOKUP_TIMEOUT = 10.0


def create_price_lookup() -> PriceLookupService:
    """Create a PriceLookupService from environment variables.

    Reads SERPAPI_KEY; when it is unset the service serves mock prices.
    PRICE_LOOKUP_TIMEOUT optionally overrides the upstream timeout (seconds).
    """
    api_key = os.environ.get("SERPAPI_KEY", "")
    if not api_key:
        logger.info("SERPAPI_KEY is not set; price search will return mock data")

    raw_timeout = os.environ.get("PRICE_LOOKUP_TIMEOUT", "")
    timeout = DEFAULT_PRICE_LOOKUP_TIMEOUT
    if raw_timeout:
        try:
            parsed = float(raw_timeout)
        except ValueError:
            parsed = math.nan
        if math.isfinite(parsed) and parsed > 0:
            timeout = parsed
        else:
            logger.warning(
                "Ignoring invalid PRICE_LOOKUP_TIMEOUT=%r, using %.0fs",
                raw_timeout,
                DEFAULT_PRICE_LOOKUP_TIMEOUT,
            )

    return PriceLookupService(api_key=api_key or None, timeout=timeout)
