"""Price lookup service — market prices for paint from Google Shopping via SerpApi.

Without an API key the service runs in mock mode: after a short simulated
delay it returns a fixed set of snippets flagged ``is_mock`` so the UI can
say the prices are illustrative.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from brushwork.exceptions import PriceLookupError

logger = logging.getLogger(__name__)

SERPAPI_URL = "https://serpapi.com/search.json"
MAX_RESULTS = 10


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class PriceSnippet(BaseModel):
    """One market listing. ``price`` is a display string, not a number."""

    model_config = ConfigDict(frozen=True)

    title: str
    price: str
    source: str
    link: str
    thumbnail: str | None = None


class PriceSearchResult(BaseModel):
    """Listings from one search. Serialises ``is_mock`` as ``isMock``."""

    model_config = ConfigDict(populate_by_name=True)

    results: list[PriceSnippet] = Field(default_factory=list)
    is_mock: bool = Field(default=False, alias="isMock")


MOCK_RESULTS: list[PriceSnippet] = [
    PriceSnippet(
        title="Dulux Trade Vinyl Matt - Pure Brilliant White - 5L",
        price="£42.00",
        source="Mock Hardware Store",
        link="#",
        thumbnail="https://via.placeholder.com/100?text=Dulux+5L",
    ),
    PriceSnippet(
        title="Dulux Retail Matt Emulsion - White - 2.5L",
        price="£26.00",
        source="Mock DIY Shop",
        link="#",
        thumbnail="https://via.placeholder.com/100?text=Dulux+2.5L",
    ),
    PriceSnippet(
        title="Farrow & Ball Estate Emulsion - All White - 2.5L",
        price="£59.00",
        source="Mock Luxury Paints",
        link="#",
        thumbnail="https://via.placeholder.com/100?text=F&B+2.5L",
    ),
]


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class PriceLookupService:
    """Searches UK Google Shopping for paint listings.

    Args:
        api_key: SerpApi key. None or empty selects mock mode.
        client: Optional pre-built ``httpx.AsyncClient`` (tests inject one
            with a mock transport). When omitted a client is opened per call.
        timeout: Upstream request timeout in seconds.
        mock_delay: Seconds to wait before returning mock data.
    """

    def __init__(
        self,
        api_key: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
        mock_delay: float = 0.8,
    ) -> None:
        self._api_key = api_key or None
        self._client = client
        self._timeout = timeout
        self._mock_delay = mock_delay

    @property
    def is_mock(self) -> bool:
        return self._api_key is None

    async def search(self, query: str, location: str | None = None) -> PriceSearchResult:
        """Look up market prices for ``query``, optionally near ``location``.

        Raises
        ------
        ValueError
            If ``query`` is blank.
        PriceLookupError
            If the upstream request fails or returns an error payload.
        """
        query = query.strip()
        if not query:
            msg = "Query parameter is required"
            raise ValueError(msg)

        if self.is_mock:
            logger.info("No SerpApi key configured, returning mock prices for %r", query)
            await asyncio.sleep(self._mock_delay)
            return PriceSearchResult(results=list(MOCK_RESULTS), is_mock=True)

        data = await self._fetch(self._build_params(query, location))
        if data.get("error"):
            raise PriceLookupError(str(data["error"]))

        results = [
            self._to_snippet(item) for item in data.get("shopping_results") or []
        ]
        logger.debug("SerpApi returned %d listings for %r", len(results), query)
        return PriceSearchResult(results=results, is_mock=False)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _build_params(self, query: str, location: str | None) -> dict[str, str]:
        params = {
            "engine": "google_shopping",
            "q": query,
            "google_domain": "google.co.uk",
            "gl": "uk",
            "hl": "en",
            "api_key": self._api_key or "",
            "num": str(MAX_RESULTS),
        }
        if location and location.strip():
            params["location"] = location.strip()
        return params

    async def _fetch(self, params: dict[str, str]) -> dict[str, Any]:
        try:
            if self._client is not None:
                response = await self._client.get(SERPAPI_URL, params=params)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(SERPAPI_URL, params=params)
            payload = response.json()
        except httpx.HTTPError as exc:
            msg = f"Price search request failed: {exc}"
            raise PriceLookupError(msg) from exc
        except ValueError as exc:
            msg = "Price search returned a non-JSON response"
            raise PriceLookupError(msg) from exc

        if not isinstance(payload, dict):
            msg = "Price search returned an unexpected payload"
            raise PriceLookupError(msg)
        # SerpApi reports most failures in the body, so check it before the status
        if response.is_error and not payload.get("error"):
            msg = f"Price search failed with HTTP {response.status_code}"
            raise PriceLookupError(msg)
        return payload

    @staticmethod
    def _to_snippet(item: dict[str, Any]) -> PriceSnippet:
        return PriceSnippet(
            title=str(item.get("title", "")),
            price=str(item.get("price", "")),
            source=str(item.get("source", "")),
            link=str(item.get("link") or item.get("product_link") or ""),
            thumbnail=item.get("thumbnail"),
        )


class PriceSearchSession:
    """Last-request-wins wrapper around a PriceLookupService.

    Each ``search`` call takes a new generation number. If another search
    starts before it resolves, the older call returns None so the caller
    can drop its stale results. A failed search is logged and degrades to
    an empty result.
    """

    def __init__(self, service: PriceLookupService) -> None:
        self._service = service
        self._generation = 0
        self.latest: PriceSearchResult | None = None

    async def search(
        self, query: str, location: str | None = None
    ) -> PriceSearchResult | None:
        # a rejected query must not invalidate the search in flight
        if not query.strip():
            msg = "Query parameter is required"
            raise ValueError(msg)
        self._generation += 1
        generation = self._generation
        try:
            result = await self._service.search(query, location)
        except PriceLookupError:
            logger.exception("Price search failed for %r", query)
            result = PriceSearchResult()

        if generation != self._generation:
            logger.debug("Discarding stale price search for %r", query)
            return None
        self.latest = result
        return result
