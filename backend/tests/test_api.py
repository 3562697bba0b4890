"""Tests for the FastAPI application — the price search upstream is mocked."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from brushwork.api.app import create_app
from brushwork.exceptions import PriceLookupError
from brushwork.services.price_lookup import PriceLookupService, PriceSearchResult

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


def _create_test_client(price_lookup: PriceLookupService | None = None) -> TestClient:
    if price_lookup is None:
        price_lookup = PriceLookupService(api_key=None, mock_delay=0)
    return TestClient(create_app(price_lookup=price_lookup))


@pytest.fixture()
def client() -> TestClient:
    return _create_test_client()


def _estimate_body(**overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "room": {"mode": "dimensions", "width": 4, "length": 6, "height": 2.4},
        "wall_product_id": "wall_standard",
        "options": {
            "coats": 2,
            "num_doors": 1,
            "num_windows": 1,
            "include_ceiling": True,
        },
    }
    body.update(overrides)
    return body


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class TestHealth:
    def test_health_returns_200(self, client: TestClient) -> None:
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == "0.1.0"


# ---------------------------------------------------------------------------
# Catalog endpoints
# ---------------------------------------------------------------------------


class TestCatalog:
    def test_list_products(self, client: TestClient) -> None:
        response = client.get("/api/products")
        assert response.status_code == 200
        ids = [p["id"] for p in response.json()]
        assert "wall_standard" in ids
        assert "trim_primer" in ids

    def test_filter_by_category(self, client: TestClient) -> None:
        response = client.get("/api/products", params={"category": "wall"})
        assert response.status_code == 200
        assert {p["category"] for p in response.json()} == {"wall"}

    def test_bad_category_is_422(self, client: TestClient) -> None:
        response = client.get("/api/products", params={"category": "ceiling"})
        assert response.status_code == 422

    def test_get_product(self, client: TestClient) -> None:
        response = client.get("/api/products/trim_gloss")
        assert response.status_code == 200
        data = response.json()
        assert data["price_per_litre"] == 16.0
        assert data["coverage_per_litre"] == 15.0

    def test_unknown_product_is_404(self, client: TestClient) -> None:
        response = client.get("/api/products/nope")
        assert response.status_code == 404
        assert "nope" in response.json()["detail"]

    def test_trends(self, client: TestClient) -> None:
        response = client.get("/api/trends")
        assert response.status_code == 200
        trends = response.json()
        assert len(trends) == 4
        assert trends[0]["hex"] == "#ffcc00"


# ---------------------------------------------------------------------------
# POST /api/estimate
# ---------------------------------------------------------------------------


class TestEstimate:
    def test_living_room(self, client: TestClient) -> None:
        response = client.post("/api/estimate", json=_estimate_body())

        assert response.status_code == 200
        data = response.json()
        estimate = data["estimate"]
        assert estimate["gross_wall_area"] == pytest.approx(72.0)
        assert estimate["paintable_area"] == pytest.approx(68.5)
        assert estimate["wall_paint"]["litres_needed"] == 11
        assert estimate["wall_paint"]["cost"] == pytest.approx(99.0)
        assert estimate["trim_paint"] is None
        assert estimate["primer_paint"] is None
        assert data["summary_dict"]["total_materials_formatted"] == "£99.00"

    def test_area_mode_with_trim_and_primer(self, client: TestClient) -> None:
        body = _estimate_body(
            room={"mode": "area", "total_wall_area": 40},
            wall_product_id="wall_economy",
            options={
                "coats": 1,
                "include_ceiling": True,
                "trim_product_id": "trim_gloss",
                "include_primer": True,
            },
        )
        response = client.post("/api/estimate", json=body)

        assert response.status_code == 200
        estimate = response.json()["estimate"]
        assert estimate["gross_wall_area"] == 40.0
        assert estimate["perimeter_is_estimated"] is True
        assert estimate["trim_paint"]["litres_needed"] == 1
        assert estimate["primer_paint"]["product"]["id"] == "trim_primer"
        assert estimate["total_materials_cost"] == pytest.approx(14.0 + 16.0 + 12.0)

    def test_labor_rate_passed_through_unclamped(self, client: TestClient) -> None:
        body = _estimate_body(
            room={"mode": "area", "total_wall_area": 40},
            options={"labor_rate": 55},
        )
        response = client.post("/api/estimate", json=body)
        estimate = response.json()["estimate"]
        assert estimate["precise_labor_cost"] == pytest.approx(2200.0)
        assert estimate["labor_cost_range"] == {"min": 480.0, "max": 800.0}

    def test_unknown_wall_product_is_404(self, client: TestClient) -> None:
        response = client.post(
            "/api/estimate", json=_estimate_body(wall_product_id="wall_gold")
        )
        assert response.status_code == 404

    def test_unknown_trim_product_is_404(self, client: TestClient) -> None:
        body = _estimate_body(options={"trim_product_id": "trim_gold"})
        response = client.post("/api/estimate", json=body)
        assert response.status_code == 404

    def test_invalid_room_is_422(self, client: TestClient) -> None:
        body = _estimate_body(
            room={"mode": "dimensions", "width": 0, "length": 6, "height": 2.4}
        )
        response = client.post("/api/estimate", json=body)
        assert response.status_code == 422

    def test_options_default(self, client: TestClient) -> None:
        body = _estimate_body()
        del body["options"]
        response = client.post("/api/estimate", json=body)
        assert response.status_code == 200
        assert response.json()["estimate"]["gross_wall_area"] == pytest.approx(48.0)


# ---------------------------------------------------------------------------
# POST /api/project-summary
# ---------------------------------------------------------------------------


class TestProjectSummary:
    def test_totals(self, client: TestClient) -> None:
        estimate = client.post("/api/estimate", json=_estimate_body()).json()["estimate"]
        rooms = [
            {"id": "a", "name": "Lounge", "room_type": "living", "result": estimate},
            {"id": "b", "name": "Hall", "room_type": "hallway"},
        ]
        response = client.post("/api/project-summary", json=rooms)

        assert response.status_code == 200
        data = response.json()
        assert data["room_count"] == 2
        assert data["priced_room_count"] == 1
        assert data["total_materials"] == pytest.approx(99.0)
        assert data["total_labor"] == pytest.approx(68.5 * 16.0)
        assert data["grand_total"] == pytest.approx(99.0 + 68.5 * 16.0)


# ---------------------------------------------------------------------------
# GET /api/search-prices
# ---------------------------------------------------------------------------


class TestSearchPrices:
    def test_mock_results(self, client: TestClient) -> None:
        response = client.get(
            "/api/search-prices", params={"query": "Dulux Vinyl Matt paint"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["isMock"] is True
        assert len(data["results"]) == 3
        assert data["results"][0]["price"] == "£42.00"

    def test_missing_query_is_400(self, client: TestClient) -> None:
        response = client.get("/api/search-prices")
        assert response.status_code == 400
        assert response.json() == {"error": "Query parameter is required"}

    def test_blank_query_is_400(self, client: TestClient) -> None:
        response = client.get("/api/search-prices", params={"query": "  "})
        assert response.status_code == 400

    def test_passes_location(self) -> None:
        service = MagicMock(spec=PriceLookupService)
        service.search = AsyncMock(
            return_value=PriceSearchResult(results=[], is_mock=False)
        )
        client = _create_test_client(price_lookup=service)

        response = client.get(
            "/api/search-prices", params={"query": "paint", "location": "York"}
        )

        assert response.status_code == 200
        assert response.json() == {"results": [], "isMock": False}
        service.search.assert_awaited_once_with("paint", "York")

    def test_upstream_failure_is_502(self) -> None:
        upstream = httpx.AsyncClient(
            transport=httpx.MockTransport(
                lambda request: httpx.Response(401, json={"error": "Invalid API key."})
            )
        )
        service = PriceLookupService(api_key="bad-key", client=upstream)
        client = _create_test_client(price_lookup=service)

        response = client.get("/api/search-prices", params={"query": "paint"})

        assert response.status_code == 502
        data = response.json()
        assert data["error"] == "Failed to fetch prices"
        assert "Invalid API key" in data["details"]

    def test_service_error_is_reported_not_raised(self) -> None:
        service = MagicMock(spec=PriceLookupService)
        service.search = AsyncMock(side_effect=PriceLookupError("timeout"))
        client = _create_test_client(price_lookup=service)

        response = client.get("/api/search-prices", params={"query": "paint"})

        assert response.status_code == 502
        assert response.json()["details"] == "timeout"
