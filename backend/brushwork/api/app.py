"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from brushwork.engine import ENGINE_VERSION, estimate_paint, summarize_project
from brushwork.exceptions import PriceLookupError, UnknownProductError
from brushwork.models.enums import ProductCategory  # noqa: TCH001 (FastAPI resolves at runtime)
from brushwork.models.project import Room  # noqa: TCH001 (FastAPI resolves at runtime)
from brushwork.models.room import EstimationOptions, RoomInput

if TYPE_CHECKING:
    from brushwork.data.repository import ProductCatalog
    from brushwork.models.product import PaintProduct
    from brushwork.services.price_lookup import PriceLookupService

logger = logging.getLogger(__name__)


class EstimateRequest(BaseModel):
    """Body of POST /api/estimate."""

    room: RoomInput
    wall_product_id: str
    options: EstimationOptions = Field(default_factory=EstimationOptions)


def create_app(
    *,
    catalog: ProductCatalog | None = None,
    price_lookup: PriceLookupService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    catalog
        Optional product catalog. Defaults to the built-in seed catalog.
    price_lookup
        Optional pre-built price lookup service (e.g. tests). If not
        provided, one is created from environment variables on first
        request to /api/search-prices.
    """
    app = FastAPI(title="Brushwork", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    if catalog is None:
        from brushwork.factory import create_default_catalog

        catalog = create_default_catalog()
    app.state.catalog = catalog
    app.state.price_lookup = price_lookup

    def _get_price_lookup() -> PriceLookupService:
        svc: PriceLookupService | None = app.state.price_lookup
        if svc is not None:
            return svc
        from brushwork.api.deps import create_price_lookup

        svc = create_price_lookup()
        app.state.price_lookup = svc
        return svc

    def _require_product(product_id: str) -> PaintProduct:
        try:
            return app.state.catalog.require_product(product_id)
        except UnknownProductError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------

    @app.get("/api/products")
    def list_products(category: ProductCategory | None = None) -> list[dict[str, Any]]:
        products = app.state.catalog.list_products(category)
        return [p.model_dump(mode="json") for p in products]

    @app.get("/api/products/{product_id}")
    def get_product(product_id: str) -> dict[str, Any]:
        return _require_product(product_id).model_dump(mode="json")

    @app.get("/api/trends")
    def trends() -> list[dict[str, Any]]:
        return [t.model_dump(mode="json") for t in app.state.catalog.get_trend_colors()]

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(request: EstimateRequest) -> dict[str, Any]:
        options = request.options
        wall_product = _require_product(request.wall_product_id)
        trim_product = (
            _require_product(options.trim_product_id)
            if options.trim_product_id
            else None
        )
        primer_product = (
            _require_product(options.primer_product_id)
            if options.include_primer and options.primer_product_id
            else None
        )

        result = estimate_paint(
            request.room,
            wall_product,
            trim_product,
            options,
            options.labor_rate,
            primer_product,
        )
        return {
            "estimate": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # POST /api/project-summary
    # ------------------------------------------------------------------

    @app.post("/api/project-summary")
    def project_summary(rooms: list[Room]) -> dict[str, Any]:
        return summarize_project(rooms).model_dump(mode="json")

    # ------------------------------------------------------------------
    # GET /api/search-prices
    # ------------------------------------------------------------------

    @app.get("/api/search-prices", response_model=None)
    async def search_prices(
        query: str | None = None,
        location: str | None = None,
    ) -> JSONResponse | dict[str, Any]:
        if not query or not query.strip():
            return JSONResponse(
                status_code=400,
                content={"error": "Query parameter is required"},
            )

        svc = _get_price_lookup()
        try:
            result = await svc.search(query, location)
        except PriceLookupError as exc:
            logger.exception("Price lookup failed for %r", query)
            return JSONResponse(
                status_code=502,
                content={"error": "Failed to fetch prices", "details": str(exc)},
            )
        return result.model_dump(mode="json", by_alias=True)

    return app
