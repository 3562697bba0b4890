"""Catalog domain models: paint products and display-only trend colours."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from brushwork.models.enums import ProductCategory


class PaintProduct(BaseModel):
    """A single catalog entry.

    Loaded once from static seed data and never mutated, so the model is
    frozen.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    brand: str
    category: ProductCategory
    price_per_litre: float = Field(ge=0)
    coverage_per_litre: float = Field(gt=0)
    description: str = ""

    @property
    def search_query(self) -> str:
        """Text query used to look up market prices for this product."""
        return f"{self.brand} {self.name} paint"


class TrendColor(BaseModel):
    """A seasonal trend colour. Shown to users, never used in estimates."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    brand: str
    hex: str = Field(pattern=r"^#[0-9a-fA-F]{6}$")
    description: str
    season: str
