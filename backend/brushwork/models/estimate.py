"""Estimate output models for the Brushwork estimator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from brushwork.models.product import PaintProduct  # noqa: TCH001 (pydantic resolves at runtime)


class LaborCostRange(BaseModel):
    """Banded labour estimate for the paintable area."""

    min: float
    max: float

    @model_validator(mode="after")
    def min_le_max(self) -> LaborCostRange:
        if self.min > self.max:
            msg = f"Must satisfy min <= max, got {self.min} <= {self.max}"
            raise ValueError(msg)
        return self


class PaintLine(BaseModel):
    """One paint layer in the estimate: how much to buy and what it costs."""

    litres_needed: int = Field(ge=0)
    cost: float = Field(ge=0)
    product: PaintProduct


class EstimationResult(BaseModel):
    """Itemised cost breakdown for painting one room.

    A value produced fresh on every call. Areas are in square metres,
    costs in pounds sterling.
    """

    gross_wall_area: float
    paintable_area: float = Field(ge=0)
    perimeter: float
    perimeter_is_estimated: bool = False
    wall_paint: PaintLine
    trim_paint: PaintLine | None = None
    primer_paint: PaintLine | None = None
    total_materials_cost: float
    labor_cost_range: LaborCostRange
    precise_labor_cost: float

    @property
    def layers(self) -> list[PaintLine]:
        """All paint lines present, walls first."""
        return [
            line
            for line in (self.wall_paint, self.trim_paint, self.primer_paint)
            if line is not None
        ]

    @property
    def total_litres(self) -> int:
        return sum(line.litres_needed for line in self.layers)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat dict of display strings for the results panel."""
        from brushwork.formatting import format_area, format_currency, format_labor_range

        lines = [
            {
                "product_name": line.product.name,
                "brand": line.product.brand,
                "litres_formatted": f"{line.litres_needed} Litres required",
                "cost_formatted": format_currency(line.cost),
            }
            for line in self.layers
        ]
        return {
            "gross_wall_area_formatted": format_area(self.gross_wall_area),
            "paintable_area_formatted": format_area(self.paintable_area),
            "perimeter_is_estimated": self.perimeter_is_estimated,
            "lines": lines,
            "total_litres": self.total_litres,
            "total_materials_formatted": format_currency(self.total_materials_cost),
            "labor_range_formatted": format_labor_range(self.labor_cost_range),
            "precise_labor_formatted": format_currency(self.precise_labor_cost),
        }
