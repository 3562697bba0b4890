"""Room input models for the Brushwork estimator.

A room is described in exactly one of two ways: by its dimensions, or by a
wall area the user already knows. ``RoomInput`` is a discriminated union on
the ``mode`` field so the estimator can never read ``width`` from a room that
only carries ``total_wall_area``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PRIMER_PRODUCT_ID = "trim_primer"


class DimensionalRoom(BaseModel):
    """Room measured as width x length x height, in metres."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["dimensions"] = "dimensions"
    width: float = Field(gt=0)
    length: float = Field(gt=0)
    height: float = Field(gt=0)

    @property
    def perimeter(self) -> float:
        return 2 * (self.width + self.length)

    @property
    def floor_area(self) -> float:
        return self.width * self.length


class AreaOnlyRoom(BaseModel):
    """Room described only by its total wall area, in square metres."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["area"] = "area"
    total_wall_area: float = Field(gt=0)


RoomInput = Annotated[DimensionalRoom | AreaOnlyRoom, Field(discriminator="mode")]


class EstimationOptions(BaseModel):
    """Per-room options that shape the estimate.

    ``include_ceiling`` only has meaning for dimensional rooms; the estimator
    ignores it in area mode. ``labor_rate`` is not range-checked beyond being
    non-negative: the form boundary clamps the slider value, the estimator
    does not.
    """

    model_config = ConfigDict(frozen=True)

    coats: int = Field(default=2, ge=1)
    num_doors: int = Field(default=0, ge=0)
    num_windows: int = Field(default=0, ge=0)
    include_ceiling: bool = False
    labor_rate: float = Field(default=16.0, ge=0)
    include_primer: bool = False
    trim_product_id: str | None = None
    primer_product_id: str | None = DEFAULT_PRIMER_PRODUCT_ID
