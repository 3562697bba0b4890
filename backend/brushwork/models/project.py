"""Project-level models: the rooms on the dashboard and their totals."""

from __future__ import annotations

from pydantic import BaseModel, Field

from brushwork.models.enums import RoomType
from brushwork.models.estimate import EstimationResult  # noqa: TCH001 (pydantic resolves at runtime)


class Room(BaseModel):
    """A named room on the project dashboard.

    ``result`` is None until the room's form holds enough input to estimate.
    """

    id: str
    name: str
    room_type: RoomType = RoomType.OTHER
    result: EstimationResult | None = None


class ProjectSummary(BaseModel):
    """Dashboard totals across every room in a project."""

    room_count: int = Field(ge=0)
    priced_room_count: int = Field(ge=0)
    total_materials: float
    total_labor: float
    grand_total: float
