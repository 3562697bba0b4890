"""Form boundary: raw user-entered text to validated estimator input.

Everything here tolerates half-filled forms. An empty or malformed field
means "no result yet" and yields None; nothing in this module raises for
bad user text.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field, ValidationError

from brushwork.models.enums import InputMode
from brushwork.models.room import (
    DEFAULT_PRIMER_PRODUCT_ID,
    AreaOnlyRoom,
    DimensionalRoom,
    EstimationOptions,
    RoomInput,
)

# Bounds of the labour-rate slider, £/m2
LABOR_RATE_SLIDER_MIN = 10.0
LABOR_RATE_SLIDER_MAX = 40.0


class RoomForm(BaseModel):
    """The editor form for one room, exactly as the user typed it.

    Defaults match a freshly added room.
    """

    input_mode: InputMode = InputMode.DIMENSIONS
    width: str = ""
    length: str = ""
    height: str = ""
    custom_wall_area: str = ""
    wall_product_id: str = "wall_economy"
    trim_product_id: str = "trim_gloss"
    include_trim: bool = True
    include_primer: bool = False
    include_ceiling: bool = True
    coats: int = Field(default=2, ge=1)
    num_doors: str = "1"
    num_windows: str = "1"
    labor_rate: float = 16.0


def parse_number(raw: str) -> float | None:
    """Parse a user-entered number. Accepts a decimal comma.

    Returns None for empty, non-numeric or non-finite text.
    """
    text = raw.strip().replace(",", ".")
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_count(raw: str) -> int | None:
    """Parse a door/window count. Empty means zero; negatives are invalid."""
    if not raw.strip():
        return 0
    value = parse_number(raw)
    if value is None or value < 0 or not value.is_integer():
        return None
    return int(value)


def clamp_labor_rate(rate: float) -> float:
    return min(LABOR_RATE_SLIDER_MAX, max(LABOR_RATE_SLIDER_MIN, rate))


def parse_room_input(form: RoomForm) -> RoomInput | None:
    """Build the room shape selected by ``input_mode``, or None if incomplete."""
    try:
        if form.input_mode == InputMode.DIMENSIONS:
            width = parse_number(form.width)
            length = parse_number(form.length)
            height = parse_number(form.height)
            if width is None or length is None or height is None:
                return None
            return DimensionalRoom(width=width, length=length, height=height)

        area = parse_number(form.custom_wall_area)
        if area is None:
            return None
        return AreaOnlyRoom(total_wall_area=area)
    except ValidationError:
        # Zero or negative measurements
        return None


def parse_room_form(form: RoomForm) -> tuple[RoomInput, EstimationOptions] | None:
    """Turn a room form into estimator input, or None when not ready."""
    room = parse_room_input(form)
    if room is None:
        return None

    num_doors = parse_count(form.num_doors)
    num_windows = parse_count(form.num_windows)
    if num_doors is None or num_windows is None:
        return None

    options = EstimationOptions(
        coats=form.coats,
        num_doors=num_doors,
        num_windows=num_windows,
        include_ceiling=(
            form.include_ceiling and form.input_mode == InputMode.DIMENSIONS
        ),
        labor_rate=clamp_labor_rate(form.labor_rate),
        include_primer=form.include_primer,
        trim_product_id=form.trim_product_id if form.include_trim else None,
        primer_product_id=DEFAULT_PRIMER_PRODUCT_ID,
    )
    return room, options
