"""Core paint estimation engine for Brushwork.

``estimate_paint`` turns a room and a product choice into an itemised cost
breakdown in a single pass:

1. **Gross area** — ``2 * (width + length) * height`` for a measured room,
   plus the ceiling (``width * length``) when requested. A room given by
   area uses that figure as-is and never adds a ceiling.
2. **Perimeter** — the true perimeter for a measured room. For an area-only
   room it is approximated as ``area / 2.4`` (a reference wall height). The
   result flags this with ``perimeter_is_estimated``.
3. **Deductions** — a fixed area per door and per window, with the
   paintable area floored at zero.
4. **Wall paint** — litres are ``ceil(area * coats / coverage)``.
5. **Trim paint** — a heuristic trim surface (skirting board strip plus a
   frame allowance per opening), coated as many times as the walls, with a
   one-litre minimum purchase.
6. **Primer** — the same trim surface and coats, priced against the primer
   product and floored at one litre independently of the trim.
7. **Labour** — a fixed UK band of £12-£20/m2 alongside a precise figure at
   the caller's rate. The rate is never clamped here.

Materials total is walls + trim + primer. Labour is always reported
separately.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from brushwork.models.estimate import EstimationResult, LaborCostRange, PaintLine
from brushwork.models.project import ProjectSummary
from brushwork.models.room import AreaOnlyRoom, DimensionalRoom

if TYPE_CHECKING:
    from brushwork.data.repository import ProductCatalog
    from brushwork.forms import RoomForm
    from brushwork.models.product import PaintProduct
    from brushwork.models.project import Room
    from brushwork.models.room import EstimationOptions, RoomInput

logger = logging.getLogger(__name__)

# Opening deductions, m2 each
DOOR_DEDUCTION_M2 = 2.0
WINDOW_DEDUCTION_M2 = 1.5

# Trim heuristic: a 15 cm skirting strip around the room plus a
# frame/sill allowance per door or window
SKIRTING_HEIGHT_M = 0.15
OPENING_TRIM_ALLOWANCE_M2 = 0.5

# Assumed wall height when only the wall area is known
REFERENCE_WALL_HEIGHT_M = 2.4

# UK average for prep + two coats, £/m2
LABOR_RATE_MIN_PER_M2 = 12.0
LABOR_RATE_MAX_PER_M2 = 20.0

MIN_PURCHASE_LITRES = 1

ENGINE_VERSION = "0.1.0"


def litres_for(coverage_needed: float, coverage_per_litre: float) -> int:
    """Whole litres needed to cover ``coverage_needed`` m2 (already times coats)."""
    return math.ceil(coverage_needed / coverage_per_litre)


def gross_area_and_perimeter(
    room: RoomInput, include_ceiling: bool = False
) -> tuple[float, float, bool]:
    """Return (gross area, perimeter, perimeter_is_estimated) for a room."""
    match room:
        case DimensionalRoom():
            perimeter = room.perimeter
            gross = perimeter * room.height
            if include_ceiling:
                gross += room.floor_area
            return gross, perimeter, False
        case AreaOnlyRoom():
            gross = room.total_wall_area
            return gross, gross / REFERENCE_WALL_HEIGHT_M, True
        case _:
            msg = f"Unsupported room input: {type(room).__name__}"
            raise TypeError(msg)


def deduction_area(num_doors: int, num_windows: int) -> float:
    return num_doors * DOOR_DEDUCTION_M2 + num_windows * WINDOW_DEDUCTION_M2


def trim_area(perimeter: float, num_doors: int, num_windows: int) -> float:
    """Heuristic trim surface: skirting strip plus per-opening frame allowance."""
    skirting = perimeter * SKIRTING_HEIGHT_M
    frames = (num_doors + num_windows) * OPENING_TRIM_ALLOWANCE_M2
    return skirting + frames


def _trim_line(area: float, coats: int, product: PaintProduct) -> PaintLine:
    litres = max(MIN_PURCHASE_LITRES, litres_for(area * coats, product.coverage_per_litre))
    return PaintLine(
        litres_needed=litres,
        cost=litres * product.price_per_litre,
        product=product,
    )


def estimate_paint(
    room: RoomInput,
    wall_product: PaintProduct,
    trim_product: PaintProduct | None,
    options: EstimationOptions,
    labor_rate: float | None = None,
    primer_product: PaintProduct | None = None,
) -> EstimationResult:
    """Estimate paint quantities and costs for one room.

    Args:
        room: The room, either measured or given by wall area.
        wall_product: Paint for the walls (and ceiling, when included).
        trim_product: Paint for skirting and frames, or None to skip trim.
        options: Coats, openings, ceiling and primer flags.
        labor_rate: £/m2 for the precise labour figure. Defaults to
            ``options.labor_rate``.
        primer_product: Primer to price when ``options.include_primer`` is
            set. Ignored otherwise.

    Returns:
        A fresh EstimationResult. Nothing is raised for valid models.
    """
    rate = options.labor_rate if labor_rate is None else labor_rate
    coats = options.coats

    # Ceiling only exists for a measured room
    include_ceiling = options.include_ceiling and isinstance(room, DimensionalRoom)
    gross, perimeter, perimeter_is_estimated = gross_area_and_perimeter(
        room, include_ceiling
    )

    deductions = deduction_area(options.num_doors, options.num_windows)
    paintable = max(0.0, gross - deductions)

    wall_litres = litres_for(paintable * coats, wall_product.coverage_per_litre)
    wall_paint = PaintLine(
        litres_needed=wall_litres,
        cost=wall_litres * wall_product.price_per_litre,
        product=wall_product,
    )

    # Trim and primer deliberately share one surface figure
    surface = trim_area(perimeter, options.num_doors, options.num_windows)

    trim_paint = _trim_line(surface, coats, trim_product) if trim_product else None

    primer_paint: PaintLine | None = None
    if options.include_primer and primer_product is not None:
        primer_paint = _trim_line(surface, coats, primer_product)

    total_materials = wall_paint.cost
    if trim_paint is not None:
        total_materials += trim_paint.cost
    if primer_paint is not None:
        total_materials += primer_paint.cost

    logger.debug(
        "Estimated %s room: gross=%.2f paintable=%.2f wall_litres=%d materials=%.2f",
        room.mode,
        gross,
        paintable,
        wall_litres,
        total_materials,
    )

    return EstimationResult(
        gross_wall_area=gross,
        paintable_area=paintable,
        perimeter=perimeter,
        perimeter_is_estimated=perimeter_is_estimated,
        wall_paint=wall_paint,
        trim_paint=trim_paint,
        primer_paint=primer_paint,
        total_materials_cost=total_materials,
        labor_cost_range=LaborCostRange(
            min=paintable * LABOR_RATE_MIN_PER_M2,
            max=paintable * LABOR_RATE_MAX_PER_M2,
        ),
        precise_labor_cost=paintable * rate,
    )


def summarize_project(rooms: list[Room]) -> ProjectSummary:
    """Total materials and precise labour across rooms.

    Rooms without a result yet contribute nothing.
    """
    priced = [r.result for r in rooms if r.result is not None]
    total_materials = sum(r.total_materials_cost for r in priced)
    total_labor = sum(r.precise_labor_cost for r in priced)
    return ProjectSummary(
        room_count=len(rooms),
        priced_room_count=len(priced),
        total_materials=total_materials,
        total_labor=total_labor,
        grand_total=total_materials + total_labor,
    )


class PaintEstimator:
    """Catalog-aware front end to ``estimate_paint``.

    Resolves product ids against a ProductCatalog and returns None ("no
    result yet") instead of raising when the wall product is unknown or the
    form is incomplete. Unknown trim or primer ids drop that layer.

    Example::

        from brushwork import create_default_estimator

        estimator = create_default_estimator()
        result = estimator.estimate(room, "wall_standard", options)
    """

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> ProductCatalog:
        return self._catalog

    def estimate(
        self,
        room: RoomInput,
        wall_product_id: str,
        options: EstimationOptions,
    ) -> EstimationResult | None:
        wall_product = self._catalog.get_product_by_id(wall_product_id)
        if wall_product is None:
            logger.debug("Wall product '%s' not in catalog; skipping", wall_product_id)
            return None

        trim_product = self._optional_product(options.trim_product_id)
        primer_product = (
            self._optional_product(options.primer_product_id)
            if options.include_primer
            else None
        )
        return estimate_paint(
            room,
            wall_product,
            trim_product,
            options,
            options.labor_rate,
            primer_product,
        )

    def estimate_form(self, form: RoomForm) -> EstimationResult | None:
        """Estimate straight from raw form fields, or None if incomplete."""
        from brushwork.forms import parse_room_form

        parsed = parse_room_form(form)
        if parsed is None:
            return None
        room, options = parsed
        return self.estimate(room, form.wall_product_id, options)

    def _optional_product(self, product_id: str | None) -> PaintProduct | None:
        if product_id is None:
            return None
        product = self._catalog.get_product_by_id(product_id)
        if product is None:
            logger.debug("Product '%s' not in catalog; layer omitted", product_id)
        return product
