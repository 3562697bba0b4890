"""Factory functions for creating pre-configured estimator instances."""

from __future__ import annotations

from brushwork.data.repository import ProductCatalog
from brushwork.data.seed import SEED_PRODUCTS, WINTER_TRENDS
from brushwork.engine import PaintEstimator


def create_default_catalog() -> ProductCatalog:
    """Create a ProductCatalog over the built-in seed products and trends."""
    return ProductCatalog(SEED_PRODUCTS, WINTER_TRENDS)


def create_default_estimator() -> PaintEstimator:
    """Create a PaintEstimator wired up with the default seed catalog.

    This is the recommended way to estimate by product id without touching
    the catalog wiring.

    Example::

        from brushwork import DimensionalRoom, EstimationOptions, create_default_estimator

        estimator = create_default_estimator()
        room = DimensionalRoom(width=4, length=6, height=2.4)
        result = estimator.estimate(room, "wall_standard", EstimationOptions())
    """
    return PaintEstimator(create_default_catalog())
