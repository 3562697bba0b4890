"""Catalog data layer for the Brushwork estimator."""

from brushwork.data.repository import ProductCatalog
from brushwork.data.seed import SEED_PRODUCTS, WINTER_TRENDS

__all__ = [
    "SEED_PRODUCTS",
    "WINTER_TRENDS",
    "ProductCatalog",
]
