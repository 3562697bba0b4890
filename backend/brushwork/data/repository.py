"""Product catalog for looking up paint products and trend colours."""

from __future__ import annotations

from typing import TYPE_CHECKING

from brushwork.exceptions import UnknownProductError

if TYPE_CHECKING:
    from brushwork.models.enums import ProductCategory
    from brushwork.models.product import PaintProduct, TrendColor


class ProductCatalog:
    """Read-only catalog over in-memory product data.

    A lookup miss is a normal outcome: ``get_product_by_id`` returns None
    and callers decide whether to skip estimation or fall back to a default.
    """

    def __init__(
        self,
        products: list[PaintProduct],
        trends: list[TrendColor] | None = None,
    ) -> None:
        self._products = tuple(products)
        self._by_id = {p.id: p for p in self._products}
        if len(self._by_id) != len(self._products):
            msg = "Product ids must be unique"
            raise ValueError(msg)
        self._trends = tuple(trends or ())

    def get_product_by_id(self, product_id: str) -> PaintProduct | None:
        """Exact-match lookup. Returns None when the id is not in the catalog."""
        return self._by_id.get(product_id)

    def require_product(self, product_id: str) -> PaintProduct:
        """Like ``get_product_by_id`` but raises UnknownProductError on a miss."""
        product = self.get_product_by_id(product_id)
        if product is None:
            raise UnknownProductError(product_id)
        return product

    def list_products(
        self, category: ProductCategory | None = None
    ) -> list[PaintProduct]:
        """All products in seed order, optionally filtered by category."""
        if category is None:
            return list(self._products)
        return [p for p in self._products if p.category == category]

    def get_trend_colors(self) -> list[TrendColor]:
        return list(self._trends)
