"""Custom exception hierarchy for Brushwork."""

from __future__ import annotations


class BrushworkError(Exception):
    """Base exception for all Brushwork errors."""


class UnknownProductError(BrushworkError):
    """Raised when a product id is required but not in the catalog."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Unknown product id '{product_id}'")


class PriceLookupError(BrushworkError):
    """Raised when the upstream price search fails."""
