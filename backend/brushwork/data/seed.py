"""Seed catalog data for the Brushwork estimator.

Prices are 2025 UK retail averages per litre; coverage is the
manufacturer's stated m2 per litre for a single coat.
"""

from brushwork.models.enums import ProductCategory
from brushwork.models.product import PaintProduct, TrendColor

SEED_PRODUCTS: list[PaintProduct] = [
    # --- Wall paints ---
    PaintProduct(
        id="wall_economy",
        name="Matt Emulsion (Economy)",
        brand="Generic Store Brand",
        category=ProductCategory.WALL,
        price_per_litre=3.50,
        coverage_per_litre=10.0,
        description="Basic contract matt for budget projects.",
    ),
    PaintProduct(
        id="wall_standard",
        name="Vinyl Matt (Standard)",
        brand="Dulux / Crown",
        category=ProductCategory.WALL,
        price_per_litre=9.00,
        coverage_per_litre=13.0,
        description="Durable, washable finish suitable for most rooms.",
    ),
    PaintProduct(
        id="wall_premium",
        name="Estate Emulsion (Premium)",
        brand="Farrow & Ball",
        category=ProductCategory.WALL,
        price_per_litre=22.00,
        coverage_per_litre=14.0,
        description="Signature chalky finish, exceptional depth of colour.",
    ),
    # --- Trim paints ---
    PaintProduct(
        id="trim_gloss",
        name="High Gloss (Standard)",
        brand="Dulux Trade",
        category=ProductCategory.TRIM,
        price_per_litre=16.00,
        coverage_per_litre=15.0,
        description="High shine, tough finish for wood and metal.",
    ),
    PaintProduct(
        id="trim_satin",
        name="Satinwood (Standard)",
        brand="Dulux Trade",
        category=ProductCategory.TRIM,
        price_per_litre=18.00,
        coverage_per_litre=16.0,
        description="Mid-sheen finish, elegant and durable.",
    ),
    PaintProduct(
        id="trim_eggshell",
        name="Eggshell (Premium)",
        brand="Farrow & Ball",
        category=ProductCategory.TRIM,
        price_per_litre=28.00,
        coverage_per_litre=12.0,
        description="Low sheen finish for woodwork and metal.",
    ),
    # Primer is costed against the trim surface, so it lives in the trim range.
    PaintProduct(
        id="trim_primer",
        name="Primer Undercoat",
        brand="Dulux Trade",
        category=ProductCategory.TRIM,
        price_per_litre=12.00,
        coverage_per_litre=12.0,
        description="Primer and undercoat in one for bare or previously painted wood.",
    ),
]


WINTER_TRENDS: list[TrendColor] = [
    TrendColor(
        id="trend_true_joy",
        name="True Joy™",
        brand="Dulux",
        hex="#ffcc00",
        description=(
            "Dulux Colour of the Year 2025. "
            "A sunny yellow to bring optimism to winter days."
        ),
        season="Winter 2025",
    ),
    TrendColor(
        id="trend_cola",
        name="Cola",
        brand="Farrow & Ball",
        hex="#4a3c31",
        description="A deep, dark brown with red undertones. Perfect for cosy winter snugs.",
        season="Winter 2025",
    ),
    TrendColor(
        id="trend_brave_ground",
        name="Brave Ground™",
        brand="Dulux",
        hex="#9e8e78",
        description="An earthy neutral that brings a sense of stability and calm.",
        season="Winter 2025",
    ),
    TrendColor(
        id="trend_marmelo",
        name="Marmelo",
        brand="Farrow & Ball",
        hex="#d67e3e",
        description='A mellow burnt orange, adding warmth and "new nostalgia" to any room.',
        season="Winter 2025",
    ),
]
