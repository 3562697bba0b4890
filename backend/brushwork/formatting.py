"""Formatting helpers for estimate output.

Amounts are pounds sterling shown to the penny, matching how a
decorator quotes a job (e.g. '£1,234.50').
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from brushwork.models.estimate import LaborCostRange

_PRICE_NUMBER_RE = re.compile(r"\d[\d,]*(?:\.\d+)?")


def format_currency(amount: float) -> str:
    """Format an amount as '£X,XXX.XX'."""
    return f"£{amount:,.2f}"


def format_area(area_m2: float) -> str:
    """Format an area as 'XX.XX m²'."""
    return f"{area_m2:,.2f} m²"


def format_labor_range(labor: LaborCostRange) -> str:
    """Format a labour band as '£X - £Y', whole pounds."""
    return f"£{labor.min:,.0f} - £{labor.max:,.0f}"


def parse_price(price: str) -> float | None:
    """Pull the numeric amount out of a display price such as '£42.00'.

    Thousands separators are dropped. Returns None if no number is present.
    """
    match = _PRICE_NUMBER_RE.search(price)
    if match is None:
        return None
    return float(match.group().replace(",", ""))
