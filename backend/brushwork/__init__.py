"""Brushwork paint cost estimator.

Usage::

    from brushwork import DimensionalRoom, EstimationOptions, create_default_estimator

    estimator = create_default_estimator()
    room = DimensionalRoom(width=4, length=6, height=2.4)
    result = estimator.estimate(room, "wall_standard", EstimationOptions(coats=2))
"""

from brushwork.data.repository import ProductCatalog
from brushwork.engine import PaintEstimator, estimate_paint, summarize_project
from brushwork.factory import create_default_catalog, create_default_estimator
from brushwork.forms import RoomForm, parse_room_form
from brushwork.models.enums import InputMode, ProductCategory, RoomType
from brushwork.models.estimate import EstimationResult, LaborCostRange, PaintLine
from brushwork.models.product import PaintProduct, TrendColor
from brushwork.models.project import ProjectSummary, Room
from brushwork.models.room import (
    AreaOnlyRoom,
    DimensionalRoom,
    EstimationOptions,
    RoomInput,
)

__all__ = [
    "AreaOnlyRoom",
    "DimensionalRoom",
    "EstimationOptions",
    "EstimationResult",
    "InputMode",
    "LaborCostRange",
    "PaintEstimator",
    "PaintLine",
    "PaintProduct",
    "ProductCatalog",
    "ProductCategory",
    "ProjectSummary",
    "Room",
    "RoomForm",
    "RoomInput",
    "RoomType",
    "TrendColor",
    "create_default_catalog",
    "create_default_estimator",
    "estimate_paint",
    "parse_room_form",
    "summarize_project",
]
