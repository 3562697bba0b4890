"""Domain models for the Brushwork paint estimator."""

from brushwork.models.enums import InputMode, ProductCategory, RoomType
from brushwork.models.estimate import EstimationResult, LaborCostRange, PaintLine
from brushwork.models.product import PaintProduct, TrendColor
from brushwork.models.project import ProjectSummary, Room
from brushwork.models.room import (
    DEFAULT_PRIMER_PRODUCT_ID,
    AreaOnlyRoom,
    DimensionalRoom,
    EstimationOptions,
    RoomInput,
)

__all__ = [
    "DEFAULT_PRIMER_PRODUCT_ID",
    "AreaOnlyRoom",
    "DimensionalRoom",
    "EstimationOptions",
    "EstimationResult",
    "InputMode",
    "LaborCostRange",
    "PaintLine",
    "PaintProduct",
    "ProductCategory",
    "ProjectSummary",
    "Room",
    "RoomInput",
    "RoomType",
    "TrendColor",
]
