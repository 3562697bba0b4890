"""Enums for the Brushwork domain models."""

from enum import StrEnum


class ProductCategory(StrEnum):
    """Which surface a paint product is sold for."""

    WALL = "wall"
    TRIM = "trim"


class InputMode(StrEnum):
    """How the room's wall area is supplied."""

    DIMENSIONS = "dimensions"
    AREA = "area"


class RoomType(StrEnum):
    """Room types offered when adding a room to a project."""

    KITCHEN = "kitchen"
    BEDROOM = "bedroom"
    LIVING = "living"
    DINING = "dining"
    BATHROOM = "bathroom"
    HALLWAY = "hallway"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human-readable label used as the default room name."""
        return _ROOM_TYPE_LABELS[self]


_ROOM_TYPE_LABELS: dict[RoomType, str] = {
    RoomType.KITCHEN: "Kitchen",
    RoomType.BEDROOM: "Bedroom",
    RoomType.LIVING: "Living Room",
    RoomType.DINING: "Dining Room",
    RoomType.BATHROOM: "Bathroom",
    RoomType.HALLWAY: "Hallway",
    RoomType.OTHER: "Other",
}
