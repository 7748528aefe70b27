"""Type definitions for the geometry engine.

Contains enums and data classes used throughout the geometry module.
All lengths are decimal feet, all areas square feet.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from shapely.geometry import Polygon


def read_field(obj: Any, *names: str, default: Any = None) -> Any:
    """Read the first present attribute or mapping key out of ``names``.

    Engine inputs arrive as pydantic models, dataclasses or raw rows using
    either snake_case or camelCase keys.
    """
    for name in names:
        if isinstance(obj, Mapping):
            if name in obj and obj[name] is not None:
                return obj[name]
        else:
            value = getattr(obj, name, None)
            if value is not None:
                return value
    return default


class WallType(str, Enum):
    """Rendering behaviour of a wall. Every type bounds rooms."""

    SOLID = "solid"
    VIRTUAL = "virtual"
    PARTITION = "partition"


class FurnitureType(str, Enum):
    """Furniture catalogue used as room-type evidence."""

    BED_QUEEN = "bed_queen"
    BED_KING = "bed_king"
    BED_TWIN = "bed_twin"
    DRESSER = "dresser"
    NIGHTSTAND = "nightstand"
    TOILET = "toilet"
    SINK = "sink"
    BATHTUB = "bathtub"
    SHOWER = "shower"
    REFRIGERATOR = "refrigerator"
    STOVE = "stove"
    DISHWASHER = "dishwasher"
    KITCHEN_SINK = "kitchen_sink"
    SOFA_3SEAT = "sofa_3seat"
    SOFA_2SEAT = "sofa_2seat"
    ARMCHAIR = "armchair"
    COFFEE_TABLE = "coffee_table"
    DINING_TABLE = "dining_table"
    DINING_CHAIR = "dining_chair"
    DESK = "desk"
    OFFICE_CHAIR = "office_chair"
    BOOKSHELF = "bookshelf"


class RoomType(str, Enum):
    """Room classifications a detected room can be labelled with."""

    BEDROOM = "bedroom"
    BATHROOM = "bathroom"
    HALF_BATH = "half_bath"
    KITCHEN = "kitchen"
    LIVING = "living"
    DINING = "dining"
    CLOSET = "closet"
    LAUNDRY = "laundry"
    STORAGE = "storage"
    UTILITY = "utility"
    ENTRY = "entry"
    CORRIDOR = "corridor"
    FLEX = "flex"
    OTHER = "other"


@dataclass(frozen=True)
class Point:
    """A 2-D coordinate in feet."""

    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass
class Room:
    """An enclosed face of the wall graph.

    Rooms are derived values: they are rebuilt from the corners and walls on
    every detection pass and never carry state of their own.
    """

    id: str
    corners: list[Point]
    walls: list[Any] = field(default_factory=list)
    area: float = 0.0
    center: Point = field(default_factory=lambda: Point(0.0, 0.0))
    name: str = ""
    type: RoomType = RoomType.OTHER

    def to_polygon(self) -> Polygon:
        """Shapely polygon of the room outline."""
        return Polygon([(p.x, p.y) for p in self.corners])

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "corners": [p.to_dict() for p in self.corners],
            "wall_ids": [read_field(w, "id") for w in self.walls],
            "area": round(self.area, 2),
            "center": self.center.to_dict(),
            "name": self.name,
            "type": self.type.value,
        }


@dataclass
class BlueprintAnalysis:
    """Rooms detected in one blueprint plus their floor-area summary."""

    rooms: list[Room] = field(default_factory=list)
    summary: dict[str, Any] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "rooms": [room.to_dict() for room in self.rooms],
            "summary": self.summary,
            "warnings": self.warnings,
        }
