"""Geometry engine package for blueprint room detection.

Provides the geometry kernel, room detection over corner/wall graphs and
room-type suggestion. All units are feet. Feet-inches dimensioning lives in
``blueprint_engine.geometry.dimensioning`` and is imported from there.
"""

from blueprint_engine.geometry.types import (
    BlueprintAnalysis,
    FurnitureType,
    Point,
    Room,
    RoomType,
    WallType,
)
from blueprint_engine.geometry.kernel import (
    angle,
    angle_degrees,
    closest_point_on_line,
    distance,
    distance_squared,
    ensure_counter_clockwise,
    is_counter_clockwise,
    is_near,
    is_near_line,
    is_point_in_polygon,
    line_segments_intersect,
    midpoint,
    point_to_line_distance,
    polygon_area,
    polygon_centroid,
    signed_polygon_area,
    snap_point_to_grid,
    snap_to_grid,
)
from blueprint_engine.geometry.room_detector import (
    RoomDetector,
    detect_rooms,
    find_room_at_point,
    get_furniture_in_room,
    is_point_in_room,
)
from blueprint_engine.geometry.rules import RoomTypeRules, suggest_room_type

__all__ = [
    "BlueprintAnalysis",
    "FurnitureType",
    "Point",
    "Room",
    "RoomType",
    "WallType",
    "angle",
    "angle_degrees",
    "closest_point_on_line",
    "distance",
    "distance_squared",
    "ensure_counter_clockwise",
    "is_counter_clockwise",
    "is_near",
    "is_near_line",
    "is_point_in_polygon",
    "line_segments_intersect",
    "midpoint",
    "point_to_line_distance",
    "polygon_area",
    "polygon_centroid",
    "signed_polygon_area",
    "snap_point_to_grid",
    "snap_to_grid",
    "RoomDetector",
    "detect_rooms",
    "find_room_at_point",
    "get_furniture_in_room",
    "is_point_in_room",
    "RoomTypeRules",
    "suggest_room_type",
]
