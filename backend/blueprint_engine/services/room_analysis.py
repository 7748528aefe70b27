"""Room analysis: detected rooms, suggested types and floor-area totals.

This is the composition the blueprint read and export paths run on every
request: detect rooms from the wall graph, look at the furniture inside
each one to suggest a type, and total the areas.
"""

import logging
from dataclasses import replace
from typing import Any, Iterable, Optional

from shapely.ops import unary_union

from blueprint_engine.geometry.dimensioning import format_area
from blueprint_engine.geometry.room_detector import RoomDetector, get_furniture_in_room
from blueprint_engine.geometry.rules import suggest_room_type
from blueprint_engine.geometry.types import BlueprintAnalysis, Room
from blueprint_engine.models.schemas.blueprint import BlueprintSnapshot

logger = logging.getLogger(__name__)


def classify_rooms(rooms: Iterable[Room], furniture: Iterable[Any]) -> list[Room]:
    """Copies of ``rooms`` with their suggested type filled in."""
    furniture = list(furniture)
    classified = []
    for room in rooms:
        furniture_in_room = get_furniture_in_room(room, furniture)
        classified.append(replace(room, type=suggest_room_type(room, furniture_in_room)))
    return classified


def summarize_floor_area(rooms: Iterable[Room]) -> dict[str, Any]:
    """Area totals for a set of rooms.

    ``total_room_area_sqft`` sums the room areas; ``footprint_area_sqft`` is
    the area of their union, so overlapping outlines are counted once.
    """
    rooms = list(rooms)
    if not rooms:
        return {
            "room_count": 0,
            "total_room_area_sqft": 0.0,
            "footprint_area_sqft": 0.0,
            "area_by_type_sqft": {},
        }

    polygons = []
    for room in rooms:
        polygon = room.to_polygon()
        if not polygon.is_valid:
            polygon = polygon.buffer(0)
        polygons.append(polygon)

    area_by_type: dict[str, float] = {}
    for room in rooms:
        area_by_type[room.type.value] = area_by_type.get(room.type.value, 0.0) + room.area

    return {
        "room_count": len(rooms),
        "total_room_area_sqft": round(sum(r.area for r in rooms), 2),
        "footprint_area_sqft": round(unary_union(polygons).area, 2),
        "area_by_type_sqft": {k: round(v, 2) for k, v in sorted(area_by_type.items())},
    }


def analysis_to_dict(analysis: BlueprintAnalysis) -> dict[str, Any]:
    """JSON-ready payload with display strings added to each room."""
    data = analysis.to_dict()
    for room, room_data in zip(analysis.rooms, data["rooms"]):
        room_data["area_display"] = format_area(room.area)
    return data


def analyze_blueprint(
    snapshot: BlueprintSnapshot,
    detector: Optional[RoomDetector] = None,
) -> BlueprintAnalysis:
    """Detect, classify and summarize the rooms of one blueprint."""
    detector = detector or RoomDetector()

    rooms = detector.detect(snapshot.corners, snapshot.walls)
    rooms = classify_rooms(rooms, snapshot.furniture)

    warnings = snapshot.dangling_wall_warnings()
    if snapshot.walls and not rooms:
        warnings.append("No enclosed rooms found; check that the walls form closed loops")

    logger.info(
        f"Analyzed blueprint: {len(snapshot.corners)} corners, "
        f"{len(snapshot.walls)} walls, {len(rooms)} rooms"
    )

    return BlueprintAnalysis(
        rooms=rooms,
        summary=summarize_floor_area(rooms),
        warnings=warnings,
    )
