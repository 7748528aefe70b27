"""Room detection: trace enclosed faces out of the corner/wall graph.

The wall network is treated as a planar straight-line graph. Every directed
edge belongs to exactly one face; walking from edge to edge by always taking
the tightest clockwise turn visits each bounded face clockwise (interior on
the right) and the outer boundary of each connected network counter-
clockwise. Bounded faces become rooms; outer boundaries are dropped.

The detector never raises on graph content. Walls that reference missing
corners, dangling wall chains, traces that dead-end or run past the step
cap, and faces below the minimum area are skipped, so bad input shows up as
fewer rooms.
"""

import logging
import math
import uuid
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from blueprint_engine.config import get_settings
from blueprint_engine.geometry.kernel import (
    angle,
    ensure_counter_clockwise,
    is_point_in_polygon,
    polygon_area,
    polygon_centroid,
    signed_polygon_area,
)
from blueprint_engine.geometry.types import Point, Room, RoomType, read_field

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


def _create_room_id() -> str:
    return f"r_{uuid.uuid4().hex[:12]}"


@dataclass
class WallGraph:
    """Arena-style corner/wall graph indexed by persisted corner id.

    ``points[i]`` and ``ids[i]`` describe corner ``i``; ``adjacency[i]``
    lists ``(neighbour index, wall)`` pairs. Parallel walls between the same
    pair of corners collapse to the first one seen.
    """

    ids: list[str] = field(default_factory=list)
    points: list[Point] = field(default_factory=list)
    index: dict[str, int] = field(default_factory=dict)
    adjacency: list[list[tuple[int, Any]]] = field(default_factory=list)
    edge_walls: dict[frozenset, Any] = field(default_factory=dict)

    @classmethod
    def build(cls, corners: Iterable[Any], walls: Iterable[Any]) -> "WallGraph":
        graph = cls()

        for corner in corners:
            corner_id = read_field(corner, "id")
            if not corner_id:
                continue
            corner_id = str(corner_id)
            if corner_id in graph.index:
                logger.debug(f"Duplicate corner id {corner_id}, keeping first")
                continue
            x, y = read_field(corner, "x"), read_field(corner, "y")
            if x is None or y is None:
                logger.debug(f"Skipping corner {corner_id}: missing coordinates")
                continue
            try:
                point = Point(float(x), float(y))
            except (TypeError, ValueError):
                logger.debug(f"Skipping corner {corner_id}: non-numeric coordinates")
                continue
            if not (math.isfinite(point.x) and math.isfinite(point.y)):
                logger.debug(f"Skipping corner {corner_id}: non-finite coordinates")
                continue

            graph.index[corner_id] = len(graph.ids)
            graph.ids.append(corner_id)
            graph.points.append(point)
            graph.adjacency.append([])

        for wall in walls:
            start_id = read_field(wall, "start_corner_id", "startCornerId")
            end_id = read_field(wall, "end_corner_id", "endCornerId")
            start = graph.index.get(str(start_id)) if start_id is not None else None
            end = graph.index.get(str(end_id)) if end_id is not None else None

            if start is None or end is None:
                logger.debug(
                    f"Skipping wall {read_field(wall, 'id')}: "
                    f"unknown corner {start_id if start is None else end_id}"
                )
                continue
            if start == end:
                logger.debug(f"Skipping zero-length wall {read_field(wall, 'id')}")
                continue

            key = frozenset((start, end))
            if key in graph.edge_walls:
                logger.debug(f"Skipping duplicate wall {read_field(wall, 'id')}")
                continue

            graph.edge_walls[key] = wall
            graph.adjacency[start].append((end, wall))
            graph.adjacency[end].append((start, wall))

        return graph

    def wall_between(self, a: int, b: int) -> Optional[Any]:
        return self.edge_walls.get(frozenset((a, b)))

    def prune_dangling(self) -> int:
        """Drop chains of walls that end at a corner with no other wall.

        Such stubs cannot bound a face. Left in place, a trace that reaches
        one either dead-ends or doubles back, depending on where it started.

        Returns:
            Number of walls removed
        """
        removed = 0
        queue = [i for i, edges in enumerate(self.adjacency) if len(edges) == 1]

        while queue:
            corner = queue.pop()
            if len(self.adjacency[corner]) != 1:
                continue

            neighbour, _ = self.adjacency[corner][0]
            self.adjacency[corner] = []
            self.adjacency[neighbour] = [
                (n, w) for n, w in self.adjacency[neighbour] if n != corner
            ]
            del self.edge_walls[frozenset((corner, neighbour))]
            removed += 1

            if len(self.adjacency[neighbour]) == 1:
                queue.append(neighbour)

        return removed


class RoomDetector:
    """Finds enclosed rooms in a corner/wall graph."""

    def __init__(
        self,
        min_room_area: Optional[float] = None,
        max_cycle_length: Optional[int] = None,
    ):
        settings = get_settings()
        self.min_room_area = (
            settings.min_room_area if min_room_area is None else min_room_area
        )
        self.max_cycle_length = (
            settings.max_cycle_length if max_cycle_length is None else max_cycle_length
        )

    def detect(self, corners: Sequence[Any], walls: Sequence[Any]) -> list[Room]:
        """Detect all enclosed rooms.

        Args:
            corners: Corner records with ``id``, ``x`` and ``y``
            walls: Wall records with start and end corner ids

        Returns:
            Rooms with counter-clockwise corners, default names and type
            ``other``. Empty when the graph cannot enclose anything.
        """
        if len(corners) < 3 or len(walls) < 3:
            return []

        graph = WallGraph.build(corners, walls)
        pruned = graph.prune_dangling()
        if pruned:
            logger.debug(f"Ignoring {pruned} dangling walls")

        rooms: list[Room] = []
        seen_keys: set[str] = set()

        for cycle in self._find_faces(graph):
            key = self.cycle_key([graph.ids[i] for i in cycle])
            if key in seen_keys:
                continue
            seen_keys.add(key)

            room = self._materialize(graph, cycle, len(rooms) + 1)
            if room is not None:
                rooms.append(room)

        logger.debug(
            f"Detected {len(rooms)} rooms from {len(graph.ids)} corners "
            f"and {len(graph.edge_walls)} walls"
        )
        return rooms

    def _find_faces(self, graph: WallGraph) -> list[list[int]]:
        """Trace every bounded face of the graph once."""
        faces: list[list[int]] = []
        visited: set[tuple[int, int]] = set()

        for start in range(len(graph.ids)):
            for neighbour, _ in graph.adjacency[start]:
                if (start, neighbour) in visited:
                    continue

                cycle = self._trace_cycle(graph, start, neighbour, visited)
                if cycle is None or len(cycle) < 3:
                    continue

                cycle_points = [graph.points[i] for i in cycle]
                if signed_polygon_area(cycle_points) > 0:
                    # Counter-clockwise traversal: outer boundary of a network.
                    continue
                faces.append(cycle)

        return faces

    def _trace_cycle(
        self,
        graph: WallGraph,
        start: int,
        first_neighbour: int,
        visited: set[tuple[int, int]],
    ) -> Optional[list[int]]:
        """Walk one face starting on the directed edge start->first_neighbour.

        Returns the corner indices of the closed cycle, or None when the walk
        dead-ends or exceeds ``max_cycle_length`` corners.
        """
        cycle = [start]
        prev, current = start, first_neighbour

        while True:
            visited.add((prev, current))

            if current == start:
                return cycle

            if len(cycle) >= self.max_cycle_length:
                logger.debug(
                    f"Abandoning trace from {graph.ids[start]}: "
                    f"more than {self.max_cycle_length} corners"
                )
                return None

            cycle.append(current)
            nxt = self._next_clockwise(graph, prev, current)
            if nxt is None:
                logger.debug(
                    f"Abandoning trace from {graph.ids[start]}: "
                    f"dead end at {graph.ids[current]}"
                )
                return None

            prev, current = current, nxt

    @staticmethod
    def _next_clockwise(graph: WallGraph, prev: int, current: int) -> Optional[int]:
        """Pick the outgoing edge with the tightest clockwise turn.

        The turn is ``(outgoing - incoming) mod 2pi`` where ``incoming`` is
        the bearing from ``current`` back to ``prev``; the smallest value
        wins and ties keep the first candidate.
        """
        here = graph.points[current]
        incoming = angle(here, graph.points[prev])

        best: Optional[int] = None
        best_turn = math.inf

        for neighbour, _ in graph.adjacency[current]:
            if neighbour == prev:
                continue
            outgoing = angle(here, graph.points[neighbour])
            turn = (outgoing - incoming) % TWO_PI
            if turn < best_turn:
                best_turn = turn
                best = neighbour

        return best

    @staticmethod
    def cycle_key(cycle: Sequence[str]) -> str:
        """Canonical key of a cycle, independent of start corner and direction."""
        if not cycle:
            return ""

        ids = list(cycle)
        candidates = []
        for sequence in (ids, ids[::-1]):
            for i in range(len(sequence)):
                candidates.append("|".join(sequence[i:] + sequence[:i]))
        return min(candidates)

    def _materialize(self, graph: WallGraph, cycle: list[int], number: int) -> Optional[Room]:
        points = ensure_counter_clockwise([graph.points[i] for i in cycle])
        area = polygon_area(points)

        if area < self.min_room_area:
            logger.debug(f"Discarding face of {area:.3f} sq ft below minimum area")
            return None

        room_walls = []
        for i, corner in enumerate(cycle):
            wall = graph.wall_between(corner, cycle[(i + 1) % len(cycle)])
            if wall is not None:
                room_walls.append(wall)

        return Room(
            id=_create_room_id(),
            corners=points,
            walls=room_walls,
            area=area,
            center=polygon_centroid(points),
            name=f"Room {number}",
            type=RoomType.OTHER,
        )


def detect_rooms(corners: Sequence[Any], walls: Sequence[Any]) -> list[Room]:
    """Detect enclosed rooms using thresholds from settings."""
    return RoomDetector().detect(corners, walls)


def is_point_in_room(point, room: Room) -> bool:
    return is_point_in_polygon(point, room.corners)


def find_room_at_point(rooms: Iterable[Room], point) -> Optional[Room]:
    """First room containing ``point``, or None."""
    for room in rooms:
        if is_point_in_room(point, room):
            return room
    return None


def get_furniture_in_room(room: Room, all_furniture: Iterable[Any]) -> list[Any]:
    """Furniture whose anchor point falls inside the room outline."""
    inside = []
    for item in all_furniture:
        x = read_field(item, "x")
        y = read_field(item, "y")
        if x is None or y is None:
            continue
        if is_point_in_polygon(Point(float(x), float(y)), room.corners):
            inside.append(item)
    return inside
