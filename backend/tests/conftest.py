"""Pytest fixtures for geometry engine testing."""

import pytest

from blueprint_engine.geometry.types import Point
from blueprint_engine.models.schemas.blueprint import Corner, Furniture, Wall


@pytest.fixture
def make_graph():
    """Factory: ``make_graph({"a": (0, 0), ...}, [("a", "b"), ...])``.

    Walls get ids ``w1``, ``w2``... in the order given.
    """

    def _make(points: dict[str, tuple[float, float]], edges: list[tuple[str, str]]):
        corners = [Corner(id=cid, x=x, y=y) for cid, (x, y) in points.items()]
        walls = [
            Wall(id=f"w{i}", start_corner_id=a, end_corner_id=b)
            for i, (a, b) in enumerate(edges, start=1)
        ]
        return corners, walls

    return _make


@pytest.fixture
def rectangle(make_graph):
    """10ft x 8ft room."""
    return make_graph(
        {"a": (0, 0), "b": (10, 0), "c": (10, 8), "d": (0, 8)},
        [("a", "b"), ("b", "c"), ("c", "d"), ("d", "a")],
    )


@pytest.fixture
def two_rooms(make_graph):
    """20ft x 8ft outline split by a partition at x=10."""
    return make_graph(
        {
            "a": (0, 0),
            "b": (10, 0),
            "c": (20, 0),
            "d": (20, 8),
            "e": (10, 8),
            "f": (0, 8),
        },
        [
            ("a", "b"),
            ("b", "c"),
            ("c", "d"),
            ("d", "e"),
            ("e", "f"),
            ("f", "a"),
            ("b", "e"),
        ],
    )


@pytest.fixture
def l_shaped(make_graph):
    """L-shaped outline (15x10 minus a 5x5 notch) split into two rooms."""
    return make_graph(
        {
            "a": (0, 0),
            "b": (10, 0),
            "c": (15, 0),
            "d": (15, 5),
            "e": (10, 5),
            "f": (10, 10),
            "g": (0, 10),
        },
        [
            ("a", "b"),
            ("b", "c"),
            ("c", "d"),
            ("d", "e"),
            ("e", "f"),
            ("f", "g"),
            ("g", "a"),
            ("b", "e"),
        ],
    )


@pytest.fixture
def square_polygon():
    return [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


@pytest.fixture
def bathroom_furniture():
    return [
        Furniture(id="f1", type="toilet", x=2, y=2, width=1.5, depth=2.5),
        Furniture(id="f2", type="shower", x=5, y=5, width=3, depth=3),
    ]


@pytest.fixture
def snapshot_payload():
    """Raw blueprint rows as the persistence layer returns them."""
    return {
        "corners": [
            {"id": "a", "x": 0, "y": 0},
            {"id": "b", "x": 10, "y": 0},
            {"id": "c", "x": 20, "y": 0},
            {"id": "d", "x": 20, "y": 8},
            {"id": "e", "x": 10, "y": 8},
            {"id": "f", "x": 0, "y": 8},
        ],
        "walls": [
            {"id": "w1", "startCornerId": "a", "endCornerId": "b"},
            {"id": "w2", "startCornerId": "b", "endCornerId": "c"},
            {"id": "w3", "startCornerId": "c", "endCornerId": "d"},
            {"id": "w4", "startCornerId": "d", "endCornerId": "e"},
            {"id": "w5", "startCornerId": "e", "endCornerId": "f"},
            {"id": "w6", "startCornerId": "f", "endCornerId": "a"},
            {"id": "w7", "startCornerId": "b", "endCornerId": "e", "wallType": "virtual"},
        ],
        "furniture": [
            {"id": "f1", "type": "bed_queen", "x": 5, "y": 4, "width": 5, "depth": 6.67},
            {"id": "f2", "type": "sofa_3seat", "x": 15, "y": 4, "width": 7, "depth": 3},
        ],
    }
