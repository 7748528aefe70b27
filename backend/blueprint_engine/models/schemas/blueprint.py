"""Blueprint snapshot validation schemas.

Rows arrive from the persistence layer with camelCase keys
(``startCornerId``, ``wallType``); snake_case names are accepted as well.
"""

import math
import uuid
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from blueprint_engine.core.exceptions import InvalidBlueprintError
from blueprint_engine.geometry.types import FurnitureType, WallType


def _new_id() -> str:
    return str(uuid.uuid4())


def _finite(v: float) -> float:
    if not math.isfinite(v):
        raise ValueError("coordinates must be finite numbers (not NaN or Infinity)")
    return v


class BlueprintModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Corner(BlueprintModel):
    """Wall graph node. Coordinates in feet."""

    id: str = Field(default_factory=_new_id, min_length=1)
    x: float
    y: float
    elevation: float = 0.0

    @field_validator("x", "y", "elevation")
    @classmethod
    def coordinates_finite(cls, v: float) -> float:
        return _finite(v)


class Wall(BlueprintModel):
    """Undirected wall between two corners."""

    id: str = Field(default_factory=_new_id, min_length=1)
    start_corner_id: str = Field(..., min_length=1)
    end_corner_id: str = Field(..., min_length=1)
    thickness: float = Field(default=0.5, gt=0)
    height: float = Field(default=9.0, gt=0)
    wall_type: WallType = WallType.SOLID


class Furniture(BlueprintModel):
    """Freely placed furniture; ``x``/``y`` is the anchor point."""

    id: str = Field(default_factory=_new_id, min_length=1)
    type: FurnitureType
    x: float
    y: float
    width: float = Field(..., gt=0)
    depth: float = Field(..., gt=0, validation_alias=AliasChoices("depth", "height"))
    rotation: float = 0.0

    @field_validator("x", "y", "rotation")
    @classmethod
    def coordinates_finite(cls, v: float) -> float:
        return _finite(v)


class BlueprintSnapshot(BlueprintModel):
    """Everything the engine needs from one blueprint."""

    corners: list[Corner] = Field(default_factory=list)
    walls: list[Wall] = Field(default_factory=list)
    furniture: list[Furniture] = Field(default_factory=list)

    def dangling_wall_warnings(self) -> list[str]:
        """Walls that will be left out of room detection, as messages."""
        corner_ids = {c.id for c in self.corners}
        warnings = []
        for i, wall in enumerate(self.walls):
            missing = [
                cid
                for cid in (wall.start_corner_id, wall.end_corner_id)
                if cid not in corner_ids
            ]
            if missing:
                warnings.append(
                    f"walls[{i}]: references unknown corner(s) {', '.join(missing)}"
                )
            elif wall.start_corner_id == wall.end_corner_id:
                warnings.append(f"walls[{i}]: starts and ends at the same corner")
        return warnings


def _format_errors(e: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(x) for x in err.get('loc', []))}: {err.get('msg', '')}"
        for err in e.errors()
    ]


def parse_blueprint(payload: Any) -> BlueprintSnapshot:
    """Validate a raw blueprint payload.

    Raises:
        InvalidBlueprintError: if any row fails validation
    """
    if not isinstance(payload, dict):
        raise InvalidBlueprintError(
            [f"blueprint must be an object, got {type(payload).__name__}"]
        )

    try:
        return BlueprintSnapshot.model_validate(payload)
    except ValidationError as e:
        raise InvalidBlueprintError(_format_errors(e)) from e
