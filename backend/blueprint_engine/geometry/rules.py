"""Rule registry for suggesting a room type from its furniture and area."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable

from blueprint_engine.geometry.types import FurnitureType, Room, RoomType, read_field

BATHING_FIXTURES = frozenset({FurnitureType.SHOWER.value, FurnitureType.BATHTUB.value})
KITCHEN_APPLIANCES = frozenset(
    {
        FurnitureType.STOVE.value,
        FurnitureType.REFRIGERATOR.value,
        FurnitureType.KITCHEN_SINK.value,
    }
)
BEDS = frozenset(
    {
        FurnitureType.BED_QUEEN.value,
        FurnitureType.BED_KING.value,
        FurnitureType.BED_TWIN.value,
    }
)
SOFAS = frozenset({FurnitureType.SOFA_3SEAT.value, FurnitureType.SOFA_2SEAT.value})


@dataclass(frozen=True)
class RoomEvidence:
    """What the rules get to look at for one room."""

    area: float
    furniture_types: frozenset[str] = field(default_factory=frozenset)

    def has_any(self, types: Iterable[str]) -> bool:
        return not self.furniture_types.isdisjoint(types)


@dataclass
class RoomTypeRule:
    """A single ``(predicate, result)`` pair in the suggestion chain."""

    rule_id: str
    description: str
    applies_when: Callable[[RoomEvidence], bool]
    room_type: RoomType


def furniture_type_of(item: Any) -> str:
    value = read_field(item, "type", default="")
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class RoomTypeRules:
    """Ordered room-type rules; the first rule that applies wins.

    Furniture rules come first, then area fallbacks. The last rule always
    applies, so every room gets a suggestion.
    """

    def __init__(
        self,
        half_bath_max_area: float = 45.0,
        closet_max_area: float = 30.0,
        storage_max_area: float = 50.0,
        living_min_area: float = 150.0,
    ):
        self.thresholds = {
            "half_bath_max_area": half_bath_max_area,
            "closet_max_area": closet_max_area,
            "storage_max_area": storage_max_area,
            "living_min_area": living_min_area,
        }
        self.rules: list[RoomTypeRule] = []
        self._register_all_rules()

    def _register_all_rules(self):
        self._register_furniture_rules()
        self._register_area_rules()

    def _register_furniture_rules(self):
        t = self.thresholds

        self.rules.append(
            RoomTypeRule(
                rule_id="half_bath",
                description="Toilet without shower or bathtub in a small room",
                applies_when=lambda ev: (
                    FurnitureType.TOILET.value in ev.furniture_types
                    and ev.area < t["half_bath_max_area"]
                    and not ev.has_any(BATHING_FIXTURES)
                ),
                room_type=RoomType.HALF_BATH,
            )
        )
        self.rules.append(
            RoomTypeRule(
                rule_id="bathroom",
                description="Contains a toilet",
                applies_when=lambda ev: FurnitureType.TOILET.value in ev.furniture_types,
                room_type=RoomType.BATHROOM,
            )
        )
        self.rules.append(
            RoomTypeRule(
                rule_id="kitchen",
                description="Contains a stove, refrigerator or kitchen sink",
                applies_when=lambda ev: ev.has_any(KITCHEN_APPLIANCES),
                room_type=RoomType.KITCHEN,
            )
        )
        self.rules.append(
            RoomTypeRule(
                rule_id="bedroom",
                description="Contains a bed",
                applies_when=lambda ev: ev.has_any(BEDS),
                room_type=RoomType.BEDROOM,
            )
        )
        self.rules.append(
            RoomTypeRule(
                rule_id="dining",
                description="Contains a dining table",
                applies_when=lambda ev: FurnitureType.DINING_TABLE.value in ev.furniture_types,
                room_type=RoomType.DINING,
            )
        )
        self.rules.append(
            RoomTypeRule(
                rule_id="living",
                description="Contains a sofa",
                applies_when=lambda ev: ev.has_any(SOFAS),
                room_type=RoomType.LIVING,
            )
        )

    def _register_area_rules(self):
        t = self.thresholds

        self.rules.append(
            RoomTypeRule(
                rule_id="closet_by_area",
                description=f"Under {t['closet_max_area']} sq ft",
                applies_when=lambda ev: ev.area < t["closet_max_area"],
                room_type=RoomType.CLOSET,
            )
        )
        self.rules.append(
            RoomTypeRule(
                rule_id="storage_by_area",
                description=f"Under {t['storage_max_area']} sq ft",
                applies_when=lambda ev: ev.area < t["storage_max_area"],
                room_type=RoomType.STORAGE,
            )
        )
        self.rules.append(
            RoomTypeRule(
                rule_id="living_by_area",
                description=f"Over {t['living_min_area']} sq ft",
                applies_when=lambda ev: ev.area > t["living_min_area"],
                room_type=RoomType.LIVING,
            )
        )
        self.rules.append(
            RoomTypeRule(
                rule_id="flex",
                description="Anything else",
                applies_when=lambda ev: True,
                room_type=RoomType.FLEX,
            )
        )

    def first_match(self, evidence: RoomEvidence) -> RoomTypeRule:
        for rule in self.rules:
            if rule.applies_when(evidence):
                return rule
        return self.rules[-1]

    def suggest(self, room: Room, furniture_in_room: Iterable[Any]) -> RoomType:
        evidence = RoomEvidence(
            area=room.area,
            furniture_types=frozenset(furniture_type_of(f) for f in furniture_in_room),
        )
        return self.first_match(evidence).room_type


_DEFAULT_RULES = RoomTypeRules()


def suggest_room_type(room: Room, furniture_in_room: Iterable[Any]) -> RoomType:
    """Suggest a room type from the furniture placed inside it."""
    return _DEFAULT_RULES.suggest(room, furniture_in_room)
