"""Lane types, directions and related classifications."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union


class LaneKind(enum.Enum):
    """The broad kind of a lane, without parking or buffer details."""

    DRIVING = "Driving"
    PARKING = "Parking"
    SIDEWALK = "Sidewalk"
    # Walkable like a sidewalk, but very narrow. Models pedestrians walking on roads
    # without sidewalks.
    SHOULDER = "Shoulder"
    BIKING = "Biking"
    BUS = "Bus"
    SHARED_LEFT_TURN = "SharedLeftTurn"
    CONSTRUCTION = "Construction"
    LIGHT_RAIL = "LightRail"
    BUFFER = "Buffer"
    FOOTWAY = "Footway"
    SHARED_USE = "SharedUse"


class ParkingType(enum.Enum):
    PARALLEL = "Parallel"
    DIAGONAL = "Diagonal"
    PERPENDICULAR = "Perpendicular"


class BufferType(enum.Enum):
    STRIPES = "Stripes"
    FLEX_POSTS = "FlexPosts"
    PLANTERS = "Planters"
    JERSEY_BARRIER = "JerseyBarrier"
    CURB = "Curb"
    VERGE = "Verge"


class TrafficClass(enum.Enum):
    """A broad categorisation of traffic by the infrastructure it requires."""

    PEDESTRIAN = "Pedestrian"
    BICYCLE = "Bicycle"
    MOTOR = "Motor"
    RAIL = "Rail"


class Direction(enum.Enum):
    FORWARD = "Forward"
    BACKWARD = "Backward"

    def opposite(self) -> "Direction":
        return Direction.BACKWARD if self is Direction.FORWARD else Direction.FORWARD

    def __str__(self) -> str:
        return "forwards" if self is Direction.FORWARD else "backwards"


class DrivingSide(enum.Enum):
    RIGHT = "Right"
    LEFT = "Left"


_MOVING_VEHICLES = frozenset(
    {LaneKind.DRIVING, LaneKind.BIKING, LaneKind.BUS, LaneKind.LIGHT_RAIL, LaneKind.SHARED_USE}
)

_ANY_MOVEMENT = frozenset(
    {
        LaneKind.DRIVING,
        LaneKind.BIKING,
        LaneKind.BUS,
        LaneKind.SIDEWALK,
        LaneKind.SHOULDER,
        LaneKind.LIGHT_RAIL,
        LaneKind.FOOTWAY,
        LaneKind.SHARED_USE,
    }
)

_LANES_SUFFIX = frozenset(
    {
        LaneKind.DRIVING,
        LaneKind.BIKING,
        LaneKind.BUS,
        LaneKind.SHARED_LEFT_TURN,
        LaneKind.CONSTRUCTION,
    }
)

_ROADWAY = frozenset(
    {
        LaneKind.DRIVING,
        LaneKind.BIKING,
        LaneKind.BUS,
        LaneKind.PARKING,
        LaneKind.SHOULDER,
        LaneKind.SHARED_LEFT_TURN,
        LaneKind.CONSTRUCTION,
        LaneKind.LIGHT_RAIL,
        LaneKind.BUFFER,
    }
)

_WALKABLE = frozenset(
    {LaneKind.SIDEWALK, LaneKind.SHOULDER, LaneKind.FOOTWAY, LaneKind.SHARED_USE}
)

_TRAFFIC_CLASS = {
    LaneKind.FOOTWAY: TrafficClass.PEDESTRIAN,
    LaneKind.SIDEWALK: TrafficClass.PEDESTRIAN,
    LaneKind.SHARED_USE: TrafficClass.BICYCLE,
    LaneKind.BIKING: TrafficClass.BICYCLE,
    LaneKind.BUS: TrafficClass.MOTOR,
    LaneKind.SHARED_LEFT_TURN: TrafficClass.MOTOR,
    LaneKind.DRIVING: TrafficClass.MOTOR,
    LaneKind.LIGHT_RAIL: TrafficClass.RAIL,
}

_DESCRIPTIONS = {
    LaneKind.DRIVING: "a general-purpose driving lane",
    LaneKind.BIKING: "a bike lane",
    LaneKind.BUS: "a bus-only lane",
    LaneKind.PARKING: "an on-street parking lane",
    LaneKind.SIDEWALK: "a sidewalk",
    LaneKind.SHOULDER: "a shoulder",
    LaneKind.SHARED_LEFT_TURN: "a shared left-turn lane",
    LaneKind.CONSTRUCTION: "a lane that's closed for construction",
    LaneKind.LIGHT_RAIL: "a light rail track",
    LaneKind.FOOTWAY: "a footway",
    LaneKind.SHARED_USE: "a shared-use walking/cycling path",
}

_BUFFER_DESCRIPTIONS = {
    BufferType.STRIPES: "striped pavement",
    BufferType.FLEX_POSTS: "flex post barriers",
    BufferType.PLANTERS: "planter barriers",
    BufferType.JERSEY_BARRIER: "a Jersey barrier",
    BufferType.CURB: "a raised curb",
    BufferType.VERGE: "a grassy verge",
}

_CHARS = {
    LaneKind.DRIVING: "d",
    LaneKind.BIKING: "b",
    LaneKind.BUS: "B",
    LaneKind.PARKING: "p",
    LaneKind.SIDEWALK: "s",
    LaneKind.SHOULDER: "S",
    LaneKind.SHARED_LEFT_TURN: "C",
    LaneKind.CONSTRUCTION: "x",
    LaneKind.LIGHT_RAIL: "l",
    LaneKind.BUFFER: "|",
    LaneKind.FOOTWAY: "f",
    LaneKind.SHARED_USE: "F",
}


@dataclass(frozen=True)
class LaneType:
    """A lane type; parking and buffer lanes carry their subtype."""

    kind: LaneKind
    subtype: Optional[Union[ParkingType, BufferType]] = None

    def __post_init__(self) -> None:
        if self.kind is LaneKind.PARKING:
            if not isinstance(self.subtype, ParkingType):
                raise ValueError("a parking lane needs a ParkingType")
        elif self.kind is LaneKind.BUFFER:
            if not isinstance(self.subtype, BufferType):
                raise ValueError("a buffer lane needs a BufferType")
        elif self.subtype is not None:
            raise ValueError(f"{self.kind.value} lanes take no subtype")

    @staticmethod
    def parking(parking_type: ParkingType) -> "LaneType":
        return LaneType(LaneKind.PARKING, parking_type)

    @staticmethod
    def buffer(buffer_type: BufferType) -> "LaneType":
        return LaneType(LaneKind.BUFFER, buffer_type)

    def is_for_moving_vehicles(self) -> bool:
        return self.kind in _MOVING_VEHICLES

    def supports_any_movement(self) -> bool:
        return self.kind in _ANY_MOVEMENT

    def is_tagged_by_lanes_suffix(self) -> bool:
        """Whether the lane is a travel lane represented in OSM ``*:lanes`` tags."""
        return self.kind in _LANES_SUFFIX

    def is_roadway(self) -> bool:
        """Whether the lane is part of the contiguous sealed surface of the road."""
        if self.kind is LaneKind.BUFFER and self.subtype in (BufferType.CURB, BufferType.VERGE):
            return False
        return self.kind in _ROADWAY

    def is_walkable(self) -> bool:
        return self.kind in _WALKABLE

    def traffic_class(self) -> Optional[TrafficClass]:
        """The most significant class of traffic travelling in this lane."""
        return _TRAFFIC_CLASS.get(self.kind)

    def describe(self) -> str:
        if self.kind is LaneKind.BUFFER:
            return _BUFFER_DESCRIPTIONS[self.subtype]
        return _DESCRIPTIONS[self.kind]

    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    @staticmethod
    def from_short_name(name: str) -> Optional["LaneType"]:
        return _FROM_SHORT_NAME.get(name)

    def to_char(self) -> str:
        """A single character for the lane type, for use in tests."""
        return _CHARS[self.kind]

    @staticmethod
    def from_char(char: str) -> "LaneType":
        """The inverse of ``to_char``; picks one buffer and parking type."""
        try:
            return _FROM_CHAR[char]
        except KeyError:
            raise ValueError(f"from_char({char}) undefined") from None


_SHORT_NAMES = {
    LaneType(LaneKind.DRIVING): "driving lane",
    LaneType(LaneKind.BIKING): "bike lane",
    LaneType(LaneKind.BUS): "bus lane",
    LaneType.parking(ParkingType.PARALLEL): "parallel parking lane",
    LaneType.parking(ParkingType.DIAGONAL): "diagonal parking lane",
    LaneType.parking(ParkingType.PERPENDICULAR): "perpendicular parking lane",
    LaneType(LaneKind.SIDEWALK): "sidewalk",
    LaneType(LaneKind.SHOULDER): "shoulder",
    LaneType(LaneKind.SHARED_LEFT_TURN): "left-turn lane",
    LaneType(LaneKind.CONSTRUCTION): "construction",
    LaneType(LaneKind.LIGHT_RAIL): "light rail track",
    LaneType.buffer(BufferType.STRIPES): "stripes",
    LaneType.buffer(BufferType.FLEX_POSTS): "flex posts",
    LaneType.buffer(BufferType.PLANTERS): "planters",
    LaneType.buffer(BufferType.JERSEY_BARRIER): "Jersey barrier",
    LaneType.buffer(BufferType.CURB): "curb",
    LaneType.buffer(BufferType.VERGE): "verge",
    LaneType(LaneKind.FOOTWAY): "footway",
    LaneType(LaneKind.SHARED_USE): "shared-use path",
}

_FROM_SHORT_NAME = {name: lt for lt, name in _SHORT_NAMES.items()}

_FROM_CHAR = {
    "d": LaneType(LaneKind.DRIVING),
    "b": LaneType(LaneKind.BIKING),
    "B": LaneType(LaneKind.BUS),
    "p": LaneType.parking(ParkingType.PARALLEL),
    "s": LaneType(LaneKind.SIDEWALK),
    "S": LaneType(LaneKind.SHOULDER),
    "C": LaneType(LaneKind.SHARED_LEFT_TURN),
    "x": LaneType(LaneKind.CONSTRUCTION),
    "l": LaneType(LaneKind.LIGHT_RAIL),
    "|": LaneType.buffer(BufferType.FLEX_POSTS),
    "f": LaneType(LaneKind.FOOTWAY),
    "F": LaneType(LaneKind.SHARED_USE),
}