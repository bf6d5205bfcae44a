"""Parsing of the OSM ``placement`` scheme."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Mapping, Optional

from .lane_types import Direction


class PlacementError(ValueError):
    """Raised for a placement value that cannot be understood."""


@dataclass(frozen=True)
class LtrLaneNum:
    """A lane by its left-to-right position among the lanes in one direction."""

    direction: Direction
    number: int

    def reverse(self) -> "LtrLaneNum":
        """The same numbered lane in the opposite direction."""
        return LtrLaneNum(self.direction.opposite(), self.number)


class PositionKind(enum.Enum):
    CENTER = "Center"
    FULL_WIDTH_CENTER = "FullWidthCenter"
    SEPARATION = "Separation"
    LEFT_OF = "LeftOf"
    MIDDLE_OF = "MiddleOf"
    RIGHT_OF = "RightOf"


_LANE_POSITIONS = frozenset({PositionKind.LEFT_OF, PositionKind.MIDDLE_OF, PositionKind.RIGHT_OF})


@dataclass(frozen=True)
class RoadPosition:
    """A position within the width of a roadway; lane-relative kinds name a lane."""

    kind: PositionKind
    lane: Optional[LtrLaneNum] = None

    def __post_init__(self) -> None:
        if (self.kind in _LANE_POSITIONS) != (self.lane is not None):
            raise ValueError(f"{self.kind.value} position and lane do not agree")

    def reverse(self) -> "RoadPosition":
        """The same position interpreted from the other direction."""
        if self.lane is None:
            return self
        return RoadPosition(self.kind, self.lane.reverse())


class PlacementKind(enum.Enum):
    CONSISTENT = "Consistent"
    VARYING = "Varying"
    TRANSITION = "Transition"


@dataclass(frozen=True)
class Placement:
    """Placement of a line along a road.

    Consistent placements use ``start`` only; varying ones use ``start`` and ``end``;
    transitions use neither.
    """

    kind: PlacementKind
    start: Optional[RoadPosition] = None
    end: Optional[RoadPosition] = None


_LANE_KINDS = {
    "left_of": PositionKind.LEFT_OF,
    "middle_of": PositionKind.MIDDLE_OF,
    "right_of": PositionKind.RIGHT_OF,
}

_LANE_NUMBER = re.compile(r"\+?[0-9]+")


def parse_road_position(value: str) -> RoadPosition:
    """Parse a road position from a ``placement`` value, treating the direction as forward."""
    if value == "":
        return RoadPosition(PositionKind.CENTER)
    if value == "separation":
        return RoadPosition(PositionKind.SEPARATION)
    kind, sep, lane_str = value.partition(":")
    if not sep:
        raise PlacementError(f"unknown placement value: {value}")
    if not _LANE_NUMBER.fullmatch(lane_str):
        raise PlacementError(f"bad lane number: {lane_str}")
    try:
        position = _LANE_KINDS[kind]
    except KeyError:
        raise PlacementError(f"unknown lane position specifier: {kind}") from None
    return RoadPosition(position, LtrLaneNum(Direction.FORWARD, int(lane_str)))


def _varying(tags: Mapping[str, str], prefix: str, backward: bool) -> Placement:
    start = parse_road_position(tags.get(f"{prefix}:start", ""))
    end = parse_road_position(tags.get(f"{prefix}:end", ""))
    if backward:
        start, end = start.reverse(), end.reverse()
    return Placement(PlacementKind.VARYING, start, end)


def _has_any(tags: Mapping[str, str], prefix: str) -> bool:
    return f"{prefix}:start" in tags or f"{prefix}:end" in tags


def parse_placement(tags: Mapping[str, str]) -> Placement:
    """Parse a placement from OSM tags; the first interpretation found wins."""
    if "placement" in tags:
        value = tags["placement"]
        if value == "transition":
            return Placement(PlacementKind.TRANSITION)
        return Placement(PlacementKind.CONSISTENT, parse_road_position(value))
    if _has_any(tags, "placement"):
        return _varying(tags, "placement", backward=False)
    if "placement:forward" in tags:
        return Placement(PlacementKind.CONSISTENT, parse_road_position(tags["placement:forward"]))
    if _has_any(tags, "placement:forward"):
        return _varying(tags, "placement:forward", backward=False)
    if "placement:backward" in tags:
        position = parse_road_position(tags["placement:backward"]).reverse()
        return Placement(PlacementKind.CONSISTENT, position)
    if _has_any(tags, "placement:backward"):
        return _varying(tags, "placement:backward", backward=True)
    return Placement(PlacementKind.CONSISTENT, RoadPosition(PositionKind.CENTER))