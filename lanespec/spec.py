"""Lane specifications, map configuration and typical lane widths."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, FrozenSet, Iterable, List, Optional, Tuple

from .lane_types import BufferType, Direction, DrivingSide, LaneKind, LaneType
from .turns import TurnDirection

FOOT = 0.3048

NORMAL_LANE_THICKNESS = 3.0
SERVICE_ROAD_LANE_THICKNESS = 2.0
SIDEWALK_THICKNESS = 1.5
SHOULDER_THICKNESS = 0.5


@dataclass
class LaneSpec:
    """One lane of a road: its type, direction, width in metres and turn restrictions.

    An empty ``allowed_turns`` means no restrictions are indicated.
    """

    lt: LaneType
    dir: Direction
    width: float
    allowed_turns: FrozenSet[TurnDirection] = field(default_factory=frozenset)
    lane: Optional[Any] = None


@dataclass
class MapConfig:
    """Settings that influence how lanes are derived from tags."""

    driving_side: DrivingSide = DrivingSide.RIGHT
    override_driving_side: Optional[DrivingSide] = None
    country_code: str = ""
    bikes_can_use_bus_lanes: bool = True
    inferred_sidewalks: bool = False
    parallel_street_parking_spot_length: float = 8.0
    vehicle_width_for_parking_spots: float = 3.0
    turn_on_red: bool = True
    include_railroads: bool = True
    inferred_kerbs: bool = True
    date_time: Optional[datetime] = None


_BUFFER_WIDTHS = {
    BufferType.STRIPES: 1.5,
    BufferType.FLEX_POSTS: 0.5,
    BufferType.PLANTERS: 2.0,
    BufferType.JERSEY_BARRIER: 1.5,
    BufferType.CURB: 0.1,
    BufferType.VERGE: 2.0,
}


def typical_lane_widths(lt: LaneType, highway_type: str) -> List[Tuple[float, str]]:
    """Likely widths in metres for a lane type; the first one is the default."""
    kind = lt.kind
    if kind is LaneKind.DRIVING:
        choices = [
            (NORMAL_LANE_THICKNESS, "typical"),
            (SERVICE_ROAD_LANE_THICKNESS, "alley"),
            (8.0 * FOOT, "narrow"),
            (12.0 * FOOT, "highway"),
        ]
        if highway_type == "service":
            choices[0], choices[1] = choices[1], choices[0]
        return choices
    if kind is LaneKind.BIKING:
        return [(1.5, "absolute minimum"), (2.0, "standard")]
    if kind is LaneKind.BUS:
        return [(10.0 * FOOT, "minimum"), (12.0 * FOOT, "normal")]
    if kind is LaneKind.PARKING:
        choices = [
            (NORMAL_LANE_THICKNESS, "full lane"),
            (SERVICE_ROAD_LANE_THICKNESS, "alley"),
            (7.0 * FOOT, "narrow"),
            (15.0 * FOOT, "loading zone"),
        ]
        if highway_type == "service":
            choices[0], choices[1] = choices[1], choices[0]
        return choices
    if kind in (LaneKind.SHARED_LEFT_TURN, LaneKind.CONSTRUCTION, LaneKind.LIGHT_RAIL):
        return [(NORMAL_LANE_THICKNESS, "default")]
    if kind is LaneKind.SIDEWALK:
        return [(SIDEWALK_THICKNESS, "default"), (6.0 * FOOT, "wide")]
    if kind is LaneKind.SHOULDER:
        return [(SHOULDER_THICKNESS, "default")]
    if kind is LaneKind.BUFFER:
        return [(_BUFFER_WIDTHS[lt.subtype], "default")]
    if kind is LaneKind.FOOTWAY:
        return [(2.0, "default")]
    if kind is LaneKind.SHARED_USE:
        return [(3.0, "default")]
    raise ValueError(f"no widths known for {lt}")


def typical_lane_width(lt: LaneType) -> float:
    """A reasonable default width, without any context on locale or tags."""
    return typical_lane_widths(lt, "road")[0][0]


def oneway_for_driving(lanes: Iterable[LaneSpec]) -> Optional[Direction]:
    """The one-way direction of the driving lanes, or None if bidirectional or undriveable."""
    directions = {spec.dir for spec in lanes if spec.lt.kind is LaneKind.DRIVING}
    if len(directions) == 1:
        return directions.pop()
    return None