import pytest

from lanespec.lane_types import (
    BufferType,
    Direction,
    LaneKind,
    LaneType,
    ParkingType,
    TrafficClass,
)

LANE_CHARS = "dbBpsSCxl|fF"


def _all_lane_types():
    plain = [
        LaneType(kind)
        for kind in LaneKind
        if kind not in (LaneKind.PARKING, LaneKind.BUFFER)
    ]
    return (
        plain
        + [LaneType.parking(p) for p in ParkingType]
        + [LaneType.buffer(b) for b in BufferType]
    )


ALL = _all_lane_types()


@pytest.mark.parametrize("char", list(LANE_CHARS))
def test_char_round_trip(char):
    assert LaneType.from_char(char).to_char() == char


def test_from_char_picks_defaults():
    assert LaneType.from_char("p") == LaneType.parking(ParkingType.PARALLEL)
    assert LaneType.from_char("|") == LaneType.buffer(BufferType.FLEX_POSTS)


def test_from_char_invalid():
    with pytest.raises(ValueError):
        LaneType.from_char("z")


@pytest.mark.parametrize("lt", ALL)
def test_short_name_round_trip(lt):
    assert LaneType.from_short_name(lt.short_name()) == lt


def test_short_names_are_distinct():
    plain_kinds = [k for k in LaneKind if k not in (LaneKind.PARKING, LaneKind.BUFFER)]
    names = (
        [LaneType(kind).short_name() for kind in plain_kinds]
        + [LaneType.parking(p).short_name() for p in ParkingType]
        + [LaneType.buffer(b).short_name() for b in BufferType]
    )
    assert len(names) == 19
    assert len(set(names)) == 19


def test_from_short_name_unknown():
    assert LaneType.from_short_name("hovercraft lane") is None


def test_specific_short_names():
    assert LaneType.parking(ParkingType.DIAGONAL).short_name() == "diagonal parking lane"
    assert LaneType.buffer(BufferType.JERSEY_BARRIER).short_name() == "Jersey barrier"


def test_describe():
    assert LaneType(LaneKind.DRIVING).describe() == "a general-purpose driving lane"
    assert LaneType.buffer(BufferType.CURB).describe() == "a raised curb"
    assert LaneType.parking(ParkingType.PERPENDICULAR).describe() == "an on-street parking lane"


def test_walkable_set():
    walkable = {c for c in LANE_CHARS if LaneType.from_char(c).is_walkable()}
    assert walkable == {"s", "S", "f", "F"}


def test_moving_vehicles_implies_any_movement():
    moving = {c for c in LANE_CHARS if LaneType.from_char(c).is_for_moving_vehicles()}
    movement = {c for c in LANE_CHARS if LaneType.from_char(c).supports_any_movement()}
    assert moving == {"d", "b", "B", "l", "F"}
    assert movement == {"d", "b", "B", "l", "F", "s", "S", "f"}
    assert moving <= movement


def test_roadway_buffers():
    assert LaneType.buffer(BufferType.CURB).is_roadway() is False
    assert LaneType.buffer(BufferType.VERGE).is_roadway() is False
    assert LaneType.buffer(BufferType.STRIPES).is_roadway() is True
    assert LaneType(LaneKind.SIDEWALK).is_roadway() is False


def test_lanes_suffix():
    assert LaneType(LaneKind.SHARED_LEFT_TURN).is_tagged_by_lanes_suffix() is True
    assert LaneType(LaneKind.LIGHT_RAIL).is_tagged_by_lanes_suffix() is False


def test_traffic_class():
    assert LaneType(LaneKind.SIDEWALK).traffic_class() is TrafficClass.PEDESTRIAN
    assert LaneType(LaneKind.SHARED_USE).traffic_class() is TrafficClass.BICYCLE
    assert LaneType(LaneKind.SHARED_LEFT_TURN).traffic_class() is TrafficClass.MOTOR
    assert LaneType(LaneKind.LIGHT_RAIL).traffic_class() is TrafficClass.RAIL
    assert LaneType.parking(ParkingType.PARALLEL).traffic_class() is None


def test_subtype_validation():
    with pytest.raises(ValueError):
        LaneType(LaneKind.PARKING)
    with pytest.raises(ValueError):
        LaneType(LaneKind.BUFFER, ParkingType.PARALLEL)
    with pytest.raises(ValueError):
        LaneType(LaneKind.DRIVING, BufferType.CURB)


def test_direction_opposite_and_str():
    assert Direction.FORWARD.opposite() is Direction.BACKWARD
    assert Direction.BACKWARD.opposite() is Direction.FORWARD
    assert str(Direction.FORWARD) == "forwards"
    assert str(Direction.BACKWARD) == "backwards"