import pytest

from lanespec.lane_types import (
    BufferType,
    Direction,
    DrivingSide,
    LaneKind,
    LaneType,
    ParkingType,
)
from lanespec.spec import (
    LaneSpec,
    MapConfig,
    oneway_for_driving,
    typical_lane_width,
    typical_lane_widths,
)

DRIVING = LaneType(LaneKind.DRIVING)
SIDEWALK = LaneType(LaneKind.SIDEWALK)


def spec(lt, direction):
    return LaneSpec(lt=lt, dir=direction, width=3.0)


def test_driving_widths_default_typical():
    widths = typical_lane_widths(DRIVING, "residential")
    assert widths[0] == (3.0, "typical")
    assert [label for _, label in widths] == ["typical", "alley", "narrow", "highway"]


def test_service_road_swaps_first_two():
    normal = typical_lane_widths(DRIVING, "residential")
    service = typical_lane_widths(DRIVING, "service")
    assert service[0] == normal[1]
    assert service[1] == normal[0]
    assert service[2:] == normal[2:]


def test_parking_service_swaps():
    lt = LaneType.parking(ParkingType.DIAGONAL)
    assert typical_lane_widths(lt, "service")[0] == (2.0, "alley")
    assert typical_lane_widths(lt, "road")[0] == (3.0, "full lane")


def test_typical_lane_width_values():
    assert typical_lane_width(SIDEWALK) == 1.5
    assert typical_lane_width(LaneType(LaneKind.SHOULDER)) == 0.5
    assert typical_lane_width(LaneType.buffer(BufferType.CURB)) == 0.1
    assert typical_lane_width(LaneType(LaneKind.SHARED_USE)) == 3.0


def test_every_lane_type_has_a_positive_default():
    lane_types = [LaneType(k) for k in LaneKind if k not in (LaneKind.PARKING, LaneKind.BUFFER)]
    lane_types += [LaneType.parking(p) for p in ParkingType]
    lane_types += [LaneType.buffer(b) for b in BufferType]
    for lt in lane_types:
        widths = typical_lane_widths(lt, "road")
        assert widths
        assert typical_lane_width(lt) == widths[0][0] > 0


def test_bus_widths_ordered():
    widths = typical_lane_widths(LaneType(LaneKind.BUS), "road")
    assert widths[0][0] < widths[1][0]
    assert [label for _, label in widths] == ["minimum", "normal"]


@pytest.mark.parametrize(
    "dirs,expected",
    [
        ([Direction.FORWARD, Direction.FORWARD], Direction.FORWARD),
        ([Direction.BACKWARD], Direction.BACKWARD),
        ([Direction.FORWARD, Direction.BACKWARD], None),
        ([], None),
    ],
)
def test_oneway_for_driving(dirs, expected):
    lanes = [spec(SIDEWALK, Direction.BACKWARD)] + [spec(DRIVING, d) for d in dirs]
    assert oneway_for_driving(lanes) == expected


def test_oneway_ignores_non_driving_lanes():
    lanes = [
        spec(LaneType(LaneKind.BIKING), Direction.BACKWARD),
        spec(DRIVING, Direction.FORWARD),
    ]
    assert oneway_for_driving(lanes) is Direction.FORWARD


def test_map_config_defaults():
    cfg = MapConfig()
    assert cfg.driving_side is DrivingSide.RIGHT
    assert cfg.override_driving_side is None
    assert cfg.country_code == ""
    assert cfg.bikes_can_use_bus_lanes is True
    assert cfg.inferred_sidewalks is False
    assert cfg.parallel_street_parking_spot_length == 8.0
    assert cfg.vehicle_width_for_parking_spots == 3.0
    assert cfg.inferred_kerbs is True
    assert cfg.date_time is None


def test_lane_spec_defaults_and_equality():
    a = LaneSpec(DRIVING, Direction.FORWARD, 3.0)
    b = LaneSpec(DRIVING, Direction.FORWARD, 3.0)
    assert a == b
    assert a.allowed_turns == frozenset()
    assert a.lane is None
    b.dir = Direction.BACKWARD
    assert a != b