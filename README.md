# lanespec

Describe the lanes of an OpenStreetMap road segment, left to right, and edit
them the way a street designer would.

## Installing

    pip install lanespec

For running the tests:

    pip install "lanespec[test]"
    pytest

## What is in it

- `lanespec.lane_types`: `LaneType` (a `LaneKind` plus a `ParkingType` or
  `BufferType` for parking and buffer lanes), `Direction`, `DrivingSide` and
  `TrafficClass`. Lane types know whether they are walkable, carry moving
  vehicles or belong to the roadway, can describe themselves
  (`describe`, `short_name`, `from_short_name`) and have a one-character code
  (`d`, `b`, `B`, `p`, `s`, `S`, `C`, `x`, `l`, `|`, `f`, `F`) through
  `to_char` and `from_char`. An unknown character raises `ValueError`.
- `lanespec.turns`: `TurnDirection`, parsed from OSM `turn` values with
  `TurnDirection.parse` (`""` and `"none"` give `None`) and
  `TurnDirection.parse_set` (`"through;right"` gives a frozenset). Each
  direction has a `turn_angle` in degrees and a `tag_value`. Unknown values
  raise `TurnParseError`.
- `lanespec.spec`: `LaneSpec` (type, direction, width in metres, allowed
  turns) and `MapConfig`, plus `typical_lane_widths`, `typical_lane_width`
  and `oneway_for_driving`.
- `lanespec.placement`: parse the OSM `placement` scheme with
  `parse_road_position` and `parse_placement`, giving `RoadPosition`,
  `LtrLaneNum` and `Placement` values. Bad values raise `PlacementError`.
- `lanespec.lane_strings`: build lanes from compact strings and back with
  `lanes_from_strings("sdds", "vv^^")` and `lanes_to_strings(lanes)`.
- Editing, all changing the list they are given in place:
  `bike_lanes.maybe_add_bike_lanes`, `new_lane.add_new_lane` (which returns
  the index of the new lane) and `one_ways.toggle_road_direction`.
- `lanespec.sidewalks`: `infer_sidewalk_tags` fills in a `sidewalk` tag in a
  tag dictionary where none is mapped, and `traffic_direction` picks a
  direction for a lane from its position relative to the centre line.

## Example

    from lanespec.bike_lanes import maybe_add_bike_lanes
    from lanespec.lane_strings import lanes_from_strings, lanes_to_strings
    from lanespec.lane_types import BufferType, DrivingSide

    lanes = lanes_from_strings("spddps", "vvv^^^")
    maybe_add_bike_lanes(lanes, BufferType.FLEX_POSTS, DrivingSide.RIGHT)
    print(lanes_to_strings(lanes))   # ('sb|dd|bs', 'vvvv^^^^')

## What it does not do

The package does not turn a full set of OSM tags into a list of lanes: there
is no function that reads `lanes`, `cycleway`, `parking:lane`, `busway` and
similar tags and produces `LaneSpec` values. Lanes are built from compact
strings or by hand, and then classified and edited. It has no command-line
tool and reads no map files.