"""Adding bike lanes to an existing road."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from .lane_types import BufferType, Direction, DrivingSide, LaneKind, LaneType
from .spec import LaneSpec, typical_lane_width


def _first_index(side: List[LaneSpec], kind: LaneKind) -> Optional[int]:
    return next((idx for idx, spec in enumerate(side) if spec.lt.kind is kind), None)


def _add_to_side(
    side: List[LaneSpec], direction: Direction, buffer_type: Optional[BufferType]
) -> None:
    """Add a bike lane to one side, given with its outermost lane first."""
    if any(spec.lt.kind is LaneKind.BIKING for spec in side):
        return

    parking_lane = _first_index(side, LaneKind.PARKING)
    first_driving_lane = _first_index(side, LaneKind.DRIVING)
    bus_lane = _first_index(side, LaneKind.BUS)
    num_driving_lanes = sum(1 for spec in side if spec.lt.kind is LaneKind.DRIVING)

    # On a one-way road, the off-side has no driving lanes and gets no bike lane.
    if parking_lane is not None:
        if num_driving_lanes == 0:
            return
        idx = parking_lane
    elif bus_lane is not None and num_driving_lanes > 1:
        # Drop a driving lane, then put the bike lane on the outside of the bus lane.
        del side[first_driving_lane]
        side.insert(bus_lane, replace(side[bus_lane]))
        idx = bus_lane
    elif num_driving_lanes > 1:
        idx = first_driving_lane
    else:
        return

    bike = LaneType(LaneKind.BIKING)
    side[idx] = LaneSpec(lt=bike, dir=direction, width=typical_lane_width(bike))
    if buffer_type is not None:
        buffer = LaneType.buffer(buffer_type)
        side.insert(idx + 1, LaneSpec(lt=buffer, dir=direction, width=typical_lane_width(buffer)))


def maybe_add_bike_lanes(
    lanes_ltr: List[LaneSpec],
    buffer_type: Optional[BufferType],
    driving_side: DrivingSide,
) -> None:
    """Add a bike lane on each side of the road where there is room, modifying ``lanes_ltr``.

    Parking is replaced first; otherwise, with several driving lanes, the outermost driving
    lane is. Bike lanes go on the outside of bus lanes. An optional buffer separates the new
    bike lane from the lanes inside it.
    """
    # Split into two sides, each listed from the outermost lane inwards.
    fwd_side = [spec for spec in lanes_ltr if spec.dir is Direction.FORWARD]
    back_side = [spec for spec in lanes_ltr if spec.dir is not Direction.FORWARD]
    if driving_side is DrivingSide.RIGHT:
        fwd_side.reverse()
    else:
        back_side.reverse()

    _add_to_side(fwd_side, Direction.FORWARD, buffer_type)
    _add_to_side(back_side, Direction.BACKWARD, buffer_type)

    if driving_side is DrivingSide.RIGHT:
        lanes_ltr[:] = back_side + fwd_side[::-1]
    else:
        lanes_ltr[:] = fwd_side + back_side[::-1]