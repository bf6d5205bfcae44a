"""Toggling a road between one-way and bidirectional driving."""

from __future__ import annotations

from dataclasses import replace
from typing import List

from .lane_types import Direction, DrivingSide, LaneKind
from .spec import LaneSpec, oneway_for_driving

_NARROW_LANE_WIDTH = 1.5


def _first_driving_index(lanes_ltr: List[LaneSpec]) -> int:
    return next(idx for idx, spec in enumerate(lanes_ltr) if spec.lt.kind is LaneKind.DRIVING)


def toggle_road_direction(lanes_ltr: List[LaneSpec], driving_side: DrivingSide) -> None:
    """Cycle the driving lanes through one-way forwards, one-way backwards and bidirectional.

    Modifies ``lanes_ltr``. Applying this three times in a row restores the road. A one-way
    road with a single lane is split into two narrow lanes to become bidirectional.
    """
    leftmost_dir = Direction.BACKWARD if driving_side is DrivingSide.RIGHT else Direction.FORWARD
    oneway_dir = oneway_for_driving(lanes_ltr)
    num_driving_lanes = sum(1 for spec in lanes_ltr if spec.lt.kind is LaneKind.DRIVING)

    if oneway_dir is Direction.BACKWARD and num_driving_lanes == 1:
        idx = _first_driving_index(lanes_ltr)
        lanes_ltr[idx].width *= 0.5
        lanes_ltr.insert(idx, replace(lanes_ltr[idx]))
        num_driving_lanes = 2

    if oneway_dir is None and num_driving_lanes == 2:
        idx = _first_driving_index(lanes_ltr)
        # Two very narrow lanes came from splitting one lane; merge them again.
        if lanes_ltr[idx].width < _NARROW_LANE_WIDTH:
            del lanes_ltr[idx]
            lanes_ltr[idx].width *= 2.0

    driving_lanes = (spec for spec in lanes_ltr if spec.lt.kind is LaneKind.DRIVING)
    for so_far, lane in enumerate(driving_lanes, start=1):
        if oneway_dir is Direction.FORWARD:
            lane.dir = Direction.BACKWARD
        elif oneway_dir is Direction.BACKWARD:
            # Split the directions down the middle.
            if so_far / num_driving_lanes <= 0.5:
                lane.dir = leftmost_dir
            else:
                lane.dir = leftmost_dir.opposite()
        else:
            lane.dir = Direction.FORWARD