"""Adding a single lane of a given type to a road."""

from __future__ import annotations

from typing import List, Optional

from .lane_types import Direction, DrivingSide, LaneKind, LaneType
from .spec import LaneSpec, typical_lane_widths

_OUTSIDE_KINDS = frozenset(
    {LaneKind.BIKING, LaneKind.BUS, LaneKind.PARKING, LaneKind.CONSTRUCTION}
)


def _default_outside_lane_placement(lanes_ltr: List[LaneSpec], direction: Direction) -> int:
    """Place on the side of ``direction``, inside any walkable lane on the outside."""
    if lanes_ltr[0].dir is direction:
        return 1 if lanes_ltr[0].lt.is_walkable() else 0
    if lanes_ltr[-1].lt.is_walkable():
        return len(lanes_ltr) - 1
    return len(lanes_ltr)


def _determine_lane_dir(lanes_ltr: List[LaneSpec], lt: LaneType, minority: bool) -> Direction:
    """The direction with fewer (``minority``) or more lanes of type ``lt``."""
    total = sum(1 for spec in lanes_ltr if spec.lt == lt)
    forward = sum(1 for spec in lanes_ltr if spec.lt == lt and spec.dir is Direction.FORWARD)
    mostly_backward = total > 0 and forward / total <= 0.5
    if mostly_backward:
        return Direction.FORWARD if minority else Direction.BACKWARD
    return Direction.BACKWARD if minority else Direction.FORWARD


def _buffer_position(lanes_ltr: List[LaneSpec]) -> tuple:
    """Find a bike lane missing a buffer next to it."""
    fwd_bike: Optional[int] = None
    back_bike: Optional[int] = None
    for idx, spec in enumerate(lanes_ltr):
        if spec.lt.kind is LaneKind.BIKING:
            if spec.dir is Direction.FORWARD:
                fwd_bike = idx
            else:
                back_bike = idx

    direction, idx = Direction.FORWARD, 0
    # Assumes forward lanes are on the right of the road.
    if fwd_bike is not None and fwd_bike > 0:
        if lanes_ltr[fwd_bike - 1].lt.kind is not LaneKind.BUFFER:
            direction, idx = Direction.FORWARD, fwd_bike
    if back_bike is not None and back_bike + 1 < len(lanes_ltr):
        if lanes_ltr[back_bike + 1].lt.kind is not LaneKind.BUFFER:
            direction, idx = Direction.BACKWARD, back_bike + 1
    return direction, idx


def add_new_lane(
    lanes_ltr: List[LaneSpec],
    lt: LaneType,
    highway_type: str,
    driving_side: DrivingSide,
) -> int:
    """Insert a new lane of type ``lt`` where it most likely belongs; return its index."""
    kind = lt.kind
    if kind is LaneKind.DRIVING:
        direction = _determine_lane_dir(lanes_ltr, lt, True)
        # In the middle, where the direction changes.
        idx = next(
            (
                i + 1
                for i, (left, right) in enumerate(zip(lanes_ltr, lanes_ltr[1:]))
                if left.dir is not right.dir
            ),
            len(lanes_ltr),
        )
    elif kind in _OUTSIDE_KINDS:
        existing = next((spec for spec in lanes_ltr if spec.lt == lt), None)
        if existing is not None:
            # Default to the other side of the road from an existing lane.
            direction = existing.dir.opposite()
        else:
            # Otherwise the majority direction, to help with one-way streets.
            direction = _determine_lane_dir(lanes_ltr, lt, False)
        idx = _default_outside_lane_placement(lanes_ltr, direction)
    elif kind is LaneKind.SIDEWALK:
        if not lanes_ltr[0].lt.is_walkable():
            idx = 0
            direction = (
                Direction.BACKWARD if driving_side is DrivingSide.RIGHT else Direction.FORWARD
            )
        else:
            idx = len(lanes_ltr)
            direction = (
                Direction.FORWARD if driving_side is DrivingSide.RIGHT else Direction.BACKWARD
            )
    elif kind is LaneKind.BUFFER:
        direction, idx = _buffer_position(lanes_ltr)
    else:
        raise ValueError(f"cannot add a new {kind.value} lane")

    width = typical_lane_widths(lt, highway_type)[0][0]
    lanes_ltr.insert(idx, LaneSpec(lt=lt, dir=direction, width=width))
    return idx