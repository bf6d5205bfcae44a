"""Compact string forms of lane lists, like ``"spddps"`` with ``"vv^^^^"``."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .lane_types import Direction, LaneType
from .spec import LaneSpec


def lanes_from_strings(lane_types: str, directions: str) -> List[LaneSpec]:
    """Build lanes from a string of lane characters and one of ``^`` (forward) or other (backward).

    Widths are zero.
    """
    if len(lane_types) != len(directions):
        raise ValueError(
            f"lane types {lane_types!r} and directions {directions!r} differ in length"
        )
    return [
        LaneSpec(
            lt=LaneType.from_char(lt),
            dir=Direction.FORWARD if d == "^" else Direction.BACKWARD,
            width=0.0,
        )
        for lt, d in zip(lane_types, directions)
    ]


def lanes_to_strings(lanes: Iterable[LaneSpec]) -> Tuple[str, str]:
    """The lane-type and direction strings describing a list of lanes."""
    lanes = list(lanes)
    lane_types = "".join(spec.lt.to_char() for spec in lanes)
    directions = "".join("^" if spec.dir is Direction.FORWARD else "v" for spec in lanes)
    return lane_types, directions