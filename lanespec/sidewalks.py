"""Sidewalk inference from OSM tags, and traffic direction by position on the road."""

from __future__ import annotations

from typing import Iterable, MutableMapping

from .lane_types import Direction, DrivingSide
from .spec import MapConfig

HIGHWAY = "highway"

_NON_MOTORIZED = ("footway", "path", "pedestrian", "steps", "track")
_MOTORWAYS = ("motorway", "motorway_link")
_JUNCTIONS = ("intersection", "roundabout")
_NO_SIDEWALK_HIGHWAYS = ("service", "cycleway", "pedestrian", "track")
_BOTH_SIDES_WHEN_ONEWAY = ("residential", "living_street")


def _is_any(tags: MutableMapping[str, str], key: str, values: Iterable[str]) -> bool:
    return tags.get(key) in tuple(values)


def infer_sidewalk_tags(tags: MutableMapping[str, str], cfg: MapConfig) -> None:
    """Fill in a ``sidewalk`` tag where none is given, modifying ``tags`` in place.

    Roads that are already tagged with ``sidewalk`` and non-motorized ways are left alone.
    """
    if "sidewalk" in tags:
        return
    if _is_any(tags, HIGHWAY, _NON_MOTORIZED):
        return

    if "sidewalk:left" in tags or "sidewalk:right" in tags:
        # Separately mapped sidewalks on one side: assume present unless tagged "no".
        right = tags.get("sidewalk:right") != "no"
        left = tags.get("sidewalk:left") != "no"
        if right and left:
            value = "both"
        elif right:
            value = "right"
        elif left:
            value = "left"
        else:
            value = "none"
        tags["sidewalk"] = value
    elif (
        _is_any(tags, HIGHWAY, _MOTORWAYS)
        or _is_any(tags, "junction", _JUNCTIONS)
        or tags.get("foot") == "no"
        or _is_any(tags, HIGHWAY, _NO_SIDEWALK_HIGHWAYS)
    ):
        tags["sidewalk"] = "none"
    elif tags.get("oneway") == "yes":
        tags["sidewalk"] = "right" if cfg.driving_side is DrivingSide.RIGHT else "left"
        if (
            _is_any(tags, HIGHWAY, _BOTH_SIDES_WHEN_ONEWAY)
            and tags.get("dual_carriageway") != "yes"
        ):
            tags["sidewalk"] = "both"
    else:
        tags["sidewalk"] = "both"


def traffic_direction(position: int, centre_line: int, driving_side: DrivingSide) -> Direction:
    """The direction of traffic for a lane, following the side of the road it is on.

    ``position`` and ``centre_line`` are lane indices doubled, so a centre line that runs
    through the middle of a lane is odd. A lane on the centre line is forward.
    """
    if position + 1 == centre_line:
        return Direction.FORWARD
    left_of_centre_line = position < centre_line
    driving_left = driving_side is DrivingSide.LEFT
    return Direction.FORWARD if left_of_centre_line == driving_left else Direction.BACKWARD