"""Turn directions following the OSM ``turn`` scheme."""

from __future__ import annotations

import enum
from typing import FrozenSet, Optional


class TurnParseError(ValueError):
    """Raised for a value that is not a known turn direction."""


class TurnDirection(enum.Enum):
    THROUGH = "Through"
    LEFT = "Left"
    RIGHT = "Right"
    SLIGHT_LEFT = "SlightLeft"
    SLIGHT_RIGHT = "SlightRight"
    SHARP_LEFT = "SharpLeft"
    SHARP_RIGHT = "SharpRight"
    MERGE_LEFT = "MergeLeft"
    MERGE_RIGHT = "MergeRight"
    REVERSE = "Reverse"

    def turn_angle(self) -> float:
        """The turn angle in degrees; negative is to the left."""
        return _ANGLES[self]

    def is_merge(self) -> bool:
        return self in (TurnDirection.MERGE_LEFT, TurnDirection.MERGE_RIGHT)

    def tag_value(self) -> str:
        return _TAG_VALUES[self]

    @staticmethod
    def parse(value: str) -> Optional["TurnDirection"]:
        """Parse a single turn direction; ``""`` and ``"none"`` give None."""
        if value in ("", "none"):
            return None
        try:
            return _PARSE[value]
        except KeyError:
            raise TurnParseError(f"unknown turn direction: {value}") from None

    @staticmethod
    def parse_set(value: str) -> FrozenSet["TurnDirection"]:
        """Parse a ``;``-separated set of turn directions."""
        parsed = (TurnDirection.parse(part) for part in value.split(";"))
        return frozenset(d for d in parsed if d is not None)


_ANGLES = {
    TurnDirection.THROUGH: 0.0,
    TurnDirection.SLIGHT_RIGHT: 45.0,
    TurnDirection.SLIGHT_LEFT: -45.0,
    TurnDirection.MERGE_RIGHT: 45.0,
    TurnDirection.MERGE_LEFT: -45.0,
    TurnDirection.RIGHT: 90.0,
    TurnDirection.LEFT: -90.0,
    TurnDirection.SHARP_RIGHT: 135.0,
    TurnDirection.SHARP_LEFT: -135.0,
    TurnDirection.REVERSE: 180.0,
}

_TAG_VALUES = {
    TurnDirection.THROUGH: "through",
    TurnDirection.LEFT: "left",
    TurnDirection.RIGHT: "right",
    TurnDirection.SLIGHT_LEFT: "slight_left",
    TurnDirection.SLIGHT_RIGHT: "slight_right",
    TurnDirection.SHARP_LEFT: "sharp_left",
    TurnDirection.SHARP_RIGHT: "sharp_right",
    TurnDirection.MERGE_LEFT: "merge_left",
    TurnDirection.MERGE_RIGHT: "merge_right",
    TurnDirection.REVERSE: "reverse",
}

_PARSE = {
    "through": TurnDirection.THROUGH,
    "left": TurnDirection.LEFT,
    "right": TurnDirection.RIGHT,
    "slight_left": TurnDirection.SLIGHT_LEFT,
    "slight_right": TurnDirection.SLIGHT_RIGHT,
    "sharp_left": TurnDirection.SHARP_LEFT,
    "sharp_right": TurnDirection.SHARP_RIGHT,
    "merge_to_left": TurnDirection.MERGE_LEFT,
    "merge_to_right": TurnDirection.MERGE_RIGHT,
    "reverse": TurnDirection.REVERSE,
}