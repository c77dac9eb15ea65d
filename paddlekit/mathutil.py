"""Small math helpers: angle conversion and a 2D vector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

PI = 3.1415926535


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180.0 / PI


@dataclass(frozen=True)
class Vector2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vector2"]


Vector2.ZERO = Vector2(0.0, 0.0)