from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from reportlab.lib.units import cm, inch, mm


class Unit(str, Enum):
    POINTS = "pt"
    INCHES = "in"
    MILLIMETERS = "mm"
    CENTIMETERS = "cm"


# Points per unit.
_POINTS_PER_UNIT = {
    Unit.POINTS: 1.0,
    Unit.INCHES: inch,
    Unit.MILLIMETERS: mm,
    Unit.CENTIMETERS: cm,
}

_UNIT_ALIASES = {
    "pt": Unit.POINTS,
    "point": Unit.POINTS,
    "points": Unit.POINTS,
    "in": Unit.INCHES,
    "inch": Unit.INCHES,
    "inches": Unit.INCHES,
    "mm": Unit.MILLIMETERS,
    "millimeter": Unit.MILLIMETERS,
    "millimeters": Unit.MILLIMETERS,
    "cm": Unit.CENTIMETERS,
    "centimeter": Unit.CENTIMETERS,
    "centimeters": Unit.CENTIMETERS,
}

Matrix = tuple[float, float, float, float, float, float]


def _factor(unit: Unit | str | None) -> float:
    # Anything unrecognised is treated as points.
    if isinstance(unit, Unit):
        return _POINTS_PER_UNIT[unit]
    if isinstance(unit, str):
        resolved = _UNIT_ALIASES.get(unit.strip().lower())
        if resolved is not None:
            return _POINTS_PER_UNIT[resolved]
    return 1.0


def to_points(value: float, unit: Unit | str | None) -> float:
    """Convert ``value`` expressed in ``unit`` to PDF points (1/72 inch)."""
    return value * _factor(unit)


def from_points(points: float, unit: Unit | str | None) -> float:
    """Convert ``points`` back into ``unit``."""
    return points / _factor(unit)


def to_device_coordinates(
    x: float, y: float, page_height: float, use_top_left_origin: bool = False
) -> tuple[float, float]:
    """
    Map caller coordinates onto PDF user space (origin bottom-left).

    Coordinates outside the page are passed through untouched.
    """
    if use_top_left_origin:
        return x, page_height - y
    return x, y


@dataclass
class PageLayout:
    """Coordinate convention used when placing content on a page."""

    use_top_left_origin: bool = False
    unit: Unit = Unit.POINTS

    def to_device_coordinates(self, x: float, y: float, page_height: float) -> tuple[float, float]:
        return to_device_coordinates(
            to_points(x, self.unit),
            to_points(y, self.unit),
            page_height,
            self.use_top_left_origin,
        )


def scale_matrix(sx: float, sy: float) -> Matrix:
    return (sx, 0.0, 0.0, sy, 0.0, 0.0)


def rotation_matrix(angle_degrees: float) -> Matrix:
    radians = angle_degrees * math.pi / 180.0
    cos = math.cos(radians)
    sin = math.sin(radians)
    return (cos, sin, -sin, cos, 0.0, 0.0)


def translation_matrix(dx: float, dy: float) -> Matrix:
    return (1.0, 0.0, 0.0, 1.0, dx, dy)


def multiply_matrices(m1: Matrix, m2: Matrix) -> Matrix:
    """
    Compose two affine transforms: apply ``m1`` first, then ``m2``.

    Matches the effect of emitting ``m2 cm`` followed by ``m1 cm``.
    """
    a1, b1, c1, d1, e1, f1 = m1
    a2, b2, c2, d2, e2, f2 = m2
    return (
        a1 * a2 + b1 * c2,
        a1 * b2 + b1 * d2,
        c1 * a2 + d1 * c2,
        c1 * b2 + d1 * d2,
        e1 * a2 + f1 * c2 + e2,
        e1 * b2 + f1 * d2 + f2,
    )
