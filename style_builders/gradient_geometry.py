"""Gradient geometry derived from Figma gradient handle positions."""

import math
from typing import Tuple

from style_builders.base import GradientPaint, Vector
from style_builders.numbers import round_half_up


def gradient_angle(fill: GradientPaint) -> float:
    """Angle in degrees of the origin -> x-axis handle vector.

    Node space is y-down, so 0 points right and 90 points down.
    """
    handles = fill.gradient_handle_positions
    if len(handles) < 2:
        return 0.0
    start, end = handles[0], handles[1]
    return math.degrees(math.atan2(end.y - start.y, end.x - start.x))


def gradient_center(fill: GradientPaint) -> Vector:
    handles = fill.gradient_handle_positions
    return handles[0] if handles else Vector(0.5, 0.5)


def center_percent(fill: GradientPaint) -> Tuple[int, int]:
    """Gradient center as rounded percentages of the node box."""
    center = gradient_center(fill)
    return round_half_up(center.x * 100), round_half_up(center.y * 100)


def is_custom_center(cx: int, cy: int) -> bool:
    """True when the center is more than 5 points away from 50% 50%."""
    return abs(cx - 50) > 5 or abs(cy - 50) > 5


def conic_start_angle(fill: GradientPaint) -> float:
    """Angle of the center -> start-direction handle, in [0, 360)."""
    handles = fill.gradient_handle_positions
    if len(handles) < 3:
        return 0.0
    center, start_direction = handles[0], handles[2]
    angle = math.degrees(math.atan2(start_direction.y - center.y, start_direction.x - center.x))
    return (angle + 360) % 360


def radial_radii_percent(fill: GradientPaint) -> Tuple[float, float]:
    """Ellipse radii (x, y) as percentages of the node box."""
    handles = fill.gradient_handle_positions
    if len(handles) < 3:
        return 50.0, 50.0
    center, x_end, y_end = handles[0], handles[1], handles[2]
    rx = math.hypot(x_end.x - center.x, x_end.y - center.y) * 100
    ry = math.hypot(y_end.x - center.x, y_end.y - center.y) * 100
    return rx, ry
