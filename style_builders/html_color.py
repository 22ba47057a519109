"""
CSS color and gradient values.

These produce raw CSS (`#hex`, `rgba(...)`, `linear-gradient(...)`, ...).
The HTML builder uses them directly and the Tailwind v3 builder wraps the
gradients in arbitrary-value classes.
"""

from typing import List, Optional

from style_builders.base import (
    ColorStop, ColorValue, GradientPaint, Paint, PaintType, SolidPaint, retrieve_top_fill,
)
from style_builders.gradient_geometry import (
    center_percent, conic_start_angle, gradient_angle, radial_radii_percent,
)
from style_builders.numbers import number_to_fixed_string, round_half_up
from style_builders.opacity import effective_opacity


def html_color(color: ColorValue, alpha: float = 1.0) -> str:
    """Hex when fully opaque, rgba() otherwise."""
    if alpha >= 1:
        return color.hex
    return color.rgba(alpha)


def html_color_from_fill(fill: Paint) -> str:
    if isinstance(fill, SolidPaint):
        return html_color(fill.color, effective_opacity(fill))
    if fill.gradient_stops:
        stop = fill.gradient_stops[0]
        return html_color(stop.color, effective_opacity(stop, fill.opacity))
    return ''


def html_color_from_fills(fills: Optional[List[Paint]]) -> str:
    """Flat CSS color of the top fill ('' when there is none)."""
    fill = retrieve_top_fill(fills)
    if fill is None:
        return ''
    return html_color_from_fill(fill)


# ---------------------------------------------------------------------------
# Gradients
# ---------------------------------------------------------------------------

def _stop_color(stop: ColorStop, fill: GradientPaint) -> str:
    return html_color(stop.color, effective_opacity(stop, fill.opacity))


def _stops(fill: GradientPaint, unit: str = '%', multiplier: float = 100) -> str:
    return ', '.join(
        f"{_stop_color(stop, fill)} {number_to_fixed_string(stop.position * multiplier)}{unit}"
        for stop in fill.gradient_stops
    )


def html_linear_gradient(fill: GradientPaint) -> str:
    # CSS angles start at "to top"; handle angles start at "to right".
    css_angle = round_half_up(gradient_angle(fill) + 90) % 360
    return f"linear-gradient({css_angle}deg, {_stops(fill)})"


def html_radial_gradient(fill: GradientPaint) -> str:
    cx, cy = center_percent(fill)
    rx, ry = radial_radii_percent(fill)
    return (
        f"radial-gradient(ellipse {number_to_fixed_string(rx)}% {number_to_fixed_string(ry)}% "
        f"at {cx}% {cy}%, {_stops(fill)})"
    )


def html_angular_gradient(fill: GradientPaint) -> str:
    cx, cy = center_percent(fill)
    angle = round_half_up(conic_start_angle(fill)) % 360
    return f"conic-gradient(from {angle}deg at {cx}% {cy}%, {_stops(fill, 'deg', 360)})"


def html_diamond_gradient(fill: GradientPaint) -> str:
    """Diamond gradient as four linear gradients, one per quadrant."""
    stops = _stops(fill)
    quadrants = ('bottom right', 'bottom left', 'top left', 'top right')
    return ', '.join(
        f"linear-gradient(to {corner}, {stops}) {corner} / 50% 50% no-repeat"
        for corner in quadrants
    )


def html_gradient_from_fills(fills: Optional[List[Paint]]) -> str:
    """CSS gradient for the top fill, '' when it is not a gradient."""
    fill = retrieve_top_fill(fills)
    if not isinstance(fill, GradientPaint) or not fill.gradient_stops:
        return ''
    if fill.type == PaintType.GRADIENT_LINEAR:
        return html_linear_gradient(fill)
    if fill.type == PaintType.GRADIENT_RADIAL:
        return html_radial_gradient(fill)
    if fill.type == PaintType.GRADIENT_ANGULAR:
        return html_angular_gradient(fill)
    if fill.type == PaintType.GRADIENT_DIAMOND:
        return html_diamond_gradient(fill)
    return ''
