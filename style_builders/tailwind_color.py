"""
Tailwind color and gradient classes.

Covers solid colors (`bg-red-500/50`), gradient stops (`from-*`, `via-*`,
`to-*`) and linear, radial and conic gradients for both Tailwind v3 and v4.

Dialect differences handled here:
- v3 expresses opacity of palette colors with a second utility
  (`bg-red-500 bg-opacity-50`); v4 always uses slash syntax.
- v3 gradients are `bg-gradient-to-*`; v4 gradients are `bg-linear-to-*`,
  `bg-radial` and `bg-conic-*` and accept explicit stop positions.
- v3 has no radial/conic utilities, so those are emitted as arbitrary
  `bg-[...]` values wrapping the CSS gradient.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from style_builders.base import (
    ColorStop, GradientPaint, Paint, PaintType, SolidPaint, retrieve_top_fill,
)
from style_builders.conversion_tables import get_color_info, nearest_opacity
from style_builders.gradient_geometry import (
    center_percent, conic_start_angle, gradient_angle, is_custom_center,
)
from style_builders.html_color import (
    html_angular_gradient, html_diamond_gradient, html_radial_gradient,
)
from style_builders.numbers import nearest_value, round_half_up
from style_builders.opacity import effective_opacity
from style_builders.settings import StyleSettings

# Minimum distance from the implied default before a stop position is emitted.
POSITION_TOLERANCE = 0.05
# Float slack so that 1.0 - 0.95 counts as exactly 0.05.
_EPSILON = 1e-9


# ---------------------------------------------------------------------------
# Solid colors
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TailwindColor:
    export_value: str
    color_name: str
    color_type: str
    hex: str
    meta: str = ''


def tailwind_color(fill: SolidPaint, settings: StyleSettings) -> TailwindColor:
    """Tailwind color value object for a solid fill (background usage)."""
    info = get_color_info(fill, settings)
    return TailwindColor(
        export_value=tailwind_solid_color(fill, 'bg', settings),
        color_name=info.color_name,
        color_type=info.color_type,
        hex=info.hex,
        meta=info.meta,
    )


def tailwind_solid_color(fill: Union[SolidPaint, ColorStop], kind: str, settings: StyleSettings) -> str:
    """Color class for a solid fill or stop, e.g. `text-red-500/50`.

    Args:
        fill: SolidPaint or ColorStop.
        kind: How the color is used ('bg', 'text', 'border', ...).
        settings: Conversion settings (selects the Tailwind dialect).

    Returns:
        The color class, with opacity when the effective opacity is not 1.
    """
    color_name = get_color_info(fill, settings).color_name
    opacity = effective_opacity(fill)

    if settings.use_tailwind4 or color_name.startswith('['):
        suffix = f"/{nearest_opacity(opacity)}" if opacity != 1.0 else ''
        return f"{kind}-{color_name}{suffix}"

    if opacity != 1.0:
        return f"{kind}-{color_name} {kind}-opacity-{nearest_opacity(opacity)}"
    return f"{kind}-{color_name}"


def tailwind_gradient_stop(stop: ColorStop, settings: StyleSettings, parent_opacity: float = 1.0) -> str:
    """Color token for a gradient stop; opacity always uses slash syntax."""
    color_name = get_color_info(stop, settings).color_name
    opacity = effective_opacity(stop, parent_opacity)
    suffix = f"/{nearest_opacity(opacity)}" if opacity != 1.0 else ''
    return f"{color_name}{suffix}"


def tailwind_color_from_fills(fills: Optional[List[Paint]], kind: str, settings: StyleSettings) -> str:
    """Flat color class for the top fill.

    Gradients are approximated by their first stop. Returns '' when there is
    no usable fill.
    """
    fill = retrieve_top_fill(fills)
    if fill is None:
        return ''
    if isinstance(fill, SolidPaint):
        return tailwind_solid_color(fill, kind, settings)
    if fill.gradient_stops:
        parent_opacity = fill.opacity if fill.opacity is not None else 1.0
        return f"{kind}-{tailwind_gradient_stop(fill.gradient_stops[0], settings, parent_opacity)}"
    return ''


# ---------------------------------------------------------------------------
# Direction and stop positions
# ---------------------------------------------------------------------------

DIRECTION_CLASSES = {
    0: ('bg-gradient-to-r', 'bg-linear-to-r'),
    45: ('bg-gradient-to-br', 'bg-linear-to-br'),
    90: ('bg-gradient-to-b', 'bg-linear-to-b'),
    135: ('bg-gradient-to-bl', 'bg-linear-to-bl'),
    -45: ('bg-gradient-to-tr', 'bg-linear-to-tr'),
    -90: ('bg-gradient-to-t', 'bg-linear-to-t'),
    -135: ('bg-gradient-to-tl', 'bg-linear-to-tl'),
    180: ('bg-gradient-to-l', 'bg-linear-to-l'),
}

SNAP_ANGLES = (0, 45, 90, 135, 180, -45, -90, -135, -180)


def snap_gradient_angle(angle: float) -> int:
    """Snap to the 8 compass directions; -180 is reported as 180."""
    snapped = int(nearest_value(angle, SNAP_ANGLES))
    return 180 if snapped == -180 else snapped


def gradient_direction_class(angle: float, settings: StyleSettings) -> str:
    snapped = snap_gradient_angle(angle)

    entry = DIRECTION_CLASSES.get(snapped)
    if entry:
        return entry[1] if settings.use_tailwind4 else entry[0]

    if settings.use_tailwind4:
        return f"bg-linear-{round_half_up(angle % 360) % 360}"

    return 'bg-gradient-to-l' if snapped == 180 else 'bg-gradient-to-r'


def needs_position_override(actual: float, expected: float) -> bool:
    return abs(actual - expected) - POSITION_TOLERANCE > _EPSILON


def stop_position_modifier(position: float, expected: float,
                           unit: str = '%', multiplier: float = 100) -> str:
    """` 30%`-style position suffix, or '' when the default is close enough."""
    if needs_position_override(position, expected):
        return f" {round_half_up(position * multiplier)}{unit}"
    return ''


# ---------------------------------------------------------------------------
# Gradient assembly
# ---------------------------------------------------------------------------

def generate_gradient_stop(prefix: str, stop: ColorStop, global_opacity: float, expected: float,
                           settings: StyleSettings, unit: str = '%', multiplier: float = 100) -> str:
    """`from-red-500`, plus ` from 30%` in v4 when the position is not the default."""
    color_part = f"{prefix}-{tailwind_gradient_stop(stop, settings, global_opacity)}"
    if not settings.use_tailwind4:
        return color_part

    modifier = stop_position_modifier(stop.position, expected, unit, multiplier)
    return f"{color_part} {prefix}{modifier}" if modifier else color_part


def _gradient_stops(fill: GradientPaint, settings: StyleSettings,
                    unit: str = '%', multiplier: float = 100) -> List[str]:
    """from/via/to fragments. Stops between the second and the last are dropped."""
    stops = fill.gradient_stops
    opacity = fill.opacity if fill.opacity is not None else 1.0
    if not stops:
        return []

    parts = [generate_gradient_stop('from', stops[0], opacity, 0, settings, unit, multiplier)]
    if len(stops) >= 3:
        parts.append(generate_gradient_stop('via', stops[1], opacity, 0.5, settings, unit, multiplier))
    if len(stops) >= 2:
        parts.append(generate_gradient_stop('to', stops[-1], opacity, 1, settings, unit, multiplier))
    return parts


def _join(base_class: str, parts: List[str]) -> str:
    if not parts:
        return ''
    return ' '.join(part for part in [base_class, *parts] if part)


def tailwind_gradient(fill: GradientPaint, settings: StyleSettings) -> str:
    """Linear gradient classes."""
    direction = gradient_direction_class(gradient_angle(fill), settings)
    return _join(direction, _gradient_stops(fill, settings))


def tailwind_radial_gradient(fill: GradientPaint, settings: StyleSettings) -> str:
    """v4 radial gradient classes."""
    cx, cy = center_percent(fill)
    base_class = f"bg-radial-[at_{cx}%_{cy}%]" if is_custom_center(cx, cy) else 'bg-radial'
    return _join(base_class, _gradient_stops(fill, settings))


def tailwind_conic_gradient(fill: GradientPaint, settings: StyleSettings) -> str:
    """v4 conic gradient classes; stop positions are in degrees."""
    angle = round_half_up(conic_start_angle(fill)) % 360
    cx, cy = center_percent(fill)
    if is_custom_center(cx, cy):
        base_class = f"bg-conic-[from_{angle}deg_at_{cx}%_{cy}%]"
    else:
        base_class = f"bg-conic-{angle}"
    return _join(base_class, _gradient_stops(fill, settings, 'deg', 360))


def tailwind_arbitrary_gradient(css_gradient: str) -> str:
    """Wrap a CSS gradient as `bg-[...]`; whitespace runs become `_`."""
    return f"bg-[{'_'.join(css_gradient.split())}]"


def tailwind_gradient_from_fills(fills: Optional[List[Paint]], settings: StyleSettings) -> str:
    """Gradient classes for the top fill, '' when it is not a gradient."""
    fill = retrieve_top_fill(fills)
    if not isinstance(fill, GradientPaint) or not fill.gradient_stops:
        return ''

    if fill.type == PaintType.GRADIENT_LINEAR:
        return tailwind_gradient(fill, settings)

    if settings.use_tailwind4:
        if fill.type == PaintType.GRADIENT_RADIAL:
            return tailwind_radial_gradient(fill, settings)
        if fill.type == PaintType.GRADIENT_ANGULAR:
            return tailwind_conic_gradient(fill, settings)
        # No v4 utility approximates a diamond gradient.
        return ''

    if fill.type == PaintType.GRADIENT_RADIAL:
        return tailwind_arbitrary_gradient(html_radial_gradient(fill))
    if fill.type == PaintType.GRADIENT_ANGULAR:
        return tailwind_arbitrary_gradient(html_angular_gradient(fill))
    if fill.type == PaintType.GRADIENT_DIAMOND:
        return tailwind_arbitrary_gradient(html_diamond_gradient(fill))
    return ''
