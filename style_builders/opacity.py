"""Effective opacity of a paint or gradient stop."""

from typing import Optional, Union

from style_builders.base import ColorStop, GradientPaint, SolidPaint


def effective_opacity(
    fill: Union[SolidPaint, GradientPaint, ColorStop],
    parent_opacity: Optional[float] = None,
) -> float:
    """Multiply parent opacity, paint opacity and color alpha.

    Any factor that is missing counts as 1.0. Inputs are expected in [0, 1];
    the result is not clamped.
    """
    result = parent_opacity if parent_opacity is not None else 1.0

    opacity = getattr(fill, 'opacity', None)
    if opacity is not None:
        result *= opacity

    color = getattr(fill, 'color', None)
    if color is not None and color.a is not None:
        result *= color.a

    return result
