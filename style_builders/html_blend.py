"""
Inline style fragments for opacity, blend mode, visibility and rotation.

Every function returns `property: value` strings, or the React
`camelCase: 'value'` form when `is_jsx` is set. An empty string means the
property equals the browser default and is omitted.
"""

import logging
from typing import List, Optional, Union

from style_builders.base import SceneNode
from style_builders.diagnostics import Diagnostics
from style_builders.numbers import number_to_fixed_string, round_half_up, round_to_nearest_hundredth

logger = logging.getLogger(__name__)

NESTED_ROTATION_WARNING = "Rotated elements within rotated containers are not currently supported."

BLEND_MODES = {
    'MULTIPLY': 'multiply',
    'SCREEN': 'screen',
    'OVERLAY': 'overlay',
    'DARKEN': 'darken',
    'LIGHTEN': 'lighten',
    'COLOR_DODGE': 'color-dodge',
    'COLOR_BURN': 'color-burn',
    'HARD_LIGHT': 'hard-light',
    'SOFT_LIGHT': 'soft-light',
    'DIFFERENCE': 'difference',
    'EXCLUSION': 'exclusion',
    'HUE': 'hue',
    'SATURATION': 'saturation',
    'COLOR': 'color',
    'LUMINOSITY': 'luminosity',
}


def _jsx_property(prop: str) -> str:
    head, *rest = prop.split('-')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


def format_with_jsx(prop: str, is_jsx: bool, value: Union[int, float, str]) -> str:
    """Format one style declaration.

    Numbers get a `px` unit in CSS and stay unitless in JSX:
    ('margin-top', False, 4) -> 'margin-top: 4px',
    ('margin-top', True, 4) -> 'marginTop: 4'.
    """
    if isinstance(value, (int, float)):
        if is_jsx:
            return f"{_jsx_property(prop)}: {number_to_fixed_string(value)}"
        return f"{prop}: {number_to_fixed_string(value)}px"
    if is_jsx:
        return f"{_jsx_property(prop)}: '{value}'"
    return f"{prop}: {value}"


def html_opacity(node: SceneNode, is_jsx: bool) -> str:
    if node.opacity is not None and node.opacity != 1:
        # Unitless, so format_with_jsx (which appends px) is not used.
        return f"opacity: {number_to_fixed_string(node.opacity)}"
    return ''


def html_blend_mode(node: SceneNode, is_jsx: bool) -> str:
    """`mix-blend-mode` for the node; NORMAL and PASS_THROUGH emit nothing."""
    blend_mode = BLEND_MODES.get(node.blend_mode or '')
    if blend_mode:
        return format_with_jsx('mix-blend-mode', is_jsx, blend_mode)
    return ''


def html_visibility(node: SceneNode, is_jsx: bool) -> str:
    # Hidden nodes are still rendered so groups keep their layout; only the
    # node itself is marked hidden.
    if node.visible is False:
        return format_with_jsx('visibility', is_jsx, 'hidden')
    return ''


def parent_rotation(node: SceneNode) -> float:
    parent = node.parent
    if parent is not None and parent.rotation is not None:
        return parent.rotation
    return 0.0


def relative_rotation(node: SceneNode, diagnostics: Optional[Diagnostics] = None) -> int:
    """Node rotation relative to its parent, `round(parent - node)` degrees.

    Figma reports a rotated group's children as rotated too, so the parent's
    rotation is taken out. When both the parent and the relative rotation
    are non-zero the output is best effort and a warning is recorded.
    """
    parent = parent_rotation(node)
    rotation = round_half_up(parent - (node.rotation or 0))

    if round_to_nearest_hundredth(parent) != 0 and round_to_nearest_hundredth(rotation) != 0:
        if diagnostics is not None:
            diagnostics.add_warning(NESTED_ROTATION_WARNING)
        else:
            logger.warning("%s (node %r)", NESTED_ROTATION_WARNING, node.name)

    return rotation


def html_rotation(node: SceneNode, is_jsx: bool, diagnostics: Optional[Diagnostics] = None) -> List[str]:
    """`transform: rotate(...)` and `transform-origin: top left`, or []."""
    rotation = relative_rotation(node, diagnostics)
    if rotation != 0:
        return [
            format_with_jsx('transform', is_jsx, f"rotate({number_to_fixed_string(rotation)}deg)"),
            format_with_jsx('transform-origin', is_jsx, 'top left'),
        ]
    return []
