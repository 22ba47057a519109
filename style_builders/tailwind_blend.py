"""Tailwind classes for opacity, blend mode, visibility and rotation."""

from typing import List, Optional

from style_builders.base import SceneNode
from style_builders.conversion_tables import nearest_opacity
from style_builders.diagnostics import Diagnostics
from style_builders.html_blend import BLEND_MODES, relative_rotation
from style_builders.settings import StyleSettings

# Rotations with a named utility in Tailwind v3.
V3_ROTATE_SCALE = (0, 1, 2, 3, 6, 12, 45, 90, 180)


def tailwind_opacity(node: SceneNode) -> str:
    """`opacity-N`; nodes that round to 100 keep full opacity."""
    if node.opacity is None or node.opacity == 1:
        return ''
    value = nearest_opacity(node.opacity)
    if value == 100:
        return ''
    return f"opacity-{value}"


def tailwind_blend_mode(node: SceneNode) -> str:
    blend_mode = BLEND_MODES.get(node.blend_mode or '')
    return f"mix-blend-{blend_mode}" if blend_mode else ''


def tailwind_visibility(node: SceneNode) -> str:
    return 'invisible' if node.visible is False else ''


def tailwind_rotation(node: SceneNode, settings: StyleSettings,
                      diagnostics: Optional[Diagnostics] = None) -> List[str]:
    """Rotate class plus `origin-top-left`, or [] for an unrotated node.

    v4 accepts any integer angle (`rotate-15`, `-rotate-15`); v3 only has the
    named scale and falls back to `rotate-[15deg]`.
    """
    rotation = relative_rotation(node, diagnostics)
    if rotation == 0:
        return []

    sign = '-' if rotation < 0 else ''
    if settings.use_tailwind4 or abs(rotation) in V3_ROTATE_SCALE:
        rotate_class = f"{sign}rotate-{abs(rotation)}"
    else:
        rotate_class = f"rotate-[{rotation}deg]"
    return [rotate_class, 'origin-top-left']
