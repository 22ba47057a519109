"""
Per-node style assembly.

Combines the fill, opacity, blend, visibility and rotation builders into
one inline style string (HTML) or class string (Tailwind) per node.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from style_builders.base import SceneNode
from style_builders.diagnostics import Diagnostics
from style_builders.html_blend import (
    format_with_jsx, html_blend_mode, html_opacity, html_rotation, html_visibility,
)
from style_builders.html_color import html_color_from_fills, html_gradient_from_fills
from style_builders.settings import Framework, StyleSettings
from style_builders.tailwind_blend import (
    tailwind_blend_mode, tailwind_opacity, tailwind_rotation, tailwind_visibility,
)
from style_builders.tailwind_color import tailwind_color_from_fills, tailwind_gradient_from_fills

logger = logging.getLogger(__name__)

TEXT_NODE_TYPES = {'TEXT'}


@dataclass
class NodeStyles:
    node_id: str
    name: str
    node_type: str
    fragments: List[str] = field(default_factory=list)
    styles: str = ''


def _html_fragments(node: SceneNode, settings: StyleSettings, diagnostics: Diagnostics) -> List[str]:
    is_jsx = settings.jsx
    fragments = []

    if node.type in TEXT_NODE_TYPES:
        color = html_color_from_fills(node.fills)
        if color:
            fragments.append(format_with_jsx('color', is_jsx, color))
    else:
        background = html_gradient_from_fills(node.fills) or html_color_from_fills(node.fills)
        if background:
            fragments.append(format_with_jsx('background', is_jsx, background))

    fragments.append(html_opacity(node, is_jsx))
    fragments.append(html_blend_mode(node, is_jsx))
    fragments.append(html_visibility(node, is_jsx))
    fragments.extend(html_rotation(node, is_jsx, diagnostics))
    return [f for f in fragments if f]


def _tailwind_fragments(node: SceneNode, settings: StyleSettings, diagnostics: Diagnostics) -> List[str]:
    fragments = []

    if node.type in TEXT_NODE_TYPES:
        fragments.append(tailwind_color_from_fills(node.fills, 'text', settings))
    else:
        fragments.append(
            tailwind_gradient_from_fills(node.fills, settings)
            or tailwind_color_from_fills(node.fills, 'bg', settings)
        )

    fragments.append(tailwind_opacity(node))
    fragments.append(tailwind_blend_mode(node))
    fragments.append(tailwind_visibility(node))
    fragments.extend(tailwind_rotation(node, settings, diagnostics))
    return [f for f in fragments if f]


def build_node_styles(node: SceneNode, settings: StyleSettings,
                      diagnostics: Optional[Diagnostics] = None) -> NodeStyles:
    """Style string for a single node in the configured framework."""
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    if settings.framework == Framework.HTML:
        fragments = _html_fragments(node, settings, diagnostics)
        styles = (', ' if settings.jsx else '; ').join(fragments)
    else:
        fragments = _tailwind_fragments(node, settings, diagnostics)
        styles = ' '.join(fragments)

    return NodeStyles(
        node_id=node.id,
        name=node.name,
        node_type=node.type,
        fragments=fragments,
        styles=styles,
    )


def walk_node_styles(root: SceneNode, settings: StyleSettings) -> Tuple[List[NodeStyles], Diagnostics]:
    """Styles for `root` and every descendant, depth first.

    Returns the per-node styles together with the warnings of this pass.
    """
    diagnostics = Diagnostics()
    results = [build_node_styles(node, settings, diagnostics) for node in root.walk()]
    logger.debug("Built styles for %d nodes (%d warnings)", len(results), len(diagnostics))
    return results, diagnostics
