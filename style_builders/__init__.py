"""Figma paint, gradient, blend and rotation to CSS / Tailwind converters."""

from style_builders.base import (
    ColorStop, ColorValue, GradientPaint, Paint, PaintType, SceneNode, SolidPaint, Vector,
    parse_fills, parse_node, parse_paint, retrieve_top_fill,
)
from style_builders.diagnostics import Diagnostics
from style_builders.node_styles import NodeStyles, build_node_styles, walk_node_styles
from style_builders.settings import Framework, StyleSettings, TailwindDialect

__all__ = [
    'ColorStop', 'ColorValue', 'GradientPaint', 'Paint', 'PaintType', 'SceneNode', 'SolidPaint',
    'Vector', 'parse_fills', 'parse_node', 'parse_paint', 'retrieve_top_fill',
    'Diagnostics',
    'NodeStyles', 'build_node_styles', 'walk_node_styles',
    'Framework', 'StyleSettings', 'TailwindDialect',
]
