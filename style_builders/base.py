"""
Scene model shared by all style builders.

Figma node JSON (plugin API shape) is parsed once into small frozen
dataclasses so every builder works on typed paints instead of raw dicts.
Parsing never raises: missing keys fall back to Figma defaults and
unsupported paint types are skipped.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from style_builders.numbers import number_to_fixed_string

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PaintType(str, Enum):
    """Paint kinds the style builders understand."""
    SOLID = "SOLID"
    GRADIENT_LINEAR = "GRADIENT_LINEAR"
    GRADIENT_RADIAL = "GRADIENT_RADIAL"
    GRADIENT_ANGULAR = "GRADIENT_ANGULAR"
    GRADIENT_DIAMOND = "GRADIENT_DIAMOND"


GRADIENT_TYPES = (
    PaintType.GRADIENT_LINEAR,
    PaintType.GRADIENT_RADIAL,
    PaintType.GRADIENT_ANGULAR,
    PaintType.GRADIENT_DIAMOND,
)


# ---------------------------------------------------------------------------
# Paint model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ColorValue:
    """RGB color with channels in [0, 1] and an optional alpha channel."""
    r: float
    g: float
    b: float
    a: Optional[float] = None

    @property
    def alpha(self) -> float:
        return 1.0 if self.a is None else self.a

    @property
    def rgb255(self) -> Tuple[int, int, int]:
        return (
            int(round(self.r * 255)),
            int(round(self.g * 255)),
            int(round(self.b * 255)),
        )

    @property
    def hex(self) -> str:
        """Lowercase `#rrggbb`; alpha is never encoded."""
        r, g, b = self.rgb255
        return f"#{r:02x}{g:02x}{b:02x}"

    def rgba(self, opacity: float) -> str:
        r, g, b = self.rgb255
        return f"rgba({r}, {g}, {b}, {number_to_fixed_string(opacity)})"


@dataclass(frozen=True)
class Vector:
    """2D point in normalized node space (0..1 on both axes, y down)."""
    x: float
    y: float


@dataclass(frozen=True)
class ColorStop:
    position: float
    color: ColorValue


@dataclass(frozen=True)
class SolidPaint:
    color: ColorValue
    opacity: Optional[float] = None
    visible: bool = True

    @property
    def type(self) -> PaintType:
        return PaintType.SOLID


@dataclass(frozen=True)
class GradientPaint:
    """Gradient paint.

    Handles are ordered origin/center, x-axis end, y-axis end.
    """
    type: PaintType
    gradient_stops: Tuple[ColorStop, ...] = ()
    gradient_handle_positions: Tuple[Vector, ...] = ()
    opacity: Optional[float] = None
    visible: bool = True


Paint = Union[SolidPaint, GradientPaint]


# ---------------------------------------------------------------------------
# Scene node
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class SceneNode:
    """The node attributes the style builders read.

    `rotation` is in degrees, counter-clockwise-positive as the plugin API
    reports it (CSS rotate() is clockwise, so emitters negate it). `parent`
    is filled in by `parse_node` and never mutated afterwards.
    """
    id: str = ''
    name: str = ''
    type: str = ''
    opacity: Optional[float] = None
    blend_mode: Optional[str] = None
    visible: Optional[bool] = None
    rotation: Optional[float] = None
    fills: List[Paint] = field(default_factory=list)
    children: List['SceneNode'] = field(default_factory=list)
    parent: Optional['SceneNode'] = field(default=None, repr=False)

    def walk(self):
        """Yield this node and its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _optional_float(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _float(value: Any, default: float) -> float:
    result = _optional_float(value)
    return default if result is None else result


def _dict_items(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def parse_color(data: Optional[Dict[str, Any]]) -> ColorValue:
    data = data if isinstance(data, dict) else {}
    return ColorValue(
        r=_float(data.get('r'), 0.0),
        g=_float(data.get('g'), 0.0),
        b=_float(data.get('b'), 0.0),
        a=_optional_float(data.get('a')),
    )


def parse_paint(data: Dict[str, Any]) -> Optional[Paint]:
    """Parse one Figma paint dict. Returns None for unsupported paints."""
    raw_type = data.get('type', '')
    try:
        paint_type = PaintType(raw_type)
    except ValueError:
        logger.debug("Skipping unsupported paint type %r", raw_type)
        return None

    opacity = _optional_float(data.get('opacity'))
    visible = data.get('visible', True) is not False

    if paint_type == PaintType.SOLID:
        return SolidPaint(color=parse_color(data.get('color')), opacity=opacity, visible=visible)

    stops = tuple(
        ColorStop(position=_float(stop.get('position'), 0.0), color=parse_color(stop.get('color')))
        for stop in _dict_items(data.get('gradientStops'))
    )
    handles = tuple(
        Vector(x=_float(h.get('x'), 0.0), y=_float(h.get('y'), 0.0))
        for h in _dict_items(data.get('gradientHandlePositions'))
    )
    return GradientPaint(
        type=paint_type,
        gradient_stops=stops,
        gradient_handle_positions=handles,
        opacity=opacity,
        visible=visible,
    )


def parse_fills(data: Any) -> List[Paint]:
    """Parse a list of paints, or the `fills` of a node dict."""
    if isinstance(data, dict):
        data = data.get('fills', [])
    if not isinstance(data, list):
        return []
    paints = []
    for item in data:
        if not isinstance(item, dict):
            continue
        paint = parse_paint(item)
        if paint is not None:
            paints.append(paint)
    return paints


def parse_node(data: Dict[str, Any], parent: Optional[SceneNode] = None) -> SceneNode:
    """Parse a node dict (and its children) into a SceneNode tree."""
    visible = data.get('visible')
    node = SceneNode(
        id=str(data.get('id', '')),
        name=data.get('name', ''),
        type=data.get('type', ''),
        opacity=_optional_float(data.get('opacity')),
        blend_mode=data.get('blendMode'),
        visible=bool(visible) if visible is not None else None,
        rotation=_optional_float(data.get('rotation')),
        fills=parse_fills(data.get('fills')),
        parent=parent,
    )
    for child in data.get('children', []) or []:
        if isinstance(child, dict):
            node.children.append(parse_node(child, parent=node))
    return node


def retrieve_top_fill(fills: Optional[List[Paint]]) -> Optional[Paint]:
    """Return the top-most visible paint.

    Figma stores paints bottom-to-top, so the last visible one wins.
    """
    if not fills:
        return None
    for paint in reversed(fills):
        if paint.visible:
            return paint
    return None
