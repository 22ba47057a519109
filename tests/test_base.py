"""Tests for parsing Figma node JSON into the scene model."""
from style_builders.base import (
    GradientPaint, PaintType, SolidPaint, parse_fills, parse_node, parse_paint, retrieve_top_fill,
)


class TestParsePaint:

    def test_solid(self):
        paint = parse_paint({'type': 'SOLID', 'color': {'r': 1, 'g': 0, 'b': 0}, 'opacity': 0.4})
        assert isinstance(paint, SolidPaint)
        assert paint.color.hex == '#ff0000'
        assert paint.color.a is None
        assert paint.opacity == 0.4
        assert paint.visible is True

    def test_gradient(self, five_stop_fill):
        paint = parse_paint(five_stop_fill)
        assert isinstance(paint, GradientPaint)
        assert paint.type == PaintType.GRADIENT_LINEAR
        assert len(paint.gradient_stops) == 5
        assert paint.gradient_stops[1].color.hex == '#3b82f6'
        assert len(paint.gradient_handle_positions) == 3

    def test_unsupported_types_are_skipped(self):
        assert parse_paint({'type': 'IMAGE'}) is None
        assert parse_fills([{'type': 'VIDEO'}, 'junk', {'type': 'SOLID'}]) == [
            SolidPaint(color=parse_paint({'type': 'SOLID'}).color),
        ]

    def test_fills_from_node_dict(self, linear_fill):
        assert len(parse_fills({'fills': [linear_fill]})) == 1
        assert parse_fills(None) == []


class TestRetrieveTopFill:

    def test_last_visible_wins(self):
        fills = parse_fills([
            {'type': 'SOLID', 'color': {'r': 1, 'g': 0, 'b': 0}},
            {'type': 'SOLID', 'color': {'r': 0, 'g': 1, 'b': 0}},
            {'type': 'SOLID', 'color': {'r': 0, 'g': 0, 'b': 1}, 'visible': False},
        ])
        assert retrieve_top_fill(fills).color.hex == '#00ff00'

    def test_nothing_visible(self):
        assert retrieve_top_fill([]) is None
        assert retrieve_top_fill(parse_fills([{'type': 'SOLID', 'visible': False}])) is None


class TestParseNode:

    def test_tree_and_parent_links(self, rotated_tree):
        root = parse_node(rotated_tree)
        assert root.parent is None
        assert root.blend_mode == 'MULTIPLY'
        assert [c.name for c in root.children] == ['Title', 'Hidden']
        assert all(c.parent is root for c in root.children)
        assert [n.id for n in root.walk()] == ['1:1', '1:2', '1:3']

    def test_defaults(self):
        node = parse_node({'type': 'FRAME'})
        assert node.opacity is None
        assert node.visible is None
        assert node.rotation is None
        assert node.fills == []
        assert node.children == []


class TestMalformedInput:
    """Null or wrongly typed values fall back to Figma defaults."""

    def test_null_gradient_lists(self):
        paints = parse_fills([{'type': 'GRADIENT_LINEAR', 'gradientStops': None,
                               'gradientHandlePositions': None}])
        assert len(paints) == 1
        assert paints[0].gradient_stops == ()
        assert paints[0].gradient_handle_positions == ()

    def test_null_color_channels(self):
        paint = parse_fills([{'type': 'SOLID', 'color': {'r': None, 'g': 0, 'b': 1, 'a': None}}])[0]
        assert paint.color.hex == '#0000ff'
        assert paint.color.a is None

    def test_null_color_and_opacity(self):
        paint = parse_paint({'type': 'SOLID', 'color': None, 'opacity': None})
        assert paint.color.hex == '#000000'
        assert paint.opacity is None

    def test_bad_stop_and_handle_entries_are_skipped(self, linear_fill):
        linear_fill['gradientStops'] = [None, {'position': None, 'color': {'r': 1, 'g': 1, 'b': 1}}, 'x']
        linear_fill['gradientHandlePositions'] = [{'x': None, 'y': 'bad'}, 7]
        paint = parse_paint(linear_fill)
        assert len(paint.gradient_stops) == 1
        assert paint.gradient_stops[0].position == 0.0
        assert [(h.x, h.y) for h in paint.gradient_handle_positions] == [(0.0, 0.0)]

    def test_null_node_opacity_and_rotation(self):
        node = parse_node({'type': 'FRAME', 'opacity': None, 'rotation': 'n/a', 'children': None})
        assert node.opacity is None
        assert node.rotation is None
        assert node.children == []
