"""Tests for per-node style assembly and tree walking."""
from style_builders import Framework, StyleSettings, build_node_styles, parse_node, walk_node_styles
from style_builders.html_blend import NESTED_ROTATION_WARNING


class TestTailwindNodeStyles:

    def test_walk_rotated_tree(self, tw4, rotated_tree):
        results, diagnostics = walk_node_styles(parse_node(rotated_tree), tw4)

        assert [r.node_id for r in results] == ['1:1', '1:2', '1:3']
        assert results[0].styles == 'bg-blue-500/50 mix-blend-multiply -rotate-30 origin-top-left'
        assert results[1].styles == 'text-black -rotate-15 origin-top-left'
        assert results[2].styles == 'bg-linear-to-r from-black to-white opacity-50 invisible'
        assert diagnostics.warnings == [NESTED_ROTATION_WARNING]

    def test_v3_dialect(self, tw3, rotated_tree):
        results, _ = walk_node_styles(parse_node(rotated_tree), tw3)
        assert results[0].styles == 'bg-blue-500 bg-opacity-50 mix-blend-multiply rotate-[-30deg] origin-top-left'
        assert results[2].styles.startswith('bg-gradient-to-r from-black to-white')

    def test_node_without_styles(self, tw4):
        result = build_node_styles(parse_node({'id': '2:1', 'type': 'GROUP'}), tw4)
        assert result.styles == ''
        assert result.fragments == []

    def test_text_uses_text_color(self, tw4):
        node = parse_node({'type': 'TEXT', 'fills': [{'type': 'SOLID', 'color': {'r': 1, 'g': 1, 'b': 1}}]})
        assert build_node_styles(node, tw4).styles == 'text-white'


class TestHtmlNodeStyles:

    def test_css_declarations(self, html_settings, rotated_tree):
        results, _ = walk_node_styles(parse_node(rotated_tree), html_settings)
        assert results[0].styles == (
            'background: rgba(59, 130, 246, 0.5); mix-blend-mode: multiply; '
            'transform: rotate(-30deg); transform-origin: top left'
        )
        assert results[1].styles.startswith('color: #000000; transform: rotate(-15deg)')
        assert results[2].styles == (
            'background: linear-gradient(90deg, #000000 0%, #ffffff 100%); '
            'opacity: 0.5; visibility: hidden'
        )

    def test_jsx_style_object(self, rotated_tree):
        settings = StyleSettings(framework=Framework.HTML, jsx=True)
        results, _ = walk_node_styles(parse_node(rotated_tree), settings)
        assert results[0].styles == (
            "background: 'rgba(59, 130, 246, 0.5)', mixBlendMode: 'multiply', "
            "transform: 'rotate(-30deg)', transformOrigin: 'top left'"
        )

    def test_warnings_are_per_pass(self, html_settings, rotated_tree):
        root = parse_node(rotated_tree)
        _, first = walk_node_styles(root, html_settings)
        _, second = walk_node_styles(root, html_settings)
        assert first.warnings == second.warnings == [NESTED_ROTATION_WARNING]
