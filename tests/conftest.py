"""Shared test fixtures for style builder tests."""
import pytest

from style_builders.settings import Framework, StyleSettings


BLACK = {'r': 0, 'g': 0, 'b': 0, 'a': 1}
WHITE = {'r': 1, 'g': 1, 'b': 1, 'a': 1}
# Tailwind blue-500 (#3b82f6)
BLUE_500 = {'r': 59 / 255, 'g': 130 / 255, 'b': 246 / 255, 'a': 1}

HORIZONTAL_HANDLES = [
    {'x': 0.0, 'y': 0.5},
    {'x': 1.0, 'y': 0.5},
    {'x': 0.0, 'y': 1.0},
]
CENTERED_HANDLES = [
    {'x': 0.5, 'y': 0.5},
    {'x': 1.0, 'y': 0.5},
    {'x': 0.5, 'y': 1.0},
]


@pytest.fixture(autouse=True)
def clean_style_env(monkeypatch):
    """Server defaults come from FIGMA_STYLES_*; keep them out of tests."""
    for name in ('FIGMA_STYLES_FRAMEWORK', 'FIGMA_STYLES_JSX',
                 'FIGMA_STYLES_TAILWIND4', 'FIGMA_STYLES_ROUND_COLORS'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tw3():
    return StyleSettings(framework=Framework.TAILWIND, use_tailwind4=False)


@pytest.fixture
def tw4():
    return StyleSettings(framework=Framework.TAILWIND, use_tailwind4=True)


@pytest.fixture
def html_settings():
    return StyleSettings(framework=Framework.HTML, jsx=False)


@pytest.fixture
def linear_fill():
    """Horizontal black -> white linear gradient."""
    return {
        'type': 'GRADIENT_LINEAR', 'visible': True, 'opacity': 1,
        'gradientStops': [
            {'color': BLACK, 'position': 0},
            {'color': WHITE, 'position': 1},
        ],
        'gradientHandlePositions': HORIZONTAL_HANDLES,
    }


@pytest.fixture
def five_stop_fill():
    """Linear gradient with five stops; only stops 0, 1 and 4 survive."""
    return {
        'type': 'GRADIENT_LINEAR', 'visible': True,
        'gradientStops': [
            {'color': BLACK, 'position': 0},
            {'color': BLUE_500, 'position': 0.5},
            {'color': WHITE, 'position': 0.6},
            {'color': {'r': 1, 'g': 0, 'b': 0, 'a': 1}, 'position': 0.8},
            {'color': WHITE, 'position': 1},
        ],
        'gradientHandlePositions': HORIZONTAL_HANDLES,
    }


@pytest.fixture
def radial_fill():
    return {
        'type': 'GRADIENT_RADIAL', 'visible': True,
        'gradientStops': [
            {'color': BLACK, 'position': 0},
            {'color': WHITE, 'position': 1},
        ],
        'gradientHandlePositions': CENTERED_HANDLES,
    }


@pytest.fixture
def angular_fill():
    return {
        'type': 'GRADIENT_ANGULAR', 'visible': True,
        'gradientStops': [
            {'color': BLACK, 'position': 0},
            {'color': WHITE, 'position': 1},
        ],
        'gradientHandlePositions': CENTERED_HANDLES,
    }


@pytest.fixture
def diamond_fill():
    return {
        'type': 'GRADIENT_DIAMOND', 'visible': True,
        'gradientStops': [
            {'color': BLACK, 'position': 0},
            {'color': WHITE, 'position': 1},
        ],
        'gradientHandlePositions': CENTERED_HANDLES,
    }


@pytest.fixture
def rotated_tree():
    """Rotated frame containing a rotated text node and a gradient rectangle."""
    return {
        'id': '1:1', 'name': 'Card', 'type': 'FRAME',
        'rotation': 30, 'blendMode': 'MULTIPLY',
        'fills': [{'type': 'SOLID', 'visible': True, 'color': BLUE_500, 'opacity': 0.5}],
        'children': [
            {
                'id': '1:2', 'name': 'Title', 'type': 'TEXT', 'rotation': 45,
                'fills': [{'type': 'SOLID', 'color': {'r': 0, 'g': 0, 'b': 0}}],
            },
            {
                'id': '1:3', 'name': 'Hidden', 'type': 'RECTANGLE', 'rotation': 30,
                'visible': False, 'opacity': 0.5,
                'fills': [{
                    'type': 'GRADIENT_LINEAR',
                    'gradientStops': [
                        {'color': BLACK, 'position': 0},
                        {'color': WHITE, 'position': 1},
                    ],
                    'gradientHandlePositions': HORIZONTAL_HANDLES,
                }],
            },
        ],
    }
