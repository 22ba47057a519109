"""Tests for effective opacity composition and opacity snapping."""
import itertools

import pytest

from style_builders.base import ColorStop, ColorValue, GradientPaint, PaintType, SolidPaint
from style_builders.conversion_tables import TAILWIND_OPACITY_VALUES, nearest_opacity
from style_builders.opacity import effective_opacity


class TestEffectiveOpacity:
    """Parent, paint opacity and color alpha multiply; missing factors are 1."""

    def test_all_defaults_is_exactly_one(self):
        fill = SolidPaint(color=ColorValue(0, 0, 0))
        assert effective_opacity(fill) == 1.0
        assert effective_opacity(fill, 1.0) == 1.0

    def test_paint_opacity_and_alpha_multiply(self):
        fill = SolidPaint(color=ColorValue(0, 0, 0, a=0.5), opacity=0.5)
        assert effective_opacity(fill) == pytest.approx(0.25)

    def test_stop_uses_alpha_and_parent(self):
        stop = ColorStop(position=0, color=ColorValue(0, 0, 0, a=0.8))
        assert effective_opacity(stop, 0.5) == pytest.approx(0.4)

    def test_gradient_paint_opacity(self):
        fill = GradientPaint(type=PaintType.GRADIENT_LINEAR, opacity=0.3)
        assert effective_opacity(fill) == pytest.approx(0.3)

    def test_monotonic_in_each_factor(self):
        values = [0.0, 0.25, 0.5, 0.75, 1.0]
        for parent, opacity, alpha in itertools.product(values, repeat=3):
            base = effective_opacity(SolidPaint(ColorValue(0, 0, 0, a=alpha), opacity=opacity), parent)
            raised_parent = effective_opacity(SolidPaint(ColorValue(0, 0, 0, a=alpha), opacity=opacity), 1.0)
            raised_paint = effective_opacity(SolidPaint(ColorValue(0, 0, 0, a=alpha), opacity=1.0), parent)
            raised_alpha = effective_opacity(SolidPaint(ColorValue(0, 0, 0, a=1.0), opacity=opacity), parent)
            for raised in (raised_parent, raised_paint, raised_alpha):
                assert raised >= base - 1e-12


class TestNearestOpacity:
    """Opacity snaps to Tailwind's 5-step scale."""

    def test_result_in_allowed_set(self):
        for i in range(101):
            assert nearest_opacity(i / 100) in TAILWIND_OPACITY_VALUES

    def test_idempotent(self):
        for i in range(101):
            once = nearest_opacity(i / 100)
            assert nearest_opacity(once / 100) == once

    def test_snapping(self):
        assert nearest_opacity(0.5) == 50
        assert nearest_opacity(0.333) == 35
        assert nearest_opacity(0.98) == 100
        assert nearest_opacity(0.97) == 95
