"""Tests for the immutable color value types."""

import dataclasses
import math

import numpy as np
import pytest

from colortokens.colorspace import (
    LCHColor,
    LABColor,
    RGBColor,
    ColorAdjustment,
    lerp,
    lerp_hue,
    shortest_hue_delta,
)


class TestLCHColorBasics:
    """Construction and immutability."""

    @pytest.mark.parametrize("h, expected", [
        (370.0, 10.0),
        (-30.0, 330.0),
        (360.0, 0.0),
        (720.0, 0.0),
        (210.0, 210.0),
    ])
    def test_hue_normalized(self, h, expected):
        assert LCHColor(50, 10, h).h == expected

    def test_hue_never_reaches_360(self):
        """Tiny negative hues must not wrap to exactly 360."""
        assert LCHColor(50, 10, -1e-20).h < 360.0

    @pytest.mark.parametrize("h", [0.1, 27.3, 123.4567, 359.9])
    def test_full_turn_gives_same_hue(self, h):
        """Hues a full turn apart wrap to the same float, not just a close one."""
        assert LCHColor(50, 10, h + 360.0).h == LCHColor(50, 10, h).h
        assert LCHColor(50, 10, h - 720.0).h == LCHColor(50, 10, h).h

    def test_alpha_defaults_to_one(self):
        assert LCHColor(50, 10, 20).alpha == 1.0

    def test_frozen(self):
        color = LCHColor(50, 10, 20)
        with pytest.raises(dataclasses.FrozenInstanceError):
            color.l = 60

    def test_equality_is_by_value(self):
        assert LCHColor(50, 10, 20) == LCHColor(50.0, 10.0, 380.0)


class TestConversions:
    """LCH -> LAB -> XYZ -> RGB chain on single colors."""

    def test_to_lab(self):
        lab = LCHColor(50, 10, 90).to_lab()
        assert lab.l == 50
        assert lab.a == pytest.approx(0.0, abs=1e-12)
        assert lab.b == pytest.approx(10.0)

    def test_achromatic_has_no_nan(self):
        for h in (0.0, 123.0, 359.0):
            lab = LCHColor(50, 0, h).to_lab()
            assert lab.a == 0.0 or abs(lab.a) < 1e-12
            assert lab.b == 0.0 or abs(lab.b) < 1e-12
            rgb = LCHColor(50, 0, h).to_rgb()
            assert not any(math.isnan(v) for v in (rgb.r, rgb.g, rgb.b))

    def test_lab_roundtrip(self):
        color = LCHColor(62.5, 48.0, 211.0, alpha=0.4)
        back = color.to_lab().to_lch()
        assert back.l == pytest.approx(color.l, abs=1e-6)
        assert back.c == pytest.approx(color.c, abs=1e-6)
        assert back.h == pytest.approx(color.h, abs=1e-6)
        assert back.alpha == 0.4

    def test_black_and_white(self):
        assert LCHColor(0, 0, 0).to_display_color().to_hex() == "#000000"
        assert LCHColor(100, 0, 0).to_display_color().to_hex() == "#ffffff"

    def test_display_color_matches_chain(self):
        color = LCHColor(55, 40, 140)
        assert color.to_display_color() == color.to_lab().to_xyz().to_rgb()

    def test_out_of_gamut_clamped(self):
        rgb = LCHColor(50, 130, 140).to_rgb()
        for channel in (rgb.r, rgb.g, rgb.b):
            assert 0.0 <= channel <= 1.0

    def test_alpha_carried_through(self):
        assert LCHColor(50, 20, 30, alpha=0.25).to_display_color().alpha == 0.25

    def test_hex_roundtrip(self):
        for text in ("#3366cc", "#ff8800", "#0a0a0a", "#d4f1e8"):
            assert LCHColor.from_hex(text).to_display_color().to_hex() == text

    def test_from_rgb(self):
        rgb = RGBColor(0.2, 0.4, 0.6)
        back = LCHColor.from_rgb(rgb).to_rgb()
        np.testing.assert_allclose([back.r, back.g, back.b], [0.2, 0.4, 0.6], atol=1e-6)

    def test_lab_to_xyz_to_lab(self):
        lab = LABColor(40.0, -20.0, 35.0)
        back = lab.to_xyz().to_lab()
        assert back.l == pytest.approx(40.0)
        assert back.a == pytest.approx(-20.0)
        assert back.b == pytest.approx(35.0)


class TestRGBColor:
    """Display helpers."""

    def test_rgb255(self):
        assert RGBColor(1.0, 0.5, 0.0).to_rgb255() == (255, 128, 0)

    def test_from_hex_without_hash(self):
        assert RGBColor.from_hex("ff0000") == RGBColor(1.0, 0.0, 0.0)

    @pytest.mark.parametrize("text", ["", "#fff", "#12345", "#1234567"])
    def test_from_hex_invalid(self, text):
        with pytest.raises(ValueError):
            RGBColor.from_hex(text)


class TestLerp:
    """Linear interpolation with circular hue."""

    @pytest.mark.parametrize("a, b", [
        (LCHColor(90, 10, 300, alpha=0.2), LCHColor(20, 60, 40, alpha=1.0)),
        (LCHColor(90.3, 10.7, 350.3, alpha=0.3), LCHColor(20.1, 60.9, 10.1, alpha=0.7)),
        (LCHColor(12.34, 0.1, 0.7), LCHColor(98.76, 77.7, 181.9, alpha=0.1)),
    ])
    def test_endpoints_exact(self, a, b):
        """t=0 gives a and t=1 gives b, with no rounding residue."""
        assert lerp(a, b, 0.0) == a
        assert lerp(a, b, 1.0) == b
        assert lerp(b, a, 1.0) == a

    def test_wraps_through_zero(self):
        """350 -> 10 passes through 0, not 180."""
        mid = LCHColor(50, 40, 350).lerp(LCHColor(50, 40, 10), 0.5)
        assert mid.h == pytest.approx(0.0, abs=1e-9)

    def test_wraps_through_zero_backwards(self):
        mid = LCHColor(50, 40, 10).lerp(LCHColor(50, 40, 350), 0.5)
        assert mid.h == pytest.approx(0.0, abs=1e-9)

    def test_channels_linear(self):
        mid = lerp(LCHColor(80, 20, 100, alpha=0.0), LCHColor(40, 60, 140, alpha=1.0), 0.25)
        assert mid.l == pytest.approx(70.0)
        assert mid.c == pytest.approx(30.0)
        assert mid.h == pytest.approx(110.0)
        assert mid.alpha == pytest.approx(0.25)

    def test_opposite_hues_go_positive(self):
        """A 180 degree gap resolves to the positive direction."""
        assert float(shortest_hue_delta(0.0, 180.0)) == 180.0
        assert float(shortest_hue_delta(180.0, 0.0)) == 180.0
        assert float(lerp_hue(0.0, 180.0, 0.5)) == 90.0

    def test_delta_range(self):
        h0 = np.linspace(0, 359, 50)
        h1 = h0[::-1] + 7.3
        delta = shortest_hue_delta(h0, h1)
        assert (delta > -180).all()
        assert (delta <= 180).all()


class TestAdjustment:
    """ColorAdjustment overrides."""

    def test_empty_adjustment_keeps_color(self):
        color = LCHColor(50, 20, 30, alpha=0.5)
        assert color.adjusted(ColorAdjustment()) == color

    def test_partial_override_keeps_rest(self):
        color = LCHColor(50, 20, 30, alpha=0.5)
        adjusted = color.adjusted(ColorAdjustment(l=80))
        assert adjusted == LCHColor(80, 20, 30, alpha=0.5)

    def test_hue_override_normalized(self):
        adjusted = LCHColor(50, 20, 30).adjusted(ColorAdjustment(h=400))
        assert adjusted.h == 40.0

    def test_zero_is_an_override(self):
        adjusted = LCHColor(50, 20, 30).adjusted(ColorAdjustment(c=0))
        assert adjusted.c == 0.0

    def test_display_color(self):
        color = LCHColor(50, 20, 30)
        rgb = color.get_display_color(ColorAdjustment(l=100, c=0))
        assert rgb.to_hex() == "#ffffff"
        assert color.get_display_color() == color.to_display_color()
