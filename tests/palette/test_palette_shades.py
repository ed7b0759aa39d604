from __future__ import annotations

"""シェード計算（`palette.shades`）と `PaletteOptions` の解決のテスト。"""

import pytest

from palette.color_types import ColorType
from palette.shades import (
    PaletteOptions,
    get_palette_color,
    lightness_at,
    saturation_at,
)


def test_lightness_at_places_base_on_middle_step() -> None:
    assert lightness_at(5, 0.6, 11) == pytest.approx(0.6)
    assert lightness_at(4, 0.5, 9) == pytest.approx(0.5)


def test_lightness_at_never_reaches_bounds() -> None:
    values = [lightness_at(i, 0.5, 11, 0.1, 0.9) for i in range(11)]
    assert all(0.1 < v < 0.9 for v in values)


def test_lightness_at_clamps_base_into_bounds() -> None:
    assert lightness_at(5, 0.95, 11, 0.2, 0.8) == pytest.approx(0.8)
    assert lightness_at(5, 0.05, 11, 0.2, 0.8) == pytest.approx(0.2)


def test_lightness_at_out_of_range_index_is_clamped() -> None:
    assert lightness_at(-50, 0.5, 11, 0.1, 0.9) == pytest.approx(0.9)
    assert lightness_at(50, 0.5, 11, 0.1, 0.9) == pytest.approx(0.1)


def test_saturation_at_eases_toward_ends() -> None:
    assert saturation_at(5, 0.8, 11) == pytest.approx(0.8)
    assert saturation_at(0, 0.8, 11) == pytest.approx(0.8 * 0.85)
    assert saturation_at(10, 0.8, 11) == pytest.approx(0.8 * 0.85)
    assert saturation_at(100, 0.8, 11) == 0.0


def test_resolve_defaults_from_source() -> None:
    opts = PaletteOptions.resolve(ColorType.RGB, 0.5)
    assert opts == PaletteOptions(type=ColorType.RGB, min=0.0, max=1.0, alpha=0.5)


def test_resolve_applies_overrides_field_by_field() -> None:
    opts = PaletteOptions.resolve(ColorType.HEX, 1.0, {"max": 0.9, "type": "hsl"})
    assert opts.type is ColorType.HSL
    assert opts.min == 0.0
    assert opts.max == 0.9
    assert opts.alpha == 1.0

    opts = PaletteOptions.resolve(ColorType.HEX, 0.5, PaletteOptions(min=0.1))
    assert opts.type is ColorType.HEX
    assert opts.min == 0.1
    assert opts.alpha == 0.5


def test_get_palette_color_is_pure() -> None:
    opts = PaletteOptions.resolve(ColorType.HEX, 1.0)
    hsl = (225.0, 1.0, 0.6)
    assert get_palette_color(5, hsl, 11, opts) == "#3366ff"
    assert get_palette_color(2, hsl, 11, opts) == get_palette_color(2, hsl, 11, opts)
    assert get_palette_color(0, hsl, 11, opts) != get_palette_color(10, hsl, 11, opts)
