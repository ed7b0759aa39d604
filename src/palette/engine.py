from __future__ import annotations

"""Color conversion engine for HSL and sRGB.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between sRGB and HSL.
"""

from typing import Protocol, Tuple


HSL = Tuple[float, float, float]
SRGB = Tuple[float, float, float]


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def srgb_to_hsl(self, r: float, g: float, b: float) -> HSL: ...

    def hsl_to_srgb(self, h: float, s: float, l: float) -> SRGB: ...

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation of the sRGB <-> HSL conversions.

    Hue is expressed in degrees, saturation and lightness as fractions
    in [0, 1].
    """

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        return (h % 360.0 + 360.0) % 360.0

    def srgb_to_hsl(self, r: float, g: float, b: float) -> HSL:
        """Convert sRGB in [0, 1] to (h, s, l)."""
        r, g, b = _clamp01(r), _clamp01(g), _clamp01(b)
        c_max = max(r, g, b)
        c_min = min(r, g, b)
        l = (c_max + c_min) / 2.0
        delta = c_max - c_min

        # Achromatic: hue and saturation are undefined, report 0.
        if delta < 1e-12:
            return (0.0, 0.0, l)

        s = delta / (1.0 - abs(2.0 * l - 1.0))
        if c_max == r:
            h = 60.0 * (((g - b) / delta) % 6.0)
        elif c_max == g:
            h = 60.0 * ((b - r) / delta + 2.0)
        else:
            h = 60.0 * ((r - g) / delta + 4.0)
        return (self.normalize_hue(h), _clamp01(s), l)

    def hsl_to_srgb(self, h: float, s: float, l: float) -> SRGB:
        """Convert (h, s, l) to sRGB in [0, 1]. Inputs are clamped."""
        h = self.normalize_hue(h)
        s = _clamp01(s)
        l = _clamp01(l)

        c = (1.0 - abs(2.0 * l - 1.0)) * s
        x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
        m = l - c / 2.0

        sector = int(h // 60.0)
        if sector == 0:
            r1, g1, b1 = c, x, 0.0
        elif sector == 1:
            r1, g1, b1 = x, c, 0.0
        elif sector == 2:
            r1, g1, b1 = 0.0, c, x
        elif sector == 3:
            r1, g1, b1 = 0.0, x, c
        elif sector == 4:
            r1, g1, b1 = x, 0.0, c
        else:
            r1, g1, b1 = c, 0.0, x
        return (_clamp01(r1 + m), _clamp01(g1 + m), _clamp01(b1 + m))


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, float(x)))
