from __future__ import annotations

"""Tonal shade generation around a source color.

This module defines :class:`PaletteOptions` and the per-index shade
function used by :class:`palette.Palette`. Shades are produced by
interpolating the source lightness toward the configured bounds, with
the source color sitting on the middle step.
"""

from dataclasses import dataclass, fields, replace
from numbers import Real
from typing import Mapping, Optional, Union

from .color_types import HSL, AnyColor, ColorType, hsl_to_color
from .errors import ConstructionError


# Saturation is eased off by this fraction at the outermost steps.
SATURATION_EASE = 0.15


@dataclass(frozen=True)
class PaletteOptions:
    """Tuning options for palette generation.

    Attributes
    ----------
    type:
        Output color representation. None means "same as the source".
    min, max:
        Lightness bounds of the interpolation range, fractions in [0, 1].
    alpha:
        Alpha carried into alpha-capable outputs. None means "same as the
        source".
    """

    type: Optional[ColorType] = None
    min: float = 0.0
    max: float = 1.0
    alpha: Optional[float] = None

    @classmethod
    def resolve(
        cls,
        source_type: ColorType,
        source_alpha: float,
        overrides: "PaletteOptionsLike | None" = None,
    ) -> "PaletteOptions":
        """Build fully-populated options from source defaults and overrides.

        Overrides are applied field by field; fields left as None in a
        :class:`PaletteOptions` override keep the source default.
        """
        resolved = cls(type=source_type, min=0.0, max=1.0, alpha=source_alpha)
        if overrides is None:
            return resolved

        if isinstance(overrides, PaletteOptions):
            changes = {
                f.name: getattr(overrides, f.name)
                for f in fields(overrides)
                if getattr(overrides, f.name) is not None
            }
        elif isinstance(overrides, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = set(overrides) - known
            if unknown:
                raise ConstructionError(f"unknown palette options: {sorted(unknown)}")
            changes = {k: v for k, v in overrides.items() if v is not None}
        else:
            raise ConstructionError(
                f"palette options must be a mapping or PaletteOptions, got {type(overrides).__name__}"
            )

        if "type" in changes:
            try:
                changes["type"] = ColorType.from_value(changes["type"])
            except ValueError as exc:
                raise ConstructionError(str(exc)) from exc
        for key in ("min", "max", "alpha"):
            if key in changes:
                value = changes[key]
                if not isinstance(value, Real) or isinstance(value, bool):
                    raise ConstructionError(f"palette option {key!r} must be a number")
                changes[key] = float(value)

        resolved = replace(resolved, **changes)
        if not (0.0 <= resolved.min <= resolved.max <= 1.0):
            raise ConstructionError(
                f"palette options require 0 <= min <= max <= 1, got min={resolved.min}, max={resolved.max}"
            )
        if not (0.0 <= resolved.alpha <= 1.0):
            raise ConstructionError(f"palette option 'alpha' must be in [0, 1], got {resolved.alpha}")
        return resolved


PaletteOptionsLike = Union[PaletteOptions, Mapping[str, object]]


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def lightness_at(i: int, base_l: float, size: int, lo: float = 0.0, hi: float = 1.0) -> float:
    """Lightness of step ``i`` for a palette of ``size`` steps.

    The base lightness (clamped into ``[lo, hi]``) sits on step
    ``size // 2``. Lighter steps approach ``hi`` and darker steps
    approach ``lo`` without reaching them.
    """
    mid = size // 2
    L = _clamp(base_l, lo, hi)
    if i < mid:
        l = L + (hi - L) * (mid - i) / (mid + 1)
    elif i > mid:
        l = L - (L - lo) * (i - mid) / (size - mid)
    else:
        l = L
    return _clamp(l, lo, hi)


def saturation_at(i: int, base_s: float, size: int) -> float:
    """Saturation of step ``i``, eased off toward both ends."""
    mid = size // 2
    d = abs(i - mid) / mid if mid > 0 else 0.0
    return _clamp(base_s * (1.0 - SATURATION_EASE * d), 0.0, 1.0)


def get_palette_color(i: int, hsl: HSL, size: int, options: PaletteOptions) -> AnyColor:
    """Compute the shade at index ``i``.

    Pure function of its arguments. ``options`` must be resolved (see
    :meth:`PaletteOptions.resolve`).
    """
    h, s, l = hsl
    shade = (h, saturation_at(i, s, size), lightness_at(i, l, size, options.min, options.max))
    alpha = 1.0 if options.alpha is None else options.alpha
    return hsl_to_color(shade, options.type or ColorType.HEX, alpha)


__all__ = [
    "PaletteOptions",
    "PaletteOptionsLike",
    "SATURATION_EASE",
    "get_palette_color",
    "lightness_at",
    "saturation_at",
]
