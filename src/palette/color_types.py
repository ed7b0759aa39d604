from __future__ import annotations

"""Color representations accepted by the palette and theme builders.

A color can be given as a CSS-like string (hex, ``rgb()``, ``rgba()``,
``hsl()``, ``hsla()``) or as a plain mapping (``{"r", "g", "b"}`` or
``{"h", "s", "l"}``, each with an optional ``"a"``). This module detects
which representation a value uses, normalizes it to an HSL triple, and
formats HSL triples back into any of the representations.
"""

import math
import re
from enum import Enum
from numbers import Real
from typing import Dict, Mapping, Tuple, Union

from common import settings

from .engine import ColorEngine, DefaultColorEngine
from .errors import InvalidColorError


HSL = Tuple[float, float, float]
HSLObject = Dict[str, float]
RGBObject = Dict[str, float]
AnyColor = Union[str, Mapping[str, float]]


class ColorType(str, Enum):
    """Tag naming the representation of a color value."""

    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    RGB_OBJECT = "rgb_object"
    HSL_OBJECT = "hsl_object"

    @classmethod
    def from_value(cls, value: "ColorType | str") -> "ColorType":
        if isinstance(value, ColorType):
            return value
        for tag in cls:
            if tag.value == value:
                return tag
        raise ValueError(f"Unknown color type: {value!r}")


_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_RE = re.compile(r"^(rgba|rgb|hsla|hsl)\(\s*(.*?)\s*\)$", re.IGNORECASE)
_ARG_SPLIT_RE = re.compile(r"\s*[,/]\s*|\s+")

_RGB_KEYS = frozenset({"r", "g", "b"})
_HSL_KEYS = frozenset({"h", "s", "l"})

_ENGINE: ColorEngine = DefaultColorEngine()


# --- detection / parsing ----------------------------------------------------


def _parse(color: object) -> Tuple[ColorType, HSL, float]:
    """Return ``(type, hsl, alpha)`` for ``color`` or raise InvalidColorError."""
    if isinstance(color, str):
        s = color.strip()
        if s.startswith("#"):
            return _parse_hex(s, color)
        m = _FUNC_RE.match(s)
        if m is not None:
            return _parse_functional(m.group(1).lower(), m.group(2), color)
        raise InvalidColorError(f"unsupported color string: {color!r}")
    if isinstance(color, Mapping):
        return _parse_mapping(color)
    raise InvalidColorError(f"unsupported color value: {type(color).__name__}")


def _parse_hex(s: str, original: object) -> Tuple[ColorType, HSL, float]:
    m = _HEX_RE.match(s)
    if m is None:
        raise InvalidColorError(f"invalid hex color: {original!r}")
    digits = m.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    r = int(digits[0:2], 16) / 255.0
    g = int(digits[2:4], 16) / 255.0
    b = int(digits[4:6], 16) / 255.0
    a = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
    return ColorType.HEX, _ENGINE.srgb_to_hsl(r, g, b), a


def _parse_functional(name: str, body: str, original: object) -> Tuple[ColorType, HSL, float]:
    args = [a for a in _ARG_SPLIT_RE.split(body) if a] if body else []
    has_alpha = name.endswith("a")
    expected = 4 if has_alpha else 3
    if len(args) != expected:
        raise InvalidColorError(
            f"{name}() color expects {expected} components, got {len(args)}: {original!r}"
        )
    try:
        alpha = _parse_alpha(args[3]) if has_alpha else 1.0
        if name.startswith("rgb"):
            r, g, b = (_parse_number(a) for a in args[:3])
            for v in (r, g, b):
                _check_range(v, 0.0, 255.0, original)
            hsl = _ENGINE.srgb_to_hsl(r / 255.0, g / 255.0, b / 255.0)
            tag = ColorType.RGBA if has_alpha else ColorType.RGB
        else:
            h = _parse_number(args[0], suffix="deg")
            s = _parse_number(args[1], suffix="%")
            l = _parse_number(args[2], suffix="%")
            _check_range(s, 0.0, 100.0, original)
            _check_range(l, 0.0, 100.0, original)
            hsl = (_ENGINE.normalize_hue(h), s / 100.0, l / 100.0)
            tag = ColorType.HSLA if has_alpha else ColorType.HSL
    except ValueError as exc:
        raise InvalidColorError(f"invalid {name}() color: {original!r}") from exc
    _check_range(alpha, 0.0, 1.0, original)
    return tag, hsl, alpha


def _parse_mapping(color: Mapping) -> Tuple[ColorType, HSL, float]:
    keys = set(color.keys())
    base_keys = keys - {"a"}
    for key in keys:
        if not _is_number(color[key]):
            raise InvalidColorError(f"color channel {key!r} must be a number: {color!r}")
    alpha = float(color["a"]) if "a" in keys else 1.0
    _check_range(alpha, 0.0, 1.0, color)

    if base_keys == _RGB_KEYS:
        r, g, b = float(color["r"]), float(color["g"]), float(color["b"])
        for v in (r, g, b):
            _check_range(v, 0.0, 255.0, color)
        return ColorType.RGB_OBJECT, _ENGINE.srgb_to_hsl(r / 255.0, g / 255.0, b / 255.0), alpha
    if base_keys == _HSL_KEYS:
        h, s, l = float(color["h"]), float(color["s"]), float(color["l"])
        _check_range(s, 0.0, 1.0, color)
        _check_range(l, 0.0, 1.0, color)
        return ColorType.HSL_OBJECT, (_ENGINE.normalize_hue(h), s, l), alpha
    raise InvalidColorError(f"unsupported color object keys: {sorted(map(repr, keys))}")


def _is_number(v: object) -> bool:
    if not isinstance(v, Real) or isinstance(v, bool):
        return False
    try:
        return math.isfinite(float(v))
    except OverflowError:
        return False


def _parse_number(token: str, suffix: str = "") -> float:
    t = token.strip().lower()
    if suffix and t.endswith(suffix):
        t = t[: -len(suffix)]
    v = float(t)
    if not math.isfinite(v):
        raise ValueError(f"non-finite number: {token!r}")
    return v


def _parse_alpha(token: str) -> float:
    t = token.strip()
    if t.endswith("%"):
        return _parse_number(t, suffix="%") / 100.0
    return _parse_number(t)


def _check_range(v: float, lo: float, hi: float, original: object) -> None:
    if not (lo <= v <= hi):
        raise InvalidColorError(f"color channel {v} out of range [{lo}, {hi}]: {original!r}")


# --- public collaborators ---------------------------------------------------


def get_color_type(color: object) -> ColorType:
    """Detect the representation of ``color``.

    Raises
    ------
    InvalidColorError
        If ``color`` is not a valid color in any supported representation.
    """
    tag, _, _ = _parse(color)
    return tag


def any_color_to_hsl(color: object) -> HSL:
    """Normalize ``color`` into an ``(h, s, l)`` triple.

    Hue is in [0, 360), saturation and lightness in [0, 1].
    """
    _, hsl, _ = _parse(color)
    return hsl


def get_alpha(color: object) -> float:
    """Return the alpha channel of ``color`` (1.0 when absent)."""
    _, _, alpha = _parse(color)
    return alpha


def hsl_to_color(
    hsl: HSL,
    color_type: ColorType | str,
    alpha: float = 1.0,
    engine: ColorEngine | None = None,
) -> AnyColor:
    """Format an HSL triple into the requested representation.

    Parameters
    ----------
    hsl:
        ``(h, s, l)`` with hue in degrees and s/l in [0, 1].
    color_type:
        Target representation.
    alpha:
        Alpha channel; dropped by ``hex`` (when 1.0), ``rgb`` and ``hsl``.
    engine:
        ColorEngine used for conversion. If None, the module default is used.
    """
    if engine is None:
        engine = _ENGINE
    tag = ColorType.from_value(color_type)
    h, s, l = hsl
    h = engine.normalize_hue(h)
    s = _clamp01(s)
    l = _clamp01(l)
    a = _clamp01(alpha)

    if tag in (ColorType.HSL, ColorType.HSLA):
        body = f"{_fmt(round(h, 2) % 360.0)}, {_fmt(s * 100.0)}%, {_fmt(l * 100.0)}%"
        if tag == ColorType.HSLA:
            return f"hsla({body}, {_fmt(a)})"
        return f"hsl({body})"
    if tag == ColorType.HSL_OBJECT:
        obj: HSLObject = {"h": round(h, 2) % 360.0, "s": round(s, 4), "l": round(l, 4)}
        if a < 1.0:
            obj["a"] = round(a, 4)
        return obj

    r, g, b = (_to_u8(c) for c in engine.hsl_to_srgb(h, s, l))
    if tag == ColorType.HEX:
        out = f"#{r:02x}{g:02x}{b:02x}"
        if a < 1.0:
            out += f"{_to_u8(a):02x}"
        return out.upper() if settings.get().HEX_UPPERCASE else out
    if tag == ColorType.RGB:
        return f"rgb({r}, {g}, {b})"
    if tag == ColorType.RGBA:
        return f"rgba({r}, {g}, {b}, {_fmt(a)})"
    if tag == ColorType.RGB_OBJECT:
        rgb: RGBObject = {"r": r, "g": g, "b": b}
        if a < 1.0:
            rgb["a"] = round(a, 4)
        return rgb

    raise ValueError(f"Unsupported color type: {color_type!r}")


def hsl_to_object(hsl: HSL) -> HSLObject:
    """Return a fresh ``{"h", "s", "l"}`` dict for an HSL triple."""
    h, s, l = hsl
    return {"h": h, "s": s, "l": l}


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, float(x)))


def _to_u8(c: float) -> int:
    return int(round(_clamp01(c) * 255))


def _fmt(v: float) -> str:
    return f"{round(v, 2):g}"


__all__ = [
    "AnyColor",
    "ColorType",
    "HSL",
    "HSLObject",
    "RGBObject",
    "any_color_to_hsl",
    "get_alpha",
    "get_color_type",
    "hsl_to_color",
    "hsl_to_object",
]
