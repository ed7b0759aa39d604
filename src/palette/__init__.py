"""Public entrypoint for the tonal palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``palette`` instead of individual
submodules.
"""

from .color_types import (
    AnyColor,
    ColorType,
    HSLObject,
    any_color_to_hsl,
    get_alpha,
    get_color_type,
    hsl_to_color,
)
from .errors import ConstructionError, InvalidColorError, PaletteError, TypeMismatchError
from .palette import Palette
from .shades import PaletteOptions, get_palette_color

__all__ = [
    "AnyColor",
    "ColorType",
    "ConstructionError",
    "HSLObject",
    "InvalidColorError",
    "Palette",
    "PaletteError",
    "PaletteOptions",
    "TypeMismatchError",
    "any_color_to_hsl",
    "get_alpha",
    "get_color_type",
    "get_palette_color",
    "hsl_to_color",
]
