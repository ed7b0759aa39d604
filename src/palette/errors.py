from __future__ import annotations

"""Exceptions raised by the palette and theme builders.

All errors are raised synchronously at the point where input is
validated; nothing is retried or recovered internally.
"""


class PaletteError(Exception):
    """Base class for all palette/theme errors."""


class ConstructionError(PaletteError, ValueError):
    """Raised when a :class:`palette.Palette` cannot be constructed."""


class InvalidColorError(PaletteError, ValueError):
    """Raised when a color value cannot be detected or parsed."""


class TypeMismatchError(PaletteError, TypeError):
    """Raised when a color's representation differs from the expected one."""


__all__ = [
    "PaletteError",
    "ConstructionError",
    "InvalidColorError",
    "TypeMismatchError",
]
