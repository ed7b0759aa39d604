from __future__ import annotations

"""Lazily evaluated tonal palettes.

This module defines :class:`Palette`, an indexable, iterable sequence of
shades derived from a single source color. Shades are computed on first
access and cached per index for the lifetime of the instance.
"""

import logging
from typing import Iterator, List, Optional

from common import settings
from common.settings import MIN_PALETTE_SIZE

from .color_types import (
    HSL,
    AnyColor,
    ColorType,
    HSLObject,
    any_color_to_hsl,
    get_alpha,
    get_color_type,
    hsl_to_object,
)
from .errors import ConstructionError
from .shades import PaletteOptions, PaletteOptionsLike, get_palette_color

logger = logging.getLogger(__name__)


def _copy_color(color: AnyColor) -> AnyColor:
    # Object representations are mutable; never hand out the cached dict.
    if isinstance(color, dict):
        return dict(color)
    return color


class Palette:
    """Tonal palette generated from a source color.

    The palette behaves like a read-only sequence of ``size`` shades.
    The source color sits on the middle step (``size // 2``); lower
    indices are lighter and higher indices are darker.

    Parameters
    ----------
    source_color:
        Source color in any supported representation.
    size:
        Number of steps; must be an integer and not less than 9.
    options:
        Optional :class:`PaletteOptions` or mapping with the keys
        ``type``, ``min``, ``max`` and ``alpha``. Unset fields default to
        the source color's type and alpha and the full ``[0, 1]``
        lightness range.

    Raises
    ------
    ConstructionError
        If ``size`` is not an integer or is less than 9, or the options
        are invalid.
    InvalidColorError
        If ``source_color`` is not a valid color.
    """

    __slots__ = ("_source", "_source_hsl", "_size", "_options", "_cache")

    def __init__(
        self,
        source_color: AnyColor,
        size: int,
        options: PaletteOptionsLike | None = None,
    ) -> None:
        if not isinstance(size, int) or isinstance(size, bool) or size < MIN_PALETTE_SIZE:
            raise ConstructionError(
                f"size must be an integer not less than {MIN_PALETTE_SIZE}, got {size!r}"
            )
        self._source = _copy_color(source_color)
        self._source_hsl: HSL = any_color_to_hsl(source_color)
        self._size = size
        self._options = PaletteOptions.resolve(
            get_color_type(source_color), get_alpha(source_color), options
        )
        self._cache: List[Optional[AnyColor]] = [None] * size
        logger.debug(
            "palette created: source=%r size=%d type=%s range=[%s, %s]",
            source_color,
            size,
            self._options.type.value,
            self._options.min,
            self._options.max,
        )

    @property
    def source(self) -> AnyColor:
        """Source color as given by the caller."""
        return _copy_color(self._source)

    @property
    def hsl(self) -> HSLObject:
        """Source color as a fresh ``{"h", "s", "l"}`` dict."""
        return hsl_to_object(self._source_hsl)

    @property
    def type(self) -> ColorType:
        """Output color representation."""
        return self._options.type

    @property
    def size(self) -> int:
        """Number of steps in the palette."""
        return self._size

    @property
    def options(self) -> PaletteOptions:
        """Resolved palette options."""
        return self._options

    def get(self, i: int) -> AnyColor:
        """Return the shade at index ``i``.

        Indices in ``[0, size)`` are cached after the first access. Other
        indices are computed by the same formula on every call and are
        not bounds-checked.
        """
        if not isinstance(i, int) or isinstance(i, bool):
            raise TypeError(f"palette indices must be integers, not {type(i).__name__}")
        if 0 <= i < self._size:
            cached = self._cache[i]
            if cached is None:
                cached = get_palette_color(i, self._source_hsl, self._size, self._options)
                self._cache[i] = cached
                if settings.get().DEBUG_PALETTE_CACHE:
                    logger.debug("palette cache fill: index=%d value=%r", i, cached)
            return _copy_color(cached)
        return get_palette_color(i, self._source_hsl, self._size, self._options)

    def all(self) -> List[AnyColor]:
        """Return every shade in index order."""
        return list(self)

    def __iter__(self) -> Iterator[AnyColor]:
        for i in range(self._size):
            yield self.get(i)

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> AnyColor:
        # Same index rules as list (negative indices allowed).
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"palette indices must be integers, not {type(index).__name__}")
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("palette index out of range")
        return self.get(index)

    def __repr__(self) -> str:
        return f"Palette(source={self._source!r}, size={self._size}, type={self._options.type.value!r})"

    @classmethod
    def create(cls, source_color: AnyColor, size: int | None = None) -> "Palette":
        """Create a palette with default options.

        ``size`` defaults to the ``DEFAULT_PALETTE_SIZE`` setting (11).
        """
        if size is None:
            size = settings.get().DEFAULT_PALETTE_SIZE
        return cls(source_color, size)


__all__ = ["Palette"]
