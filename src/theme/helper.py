from __future__ import annotations

"""High-level public API for building themes.

This module provides :func:`create_theme`, which derives the base
scheme from a seed color, merges caller overrides, and wraps the result
in a :class:`theme.Theme`.
"""

import logging
from collections.abc import Mapping
from typing import Optional

from palette.color_types import AnyColor, get_color_type
from palette.errors import InvalidColorError, TypeMismatchError

from .scheme import Scheme
from .theme import Theme

logger = logging.getLogger(__name__)


def create_theme(main: AnyColor, custom_color_scheme: Optional[Mapping] = None) -> Theme:
    """Create a theme from a seed color.

    Parameters
    ----------
    main:
        Seed (primary) color in any supported representation.
    custom_color_scheme:
        Optional mapping of role name to color. Entries replace the base
        scheme's role of the same name; unknown roles are added. Every
        color must use the same representation as ``main``. Values that
        are not mappings (lists, tuples, ...) are ignored.

    Returns
    -------
    Theme
        Theme holding every base role plus any custom roles.

    Raises
    ------
    InvalidColorError
        If ``main`` or a custom color is not a valid color.
    TypeMismatchError
        If a custom color's representation differs from ``main``'s.
    """
    primary_color_type = get_color_type(main)
    colors_scheme = Scheme.create_base_color_scheme(main)

    if isinstance(custom_color_scheme, Mapping):
        for key, value in custom_color_scheme.items():
            try:
                color_type = get_color_type(value)
            except InvalidColorError as exc:
                raise InvalidColorError(
                    f"custom color scheme {key} is not a valid color"
                ) from exc
            if color_type != primary_color_type:
                raise TypeMismatchError(
                    f"custom color scheme {key} color type must be the same as the primary color type"
                )
            logger.debug("custom color scheme overrides role %r", key)
            colors_scheme[key] = value

    return Theme(colors_scheme)


__all__ = ["create_theme"]
