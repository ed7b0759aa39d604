from __future__ import annotations

"""Read-only theme wrapper around a finalized color scheme."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional, Tuple

from common import settings
from palette import Palette
from palette.color_types import AnyColor, ColorType, get_color_type


def _copy_color(color: AnyColor) -> AnyColor:
    if isinstance(color, dict):
        return dict(color)
    return color


class Theme(Mapping):
    """Finalized role-to-color mapping.

    Roles are readable by key (``theme["primary"]``) or by attribute
    (``theme.primary``). Attribute access only reaches roles whose names
    do not collide with Theme members (``type``, ``palette``, ``roles``,
    ``scheme``, ``get``, ``keys``, ``values``, ``items``); use item access
    for those. The mapping cannot be changed after construction.
    """

    __slots__ = ("_scheme",)

    def __init__(self, scheme: Mapping) -> None:
        frozen = {str(role): _copy_color(color) for role, color in scheme.items()}
        object.__setattr__(self, "_scheme", MappingProxyType(frozen))

    # --- Mapping interface ---
    def __getitem__(self, role: str) -> AnyColor:
        return _copy_color(self._scheme[role])

    def __iter__(self) -> Iterator[str]:
        return iter(self._scheme)

    def __len__(self) -> int:
        return len(self._scheme)

    def __getattr__(self, name: str) -> AnyColor:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"theme has no role {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Theme is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Theme is read-only")

    def __repr__(self) -> str:
        return f"Theme({dict(self._scheme)!r})"

    @property
    def roles(self) -> Tuple[str, ...]:
        """Role names in insertion order."""
        return tuple(self._scheme)

    @property
    def scheme(self) -> Dict[str, AnyColor]:
        """A fresh dict copy of the role-to-color mapping."""
        return {role: _copy_color(color) for role, color in self._scheme.items()}

    @property
    def type(self) -> Optional[ColorType]:
        """Representation of the primary color, if the theme has one."""
        primary = self._scheme.get("primary")
        if primary is None:
            return None
        return get_color_type(primary)

    def palette(self, role: str, size: int | None = None, **options: Any) -> Palette:
        """Build a tonal :class:`palette.Palette` for ``role``.

        ``options`` are forwarded as palette options (``type``, ``min``,
        ``max``, ``alpha``).

        Raises
        ------
        KeyError
            If the theme has no such role.
        """
        color = self._scheme[role]
        if size is None:
            size = settings.get().DEFAULT_PALETTE_SIZE
        return Palette(color, size, options or None)


__all__ = ["Theme"]
