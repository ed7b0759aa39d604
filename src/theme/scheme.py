from __future__ import annotations

"""Role-based color schemes derived from a single seed color.

This module defines the fixed role set of the design system, the
per-role HSL transforms (:class:`RoleRule`), and
:meth:`Scheme.create_base_color_scheme` which applies them to a seed.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from palette.color_types import (
    HSL,
    AnyColor,
    any_color_to_hsl,
    get_alpha,
    get_color_type,
    hsl_to_color,
)
from palette.engine import DefaultColorEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoleRule:
    """HSL transform applied to the seed color for one role.

    Attributes
    ----------
    hue_shift:
        Degrees added to the seed hue. Ignored when ``hue`` is set.
    hue:
        Absolute hue in degrees, or None to follow the seed.
    saturation_scale:
        Factor applied to the seed saturation before clamping.
    saturation_range, lightness_range:
        Inclusive ``(lo, hi)`` bounds the result is clamped into.
    """

    hue_shift: float = 0.0
    hue: Optional[float] = None
    saturation_scale: float = 1.0
    saturation_range: Tuple[float, float] = (0.0, 1.0)
    lightness_range: Tuple[float, float] = (0.0, 1.0)


BASE_ROLES: Tuple[str, ...] = (
    "primary",
    "secondary",
    "tertiary",
    "success",
    "warning",
    "error",
    "info",
    "neutral",
)

SCHEME_RULES: Dict[str, RoleRule] = {
    "primary": RoleRule(),
    "secondary": RoleRule(hue_shift=30.0, saturation_scale=0.7),
    "tertiary": RoleRule(hue_shift=60.0, saturation_scale=0.8),
    "success": RoleRule(hue=142.0, saturation_range=(0.5, 0.8), lightness_range=(0.35, 0.55)),
    "warning": RoleRule(hue=38.0, saturation_range=(0.7, 1.0), lightness_range=(0.45, 0.6)),
    "error": RoleRule(hue=0.0, saturation_range=(0.65, 0.9), lightness_range=(0.4, 0.6)),
    "info": RoleRule(hue=207.0, saturation_range=(0.6, 0.9), lightness_range=(0.4, 0.6)),
    "neutral": RoleRule(saturation_scale=0.08),
}

_ENGINE = DefaultColorEngine()


def _clamp(x: float, bounds: Tuple[float, float]) -> float:
    lo, hi = bounds
    return max(lo, min(hi, x))


def derive_role_color(seed_hsl: HSL, rule: RoleRule) -> HSL:
    """Apply ``rule`` to ``seed_hsl`` and return the role's HSL triple."""
    h0, s0, l0 = seed_hsl
    h = rule.hue if rule.hue is not None else h0 + rule.hue_shift
    s = _clamp(s0 * rule.saturation_scale, rule.saturation_range)
    l = _clamp(l0, rule.lightness_range)
    return (_ENGINE.normalize_hue(h), s, l)


class Scheme:
    """Namespace for building role-to-color mappings."""

    roles: Tuple[str, ...] = BASE_ROLES

    @staticmethod
    def create_base_color_scheme(seed: AnyColor) -> Dict[str, AnyColor]:
        """Derive the base scheme for ``seed``.

        Every role in :data:`BASE_ROLES` is present. Values use the seed's
        representation and alpha; ``primary`` is the seed itself.

        Raises
        ------
        InvalidColorError
            If ``seed`` is not a valid color.
        """
        color_type = get_color_type(seed)
        seed_hsl = any_color_to_hsl(seed)
        alpha = get_alpha(seed)

        scheme: Dict[str, AnyColor] = {}
        for role in BASE_ROLES:
            if role == "primary":
                scheme[role] = dict(seed) if isinstance(seed, dict) else seed
                continue
            hsl = derive_role_color(seed_hsl, SCHEME_RULES[role])
            scheme[role] = hsl_to_color(hsl, color_type, alpha)
        logger.debug("base color scheme derived: seed=%r type=%s", seed, color_type.value)
        return scheme


__all__ = ["BASE_ROLES", "RoleRule", "SCHEME_RULES", "Scheme", "derive_role_color"]
