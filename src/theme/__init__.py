"""Theme builder: role-based color schemes derived from one seed color."""

from .helper import create_theme
from .scheme import BASE_ROLES, SCHEME_RULES, RoleRule, Scheme, derive_role_color
from .theme import Theme

__all__ = [
    "BASE_ROLES",
    "RoleRule",
    "SCHEME_RULES",
    "Scheme",
    "Theme",
    "create_theme",
    "derive_role_color",
]
