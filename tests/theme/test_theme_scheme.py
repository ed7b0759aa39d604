from __future__ import annotations

"""ロール別配色の導出（`theme.scheme`）のテスト。"""

import pytest

from palette.color_types import ColorType, any_color_to_hsl, get_color_type
from palette.errors import InvalidColorError
from theme.scheme import BASE_ROLES, SCHEME_RULES, RoleRule, Scheme, derive_role_color

SEED_HSL = (225.0, 1.0, 0.6)


@pytest.mark.parametrize(
    "role, expected",
    [
        ("primary", (225.0, 1.0, 0.6)),
        ("secondary", (255.0, 0.7, 0.6)),
        ("tertiary", (285.0, 0.8, 0.6)),
        ("success", (142.0, 0.8, 0.55)),
        ("warning", (38.0, 1.0, 0.6)),
        ("error", (0.0, 0.9, 0.6)),
        ("info", (207.0, 0.9, 0.6)),
        ("neutral", (225.0, 0.08, 0.6)),
    ],
)
def test_derive_role_color(role, expected) -> None:
    assert derive_role_color(SEED_HSL, SCHEME_RULES[role]) == pytest.approx(expected)


def test_derive_role_color_wraps_hue() -> None:
    h, _, _ = derive_role_color((340.0, 0.5, 0.5), RoleRule(hue_shift=30.0))
    assert h == pytest.approx(10.0)


def test_every_base_role_has_a_rule() -> None:
    assert set(BASE_ROLES) == set(SCHEME_RULES)
    assert Scheme.roles == BASE_ROLES


def test_base_scheme_keeps_seed_representation() -> None:
    scheme = Scheme.create_base_color_scheme("#3366ff")
    assert tuple(scheme) == BASE_ROLES
    assert scheme["primary"] == "#3366ff"
    assert all(get_color_type(c) is ColorType.HEX for c in scheme.values())
    assert any_color_to_hsl(scheme["success"])[0] == pytest.approx(142.0, abs=1.0)


def test_base_scheme_is_deterministic() -> None:
    assert Scheme.create_base_color_scheme("#3366ff") == Scheme.create_base_color_scheme("#3366ff")


def test_base_scheme_for_object_seed() -> None:
    seed = {"h": 225.0, "s": 1.0, "l": 0.6, "a": 0.5}
    scheme = Scheme.create_base_color_scheme(seed)
    assert scheme["primary"] == seed
    assert scheme["primary"] is not seed
    assert scheme["secondary"] == {"h": 255.0, "s": 0.7, "l": 0.6, "a": 0.5}


def test_base_scheme_invalid_seed() -> None:
    with pytest.raises(InvalidColorError):
        Scheme.create_base_color_scheme("nope")
