from __future__ import annotations

"""`create_theme` と `Theme` の公開 API テスト。"""

import pytest

from palette import ColorType, InvalidColorError, Palette, TypeMismatchError
from palette.color_types import get_color_type
from theme import BASE_ROLES, Theme, create_theme

SEED = "#3366ff"


def test_create_theme_end_to_end() -> None:
    theme = create_theme("#3366FF")
    assert isinstance(theme, Theme)
    for role in ("primary", "secondary", "error"):
        assert role in theme
        assert get_color_type(theme[role]) is ColorType.HEX
    assert theme.primary == "#3366FF"
    assert theme.roles == BASE_ROLES
    assert theme.type is ColorType.HEX


def test_override_replaces_only_that_role() -> None:
    base = create_theme(SEED)
    theme = create_theme(SEED, {"primary": "#ff0000"})
    assert theme.primary == "#ff0000"
    for role in BASE_ROLES:
        if role != "primary":
            assert theme[role] == base[role]


def test_unknown_override_keys_are_added() -> None:
    theme = create_theme(SEED, {"brand": "#123456"})
    assert theme.brand == "#123456"
    assert len(theme) == len(BASE_ROLES) + 1
    assert set(BASE_ROLES) <= set(theme)


def test_type_mismatch_is_rejected(seed_hex: str, seed_rgb_object: dict) -> None:
    with pytest.raises(TypeMismatchError, match="custom color scheme primary color type"):
        create_theme(seed_hex, {"primary": seed_rgb_object})
    with pytest.raises(TypeError):
        create_theme(seed_rgb_object, {"error": seed_hex})


def test_invalid_override_is_rejected() -> None:
    with pytest.raises(InvalidColorError, match="custom color scheme primary is not a valid color") as info:
        create_theme(SEED, {"primary": "not-a-color"})
    assert isinstance(info.value.__cause__, InvalidColorError)


def test_first_bad_key_aborts() -> None:
    with pytest.raises(InvalidColorError, match="warning"):
        create_theme(SEED, {"error": "#ff0000", "warning": "bad", "info": "rgb(1, 2, 3)"})


def test_invalid_main_color() -> None:
    with pytest.raises(InvalidColorError):
        create_theme("nope")


@pytest.mark.parametrize("custom", [None, [("primary", "#ff0000")], ("#ff0000",), "primary"])
def test_non_mapping_overrides_are_ignored(custom) -> None:
    assert create_theme(SEED, custom) == create_theme(SEED)


def test_theme_is_read_only() -> None:
    theme = create_theme(SEED)
    with pytest.raises(AttributeError):
        theme.primary = "#000000"
    with pytest.raises(TypeError):
        theme["primary"] = "#000000"  # type: ignore[index]
    with pytest.raises(AttributeError):
        theme.missing_role
    scheme = theme.scheme
    scheme["primary"] = "#000000"
    assert theme.primary == SEED


def test_theme_copies_input_mapping() -> None:
    source = {"primary": {"r": 51, "g": 102, "b": 255}}
    theme = Theme(source)
    source["primary"]["r"] = 0
    color = theme.primary
    color["g"] = 0
    assert theme.primary == {"r": 51, "g": 102, "b": 255}


def test_alpha_is_preserved_across_roles() -> None:
    theme = create_theme("rgba(51, 102, 255, 0.5)")
    assert all(color.endswith(", 0.5)") for color in theme.values())


def test_theme_palette_per_role() -> None:
    theme = create_theme(SEED)
    pal = theme.palette("primary")
    assert isinstance(pal, Palette)
    assert pal.size == 11
    assert pal.get(5) == SEED

    error = theme.palette("error", 9, type="rgb", min=0.1, max=0.9)
    assert error.size == 9
    assert error.type is ColorType.RGB
    with pytest.raises(KeyError):
        theme.palette("missing")


def test_theme_type_without_primary() -> None:
    assert Theme({"brand": "#123456"}).type is None


@pytest.mark.parametrize("custom", [{1: 0, "r": 0}, {"r": 10**400, "g": 0, "b": 0}])
def test_malformed_override_object_is_invalid_color(seed_rgb_object: dict, custom: dict) -> None:
    with pytest.raises(InvalidColorError, match="custom color scheme primary is not a valid color"):
        create_theme(seed_rgb_object, {"primary": custom})


def test_roles_colliding_with_members_need_item_access() -> None:
    theme = create_theme(SEED, {"type": "#ff0000", "palette": "#00ff00"})
    assert theme["type"] == "#ff0000"
    assert theme["palette"] == "#00ff00"
    assert theme.type is ColorType.HEX
    assert callable(theme.palette)
