"""共通フィクスチャ。

- 各テスト後に環境変数由来の設定を読み直す
- 代表的なシード色
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """テスト内での settings 変更を後続テストへ持ち越さない。"""
    yield
    settings.reload_from_env()


@pytest.fixture()
def seed_hex() -> str:
    return "#3366ff"


@pytest.fixture()
def seed_rgb_object() -> dict:
    return {"r": 51, "g": 102, "b": 255}
