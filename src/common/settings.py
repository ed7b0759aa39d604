"""
どこで: `common.settings`
何を: パレット/テーマ生成の環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int

# Palette のサイズ下限（これ未満は構築エラー）。設定では変更できない。
MIN_PALETTE_SIZE = 9


@dataclass
class _Settings:
    # Palette
    DEFAULT_PALETTE_SIZE: int = 11
    DEBUG_PALETTE_CACHE: bool = False

    # 出力書式
    HEX_UPPERCASE: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int` を使用。
    - パレットサイズは下限 `MIN_PALETTE_SIZE` に丸める。
    """
    _settings.DEFAULT_PALETTE_SIZE = (
        env_int("TONAL_DEFAULT_PALETTE_SIZE", 11, min_value=MIN_PALETTE_SIZE) or 11
    )
    _settings.DEBUG_PALETTE_CACHE = env_bool("TONAL_DEBUG_PALETTE_CACHE", False)
    _settings.HEX_UPPERCASE = env_bool("TONAL_HEX_UPPERCASE", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "MIN_PALETTE_SIZE", "_Settings"]
