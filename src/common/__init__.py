"""
どこで: `common` パッケージ。
何を: palette/theme 双方で使う軽量ユーティリティ（環境変数パース、設定、ロギング）。
なぜ: 色計算から環境依存の処理を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging
from .settings import MIN_PALETTE_SIZE

__all__ = [
    "MIN_PALETTE_SIZE",
    "setup_default_logging",
]
