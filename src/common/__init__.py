"""
どこで: `common` パッケージ。
何を: 型（Vec3/Axis）・設定・環境変数・レジストリ基盤などの軽量ユーティリティ。
なぜ: shapes/engine/api から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry
from .types import Axis, Vec3

__all__ = [
    "Axis",
    "BaseRegistry",
    "Vec3",
]
