"""
どこで: `common` の型定義。
何を: Vec3 エイリアスと主軸 `Axis`、出力バッファの型エイリアス。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from __future__ import annotations

from enum import IntEnum
from typing import MutableSequence

Vec3 = tuple[float, float, float]

# 呼び出し側が所有する追記専用バッファ
PositionBuffer = MutableSequence[Vec3]
IndexBuffer = MutableSequence[int]

ORIGIN: Vec3 = (0.0, 0.0, 0.0)


class Axis(IntEnum):
    """リングを埋め込む主軸（リング平面はこの軸に垂直）。

    数値は従来の軸インデックス（0: X, 1: Y, 2: Z）と一致させている。
    """

    X = 0
    Y = 1
    Z = 2

    @classmethod
    def coerce(cls, value: "Axis | int") -> "Axis":
        """`Axis` または int を `Axis` に正規化する。

        例外:
            ValueError: 0/1/2 以外の値が渡された場合。
        """
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise ValueError(f"axis は 0/1/2（X/Y/Z）である必要があります: got {value!r}") from None


__all__ = ["Vec3", "Axis", "PositionBuffer", "IndexBuffer", "ORIGIN"]
