"""
どこで: `shapes.counts`
何を: 各ビルダ 1 回分の出力件数（頂点数, インデックス要素数）を返す。
なぜ: 呼び出し側がバッファを事前確保したり、詰め込み位置を計算できるようにするため。
"""

from __future__ import annotations

from .cylinder import SIDE_LINE_COUNT
from .rings import resolve_vertex_count

CUBOID_VERTICES = 24
CONE_EXTRA_VERTICES = 5
CONE_GENERATOR_LINES = 4


def expected_counts(kind: str, vertex_count: int | None = None) -> tuple[int, int]:
    """`(n_vertices, n_index_entries)` を返す。インデックス要素数は線分数の 2 倍。

    例外:
        KeyError: 未知の形状名の場合
    """
    n = resolve_vertex_count(vertex_count)
    key = kind.replace("-", "_").lower()
    if key == "cuboid":
        return CUBOID_VERTICES, 2 * CUBOID_VERTICES
    if key == "sphere":
        return 3 * n, 6 * n
    if key == "cone":
        return n + CONE_EXTRA_VERTICES, 2 * (n + CONE_GENERATOR_LINES)
    if key == "unbound_cylinder":
        return n + 2 * SIDE_LINE_COUNT, 2 * (n + SIDE_LINE_COUNT)
    if key == "capsule":
        return 4 * n, 8 * n
    raise KeyError(f"'{kind}' は登録されていません")


__all__ = ["expected_counts"]
