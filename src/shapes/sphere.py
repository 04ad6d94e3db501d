from __future__ import annotations

from common.types import ORIGIN, Axis, IndexBuffer, PositionBuffer

from .base import check_vertex_begin, log_emitted
from .registry import shape
from .rings import create_circle_ring, resolve_vertex_count


@shape("sphere")
def create_sphere(
    radius: float,
    vertex_begin: int,
    positions: PositionBuffer,
    indices: IndexBuffer,
    *,
    vertex_count: int | None = None,
) -> None:
    """原点中心の球ワイヤーフレーム（X/Y/Z 各軸に垂直な大円 3 本）を追記します。

    引数:
        radius: 半径
        vertex_begin: 先頭頂点のグローバルインデックス
        vertex_count: リング 1 本の頂点数（None で設定値を使用）

    頂点数は `3 * vertex_count`。リングは X → Y → Z の順に連続配置する。
    """
    begin = check_vertex_begin("sphere", vertex_begin, positions)
    n = resolve_vertex_count(vertex_count)
    for ring, axis in enumerate((Axis.X, Axis.Y, Axis.Z)):
        create_circle_ring(radius, axis, ORIGIN, begin + n * ring, n, positions, indices)
    log_emitted("sphere", begin, 3 * n, 3 * n)
