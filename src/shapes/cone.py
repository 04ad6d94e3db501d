from __future__ import annotations

from common.types import Axis, IndexBuffer, PositionBuffer

from .base import check_vertex_begin, log_emitted
from .registry import shape
from .rings import create_circle_ring, resolve_vertex_count


@shape("cone")
def create_cone(
    radius: float,
    height: float,
    vertex_begin: int,
    positions: PositionBuffer,
    indices: IndexBuffer,
    *,
    vertex_count: int | None = None,
) -> None:
    """円錐ワイヤーフレームを追記します。

    底面リングは `y = -height`、頂点は `(0, height, 0)`。母線は全周ではなく
    ±X/±Z の 4 本だけを引いてシルエットを近似する。

    頂点数は `vertex_count + 5`、線分数は `vertex_count + 4`。
    """
    begin = check_vertex_begin("cone", vertex_begin, positions)
    n = resolve_vertex_count(vertex_count)
    create_circle_ring(radius, Axis.Y, (0.0, -height, 0.0), begin, n, positions, indices)

    positions.extend(
        [
            (0.0, height, 0.0),
            (-radius, -height, 0.0),
            (radius, -height, 0.0),
            (0.0, -height, radius),
            (0.0, -height, -radius),
        ]
    )
    apex = begin + n
    for k in range(1, 5):
        indices.extend((apex, apex + k))

    log_emitted("cone", begin, n + 5, n + 4)
