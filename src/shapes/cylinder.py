from __future__ import annotations

import math

from common.types import ORIGIN, Axis, IndexBuffer, PositionBuffer

from .base import check_vertex_begin, log_emitted
from .registry import shape
from .rings import create_circle_ring, resolve_vertex_count

# 側線を下方向へ伸ばす長さ（無限長の示唆用、単位系に依らない固定値）
SIDE_LINE_DROP = 5.0
SIDE_LINE_COUNT = 8


@shape("unbound_cylinder")
def create_unbound_cylinder(
    radius: float,
    vertex_begin: int,
    positions: PositionBuffer,
    indices: IndexBuffer,
    *,
    vertex_count: int | None = None,
) -> None:
    """長さの定まらない円柱のワイヤーフレームを追記します。

    リムは `y = 0` のリング 1 本のみ。45° 刻みの 8 本の側線を `y = 0` から
    `y = -5` まで引く。頂点数は `vertex_count + 16`、線分数は `vertex_count + 8`。
    """
    begin = check_vertex_begin("unbound_cylinder", vertex_begin, positions)
    n = resolve_vertex_count(vertex_count)
    create_circle_ring(radius, Axis.Y, ORIGIN, begin, n, positions, indices)

    first = begin + n
    for i in range(SIDE_LINE_COUNT):
        rad = math.radians(45 * i)
        x = radius * math.cos(rad)
        z = radius * math.sin(rad)
        positions.append((x, 0.0, z))
        positions.append((x, -SIDE_LINE_DROP, z))
        indices.extend((first + 2 * i, first + 2 * i + 1))

    log_emitted("unbound_cylinder", begin, n + 2 * SIDE_LINE_COUNT, n + SIDE_LINE_COUNT)
