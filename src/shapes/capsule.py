from __future__ import annotations

from common.types import Axis, IndexBuffer, PositionBuffer

from .base import check_vertex_begin, log_emitted
from .registry import shape
from .rings import create_circle_ring, create_elliptic_ring, resolve_vertex_count


@shape("capsule")
def create_capsule(
    radius: float,
    height: float,
    vertex_begin: int,
    positions: PositionBuffer,
    indices: IndexBuffer,
    *,
    vertex_count: int | None = None,
) -> None:
    """原点中心のカプセルワイヤーフレームを追記します。

    引数:
        radius: 両端半球の半径
        height: 円筒部の高さ（両端半球の中心間距離）

    リング 4 本（各 `vertex_count` 頂点）を連続配置する:
        0: 上端の赤道円（Y 軸, y = +height/2）
        1: 下端の赤道円（Y 軸, y = -height/2）
        2: 側面輪郭（XY 平面, 軸インデックス 2）
        3: 側面輪郭（YZ 平面, 軸インデックス 0）
    """
    begin = check_vertex_begin("capsule", vertex_begin, positions)
    n = resolve_vertex_count(vertex_count)
    half = height / 2

    create_circle_ring(radius, Axis.Y, (0.0, half, 0.0), begin, n, positions, indices)
    create_circle_ring(radius, Axis.Y, (0.0, -half, 0.0), begin + n, n, positions, indices)
    create_elliptic_ring(radius, half, Axis.Z, begin + 2 * n, n, positions, indices)
    create_elliptic_ring(radius, half, Axis.X, begin + 3 * n, n, positions, indices)

    log_emitted("capsule", begin, 4 * n, 4 * n)
