from __future__ import annotations

from common.types import IndexBuffer, PositionBuffer

from .base import check_vertex_begin, log_emitted
from .registry import shape

# 面の並び（頂点 4 つずつ、この順で追記する）
FACES = ("up", "down", "left", "right", "front", "back")


@shape("cuboid")
def create_cuboid(
    width: float,
    height: float,
    depth: float,
    vertex_begin: int,
    positions: PositionBuffer,
    indices: IndexBuffer,
) -> None:
    """原点中心の直方体ワイヤーフレームを追記します。

    6 面それぞれが独立した 4 頂点を持つ（共有辺は面ごとに重複する）。
    頂点順は互換性のため固定: 24 頂点、24 線分。

    引数:
        width: X 方向の幅
        height: Y 方向の高さ
        depth: Z 方向の奥行き
        vertex_begin: 先頭頂点のグローバルインデックス
        positions: 頂点列（追記）
        indices: インデックス列（追記）
    """
    begin = check_vertex_begin("cuboid", vertex_begin, positions)
    hw = width / 2
    hh = height / 2
    hd = depth / 2

    positions.extend(
        [
            # Up
            (-hw, hh, -hd),
            (hw, hh, -hd),
            (hw, hh, hd),
            (-hw, hh, hd),
            # Down
            (-hw, -hh, -hd),
            (hw, -hh, -hd),
            (hw, -hh, hd),
            (-hw, -hh, hd),
            # Left
            (-hw, hh, -hd),
            (-hw, hh, hd),
            (-hw, -hh, hd),
            (-hw, -hh, -hd),
            # Right
            (hw, hh, -hd),
            (hw, hh, hd),
            (hw, -hh, hd),
            (hw, -hh, -hd),
            # Front
            (-hw, hh, hd),
            (hw, hh, hd),
            (hw, -hh, hd),
            (-hw, -hh, hd),
            # Back
            (-hw, hh, -hd),
            (hw, hh, -hd),
            (hw, -hh, -hd),
            (-hw, -hh, -hd),
        ]
    )

    for face in range(len(FACES)):
        first = begin + 4 * face
        for k in range(4):
            indices.extend((first + k, first + (k + 1) % 4))

    log_emitted("cuboid", begin, 24, 24)
