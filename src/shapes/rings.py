"""
どこで: `shapes.rings`（リング生成の葉モジュール）。
何を: 円リング/楕円リングを等角サンプリングし、閉ループの線分インデックスとともに追記する。
なぜ: sphere/cone/cylinder/capsule の断面をすべてここに集約し、各ビルダは配置だけを担うため。

サンプリング:
- `θ_i = (i / n) · 2π`（`i = 0 .. n-1`、終点は含めない）。
- インデックスは `(b+i, b+i+1)`、最後だけ `(b+n-1, b)` で閉じる。ちょうど n ペア。
- `n == 0` の場合は何も追記しない。
"""

from __future__ import annotations

import logging

import numpy as np

from common import settings
from common.types import Axis, IndexBuffer, PositionBuffer, Vec3

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * np.pi


def resolve_vertex_count(vertex_count: int | None = None) -> int:
    """リング解像度を確定する。

    `None` の場合は呼び出し時点のプロセス設定 `RING_VERTEX_COUNT` を読む。

    例外:
        ValueError: 負の値が渡された場合。
    """
    if vertex_count is None:
        return int(settings.get().RING_VERTEX_COUNT)
    count = int(vertex_count)
    if count < 0:
        raise ValueError(f"vertex_count must be >= 0: got {vertex_count!r}")
    return count


def ring_angles(vertex_count: int) -> np.ndarray:
    """`n` 個の等間隔角度（ラジアン, float64）。"""
    if vertex_count <= 0:
        return np.empty(0, dtype=np.float64)
    return np.arange(vertex_count, dtype=np.float64) * (1.0 / vertex_count) * TWO_PI


def append_loop_indices(vertex_begin: int, vertex_count: int, indices: IndexBuffer) -> None:
    """`vertex_begin` から始まる `n` 頂点の閉ループを線分ペアとして追記する。"""
    if vertex_count <= 0:
        return
    start = np.arange(vertex_begin, vertex_begin + vertex_count, dtype=np.int64)
    pairs = np.stack((start, np.roll(start, -1)), axis=1)
    indices.extend(pairs.reshape(-1).tolist())


def _extend_positions(points: np.ndarray, positions: PositionBuffer) -> None:
    positions.extend(tuple(p) for p in points.tolist())


def create_circle_ring(
    radius: float,
    axis: Axis | int,
    shift: Vec3,
    vertex_begin: int,
    vertex_count: int,
    positions: PositionBuffer,
    indices: IndexBuffer,
) -> None:
    """`axis` に垂直な平面上の円リングを追記する。

    引数:
        radius: 半径
        axis: 法線方向の主軸（X/Y/Z）
        shift: 中心位置
        vertex_begin: 先頭頂点のグローバルインデックス
        vertex_count: 頂点数（= 線分数）
        positions: 頂点列（追記）
        indices: インデックス列（追記）
    """
    ax = Axis.coerce(axis)
    n = int(vertex_count)
    if n <= 0:
        return
    sx, sy, sz = (float(c) for c in shift)
    theta = ring_angles(n)
    cos_t = radius * np.cos(theta)
    sin_t = radius * np.sin(theta)
    pts = np.empty((n, 3), dtype=np.float64)
    if ax is Axis.X:
        pts[:, 0] = sx
        pts[:, 1] = cos_t + sy
        pts[:, 2] = sin_t + sz
    elif ax is Axis.Y:
        pts[:, 0] = cos_t + sx
        pts[:, 1] = sy
        pts[:, 2] = sin_t + sz
    else:
        pts[:, 0] = cos_t + sx
        pts[:, 1] = sin_t + sy
        pts[:, 2] = sz

    _extend_positions(pts, positions)
    append_loop_indices(vertex_begin, n, indices)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("circle ring axis=%s begin=%d count=%d r=%s", ax.name, vertex_begin, n, radius)


def create_elliptic_ring(
    radius: float,
    height: float,
    axis: Axis | int,
    vertex_begin: int,
    vertex_count: int,
    positions: PositionBuffer,
    indices: IndexBuffer,
) -> None:
    """上下に `±height` ずらした半円 2 本を 1 本の閉ループとして追記する（カプセル側面用）。

    軸方向オフセットはサンプル `i < n // 2` で `+height`、`i >= n // 2` で `-height`。
    奇数 n では切り捨て除算の位置で切り替わる（非対称のまま維持する）。

    埋め込み:
        X: (0, r·sinθ + h, r·cosθ)
        Y: (r·cosθ, h, r·sinθ)
        Z: (r·cosθ, r·sinθ + h, 0)
    """
    ax = Axis.coerce(axis)
    n = int(vertex_count)
    if n <= 0:
        return
    theta = ring_angles(n)
    cos_t = radius * np.cos(theta)
    sin_t = radius * np.sin(theta)
    flip_at = n // 2
    h = np.where(np.arange(n) < flip_at, float(height), -float(height))
    pts = np.zeros((n, 3), dtype=np.float64)
    if ax is Axis.X:
        pts[:, 1] = sin_t + h
        pts[:, 2] = cos_t
    elif ax is Axis.Y:
        pts[:, 0] = cos_t
        pts[:, 1] = h
        pts[:, 2] = sin_t
    else:
        pts[:, 0] = cos_t
        pts[:, 1] = sin_t + h

    _extend_positions(pts, positions)
    append_loop_indices(vertex_begin, n, indices)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "elliptic ring axis=%s begin=%d count=%d flip_at=%d", ax.name, vertex_begin, n, flip_at
        )


__all__ = [
    "append_loop_indices",
    "create_circle_ring",
    "create_elliptic_ring",
    "resolve_vertex_count",
    "ring_angles",
]
