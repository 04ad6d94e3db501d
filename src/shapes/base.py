"""
ワイヤーフレームビルダ共通ヘルパ

概要:
- 各ビルダは `create_<kind>(..., vertex_begin, positions, indices)` の形で
  呼び出し側所有のバッファへ追記するだけの純関数として実装する。
- ここでは全ビルダ共通の前処理（`vertex_begin` の検査）とデバッグログを提供する。

設計意図:
- `vertex_begin == len(positions)` はバッファ共有時の呼び出し側の責務。
  ずれていても生成は続行し、WARNING を 1 行残すだけにする。
- 負の `vertex_begin` は明らかな誤りなので `ValueError`。
"""

from __future__ import annotations

import logging
from typing import Sized

logger = logging.getLogger("shapes")


def check_vertex_begin(kind: str, vertex_begin: int, positions: Sized) -> int:
    """`vertex_begin` を検査して int で返す。

    例外:
        ValueError: 負の値が渡された場合。
    """
    begin = int(vertex_begin)
    if begin < 0:
        raise ValueError(f"vertex_begin must be >= 0: got {vertex_begin!r}")
    current = len(positions)
    if begin != current:
        logger.warning(
            "%s: vertex_begin=%d does not match len(positions)=%d", kind, begin, current
        )
    return begin


def log_emitted(kind: str, vertex_begin: int, n_vertices: int, n_pairs: int) -> None:
    """生成結果の件数を DEBUG で記録する。"""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s: begin=%d vertices=%d pairs=%d", kind, vertex_begin, n_vertices, n_pairs
        )


__all__ = ["check_vertex_begin", "log_emitted"]
