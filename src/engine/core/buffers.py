"""
ワイヤーフレーム出力バッファ（頂点列 + 線分インデックス列）

本モジュールは、複数のシェイプを 1 組の頂点/インデックスバッファへ詰め込むための
薄いコンテナ `WireframeBuffers` を提供する。ビルダ関数（`shapes.*`）は素の
`list` にも直接追記できるが、本クラスを使うと次に渡す `vertex_begin` の管理と
GPU 転送用の ndarray 化を呼び出し側で書かずに済む。

データモデル（不変条件）:
- `positions: list[Vec3]` — 追記専用。インデックスはバッファ全体で通し番号（0 始まり）。
- `indices: list[int]` — 追記専用。連続する 2 要素 `(a, b)` が 1 本の線分 `a→b`。
- 各ビルダ呼び出しの `vertex_begin` は呼び出し時点の `len(positions)` と一致させる。

直感図（cuboid の後に sphere を詰める例、リング解像度 n）:

    # positions
    #   0 .. 23          cuboid（6 面 × 4 頂点）
    #   24 .. 24+3n-1    sphere（X/Y/Z リング）
    # indices（ペア数）
    #   0 .. 23          cuboid
    #   24 .. 24+3n-1    sphere（すべて 24 以上を参照）

補足:
- バッファの縮小/クリアは提供しない（追記専用）。作り直す場合は新しいインスタンスを使う。
- `as_arrays()` は float32 (N, 3) と uint32 (2M,) を返す。描画 API への転送は呼び出し側の責務。
"""

from __future__ import annotations

import numpy as np

from common.types import Vec3


class WireframeBuffers:
    """頂点列と線分インデックス列の組。

    フィールド:
    - `positions list[Vec3]`: 追記専用の頂点列。
    - `indices list[int]`: 追記専用の線分インデックス列（2 要素で 1 線分）。
    """

    __slots__ = ("positions", "indices")

    positions: list[Vec3]
    indices: list[int]

    def __init__(self) -> None:
        self.positions = []
        self.indices = []

    # ── 参照系 ───────────────────
    @property
    def vertex_begin(self) -> int:
        """次のビルダ呼び出しに渡す `vertex_begin`（= 現在の頂点数）。"""
        return len(self.positions)

    @property
    def n_vertices(self) -> int:
        """頂点数 `N` を返す。"""
        return len(self.positions)

    @property
    def n_lines(self) -> int:
        """線分本数 `M`（インデックス 2 要素で 1 本）を返す。"""
        return len(self.indices) // 2

    @property
    def is_empty(self) -> bool:
        return not self.positions

    def __len__(self) -> int:
        """線分本数（`M`）を返す。"""
        return self.n_lines

    def as_arrays(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        """GPU 転送向けの配列を返す。

        Parameters
        ----------
        copy : bool, default False
            False の場合は読み取り専用フラグを立てた配列を返す。

        Returns
        -------
        tuple[np.ndarray, np.ndarray]
            `(positions float32 (N, 3), indices uint32 (2M,))`。

        Notes
        -----
        list からの変換なので常に新しい配列が作られる。`copy=False` は
        受け取り側での就地変更を防ぐためだけに `setflags(write=False)` する。
        """
        if self.positions:
            positions = np.asarray(self.positions, dtype=np.float32).reshape(-1, 3)
        else:
            positions = np.empty((0, 3), dtype=np.float32)
        indices = np.asarray(self.indices, dtype=np.uint32).reshape(-1)
        if not copy:
            positions.setflags(write=False)
            indices.setflags(write=False)
        return positions, indices

    def segments(self) -> np.ndarray:
        """線分端点の配列 `float32 (M, 2, 3)` を返す。"""
        self.validate()
        positions, indices = self.as_arrays(copy=True)
        if indices.size == 0:
            return np.empty((0, 2, 3), dtype=np.float32)
        return positions[indices.reshape(-1, 2).astype(np.intp)]

    def validate(self) -> None:
        """インデックス列の整合性を検証する。

        Raises
        ------
        ValueError
            インデックス数が奇数、または `[0, N)` の範囲外を参照している場合。
        """
        if len(self.indices) % 2 != 0:
            raise ValueError(f"indices の長さは偶数である必要があります: got {len(self.indices)}")
        if not self.indices:
            return
        arr = np.asarray(self.indices, dtype=np.int64)
        lo = int(arr.min())
        hi = int(arr.max())
        if lo < 0 or hi >= len(self.positions):
            raise ValueError(
                f"indices が頂点範囲外を参照しています: range=[{lo}, {hi}] n_vertices={len(self.positions)}"
            )

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"WireframeBuffers(N={self.n_vertices}, M={self.n_lines})"


__all__ = ["WireframeBuffers"]
