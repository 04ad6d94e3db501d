"""
どこで: `api.wireframe`（ワイヤーフレーム生成の高レベル API）。
何を: 形状種別ごとのパラメータ dataclass と、それを登録済みビルダへ振り分ける `WireframeGenerator`。
なぜ: 複数形状を 1 組のバッファへ詰め込む際の `vertex_begin` 管理とリング解像度の受け渡しを一箇所にまとめるため。

Notes
-----
- ビルダ本体（`shapes.*`）は呼び出し側所有のバッファへ追記する純関数。本モジュールは
  `WireframeBuffers` の現在長を `vertex_begin` として渡すだけの薄いファサード。
- リング解像度は生成器の構築時に確定する（`vertex_count=None` なら構築時点の
  `common.settings` 値）。以後プロセス設定を変更しても既存の生成器には影響しない。
  呼び出しごとに設定値を読みたい場合は `shapes.*` を直接呼ぶ。
- 形状クラス階層は持たない。パラメータ型 → 形状名 → ビルダ関数の単純なディスパッチ。

Examples
--------
    from api import WireframeGenerator, CuboidParams, SphereParams

    gen = WireframeGenerator(vertex_count=32)
    buffers = gen.build(CuboidParams(1.0, 2.0, 1.0), SphereParams(radius=0.5))
    positions, indices = buffers.as_arrays()
"""

from __future__ import annotations

import logging
from dataclasses import astuple, dataclass
from enum import Enum
from typing import ClassVar, Union

# レジストリ登録の副作用を発火させるため、shapes パッケージを 1 度だけ import すれば十分
import shapes  # noqa: F401  (登録目的の副作用)
from common import settings
from engine.core.buffers import WireframeBuffers
from shapes.registry import get_shape
from shapes.rings import resolve_vertex_count

logger = logging.getLogger(__name__)


class ShapeKind(str, Enum):
    """レジストリ上の形状名。"""

    CUBOID = "cuboid"
    SPHERE = "sphere"
    CONE = "cone"
    UNBOUND_CYLINDER = "unbound_cylinder"
    CAPSULE = "capsule"


@dataclass(frozen=True)
class CuboidParams:
    width: float = 1.0
    height: float = 1.0
    depth: float = 1.0

    kind: ClassVar[ShapeKind] = ShapeKind.CUBOID
    uses_rings: ClassVar[bool] = False


@dataclass(frozen=True)
class SphereParams:
    radius: float = 0.5

    kind: ClassVar[ShapeKind] = ShapeKind.SPHERE
    uses_rings: ClassVar[bool] = True


@dataclass(frozen=True)
class ConeParams:
    radius: float = 0.5
    height: float = 1.0

    kind: ClassVar[ShapeKind] = ShapeKind.CONE
    uses_rings: ClassVar[bool] = True


@dataclass(frozen=True)
class UnboundCylinderParams:
    radius: float = 0.5

    kind: ClassVar[ShapeKind] = ShapeKind.UNBOUND_CYLINDER
    uses_rings: ClassVar[bool] = True


@dataclass(frozen=True)
class CapsuleParams:
    radius: float = 0.5
    height: float = 1.0

    kind: ClassVar[ShapeKind] = ShapeKind.CAPSULE
    uses_rings: ClassVar[bool] = True


ShapeParams = Union[CuboidParams, SphereParams, ConeParams, UnboundCylinderParams, CapsuleParams]

_PARAM_TYPES = (CuboidParams, SphereParams, ConeParams, UnboundCylinderParams, CapsuleParams)

# 追記された頂点範囲 (先頭インデックス, 頂点数)
VertexRange = tuple[int, int]


class WireframeGenerator:
    """リング解像度を保持し、形状パラメータをビルダへ振り分ける生成器。

    責務:
    - パラメータ型 → 登録済みビルダの解決と呼び出し
    - `vertex_begin` の自動算出（対象バッファの現在長）
    - 任意でインデックス範囲の事後検証（`AUXL_VALIDATE_INDICES`）

    既定の出力先は生成器自身が持つ `buffers`。各メソッドの `buffers=` で別のバッファにも追記できる。
    """

    def __init__(
        self,
        vertex_count: int | None = None,
        *,
        validate: bool | None = None,
        buffers: WireframeBuffers | None = None,
    ) -> None:
        self.vertex_count = resolve_vertex_count(vertex_count)
        self.validate = settings.get().VALIDATE_INDICES if validate is None else bool(validate)
        self.buffers = WireframeBuffers() if buffers is None else buffers

    # ---- ディスパッチ ----------------------------------------------------
    def generate(self, params: ShapeParams, buffers: WireframeBuffers | None = None) -> VertexRange:
        """`params` の形状を追記し、追記した頂点範囲を返す。

        例外:
            TypeError: 未知のパラメータ型が渡された場合。
        """
        if not isinstance(params, _PARAM_TYPES):
            raise TypeError(f"unsupported shape params: {type(params).__name__}")
        target = self.buffers if buffers is None else buffers
        begin = target.vertex_begin
        fn = get_shape(params.kind.value)
        args = (*astuple(params), begin, target.positions, target.indices)
        if params.uses_rings:
            fn(*args, vertex_count=self.vertex_count)
        else:
            fn(*args)
        added = target.vertex_begin - begin
        if self.validate:
            target.validate()
        logger.debug("generated %s at %d (+%d vertices)", params.kind.value, begin, added)
        return begin, added

    def build(self, *params: ShapeParams) -> WireframeBuffers:
        """新しい `WireframeBuffers` に `params` の形状を順に詰めて返す。"""
        out = WireframeBuffers()
        for p in params:
            self.generate(p, out)
        return out

    # ---- 形状ごとの糖衣 --------------------------------------------------
    def cuboid(
        self, width: float, height: float, depth: float, *, buffers: WireframeBuffers | None = None
    ) -> VertexRange:
        return self.generate(CuboidParams(width, height, depth), buffers)

    def sphere(self, radius: float, *, buffers: WireframeBuffers | None = None) -> VertexRange:
        return self.generate(SphereParams(radius), buffers)

    def cone(
        self, radius: float, height: float, *, buffers: WireframeBuffers | None = None
    ) -> VertexRange:
        return self.generate(ConeParams(radius, height), buffers)

    def unbound_cylinder(
        self, radius: float, *, buffers: WireframeBuffers | None = None
    ) -> VertexRange:
        return self.generate(UnboundCylinderParams(radius), buffers)

    def capsule(
        self, radius: float, height: float, *, buffers: WireframeBuffers | None = None
    ) -> VertexRange:
        return self.generate(CapsuleParams(radius, height), buffers)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"WireframeGenerator(vertex_count={self.vertex_count}, buffers={self.buffers!r})"


def build(*params: ShapeParams, vertex_count: int | None = None) -> WireframeBuffers:
    """`WireframeGenerator(vertex_count).build(*params)` の省略形。"""
    return WireframeGenerator(vertex_count).build(*params)


__all__ = [
    "CapsuleParams",
    "ConeParams",
    "CuboidParams",
    "ShapeKind",
    "ShapeParams",
    "SphereParams",
    "UnboundCylinderParams",
    "VertexRange",
    "WireframeGenerator",
    "build",
]
