"""
どこで: `api` 入口（高レベル公開 API）。
何を: `WireframeGenerator`・形状パラメータ・`WireframeBuffers`・装飾子 `shape` を再輸出。
なぜ: 利用者が単一名前空間から形状指定→バッファ詰め込み→配列化まで完結できるようにするため。

Usage:
    from api import WireframeGenerator, CapsuleParams, ConeParams

    gen = WireframeGenerator(vertex_count=40)
    gen.capsule(0.5, 2.0)
    gen.cone(0.3, 1.0)
    positions, indices = gen.buffers.as_arrays()  # 描画側へ転送
"""

# コアクラス（高度な使用）
from engine.core.buffers import WireframeBuffers
from shapes.registry import shape as shape  # 公開唯一経路（api.shape）

# 主要API
from .wireframe import (
    CapsuleParams,
    ConeParams,
    CuboidParams,
    ShapeKind,
    SphereParams,
    UnboundCylinderParams,
    WireframeGenerator,
    build,
)

__all__ = [
    "WireframeGenerator",
    "build",
    "shape",
    # パラメータ
    "ShapeKind",
    "CuboidParams",
    "SphereParams",
    "ConeParams",
    "UnboundCylinderParams",
    "CapsuleParams",
    # クラス（高度な使用）
    "WireframeBuffers",
]

__version__ = "2026.10"
