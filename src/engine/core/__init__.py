"""
どこで: `engine.core` サブパッケージ。
何を: ワイヤーフレーム出力バッファ `WireframeBuffers` を提供。
なぜ: 生成（shapes）と消費（描画側）の境界となるデータ構造を上位層から再利用可能にするため。
"""

from .buffers import WireframeBuffers

__all__ = ["WireframeBuffers"]
