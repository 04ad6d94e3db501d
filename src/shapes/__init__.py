"""
どこで: `shapes` パッケージ（ビルダ関数の登録）。
何を: ビルトインのワイヤーフレームビルダを import 副作用で登録し、`api.wireframe` から解決できるようにする。
なぜ: 形状種別の拡張点を一箇所に集約するため。
"""

# ビルダ定義を import して登録（副作用）
from . import capsule as _register_capsule  # noqa: F401
from . import cone as _register_cone  # noqa: F401
from . import cuboid as _register_cuboid  # noqa: F401
from . import cylinder as _register_cylinder  # noqa: F401
from . import sphere as _register_sphere  # noqa: F401
from .capsule import create_capsule
from .cone import create_cone
from .counts import expected_counts
from .cuboid import create_cuboid
from .cylinder import create_unbound_cylinder
from .registry import get_shape, is_shape_registered, list_shapes, shape  # re-export
from .rings import create_circle_ring, create_elliptic_ring
from .sphere import create_sphere

__all__ = [
    "create_capsule",
    "create_circle_ring",
    "create_cone",
    "create_cuboid",
    "create_elliptic_ring",
    "create_sphere",
    "create_unbound_cylinder",
    "expected_counts",
    "get_shape",
    "is_shape_registered",
    "list_shapes",
    "shape",
]
