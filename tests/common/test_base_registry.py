from __future__ import annotations

import pytest

from common.base_registry import BaseRegistry


def test_register_and_get_with_camel_case_normalization() -> None:
    reg = BaseRegistry()

    @reg.register(None)
    def UnboundCylinder():  # noqa: N802 (テスト用)
        return None

    assert reg.is_registered("unbound_cylinder")
    assert reg.get("UnboundCylinder") is UnboundCylinder
    assert reg.list_all() == ["unbound_cylinder"]


def test_duplicate_name_is_rejected_and_unregister_is_lenient() -> None:
    reg = BaseRegistry()

    @reg.register("capsule")
    def first():  # noqa: ANN001 - テスト用
        return 1

    # 同一オブジェクトの再登録は許容
    reg.register("capsule")(first)
    with pytest.raises(ValueError):
        reg.register("Capsule")(lambda: 2)

    reg.unregister("nonexistent")  # 例外にならない
    reg.unregister("CAPSULE")
    assert not reg.is_registered("capsule")


def test_key_normalization_hyphen_and_invalid_keys() -> None:
    reg = BaseRegistry()

    @reg.register("unbound-cylinder")
    def fn():  # noqa: ANN001 - テスト用
        return 0

    assert reg.get("unbound_cylinder") is fn
    with pytest.raises(KeyError):
        reg.get("cuboid")
    with pytest.raises(ValueError):
        reg.is_registered("")
    with pytest.raises(TypeError):
        reg.is_registered(3)  # type: ignore[arg-type]


def test_registry_property_returns_copy() -> None:
    reg = BaseRegistry()
    reg.register("sphere")(lambda: None)
    snap = reg.registry
    snap["bogus"] = object()
    assert not reg.is_registered("bogus")
