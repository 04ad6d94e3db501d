from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_int, env_str
from common.logging import setup_default_logging
from common.types import Axis


def test_env_int_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AUXL_TEST_INT", raising=False)
    assert env_int("AUXL_TEST_INT", 3) == 3
    monkeypatch.setenv("AUXL_TEST_INT", " 12 ")
    assert env_int("AUXL_TEST_INT", 3) == 12
    monkeypatch.setenv("AUXL_TEST_INT", "abc")
    assert env_int("AUXL_TEST_INT", 3) == 3
    monkeypatch.setenv("AUXL_TEST_INT", "-5")
    assert env_int("AUXL_TEST_INT", 3, min_value=0) == 0


@pytest.mark.parametrize(
    "raw,expected", [("1", True), ("0", False), ("yes", True), ("off", False), ("maybe", True)]
)
def test_env_bool_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("AUXL_TEST_BOOL", raw)
    # 解釈できない値は既定値（ここでは True）
    assert env_bool("AUXL_TEST_BOOL", True) is expected


def test_env_str_blank_is_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUXL_TEST_STR", "  ")
    assert env_str("AUXL_TEST_STR", "INFO") == "INFO"


def test_reload_from_env_reads_ring_resolution(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUXL_RING_VERTEX_COUNT", "12")
    monkeypatch.setenv("AUXL_VALIDATE_INDICES", "true")
    settings.reload_from_env()
    assert settings.get().RING_VERTEX_COUNT == 12
    assert settings.get().VALIDATE_INDICES is True

    monkeypatch.setenv("AUXL_RING_VERTEX_COUNT", "not-a-number")
    settings.reload_from_env()
    assert settings.get().RING_VERTEX_COUNT == settings.DEFAULT_RING_VERTEX_COUNT

    monkeypatch.setenv("AUXL_RING_VERTEX_COUNT", "-4")
    settings.reload_from_env()
    assert settings.get().RING_VERTEX_COUNT == 0


def test_set_ring_vertex_count_validates() -> None:
    settings.set_ring_vertex_count(7)
    assert settings.get().RING_VERTEX_COUNT == 7
    with pytest.raises(ValueError):
        settings.set_ring_vertex_count(-1)
    assert settings.get().RING_VERTEX_COUNT == 7


def test_setup_default_logging_is_noop_when_configured() -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        before = list(root.handlers)
        setup_default_logging("DEBUG")
        assert root.handlers == before
    finally:
        root.removeHandler(handler)


def test_axis_coerce() -> None:
    assert Axis.coerce(1) is Axis.Y
    assert Axis.coerce(Axis.Z) is Axis.Z
    with pytest.raises(ValueError):
        Axis.coerce(5)
