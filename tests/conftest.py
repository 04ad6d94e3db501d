"""共通フィクスチャ。

- 出力バッファ（呼び出し側所有の list 2 本）
- プロセス設定（リング解像度など）のテスト間復元
"""

from __future__ import annotations

import dataclasses
from typing import Iterator

import pytest

from common import settings
from common.types import Vec3


@pytest.fixture(autouse=True)
def restore_settings() -> Iterator[None]:
    """テスト内で変更した `common.settings` を元に戻す。"""
    s = settings.get()
    saved = dataclasses.replace(s)
    yield
    for field in dataclasses.fields(saved):
        setattr(s, field.name, getattr(saved, field.name))


@pytest.fixture()
def positions() -> list[Vec3]:
    return []


@pytest.fixture()
def indices() -> list[int]:
    return []
