"""
どこで: `common.settings`
何を: ワイヤーフレーム生成の設定（リング解像度など）を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

Notes
-----
- `RING_VERTEX_COUNT` はプロセス全体の既定解像度。各ビルダは呼び出し時点で読む
  （スナップショットしない）ため、変更は以後の生成にのみ影響する。
- 明示的に `vertex_count=` を渡した呼び出しはこの値を参照しない。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str

DEFAULT_RING_VERTEX_COUNT = 40


@dataclass
class _Settings:
    # リング（円/楕円）1 本あたりの頂点数
    RING_VERTEX_COUNT: int = DEFAULT_RING_VERTEX_COUNT

    # 生成後にインデックス範囲を検証する（デバッグ用）
    VALIDATE_INDICES: bool = False

    # スクリプト/CLI 用の既定ログレベル
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - int は `env_int`（下限 0 に丸め）、bool は `env_bool` を使用。
    - 不正値は既定値へフォールバックし、例外は送出しない。
    """
    _settings.RING_VERTEX_COUNT = (
        env_int("AUXL_RING_VERTEX_COUNT", DEFAULT_RING_VERTEX_COUNT, min_value=0)
        or 0
    )
    _settings.VALIDATE_INDICES = env_bool("AUXL_VALIDATE_INDICES", False)
    _settings.LOG_LEVEL = env_str("AUXL_LOG_LEVEL", "INFO")


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


def set_ring_vertex_count(value: int) -> None:
    """プロセス全体のリング解像度を変更する。

    例外:
        ValueError: 負の値が渡された場合。
    """
    count = int(value)
    if count < 0:
        raise ValueError(f"ring vertex count must be >= 0: got {value!r}")
    _settings.RING_VERTEX_COUNT = count


# 初期ロード
reload_from_env()


__all__ = [
    "DEFAULT_RING_VERTEX_COUNT",
    "get",
    "reload_from_env",
    "set_ring_vertex_count",
    "_Settings",
]
