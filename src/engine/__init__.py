"""
どこで: `engine` パッケージ。
何を: 生成結果のデータ構造（`engine.core`）をまとめる。
"""
