#!/usr/bin/env python3
"""
Wireframe dump tool.

Packs one or more primitives into a single vertex/index buffer and prints the
result as JSON (counts, and optionally the raw positions/indices).

Usage:
  python scripts/dump_wireframe.py cuboid 1 2 3 sphere 0.5
  python scripts/dump_wireframe.py --vertex-count 8 --full capsule 1 2
  AUXL_RING_VERTEX_COUNT=16 python scripts/dump_wireframe.py cone 0.5 1

Each shape name is followed by its numeric parameters in builder order
(cuboid: width height depth, sphere: radius, cone: radius height,
unbound_cylinder: radius, capsule: radius height).
"""
from __future__ import annotations

import argparse
import json
import logging
from typing import Sequence

from api.wireframe import (
    CapsuleParams,
    ConeParams,
    CuboidParams,
    ShapeParams,
    SphereParams,
    UnboundCylinderParams,
    WireframeGenerator,
)
from common.logging import setup_default_logging

logger = logging.getLogger("scripts.dump_wireframe")

_PARAMS_BY_NAME = {
    "cuboid": (CuboidParams, 3),
    "sphere": (SphereParams, 1),
    "cone": (ConeParams, 2),
    "unbound_cylinder": (UnboundCylinderParams, 1),
    "capsule": (CapsuleParams, 2),
}


def parse_shapes(tokens: Sequence[str]) -> list[ShapeParams]:
    """`name v1 v2 ... name v1 ...` の並びをパラメータ列へ変換する。"""
    out: list[ShapeParams] = []
    i = 0
    while i < len(tokens):
        name = tokens[i].replace("-", "_").lower()
        if name not in _PARAMS_BY_NAME:
            raise ValueError(f"unknown shape: {tokens[i]!r}")
        cls, arity = _PARAMS_BY_NAME[name]
        values = tokens[i + 1 : i + 1 + arity]
        if len(values) != arity:
            raise ValueError(f"{name} expects {arity} value(s), got {len(values)}")
        out.append(cls(*(float(v) for v in values)))
        i += 1 + arity
    return out


def dump(params: Sequence[ShapeParams], vertex_count: int | None, full: bool) -> dict:
    gen = WireframeGenerator(vertex_count)
    ranges = []
    for p in params:
        begin, added = gen.generate(p)
        ranges.append({"shape": p.kind.value, "begin": begin, "vertices": added})
    buffers = gen.buffers
    report: dict = {
        "vertex_count": gen.vertex_count,
        "n_vertices": buffers.n_vertices,
        "n_lines": buffers.n_lines,
        "shapes": ranges,
    }
    if full:
        report["positions"] = [list(p) for p in buffers.positions]
        report["indices"] = list(buffers.indices)
    return report


def main(argv: Sequence[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[1] if __doc__ else None)
    ap.add_argument("shapes", nargs="+", help="shape name followed by its parameters")
    ap.add_argument("--vertex-count", type=int, default=None, help="ring resolution")
    ap.add_argument("--full", action="store_true", help="include positions and indices")
    ap.add_argument("--log-level", default=None)
    args = ap.parse_args(argv)

    setup_default_logging(args.log_level)
    try:
        params = parse_shapes(args.shapes)
    except ValueError as e:
        ap.error(str(e))
    logger.debug("dumping %d shape(s)", len(params))
    print(json.dumps(dump(params, args.vertex_count, args.full)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
