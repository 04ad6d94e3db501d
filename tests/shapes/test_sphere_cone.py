from __future__ import annotations

import numpy as np
import pytest

from common import settings
from shapes.cone import create_cone
from shapes.sphere import create_sphere
from tests._utils.topology import as_pairs, assert_closed_loop, assert_in_range


def test_sphere_vertices_lie_on_sphere(positions, indices) -> None:
    create_sphere(2.0, 0, positions, indices, vertex_count=16)
    assert len(positions) == 48
    assert len(indices) == 96
    r = np.linalg.norm(np.asarray(positions), axis=1)
    np.testing.assert_allclose(r, 2.0, rtol=0, atol=1e-12)


def test_sphere_rings_are_consecutive_per_axis(positions, indices) -> None:
    n, begin = 12, 5
    positions.extend([(0.0, 0.0, 0.0)] * begin)
    create_sphere(1.0, begin, positions, indices, vertex_count=n)
    pts = np.asarray(positions[begin:])
    # X → Y → Z の順に、その軸成分が 0 のリング
    np.testing.assert_array_equal(pts[:n, 0], np.zeros(n))
    np.testing.assert_array_equal(pts[n : 2 * n, 1], np.zeros(n))
    np.testing.assert_array_equal(pts[2 * n :, 2], np.zeros(n))

    pairs = as_pairs(indices)
    for ring in range(3):
        assert_closed_loop(pairs[ring * n : (ring + 1) * n], begin + ring * n, n)


def test_sphere_reads_ring_resolution_at_call_time(positions, indices) -> None:
    settings.set_ring_vertex_count(10)
    create_sphere(1.0, 0, positions, indices)
    assert len(positions) == 30

    settings.set_ring_vertex_count(4)
    create_sphere(1.0, 30, positions, indices)
    # 以前の出力は変わらず、以後の呼び出しだけが新しい解像度を使う
    assert len(positions) == 30 + 12
    assert_in_range(indices[:60], 0, 30)
    assert_in_range(indices[60:], 30, 12)


def test_sphere_default_resolution_is_forty(positions, indices) -> None:
    settings.reload_from_env()
    if settings.get().RING_VERTEX_COUNT != settings.DEFAULT_RING_VERTEX_COUNT:
        pytest.skip("AUXL_RING_VERTEX_COUNT is set in the environment")
    create_sphere(1.0, 0, positions, indices)
    assert len(positions) == 120


def test_cone_base_ring_and_apex(positions, indices) -> None:
    n = 12
    radius, height = 0.5, 1.5
    create_cone(radius, height, 0, positions, indices, vertex_count=n)
    assert len(positions) == n + 5
    assert len(indices) == 2 * (n + 4)

    ring = np.asarray(positions[:n])
    np.testing.assert_array_equal(ring[:, 1], np.full(n, -height))
    np.testing.assert_allclose(np.hypot(ring[:, 0], ring[:, 2]), radius, atol=1e-12)

    assert positions[n] == (0.0, height, 0.0)
    assert positions[n + 1 :] == [
        (-radius, -height, 0.0),
        (radius, -height, 0.0),
        (0.0, -height, radius),
        (0.0, -height, -radius),
    ]


def test_cone_generator_lines_start_at_apex(positions, indices) -> None:
    n, begin = 8, 3
    positions.extend([(0.0, 0.0, 0.0)] * begin)
    create_cone(1.0, 2.0, begin, positions, indices, vertex_count=n)
    pairs = as_pairs(indices)
    assert_closed_loop(pairs[:n], begin, n)
    apex = begin + n
    assert pairs[n:] == [(apex, apex + 1), (apex, apex + 2), (apex, apex + 3), (apex, apex + 4)]
    assert_in_range(indices, begin, n + 5)


def test_cone_zero_resolution_still_emits_generators(positions, indices) -> None:
    create_cone(1.0, 1.0, 0, positions, indices, vertex_count=0)
    assert len(positions) == 5
    assert as_pairs(indices) == [(0, 1), (0, 2), (0, 3), (0, 4)]


def test_negative_vertex_count_is_rejected(positions, indices) -> None:
    with pytest.raises(ValueError):
        create_sphere(1.0, 0, positions, indices, vertex_count=-1)
    assert positions == []
