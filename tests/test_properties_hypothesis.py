import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, settings as hsettings, strategies as st  # type: ignore

from api import CapsuleParams, ConeParams, CuboidParams, SphereParams, UnboundCylinderParams
from api import WireframeBuffers, WireframeGenerator
from common.types import Axis
from shapes.rings import create_circle_ring, create_elliptic_ring
from tests._utils.topology import as_pairs, assert_closed_loop

_dims = st.floats(-10, 10, allow_nan=False, allow_infinity=False)


@given(
    n=st.integers(0, 64),
    begin=st.integers(0, 1000),
    radius=_dims,
    axis=st.sampled_from(list(Axis)),
    elliptic=st.booleans(),
)
def test_ring_is_single_closed_loop(n, begin, radius, axis, elliptic):
    positions: list = []
    indices: list = []
    if elliptic:
        create_elliptic_ring(radius, 0.5, axis, begin, n, positions, indices)
    else:
        create_circle_ring(radius, axis, (1.0, -2.0, 0.5), begin, n, positions, indices)
    assert len(positions) == n
    assert len(indices) == 2 * n
    if n:
        assert_closed_loop(as_pairs(indices), begin, n)


@given(radius=st.floats(0.0, 100.0, allow_nan=False), n=st.integers(1, 48))
def test_sphere_radius_preserved(radius, n):
    out = WireframeGenerator(vertex_count=n).build(SphereParams(radius))
    r = np.linalg.norm(np.asarray(out.positions), axis=1)
    np.testing.assert_allclose(r, radius, rtol=1e-12, atol=1e-12)


_shape_params = st.one_of(
    st.builds(CuboidParams, _dims, _dims, _dims),
    st.builds(SphereParams, _dims),
    st.builds(ConeParams, _dims, _dims),
    st.builds(UnboundCylinderParams, _dims),
    st.builds(CapsuleParams, _dims, _dims),
)


@hsettings(max_examples=50)
@given(params=st.lists(_shape_params, max_size=8), n=st.integers(0, 16))
def test_packed_shapes_never_overlap(params, n):
    gen = WireframeGenerator(vertex_count=n)
    out = WireframeBuffers()
    index_start = 0
    for p in params:
        begin, added = gen.generate(p, out)
        new = out.indices[index_start:]
        assert all(begin <= v < begin + added for v in new)
        index_start = len(out.indices)
    out.validate()
