import math

import pytest

from orrery.sphere import Sphere

TOL = 1e-12


def test_small_sphere_counts():
    s = Sphere(1.0, sectors=4, stacks=2)
    assert s.vertex_count() == 15
    assert s.triangle_count() == 8
    assert s.line_index_count() == 24


def test_counts_are_consistent():
    s = Sphere(2.0)
    assert s.vertex_count() == s.normal_count() == s.tex_coord_count()
    assert s.index_count() == 3 * s.triangle_count()
    assert s.vertex_count() == (s.stacks + 1) * (s.sectors + 1)


def test_defaults():
    s = Sphere(1.5)
    assert (s.sectors, s.stacks, s.smooth, s.up_axis) == (36, 18, True, 3)
    assert s.radius == 1.5


@pytest.mark.parametrize("radius", [0.5, 1.0, 3.0])
def test_vertices_lie_on_sphere(radius):
    s = Sphere(radius, sectors=8, stacks=6)
    for v in s.vertices:
        assert math.hypot(*v) == pytest.approx(radius)


def test_normals_are_unit_and_radial():
    s = Sphere(2.5, sectors=6, stacks=5)
    for v, n in zip(s.vertices, s.normals):
        assert math.hypot(*n) == pytest.approx(1.0)
        assert n == pytest.approx(tuple(c / 2.5 for c in v), abs=TOL)


@pytest.mark.parametrize(
    "up, pole",
    [(3, (0.0, 0.0, 2.0)), (2, (0.0, 2.0, 0.0)), (1, (2.0, 0.0, 0.0))],
)
def test_poles_follow_up_axis(up, pole):
    s = Sphere(2.0, sectors=8, stacks=4, up_axis=up)
    assert s.vertices[0] == pytest.approx(pole, abs=TOL)
    assert s.vertices[-1] == pytest.approx(tuple(-c for c in pole), abs=TOL)


def test_tex_coords_span_unit_square():
    s = Sphere(1.0, sectors=5, stacks=3)
    assert s.tex_coords[0] == (0.0, 0.0)
    assert s.tex_coords[-1] == (1.0, 1.0)
    assert all(0.0 <= u <= 1.0 and 0.0 <= v <= 1.0 for u, v in s.tex_coords)


def test_indices_in_range():
    s = Sphere(1.0, sectors=7, stacks=5)
    n = s.vertex_count()
    assert all(0 <= i < n for i in s.indices)
    assert all(0 <= i < n for i in s.line_indices)


def test_interleaved_layout():
    s = Sphere(1.0, sectors=3, stacks=3)
    data = s.interleaved_vertices()
    assert len(data) == 8 * s.vertex_count()
    assert tuple(data[8:11]) == s.vertices[1]
    assert tuple(data[11:14]) == s.normals[1]
    assert tuple(data[14:16]) == s.tex_coords[1]


def test_reverse_normals_flips_and_rewinds():
    s = Sphere(1.0, sectors=4, stacks=3)
    normals = list(s.normals)
    indices = list(s.indices)
    s.reverse_normals()
    assert s.normals == [(-x, -y, -z) for x, y, z in normals]
    assert s.indices[:3] == [indices[2], indices[1], indices[0]]
    s.reverse_normals()
    assert s.normals == normals
    assert s.indices == indices


def test_change_up_axis_round_trip():
    s = Sphere(1.0, sectors=6, stacks=4)
    original = list(s.vertices)
    s.change_up_axis(3, 1)
    s.change_up_axis(1, 3)
    assert len(s.vertices) == len(original)
    for a, b in zip(s.vertices, original):
        assert a == pytest.approx(b, abs=TOL)


def test_change_up_axis_updates_interleaved():
    s = Sphere(1.0, sectors=4, stacks=2)
    s.change_up_axis(3, 2)
    data = s.interleaved_vertices()
    assert tuple(data[0:3]) == s.vertices[0]
    assert s.vertices[0] == pytest.approx((0.0, 1.0, 0.0), abs=TOL)


@pytest.mark.parametrize("from_axis, to_axis", [(0, 2), (3, 4), (2, 2)])
def test_change_up_axis_rejects_bad_axes(from_axis, to_axis):
    s = Sphere(1.0, sectors=4, stacks=2)
    with pytest.raises(ValueError):
        s.change_up_axis(from_axis, to_axis)


def test_invalid_parameters():
    with pytest.raises(ValueError):
        Sphere(1.0, sectors=0)
    with pytest.raises(ValueError):
        Sphere(1.0, stacks=0)
    with pytest.raises(ValueError):
        Sphere(0.0)
    with pytest.raises(ValueError):
        Sphere(1.0, up_axis=5)


def test_parameters_apply_on_rebuild():
    s = Sphere(1.0, sectors=4, stacks=2)
    before = s.vertex_count()
    s.sectors = 8
    assert s.vertex_count() == before
    s.rebuild()
    assert s.vertex_count() == (2 + 1) * (8 + 1)