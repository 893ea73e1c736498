import pytest

from terrascene.mesh import Mesh, Vertex, object_to_world
from terrascene.vector import Vector3, Vector4


def flat_plane(res=4, level=3.5, width=8.0, height=6.0):
    heights = [level] * (res * res)
    return Mesh.plane(width, height, res, res, heights, res)


def test_vertex_count_matches_resolution():
    mesh = flat_plane(res=4)
    assert len(mesh.vertices) == 4 * 4


def test_first_vertex_is_at_lower_corner():
    mesh = flat_plane(width=8.0, height=6.0)
    first = mesh.vertices[0].position
    assert first.x == -8.0 * 0.5
    assert first.z == -6.0 * 0.5
    assert first.w == 1.0


def test_flat_height_map_sets_every_height():
    mesh = flat_plane(level=3.5)
    assert all(v.position.y == 3.5 for v in mesh.vertices)


def test_height_map_sampled_by_uv():
    mesh = Mesh.plane(2.0, 2.0, 2, 2, [10.0, 20.0, 30.0, 40.0], 2)
    assert mesh.vertices[0].position.y == 10.0
    assert mesh.vertices[1].position.y == 30.0
    assert mesh.vertices[2].position.y == 20.0


def test_indices_are_in_range_and_triangles():
    res = 5
    mesh = flat_plane(res=res)
    assert len(mesh.indices) == 6 * (res - 1) * (res - 1)
    assert all(0 <= i < len(mesh.vertices) for i in mesh.indices)


def test_flat_plane_normals_are_vertical_unit_vectors():
    res = 4
    mesh = flat_plane(res=res)
    for j in range(res - 1):
        for i in range(res - 1):
            n = mesh.vertices[i + j * res].normal
            assert n.x == 0.0 and n.z == 0.0
            assert abs(n.length() - 1.0) < 1e-12


def test_last_row_normals_are_left_unset():
    res = 3
    mesh = flat_plane(res=res)
    assert mesh.vertices[-1].normal == Vector3()


def test_colors_are_white():
    mesh = flat_plane()
    assert all(v.color == Vector4(1.0, 1.0, 1.0, 1.0) for v in mesh.vertices)


def test_short_height_map_raises():
    with pytest.raises(IndexError):
        Mesh.plane(1.0, 1.0, 4, 4, [0.0], 4)


def test_default_vertex():
    v = Vertex()
    assert v.position.w == 1.0
    assert v.normal == Vector3()


def test_object_to_world_scales_then_translates():
    m = object_to_world(Vector3(5.0, 6.0, 7.0), Vector3(2.0, 3.0, 4.0))
    assert m[1, 1] == 2.0 and m[2, 2] == 3.0 and m[3, 3] == 4.0
    assert (m[4, 1], m[4, 2], m[4, 3], m[4, 4]) == (5.0, 6.0, 7.0, 1.0)
    p = Vector4(1.0, 1.0, 1.0, 1.0) * m
    assert p == Vector4(2.0 + 5.0, 3.0 + 6.0, 4.0 + 7.0, 1.0)