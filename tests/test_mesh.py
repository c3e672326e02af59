import numpy as np
import pytest

from MeshGraph.errors import MalformedMeshError
from MeshGraph.mesh import Mesh, load_obj, make_grid_mesh


def test_mesh_buffers_are_typed(triangle_mesh):
    assert triangle_mesh.vertices.dtype == np.float32
    assert triangle_mesh.triangles.dtype == np.int32
    assert triangle_mesh.num_vertices == 3
    assert triangle_mesh.num_triangles == 1


def test_empty_mesh_has_empty_shapes(empty_mesh):
    assert empty_mesh.vertices.shape == (0, 3)
    assert empty_mesh.triangles.shape == (0, 3)


@pytest.mark.parametrize("vertices, triangles", [
    ([[0.0, 0.0], [1.0, 0.0]], []),
    ([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], [[0, 1]]),
])
def test_bad_shapes_are_rejected(vertices, triangles):
    with pytest.raises(MalformedMeshError):
        Mesh(vertices, triangles)


def test_grid_mesh_layout():
    mesh = make_grid_mesh(4, 3, spacing=0.5)
    assert mesh.num_vertices == 12
    assert mesh.num_triangles == 2 * 3 * 2
    # index = y * width + x
    np.testing.assert_allclose(mesh.vertices[6], [1.0, 0.5, 0.0])
    assert mesh.triangles.tolist()[:2] == [[0, 1, 5], [0, 5, 4]]


def test_single_row_grid_has_no_triangles():
    mesh = make_grid_mesh(5, 1)
    assert mesh.num_vertices == 5
    assert mesh.triangles.shape == (0, 3)


def test_grid_mesh_rejects_zero_size():
    with pytest.raises(MalformedMeshError):
        make_grid_mesh(0, 3)


def test_load_obj_triangulates_quads(tmp_path):
    path = tmp_path / "quad.obj"
    path.write_text(
        "# quad\n"
        "v 0 0 0\n"
        "v 1 0 0 1.0 0.5 0.5\n"
        "v 1 1 0\n"
        "v 0 1 0\n"
        "vt 0 0\n"
        "f 1/1 2/2 3/3 4/4\n"
    )
    mesh = load_obj(str(path))
    assert mesh.num_vertices == 4
    assert mesh.triangles.tolist() == [[0, 1, 2], [0, 2, 3]]


def test_load_obj_reports_bad_records(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("v 0 0 0\nv 1 zero 0\n")
    with pytest.raises(MalformedMeshError, match="bad.obj:2"):
        load_obj(str(path))


def test_load_obj_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(str(tmp_path / "missing.obj"))


@pytest.mark.parametrize("face, reason", [
    ("f 1 2", "at least 3 vertices"),
    ("f -3 -2 -1", "relative"),
    ("f 0 1 2", "relative"),
])
def test_load_obj_rejects_unusable_faces(tmp_path, face, reason):
    path = tmp_path / "faces.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\n" + face + "\n")
    with pytest.raises(MalformedMeshError, match=f"faces.obj:4: .*{reason}"):
        load_obj(str(path))


def test_load_obj_reports_out_of_range_face(tmp_path):
    path = tmp_path / "range.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 4\n")
    with pytest.raises(MalformedMeshError, match="vertex 3"):
        load_obj(str(path))
