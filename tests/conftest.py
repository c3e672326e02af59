import pytest

from MeshGraph.mesh import Mesh, make_grid_mesh


@pytest.fixture
def triangle_mesh():
    return Mesh([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]], [[0, 1, 2]])


@pytest.fixture
def two_triangle_mesh():
    # 0-2 가 공유 변
    return Mesh(
        [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 1.0, 0.0], [0.0, 1.0, 0.0]],
        [[0, 1, 2], [0, 2, 3]],
    )


@pytest.fixture
def empty_mesh():
    return Mesh([], [])


@pytest.fixture
def grid_mesh():
    return make_grid_mesh(6, 5, spacing=1.0)
