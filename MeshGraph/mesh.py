import os

import numpy as np

from MeshGraph.errors import MalformedMeshError


class Mesh:
    """
    Vertex buffer + triangle index buffer, as handed over by a 3D engine.
    - vertices: (N, 3) float32
    - triangles: (M, 3) int32
    """

    def __init__(self, vertices, triangles):
        try:
            vertices = np.asarray(vertices, dtype=np.float32)
            # dtype 없이 먼저 변환: int32 캐스팅 전에 범위/정수 여부를 확인해야 함
            raw = np.asarray(triangles)
        except ValueError as e:
            raise MalformedMeshError(f"mesh buffers must be rectangular numeric arrays: {e}") from e

        # 빈 리스트는 (0,) 로 들어오므로 모양을 맞춰줌
        if vertices.size == 0:
            vertices = vertices.reshape(0, 3)
        if raw.size == 0:
            raw = np.zeros((0, 3), dtype=np.int32)

        if vertices.ndim != 2 or vertices.shape[1] != 3:
            raise MalformedMeshError(f"vertices must have shape (N, 3), got {vertices.shape}")
        if raw.ndim != 2 or raw.shape[1] != 3:
            raise MalformedMeshError(f"triangles must have shape (M, 3), got {raw.shape}")
        if not np.issubdtype(raw.dtype, np.integer):
            raise MalformedMeshError(f"triangle indices must be integers, got dtype {raw.dtype}")

        num_vertices = vertices.shape[0]
        bad = (raw < 0) | (raw >= num_vertices)
        if bad.any():
            tri_idx, corner = np.argwhere(bad)[0]
            raise MalformedMeshError(
                f"triangle {tri_idx} references vertex {raw[tri_idx, corner]}, "
                f"but the vertex buffer only has {num_vertices} vertices"
            )

        self.vertices = vertices
        self.triangles = raw.astype(np.int32)

    @property
    def num_vertices(self):
        return self.vertices.shape[0]

    @property
    def num_triangles(self):
        return self.triangles.shape[0]


def make_grid_mesh(width, height, spacing=0.1):
    """
    Regular width x height vertex grid (z = 0), two triangles per quad.
    Vertex index = y * width + x.
    """
    if width < 1 or height < 1:
        raise MalformedMeshError(f"grid needs at least 1x1 vertices, got {width}x{height}")

    pos_host = np.zeros((width * height, 3), dtype=np.float32)
    for y in range(height):
        for x in range(width):
            idx = y * width + x
            pos_host[idx] = [x * spacing, y * spacing, 0.0]

    triangles = []
    for y in range(height - 1):
        for x in range(width - 1):
            idx_bl = y * width + x
            idx_br = y * width + x + 1
            idx_tl = (y + 1) * width + x
            idx_tr = (y + 1) * width + x + 1

            # Quad를 두 개의 Triangle로 나눔 (대각선: BL-TR)
            triangles.append([idx_bl, idx_br, idx_tr])
            triangles.append([idx_bl, idx_tr, idx_tl])

    return Mesh(pos_host, np.array(triangles, dtype=np.int32).reshape(-1, 3))


def load_obj(path):
    """
    Read 'v' and 'f' records of a Wavefront OBJ file.
    Faces with more than three corners are fan-triangulated.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Mesh not found at {path}!")

    vertices = []
    triangles = []
    with open(path, 'r') as f:
        for line_no, line in enumerate(f, start=1):
            tokens = line.strip().split()
            if not tokens:
                continue
            try:
                if tokens[0] == 'v':
                    if len(tokens) < 4:
                        raise ValueError("vertex needs 3 coordinates")
                    # 'v x y z r g b' 처럼 색상이 붙어 있어도 앞의 3개만 사용
                    vertices.append([float(t) for t in tokens[1:4]])
                elif tokens[0] == 'f':
                    # OBJ는 인덱스가 1부터 시작함 (v/vt/vn 형식 허용)
                    face = [int(t.split("/")[0]) for t in tokens[1:]]
                    if len(face) < 3:
                        raise ValueError("face needs at least 3 vertices")
                    if min(face) < 1:
                        raise ValueError("relative (negative) or zero face indices are not supported")
                    face = [i - 1 for i in face]
                    for k in range(1, len(face) - 1):
                        triangles.append([face[0], face[k], face[k + 1]])
            except ValueError as e:
                raise MalformedMeshError(f"{path}:{line_no}: {e} in '{line.strip()}'") from e

    return Mesh(vertices, triangles)
