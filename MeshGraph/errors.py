class MeshGraphError(Exception):
    """Base class for every error raised while building or coloring a mesh graph."""


class MalformedMeshError(MeshGraphError, ValueError):
    """Vertex/index buffers that cannot describe a triangle mesh."""


class GraphStateError(MeshGraphError, RuntimeError):
    """A pipeline phase was called on a graph in the wrong state."""


class ColoringPreconditionError(MeshGraphError, RuntimeError):
    """Coloring was requested without any edge to seed it."""


class GraphInvariantError(MeshGraphError, AssertionError):
    """Internal defect: the graph broke one of its own invariants."""
