import numpy as np

from MeshGraph.errors import ColoringPreconditionError, GraphStateError
from MeshGraph.line_graph import build_edge_graph
from MeshGraph.vertex_graph import augment, build_nodes
from PBD.coloring import MAX_NEIGHBOR, dsatur_coloring, group_batches


class Graph:
    """
    Owns the Node arena and, once the line graph is built, the Edge arena.

    Pipeline: Graph(mesh) -> augment() -> build_edge_graph() -> color_edge_graph()
    """

    def __init__(self, mesh, verbose=False):
        self.verbose = verbose
        self.nodes = build_nodes(mesh, verbose=verbose)
        self.edges = []
        self.num_colors = 0
        self.has_edge_graph = False

    @classmethod
    def from_mesh(cls, mesh, augment=True, policy=MAX_NEIGHBOR, verbose=False):
        graph = cls(mesh, verbose=verbose)
        if augment:
            if verbose:
                print("🔗 Augmenting graph...")
            graph.augment()
        if verbose:
            print("✂️  Creating line graph...")
        graph.build_edge_graph()
        if graph.edges:
            if verbose:
                print("🎨 Coloring edge graph...")
            graph.color_edge_graph(policy=policy)
        return graph

    def augment(self):
        if self.has_edge_graph:
            raise GraphStateError("cannot augment: vertex adjacency was consumed by build_edge_graph()")
        return augment(self.nodes, verbose=self.verbose)

    def unmark(self):
        for n in self.nodes:
            n.unmark()
        for e in self.edges:
            e.unmark()

    # Warning : erases color
    def build_edge_graph(self):
        if self.has_edge_graph:
            raise GraphStateError("line graph already built")
        self.unmark()
        self.edges = build_edge_graph(self.nodes, verbose=self.verbose)
        self.num_colors = 0
        self.has_edge_graph = True
        return self.edges

    def color_edge_graph(self, policy=MAX_NEIGHBOR):
        if not self.has_edge_graph:
            raise ColoringPreconditionError("build_edge_graph() must run before color_edge_graph()")
        result = dsatur_coloring(self.edges, policy=policy, verbose=self.verbose)
        self.num_colors = result.num_colors
        return result.num_colors

    # --- Data Access ---
    def colors(self):
        return np.array([e.color for e in self.edges], dtype=np.int32)

    def constraint_array(self):
        return np.array([e.nodes for e in self.edges], dtype=np.int32).reshape(-1, 2)

    def rest_lengths(self):
        if not self.edges:
            return np.zeros(0, dtype=np.float32)
        pos = np.stack([n.pos for n in self.nodes])
        constraints = self.constraint_array()
        lengths = np.linalg.norm(pos[constraints[:, 0]] - pos[constraints[:, 1]], axis=1)
        return lengths.astype(np.float32)

    def color_batches(self):
        return group_batches(self.colors())

    def color_groups(self):
        """One set of (node_1, node_2) vertex pairs per color."""
        return [{self.edges[e_id].nodes for e_id in batch.tolist()} for batch in self.color_batches()]

    def stats(self):
        num_edges = len(self.edges)
        return {
            "nodes": len(self.nodes),
            "edges": num_edges,
            "colors": self.num_colors,
            "mean": num_edges / self.num_colors if self.num_colors else 0.0,
        }
