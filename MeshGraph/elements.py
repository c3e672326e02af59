import numpy as np

NO_COLOR = -1


class Node:
    """
    Mesh vertex. Adjacency is stored as ids into the owning Graph's arenas.
    """

    def __init__(self, identifier, pos):
        self.id = identifier
        self.pos = np.asarray(pos, dtype=np.float32)
        self.adjacent_nodes = []
        self.adjacent_edges = []
        self.marked = False
        self._adjacent_set = set()

    def __repr__(self):
        return f"Node({self.id})"

    def is_adj_to(self, other_id):
        return other_id in self._adjacent_set

    def degree(self):
        return len(self.adjacent_nodes)

    def clear_adj_nodes(self):
        self.adjacent_nodes = []
        self._adjacent_set = set()

    def share_2_adjs(self, other):
        """True once two common neighbors are found (early exit)."""
        count = 0
        for n1 in self.adjacent_nodes:
            if other.is_adj_to(n1):
                count += 1
                if count >= 2:
                    return True
        return False

    def mark(self):
        self.marked = True

    def unmark(self):
        self.marked = False


def connect_nodes(n1, n2):
    """Symmetric, idempotent. Self-loops are ignored."""
    if n1.id == n2.id or n1.is_adj_to(n2.id):
        return False
    n1.adjacent_nodes.append(n2.id)
    n1._adjacent_set.add(n2.id)
    n2.adjacent_nodes.append(n1.id)
    n2._adjacent_set.add(n1.id)
    return True


class Edge:
    """
    Constraint between two Nodes, i.e. a node of the line graph.
    color == NO_COLOR (-1) means "not colored yet".
    """

    def __init__(self, identifier, node_1, node_2, color=NO_COLOR):
        self.id = identifier
        self.node_1 = node_1.id
        self.node_2 = node_2.id
        self.color = color
        self.marked = False
        self.adjacent_edges = []
        self._adjacent_set = set()
        # 내보내기(export) 전용 중점 좌표
        self.pos = (node_1.pos + node_2.pos) * 0.5

    def __repr__(self):
        return f"Edge({self.id}: {self.node_1}-{self.node_2}, color={self.color})"

    @property
    def nodes(self):
        return (self.node_1, self.node_2)

    def is_adj_to(self, other_id):
        return other_id in self._adjacent_set

    def degree(self):
        return len(self.adjacent_edges)

    def saturation(self, edges, num_colors):
        """
        Number of distinct colors in [0, num_colors) among adjacent edges.
        Uncolored neighbors do not count.
        """
        seen = set()
        for e_id in self.adjacent_edges:
            c = edges[e_id].color
            if 0 <= c < num_colors:
                seen.add(c)
        return len(seen)

    def mark(self):
        self.marked = True

    def unmark(self):
        self.marked = False


def connect_edges(e1, e2):
    """Symmetric, idempotent. Self-loops are ignored."""
    if e1.id == e2.id or e1.is_adj_to(e2.id):
        return False
    e1.adjacent_edges.append(e2.id)
    e1._adjacent_set.add(e2.id)
    e2.adjacent_edges.append(e1.id)
    e2._adjacent_set.add(e1.id)
    return True
