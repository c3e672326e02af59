import numpy as np
from tqdm import tqdm

from MeshGraph.elements import Edge, NO_COLOR, connect_edges


def split(node, nodes, visited, all_edges):
    # 아직 처리되지 않은 이웃과의 쌍만 Edge로 만든다 -> 쌍마다 정확히 하나
    for a_id in node.adjacent_nodes:
        if not visited[a_id]:
            a = nodes[a_id]
            edge = Edge(len(all_edges), node, a, NO_COLOR)

            node.adjacent_edges.append(edge.id)
            a.adjacent_edges.append(edge.id)

            all_edges.append(edge)
    visited[node.id] = True


def connect_incident_edges(node, all_edges):
    incident = node.adjacent_edges
    for i, e1 in enumerate(incident):
        for e2 in incident[i + 1:]:
            connect_edges(all_edges[e1], all_edges[e2])


def build_edge_graph(nodes, verbose=False):
    """
    Line graph of the vertex graph: every undirected node pair becomes one Edge,
    two Edges are adjacent iff they share a Node.

    Nodes are visited in ascending id order. `adjacent_nodes` of every node is
    cleared afterwards. Returns the new edge list (empty for an empty graph).
    """
    all_edges = []
    visited = np.zeros(len(nodes), dtype=bool)

    ordered = sorted(nodes, key=lambda n: n.id)
    for n in tqdm(ordered, desc="Splitting nodes", disable=not verbose):
        split(n, nodes, visited, all_edges)

    for n in tqdm(ordered, desc="Connecting edges", disable=not verbose):
        connect_incident_edges(n, all_edges)
        n.clear_adj_nodes()

    return all_edges
