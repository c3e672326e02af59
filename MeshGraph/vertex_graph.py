from tqdm import tqdm

from MeshGraph.elements import Node, connect_nodes


def build_nodes(mesh, verbose=False):
    """
    One Node per vertex, every triangle side becomes an undirected adjacency.
    Index ranges were already checked by Mesh, so no partial graph can be built.
    """
    nodes = [Node(vid, v) for vid, v in enumerate(mesh.vertices)]

    for id1, id2, id3 in tqdm(mesh.triangles.tolist(), desc="Building vertex graph", disable=not verbose):
        connect_nodes(nodes[id1], nodes[id2])
        connect_nodes(nodes[id1], nodes[id3])
        connect_nodes(nodes[id2], nodes[id3])

    return nodes


def get_2_distant_adjs(node, nodes):
    """
    Nodes two hops away from `node`, not adjacent to it, sharing >= 2 neighbors.
    """
    dist_nodes = []
    seen = set()
    for n1 in node.adjacent_nodes:
        for n2 in nodes[n1].adjacent_nodes:
            if n2 == node.id or n2 in seen or node.is_adj_to(n2):
                continue
            if node.share_2_adjs(nodes[n2]):
                dist_nodes.append(n2)
                seen.add(n2)
    return dist_nodes


def augment(nodes, verbose=False):
    """
    Connect near-diagonal vertex pairs. Returns the number of new pairs.

    Candidates for every node are collected first and only then connected,
    so edges added here never act as intermediate hops in the same pass.
    """
    to_connect = [get_2_distant_adjs(n, nodes) for n in tqdm(nodes, desc="Augmenting", disable=not verbose)]

    added = 0
    for n, candidates in zip(nodes, to_connect):
        for n2 in candidates:
            if connect_nodes(n, nodes[n2]):
                added += 1
    return added
