from MeshGraph.errors import GraphStateError

DOT_COLORS = [
    "azure", "skyblue", "pink", "crimson", "peru",
    "orange", "gold", "lawngreen", "cyan", "blueviolet",
    "lavender", "mediumblue", "limegreen", "chocolate", "plum",
    "yellowgreen", "royalblue", "hotpink", "darkslategray",
    "darkorange", "beige", "aliceblue", "tomato", "salmon",
]


def write_simple_dot(graph, path):
    """
    Vertex graph as Graphviz (neato, pinned positions): one line per node, one per edge.
    """
    with open(path, 'w') as f:
        f.write("graph simple {\n")
        for n in graph.nodes:
            f.write(f"{n.id} [pos=\"{n.pos[0]:g},{n.pos[1]:g}!\"]\n")
        for e in graph.edges:
            f.write(f"{e.node_1} -- {e.node_2}\n")
        f.write("}\n")


def write_line_dot(graph, path):
    """
    Colored line graph as Graphviz. Each edge-graph adjacency is written once.
    """
    if not graph.has_edge_graph:
        raise GraphStateError("write_line_dot() needs build_edge_graph() first")

    with open(path, 'w') as f:
        f.write("graph line {\n")
        graph.unmark()
        for e in graph.edges:
            attrs = f"pos=\"{e.pos[0]:g},{e.pos[1]:g}!\""
            if e.color >= 0:
                # 팔레트보다 색이 많으면 순환
                attrs += f", color={DOT_COLORS[e.color % len(DOT_COLORS)]}, style=filled"
            f.write(f"e{e.id} [{attrs}]\n")

        for e1 in graph.edges:
            for e2_id in e1.adjacent_edges:
                if not graph.edges[e2_id].marked:
                    f.write(f"e{e1.id} -- e{e2_id}\n")
            e1.mark()
        f.write("}\n")


def save_obj_with_colors(filename, graph):
    """
    Vertices + one group of line elements per color class.
    """
    with open(filename, 'w') as f:
        f.write("# Colored constraint graph\n")

        # 1. Vertices (v x y z)
        for n in graph.nodes:
            f.write(f"v {n.pos[0]:.4f} {n.pos[1]:.4f} {n.pos[2]:.4f}\n")

        # 2. Lines (l v1 v2), 색상별 그룹 - OBJ는 인덱스가 1부터 시작함
        for color, batch in enumerate(graph.color_batches()):
            f.write(f"g color_{color}\n")
            for e_id in batch.tolist():
                e = graph.edges[e_id]
                f.write(f"l {e.node_1 + 1} {e.node_2 + 1}\n")
