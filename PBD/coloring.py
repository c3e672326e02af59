import heapq
from collections import namedtuple

import numpy as np
from numba import njit
from tqdm import tqdm

from MeshGraph.elements import NO_COLOR
from MeshGraph.errors import ColoringPreconditionError, GraphInvariantError

# 색상 할당 정책
MAX_NEIGHBOR = "max_neighbor"              # 이웃의 최대 색상 + 1 (기본값, 기존 출력과 동일)
SMALLEST_AVAILABLE = "smallest_available"  # 이웃이 쓰지 않는 가장 작은 색상 (정석 DSATUR)
POLICIES = (MAX_NEIGHBOR, SMALLEST_AVAILABLE)

ColoringResult = namedtuple("ColoringResult", ["num_colors", "order"])


def _pick_color(edge, edges, num_colors, policy):
    neighbor_colors = set()
    max_col = NO_COLOR
    for e_id in edge.adjacent_edges:
        c = edges[e_id].color
        if c < NO_COLOR or c >= num_colors:
            raise GraphInvariantError(
                f"edge {e_id} holds color {c} outside [{NO_COLOR}, {num_colors})"
            )
        if c == NO_COLOR:
            continue
        neighbor_colors.add(c)
        if max_col < c:
            max_col = c

    if policy == MAX_NEIGHBOR:
        return max_col + 1

    color = 0
    while color in neighbor_colors:
        color += 1
    return color


def dsatur_coloring(edges, policy=MAX_NEIGHBOR, verbose=False):
    """
    DSATUR greedy coloring of the edge (line) graph, in place.

    Seed: the edge with the highest degree gets color 0. Then, N-1 times, the
    uncolored edge with the highest saturation degree is colored; ties go to
    the higher degree, then to the earlier edge in the seed order
    (descending degree, stable by id).

    Returns ColoringResult(num_colors, order) where `order` lists edge ids in
    the order they were colored.
    """
    if len(edges) == 0:
        raise ColoringPreconditionError("cannot color an empty edge graph")
    if policy not in POLICIES:
        raise ValueError(f"unknown coloring policy '{policy}', expected one of {POLICIES}")

    for e in edges:
        e.color = NO_COLOR

    num_edges = len(edges)
    seed_order = sorted(range(num_edges), key=lambda i: -edges[i].degree())
    rank = [0] * num_edges
    for r, e_id in enumerate(seed_order):
        rank[e_id] = r

    # 힙에 들어간 마지막 saturation degree
    saturation = [0] * num_edges
    heap = [(0, -edges[e_id].degree(), rank[e_id], e_id) for e_id in seed_order]
    heapq.heapify(heap)

    num_colors = 0
    order = []

    def assign(e_id, color):
        nonlocal num_colors
        edge = edges[e_id]
        edge.color = color
        num_colors = max(num_colors, color + 1)
        order.append(e_id)
        for nb_id in edge.adjacent_edges:
            nb = edges[nb_id]
            if nb.color != NO_COLOR:
                continue
            sat = nb.saturation(edges, num_colors)
            if sat != saturation[nb_id]:
                saturation[nb_id] = sat
                heapq.heappush(heap, (-sat, -nb.degree(), rank[nb_id], nb_id))

    assign(seed_order[0], 0)

    with tqdm(total=num_edges - 1, desc="DSATUR coloring", disable=not verbose) as pbar:
        while len(order) < num_edges:
            neg_sat, _, _, e_id = heapq.heappop(heap)
            edge = edges[e_id]
            # 오래된(stale) 항목은 건너뜀
            if edge.color != NO_COLOR or -neg_sat != saturation[e_id]:
                continue
            assign(e_id, _pick_color(edge, edges, num_colors, policy))
            pbar.update(1)

    if verbose:
        print(f"  -> nb_chrom : {num_colors}")
        print(f"  -> mean : {num_edges / num_colors:.2f}")
    return ColoringResult(num_colors, order)


def group_batches(colors):
    """
    Color vector -> list of int32 index arrays, one per color (GPU batch format).
    """
    colors = np.asarray(colors, dtype=np.int32)
    if colors.size == 0:
        return []
    if (colors < 0).any():
        raise GraphInvariantError("cannot batch a coloring with uncolored entries")

    num_colors = int(colors.max()) + 1
    batches = [[] for _ in range(num_colors)]
    for c_idx, color in enumerate(colors.tolist()):
        batches[color].append(c_idx)
    return [np.array(b, dtype=np.int32) for b in batches]


def compute_graph_coloring(num_particles, constraints, verbose=False):
    """
    Greedy first-fit coloring of raw (p1, p2) constraints, in list order.
    Returns: a list of int32 arrays, each one an independent set of constraints.
    """
    num_constraints = len(constraints)

    particle_to_constraints = [[] for _ in range(num_particles)]
    for c_idx, (p1, p2) in enumerate(constraints):
        particle_to_constraints[p1].append(c_idx)
        particle_to_constraints[p2].append(c_idx)

    constraint_colors = [NO_COLOR] * num_constraints
    num_colors = 0

    for c_idx in range(num_constraints):
        p1, p2 = constraints[c_idx]

        # 나와 점을 공유하는 이웃 제약조건들이 사용 중인 색상들을 수집
        neighbor_colors = set()
        for neighbor_c_idx in particle_to_constraints[p1] + particle_to_constraints[p2]:
            if neighbor_c_idx != c_idx and constraint_colors[neighbor_c_idx] != NO_COLOR:
                neighbor_colors.add(constraint_colors[neighbor_c_idx])

        color = 0
        while color in neighbor_colors:
            color += 1

        constraint_colors[c_idx] = color
        num_colors = max(num_colors, color + 1)

    if verbose:
        print(f"  -> Greedy Coloring Result: {num_colors} colors found.")
    return group_batches(constraint_colors)


@njit
def _count_color_conflicts_kernel(constraints, colors, num_particles):
    conflicts = 0
    num_colors = 0
    for i in range(colors.shape[0]):
        if colors[i] < 0:
            conflicts += 1
        elif colors[i] + 1 > num_colors:
            num_colors = colors[i] + 1

    # touched[p] == c : 색상 c 배치에서 파티클 p 가 이미 쓰였음
    touched = np.full(num_particles, -1, dtype=np.int64)
    for c in range(num_colors):
        for i in range(constraints.shape[0]):
            if colors[i] != c:
                continue
            p1 = constraints[i, 0]
            p2 = constraints[i, 1]
            if touched[p1] == c or touched[p2] == c:
                conflicts += 1
            touched[p1] = c
            touched[p2] = c
    return conflicts


def count_color_conflicts(constraints, colors, num_particles):
    """
    Number of constraints that would race with another constraint of the same
    color (shared particle), plus uncolored constraints. 0 means safe to solve
    every color batch without atomics.
    """
    constraints = np.asarray(constraints, dtype=np.int64).reshape(-1, 2)
    colors = np.asarray(colors, dtype=np.int64).reshape(-1)
    if constraints.shape[0] != colors.shape[0]:
        raise ValueError(f"{constraints.shape[0]} constraints but {colors.shape[0]} colors")
    return int(_count_color_conflicts_kernel(constraints, colors, num_particles))
