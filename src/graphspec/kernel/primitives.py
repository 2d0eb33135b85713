"""Reusable graph primitives shared by the axis computers.

Everything here works on the undirected binary part of a graph unless the
name says otherwise. Hyperedges are never expanded into cliques.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphspec.graph.core import Graph

Adjacency = dict[str, list[str]]
NeighborSets = dict[str, set[str]]


# =============================================================================
# Edge-shape predicates
# =============================================================================


def has_directed_edges(graph: Graph) -> bool:
    return any(e.directed for e in graph.edges)


def has_undirected_edges(graph: Graph) -> bool:
    return any(not e.directed for e in graph.edges)


def all_binary(graph: Graph) -> bool:
    return all(e.is_binary for e in graph.edges)


def is_undirected_binary(graph: Graph) -> bool:
    """True when every edge is undirected and has exactly two endpoints."""
    return all(not e.directed and e.is_binary for e in graph.edges)


def count_self_loops(graph: Graph) -> int:
    return sum(1 for e in graph.edges if e.is_self_loop)


def edge_key(u: str, v: str, directed: bool) -> tuple[str, str]:
    """Identity of a binary edge: ordered for directed, sorted for undirected."""
    if directed or u <= v:
        return (u, v)
    return (v, u)


def has_parallel_edges(graph: Graph) -> bool:
    """True if two edges share a key (binary) or a vertex multiset (hyper)."""
    seen: set[tuple] = set()
    for e in graph.edges:
        if e.is_binary:
            key: tuple = ("B", e.directed, *edge_key(e.endpoints[0], e.endpoints[1], e.directed))
        else:
            key = ("H", *sorted(e.endpoints))
        if key in seen:
            return True
        seen.add(key)
    return False


def unique_ids(graph: Graph) -> list[str]:
    """Vertex ids in first-seen order with duplicates dropped."""
    return list(dict.fromkeys(v.id for v in graph.vertices))


# =============================================================================
# Adjacency and degrees
# =============================================================================


def build_adjacency(graph: Graph) -> Adjacency:
    """Undirected adjacency lists over binary undirected edges.

    Parallel edges and self-loops are kept as repeated entries, so list
    length is the multigraph degree.
    """
    adj: Adjacency = {vid: [] for vid in unique_ids(graph)}
    for e in graph.edges:
        if e.directed or not e.is_binary:
            continue
        a, b = e.endpoints
        adj[a].append(b)
        adj[b].append(a)
    return adj


def neighbor_sets(adjacency: Mapping[str, Iterable[str]]) -> NeighborSets:
    """Simple-graph view of an adjacency: sets without self-loops."""
    return {v: {u for u in nbrs if u != v} for v, nbrs in adjacency.items()}


def degrees(graph: Graph) -> list[int]:
    """Total degree per vertex, in vertex order.

    Counts every binary non-loop edge, directed edges included, as one unit
    of degree at each endpoint.
    """
    count = {vid: 0 for vid in unique_ids(graph)}
    for e in graph.edges:
        if not e.is_binary or e.is_self_loop:
            continue
        u, v = e.endpoints
        count[u] += 1
        count[v] += 1
    return [count[v.id] for v in graph.vertices]


def complement_adjacency(nbrs: Mapping[str, set[str]]) -> NeighborSets:
    """Neighbour sets of the simple complement graph."""
    vertices = set(nbrs)
    return {v: vertices - nbrs[v] - {v} for v in nbrs}


# =============================================================================
# Connectivity, acyclicity, bipartiteness
# =============================================================================


def is_connected(graph: Graph, adjacency: Adjacency | None = None) -> bool:
    """Stack walk from the first vertex; vacuously true for 0-1 vertices."""
    adj = adjacency if adjacency is not None else build_adjacency(graph)
    if len(adj) <= 1:
        return True
    start = next(iter(adj))
    seen: set[str] = set()
    stack = [start]
    while stack:
        current = stack.pop()
        if current in seen:
            continue
        seen.add(current)
        stack.extend(n for n in adj[current] if n not in seen)
    return len(seen) == len(adj)


def connected_components(nbrs: Mapping[str, Iterable[str]]) -> list[list[str]]:
    """Components in first-seen order, each listed in BFS order."""
    seen: set[str] = set()
    components: list[list[str]] = []
    for start in nbrs:
        if start in seen:
            continue
        seen.add(start)
        component = [start]
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for n in nbrs[current]:
                if n not in seen:
                    seen.add(n)
                    component.append(n)
                    queue.append(n)
        components.append(component)
    return components


def is_acyclic_directed(graph: Graph) -> bool:
    """Kahn's algorithm over directed binary edges."""
    ids = unique_ids(graph)
    indeg = {v: 0 for v in ids}
    out: Adjacency = {v: [] for v in ids}
    for e in graph.edges:
        if not e.directed or not e.is_binary:
            continue
        u, v = e.endpoints
        out[u].append(v)
        indeg[v] += 1

    ready = [v for v in ids if indeg[v] == 0]
    processed = 0
    while ready:
        v = ready.pop()
        processed += 1
        for w in out[v]:
            indeg[w] -= 1
            if indeg[w] == 0:
                ready.append(w)
    return processed == len(ids)


def two_coloring(adjacency: Mapping[str, Iterable[str]]) -> dict[str, int] | None:
    """BFS 2-colouring per component, or None if some edge is monochromatic.

    A self-loop is monochromatic by definition.
    """
    colour: dict[str, int] = {}
    for start in adjacency:
        if start in colour:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            current = queue.popleft()
            c = colour[current]
            for n in adjacency[current]:
                if n not in colour:
                    colour[n] = c ^ 1
                    queue.append(n)
                elif colour[n] == c:
                    return None
    return colour


def is_bipartite(graph: Graph) -> bool:
    return two_coloring(build_adjacency(graph)) is not None


# =============================================================================
# Chordality
# =============================================================================


def maximum_cardinality_search(nbrs: Mapping[str, set[str]]) -> list[str]:
    """Visit order of Maximum Cardinality Search.

    Repeatedly picks the unvisited vertex with the most visited neighbours,
    breaking ties by vertex order. The reverse of the result is a perfect
    elimination ordering iff the graph is chordal.
    """
    weight = {v: 0 for v in nbrs}
    visited: set[str] = set()
    order: list[str] = []
    for _ in range(len(nbrs)):
        best = max((v for v in nbrs if v not in visited), key=lambda v: weight[v])
        visited.add(best)
        order.append(best)
        for n in nbrs[best]:
            if n not in visited:
                weight[n] += 1
    return order


def is_perfect_elimination(order: Sequence[str], nbrs: Mapping[str, set[str]]) -> bool:
    """Check that each vertex's earlier-visited neighbours form a clique.

    Uses the parent test: with p the latest earlier neighbour of v, every
    other earlier neighbour of v must be adjacent to p. Applied to all
    vertices this is equivalent to the full pairwise clique check.
    """
    index = {v: i for i, v in enumerate(order)}
    for v in order:
        earlier = [n for n in nbrs[v] if index[n] < index[v]]
        if len(earlier) < 2:
            continue
        parent = max(earlier, key=index.__getitem__)
        parent_nbrs = nbrs[parent]
        if any(n != parent and n not in parent_nbrs for n in earlier):
            return False
    return True


def is_chordal_nbrs(nbrs: Mapping[str, set[str]]) -> bool:
    if len(nbrs) <= 3:
        return True
    return is_perfect_elimination(maximum_cardinality_search(nbrs), nbrs)


def is_chordal(graph: Graph) -> bool:
    """MCS ordering verified as a perfect elimination ordering."""
    return is_chordal_nbrs(neighbor_sets(build_adjacency(graph)))


# =============================================================================
# Local structure
# =============================================================================


def has_independent_triple(vertices: Iterable[str], nbrs: Mapping[str, set[str]]) -> bool:
    """True if three pairwise non-adjacent vertices exist among ``vertices``."""
    pool = list(vertices)
    for i, a in enumerate(pool):
        rest = [b for b in pool[i + 1 :] if b not in nbrs[a]]
        for j, b in enumerate(rest):
            if any(c not in nbrs[b] for c in rest[j + 1 :]):
                return True
    return False


def claw_centre(nbrs: Mapping[str, set[str]]) -> str | None:
    """A vertex whose neighbourhood holds an independent triple, if any."""
    for v, around in nbrs.items():
        if len(around) >= 3 and has_independent_triple(around, nbrs):
            return v
    return None


# =============================================================================
# Transitive orientation
# =============================================================================


def is_transitively_orientable(nbrs: Mapping[str, set[str]]) -> bool:
    """Implication-class test for comparability graphs.

    Arcs (a, b) and (a, c) force each other when b and c are non-adjacent,
    likewise (a, c) and (b, c) when a and b are non-adjacent. The graph has
    a transitive orientation iff no implication class contains an arc
    together with its reverse.
    """
    seen: set[tuple[str, str]] = set()
    for a in nbrs:
        for b in nbrs[a]:
            if (a, b) in seen:
                continue
            members = {(a, b)}
            queue = deque([(a, b)])
            while queue:
                u, v = queue.popleft()
                forced = [(u, w) for w in nbrs[u] if w != v and w not in nbrs[v]]
                forced += [(w, v) for w in nbrs[v] if w != u and w not in nbrs[u]]
                for arc in forced:
                    if arc not in members:
                        members.add(arc)
                        queue.append(arc)
            if any((v, u) in members for u, v in members):
                return False
            seen |= members
    return True
