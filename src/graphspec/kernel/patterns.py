"""Small named graphs and induced-subgraph search.

Patterns are plain NetworkX graphs on vertices 0..k-1. Matching is
node-induced (VF2), so a pattern only matches when the chosen vertices
carry exactly the pattern's edges.
"""

from __future__ import annotations

from collections.abc import Iterator

import networkx as nx
from networkx.algorithms.isomorphism import GraphMatcher


def _pattern(name: str, size: int, edges: list[tuple[int, int]]) -> nx.Graph:
    g = nx.Graph(name=name)
    g.add_nodes_from(range(size))
    g.add_edges_from(edges)
    return g


def path(k: int) -> nx.Graph:
    return _pattern(f"P{k}", k, [(i, i + 1) for i in range(k - 1)])


def cycle(k: int) -> nx.Graph:
    return _pattern(f"C{k}", k, [(i, (i + 1) % k) for i in range(k)])


P4 = path(4)
P5 = path(5)
C4 = cycle(4)
C5 = cycle(5)

#     0
#    /|\
#   1 2 3
CLAW = _pattern("claw", 4, [(0, 1), (0, 2), (0, 3)])

# Triangle 0-1-2 with pendants 3 (on 0) and 4 (on 1).
BULL = _pattern("bull", 5, [(0, 1), (1, 2), (0, 2), (0, 3), (1, 4)])

# P4 0-1-2-3 plus vertex 4 adjacent to all of it.
GEM = _pattern("gem", 5, [(0, 1), (1, 2), (2, 3), (0, 4), (1, 4), (2, 4), (3, 4)])

# Square 0-1-2-3 with roof vertex 4 on the 0-1 side.
HOUSE = _pattern("house", 5, [(0, 1), (1, 2), (2, 3), (3, 0), (0, 4), (1, 4)])

# Two squares sharing the 1-4 edge.
DOMINO = _pattern(
    "domino", 6, [(0, 1), (1, 2), (3, 4), (4, 5), (0, 3), (1, 4), (2, 5)]
)


def has_induced_subgraph(graph: nx.Graph, pattern: nx.Graph) -> bool:
    """True if some vertex subset of ``graph`` induces a copy of ``pattern``."""
    if graph.number_of_nodes() < pattern.number_of_nodes():
        return False
    if graph.number_of_edges() < pattern.number_of_edges():
        return False
    return GraphMatcher(graph, pattern).subgraph_is_isomorphic()


def find_induced_subgraph(graph: nx.Graph, pattern: nx.Graph) -> dict | None:
    """Return one mapping graph-vertex -> pattern-vertex, or None."""
    if graph.number_of_nodes() < pattern.number_of_nodes():
        return None
    return next(GraphMatcher(graph, pattern).subgraph_isomorphisms_iter(), None)


def long_holes(graph: nx.Graph, min_length: int = 5) -> Iterator[list]:
    """Yield chordless cycles with at least ``min_length`` vertices."""
    for cyc in nx.chordless_cycles(graph):
        if len(cyc) >= min_length:
            yield cyc


def has_long_hole(graph: nx.Graph, min_length: int = 5, *, odd_only: bool = False) -> bool:
    for cyc in long_holes(graph, min_length):
        if not odd_only or len(cyc) % 2 == 1:
            return True
    return False
