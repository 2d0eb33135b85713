"""Call-scoped memo of derived graph facts.

Many axes need the same derived structures (adjacency, degrees, the
complement, chordality). ``GraphFacts`` computes each one lazily, at most
once per analysis call. One instance is created per orchestrator call and
must not be shared across calls.
"""

from __future__ import annotations

import logging
import time
from functools import cached_property

import networkx as nx

from graphspec.graph.core import Graph
from graphspec.kernel import primitives as prim

logger = logging.getLogger(__name__)


class GraphFacts:
    """Lazily computed facts about one graph.

    Args:
        graph: The graph under analysis
        deadline: Optional ``time.monotonic()`` value after which long
            searches should abstain

    Example:
        >>> facts = GraphFacts(graph)
        >>> facts.is_chordal  # computed once, reused by every computer
        True
    """

    def __init__(self, graph: Graph, *, deadline: float | None = None) -> None:
        self.graph = graph
        self.deadline = deadline

    @classmethod
    def of(cls, graph: Graph, facts: GraphFacts | None) -> GraphFacts:
        """Reuse ``facts`` when it belongs to ``graph``, else start fresh."""
        if facts is not None and facts.graph is graph:
            return facts
        return cls(graph)

    @classmethod
    def with_timeout(cls, graph: Graph, timeout: float | None) -> GraphFacts:
        deadline = None if timeout is None else time.monotonic() + timeout
        return cls(graph, deadline=deadline)

    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() > self.deadline

    def abstain(self, axis: str, reason: str) -> None:
        """Record an abstention at DEBUG level."""
        logger.debug("%s abstains on %d vertices: %s", axis, self.n, reason)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def n(self) -> int:
        return len(self.ids)

    @cached_property
    def ids(self) -> list[str]:
        return prim.unique_ids(self.graph)

    @cached_property
    def undirected_binary(self) -> bool:
        return prim.is_undirected_binary(self.graph)

    @cached_property
    def all_binary(self) -> bool:
        return prim.all_binary(self.graph)

    @cached_property
    def self_loop_count(self) -> int:
        return prim.count_self_loops(self.graph)

    @cached_property
    def has_parallel_edges(self) -> bool:
        return prim.has_parallel_edges(self.graph)

    @cached_property
    def simple(self) -> bool:
        """No parallel edges and no self-loops."""
        return not self.has_parallel_edges and self.self_loop_count == 0

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    @cached_property
    def adjacency(self) -> prim.Adjacency:
        return prim.build_adjacency(self.graph)

    @cached_property
    def nbrs(self) -> prim.NeighborSets:
        return prim.neighbor_sets(self.adjacency)

    @cached_property
    def complement_nbrs(self) -> prim.NeighborSets:
        return prim.complement_adjacency(self.nbrs)

    @cached_property
    def degrees(self) -> list[int]:
        return prim.degrees(self.graph)

    @cached_property
    def simple_edge_count(self) -> int:
        return sum(len(s) for s in self.nbrs.values()) // 2

    @cached_property
    def components(self) -> list[list[str]]:
        return prim.connected_components(self.nbrs)

    @cached_property
    def connected(self) -> bool:
        return prim.is_connected(self.graph, self.adjacency)

    def adjacent(self, u: str, v: str) -> bool:
        return v in self.nbrs[u]

    # ------------------------------------------------------------------
    # Recognised classes shared across computers
    # ------------------------------------------------------------------

    @cached_property
    def coloring(self) -> dict[str, int] | None:
        return prim.two_coloring(self.adjacency)

    @cached_property
    def is_bipartite(self) -> bool:
        return self.coloring is not None

    @cached_property
    def is_chordal(self) -> bool:
        return prim.is_chordal_nbrs(self.nbrs)

    @cached_property
    def is_cochordal(self) -> bool:
        return prim.is_chordal_nbrs(self.complement_nbrs)

    @cached_property
    def is_split(self) -> bool:
        return self.is_chordal and self.is_cochordal

    @cached_property
    def is_claw_free(self) -> bool:
        return prim.claw_centre(self.nbrs) is None

    @cached_property
    def is_comparability(self) -> bool:
        return prim.is_transitively_orientable(self.nbrs)

    @cached_property
    def is_cocomparability(self) -> bool:
        return prim.is_transitively_orientable(self.complement_nbrs)

    @cached_property
    def is_at_free(self) -> bool:
        return nx.is_at_free(self.nx_graph)

    @cached_property
    def is_interval(self) -> bool:
        """Lekkerkerker-Boland: chordal and free of asteroidal triples."""
        return self.is_chordal and self.is_at_free

    @cached_property
    def is_p4_free(self) -> bool:
        """Edge-centred induced-P4 scan.

        An induced P4 a-b-c-d has a middle edge b-c; for each edge try an
        ``a`` private to ``b`` and a ``d`` private to ``c`` with a, d apart.
        """
        nbrs = self.nbrs
        for b in self.ids:
            for c in nbrs[b]:
                if c < b:
                    continue
                a_side = nbrs[b] - nbrs[c] - {c}
                d_side = nbrs[c] - nbrs[b] - {b}
                for a in a_side:
                    if d_side - nbrs[a] - {a}:
                        return False
        return True

    # ------------------------------------------------------------------
    # NetworkX views
    # ------------------------------------------------------------------

    @cached_property
    def nx_graph(self) -> nx.Graph:
        """Underlying simple undirected graph (binary undirected edges only)."""
        g = nx.Graph()
        g.add_nodes_from(self.ids)
        g.add_edges_from((u, v) for u in self.ids for v in self.nbrs[u] if u < v)
        return g

    @cached_property
    def nx_complement(self) -> nx.Graph:
        return nx.complement(self.nx_graph)
