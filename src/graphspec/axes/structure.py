"""Structural axes: connectivity, cycles, degrees, completeness, partiteness, density."""

from __future__ import annotations

from graphspec.axes.variant import UNCONSTRAINED, Variant
from graphspec.graph.core import Graph
from graphspec.kernel import primitives as prim
from graphspec.kernel.facts import GraphFacts

SPARSE_RATIO = 0.10
DENSE_RATIO = 0.90


def compute_connectivity(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """``connected`` for connected undirected binary graphs, else unconstrained."""
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    return Variant("connected") if facts.connected else UNCONSTRAINED


def compute_cycles(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """``acyclic`` or ``cycles_allowed``.

    Purely directed binary graphs use Kahn's algorithm; purely undirected
    binary graphs are acyclic exactly when they are simple forests
    (E == V - components). Everything else, including the empty graph, is
    reported as ``cycles_allowed``.
    """
    facts = GraphFacts.of(graph, facts)
    if facts.n == 0:
        return Variant("cycles_allowed")
    if facts.all_binary and all(e.directed for e in graph.edges):
        if prim.is_acyclic_directed(graph):
            return Variant("acyclic")
        return Variant("cycles_allowed")
    if facts.undirected_binary:
        if not facts.simple:
            return Variant("cycles_allowed")
        if len(graph.edges) == facts.n - len(facts.components):
            return Variant("acyclic")
    return Variant("cycles_allowed")


def compute_degree_constraint(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """``regular`` when every degree agrees, else the full ``degree_sequence``.

    Binary edges only; directed edges count toward total degree.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.all_binary:
        return UNCONSTRAINED
    sequence = facts.degrees
    if not sequence:
        return Variant.of("degree_sequence", sequence=[])
    if len(set(sequence)) == 1:
        return Variant.of("regular", degree=sequence[0])
    return Variant.of("degree_sequence", sequence=sequence)


def compute_completeness(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    facts = GraphFacts.of(graph, facts)
    n = facts.n
    if n <= 1:
        return Variant("complete")
    if not facts.all_binary or facts.self_loop_count:
        return Variant("incomplete")

    directed = [e for e in graph.edges if e.directed]
    if not directed:
        if facts.simple_edge_count == n * (n - 1) // 2:
            return Variant("complete")
        return Variant("incomplete")
    if len(directed) != len(graph.edges):
        return Variant("incomplete")
    if len({e.endpoints for e in directed}) == n * (n - 1):
        return Variant("complete")
    return Variant("incomplete")


def compute_partiteness(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    facts = GraphFacts.of(graph, facts)
    if facts.undirected_binary and facts.is_bipartite:
        return Variant("bipartite")
    return Variant("unrestricted")


def compute_density(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Bucket the edge ratio: sparse at or below 10%, dense at or above 90%."""
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    n = facts.n
    if n <= 1:
        return Variant("dense")
    ratio = facts.simple_edge_count / (n * (n - 1) / 2)
    if ratio <= SPARSE_RATIO:
        return Variant("sparse")
    if ratio >= DENSE_RATIO:
        return Variant("dense")
    return UNCONSTRAINED
