"""Forbidden induced subgraph classes.

Each class is defined by the absence of some small induced pattern or of
long holes. Pattern scans use VF2 (node-induced) and abstain above
``INDUCED_SUBGRAPH_LIMIT`` vertices; hole enumeration abstains above
``HOLE_SEARCH_LIMIT``.
"""

from __future__ import annotations

from collections.abc import Sequence

import networkx as nx

from graphspec.axes.variant import UNCONSTRAINED, Variant
from graphspec.graph.core import Graph
from graphspec.kernel import patterns
from graphspec.kernel.facts import GraphFacts
from graphspec.limits import HOLE_SEARCH_LIMIT, INDUCED_SUBGRAPH_LIMIT


def _pattern_free(
    graph: Graph,
    facts: GraphFacts | None,
    name: str,
    forbidden: Sequence[nx.Graph],
    *,
    holes: bool = False,
) -> Variant:
    """Shared driver: ``name`` when no pattern (and, optionally, no hole >= 5) occurs."""
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    if facts.n > INDUCED_SUBGRAPH_LIMIT:
        facts.abstain(name, "induced pattern scan skipped")
        return UNCONSTRAINED
    if holes and facts.n > HOLE_SEARCH_LIMIT:
        facts.abstain(name, "hole search skipped")
        return UNCONSTRAINED

    g = facts.nx_graph
    for pattern in forbidden:
        if facts.expired():
            facts.abstain(name, "deadline expired")
            return UNCONSTRAINED
        if patterns.has_induced_subgraph(g, pattern):
            return Variant(f"not_{name}")
    if holes and patterns.has_long_hole(g, 5):
        return Variant(f"not_{name}")
    return Variant(name)


def compute_p5_free(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    return _pattern_free(graph, facts, "p5_free", [patterns.P5])


def compute_c5_free(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    return _pattern_free(graph, facts, "c5_free", [patterns.C5])


def compute_bull_free(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    return _pattern_free(graph, facts, "bull_free", [patterns.BULL])


def compute_gem_free(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    return _pattern_free(graph, facts, "gem_free", [patterns.GEM])


def compute_hh_free(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """House-hole free: no house and no hole of length >= 5."""
    return _pattern_free(graph, facts, "hh_free", [patterns.HOUSE], holes=True)


def compute_distance_hereditary(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Bandelt-Mulder: no house, hole >= 5, domino or gem."""
    return _pattern_free(
        graph,
        facts,
        "distance_hereditary",
        [patterns.HOUSE, patterns.GEM, patterns.DOMINO],
        holes=True,
    )


def compute_at_free(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """No asteroidal triple."""
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    if facts.n > INDUCED_SUBGRAPH_LIMIT:
        facts.abstain("at_free", "asteroidal triple search skipped")
        return UNCONSTRAINED
    return Variant("at_free") if facts.is_at_free else Variant("not_at_free")


def compute_weakly_chordal(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """No hole and no antihole of length >= 5."""
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    if facts.is_chordal and facts.is_cochordal:
        return Variant("weakly_chordal")
    if facts.n > HOLE_SEARCH_LIMIT:
        facts.abstain("weakly_chordal", "hole search skipped")
        return UNCONSTRAINED
    if patterns.has_long_hole(facts.nx_graph, 5):
        return Variant("not_weakly_chordal")
    if patterns.has_long_hole(facts.nx_complement, 5):
        return Variant("not_weakly_chordal")
    return Variant("weakly_chordal")
