"""Refinements of chordal and claw-free structure: modular (prime),
ptolemaic and quasi-line graphs."""

from __future__ import annotations

from graphspec.axes.variant import UNCONSTRAINED, Variant
from graphspec.graph.core import Graph
from graphspec.kernel import patterns
from graphspec.kernel import primitives as prim
from graphspec.kernel.facts import GraphFacts
from graphspec.limits import INDUCED_SUBGRAPH_LIMIT, MODULAR_LIMIT


def smallest_module(seed: set[str], nbrs: prim.NeighborSets) -> set[str]:
    """Grow ``seed`` until no outside vertex splits it.

    A vertex splits M when it is adjacent to some but not all of M.
    """
    module = set(seed)
    changed = True
    while changed:
        changed = False
        for x in nbrs:
            if x in module:
                continue
            hits = len(nbrs[x] & module)
            if 0 < hits < len(module):
                module.add(x)
                changed = True
    return module


def compute_modular(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """``modular`` when the graph is prime: its only modules are trivial.

    Every pair of vertices is closed under splitting; any pair whose
    closure stops short of V is a non-trivial module.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    ids, n = facts.ids, facts.n
    if n <= 2:
        return Variant("modular")
    if n > MODULAR_LIMIT:
        facts.abstain("modular", "module closure skipped")
        return UNCONSTRAINED

    for i, u in enumerate(ids):
        for v in ids[i + 1 :]:
            if len(smallest_module({u, v}, facts.nbrs)) < n:
                return Variant("not_modular")
    return Variant("modular")


def compute_ptolemaic(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Ptolemaic graphs are the gem-free chordal graphs."""
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    if not facts.is_chordal:
        return Variant("not_ptolemaic")
    if facts.n > INDUCED_SUBGRAPH_LIMIT:
        facts.abstain("ptolemaic", "gem scan skipped")
        return UNCONSTRAINED
    if patterns.has_induced_subgraph(facts.nx_graph, patterns.GEM):
        return Variant("not_ptolemaic")
    return Variant("ptolemaic")


def compute_quasi_line(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Every neighbourhood splits into two cliques.

    Equivalently the complement of each neighbourhood is bipartite.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    nbrs = facts.nbrs
    for v in facts.ids:
        around = nbrs[v]
        local = {u: {w for w in around if w != u and w not in nbrs[u]} for u in around}
        if prim.two_coloring(local) is None:
            return Variant("not_quasi_line")
    return Variant("quasi_line")
