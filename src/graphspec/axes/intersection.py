"""Intersection-model classes.

Interval, comparability and permutation recognition are exposed as
boolean helpers for the predicate layer; circular-arc and proper
circular-arc are axes.
"""

from __future__ import annotations

from graphspec.axes.variant import UNCONSTRAINED, Variant
from graphspec.graph.core import Graph
from graphspec.kernel.facts import GraphFacts
from graphspec.limits import INDUCED_SUBGRAPH_LIMIT


def is_interval(graph: Graph, facts: GraphFacts | None = None) -> bool:
    """Chordal and AT-free (Lekkerkerker-Boland)."""
    facts = GraphFacts.of(graph, facts)
    return facts.undirected_binary and facts.is_interval


def is_proper_interval(graph: Graph, facts: GraphFacts | None = None) -> bool:
    """Claw-free interval graphs, i.e. unit interval graphs (Roberts)."""
    facts = GraphFacts.of(graph, facts)
    return facts.undirected_binary and facts.is_claw_free and facts.is_interval


def is_comparability(graph: Graph, facts: GraphFacts | None = None) -> bool:
    """Edges admit a transitive orientation."""
    facts = GraphFacts.of(graph, facts)
    return facts.undirected_binary and facts.is_comparability


def is_permutation(graph: Graph, facts: GraphFacts | None = None) -> bool:
    """Permutation graphs: both the graph and its complement are comparability graphs."""
    facts = GraphFacts.of(graph, facts)
    return facts.undirected_binary and facts.is_comparability and facts.is_cocomparability


def is_single_cycle(facts: GraphFacts) -> bool:
    """Connected, at least three vertices, every vertex of degree two."""
    if facts.n < 3 or not facts.connected:
        return False
    return all(len(facts.nbrs[v]) == 2 for v in facts.ids)


def compute_circular_arc(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Circular-arc recognition on the cases that are decidable cheaply.

    Interval graphs and chordless cycles are circular-arc. A disconnected
    circular-arc graph leaves part of the circle uncovered and is therefore
    an interval graph, so a disconnected non-interval graph is rejected.
    Everything else is left ``unconstrained``.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    if is_single_cycle(facts):
        return Variant("circular_arc")
    if facts.n > INDUCED_SUBGRAPH_LIMIT:
        facts.abstain("circular_arc", "interval test skipped")
        return UNCONSTRAINED
    if facts.is_interval:
        return Variant("circular_arc")
    if len(facts.components) > 1:
        return Variant("not_circular_arc")
    return UNCONSTRAINED


def compute_proper_circular_arc(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Proper circular-arc recognition.

    Proper circular-arc graphs are claw-free, so a claw rejects. Proper
    interval graphs and chordless cycles are accepted, and anything that
    is not circular-arc at all is rejected.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    if not facts.is_claw_free:
        return Variant("not_proper_circular_arc")
    if is_single_cycle(facts):
        return Variant("proper_circular_arc")
    if facts.n > INDUCED_SUBGRAPH_LIMIT:
        facts.abstain("proper_circular_arc", "interval test skipped")
        return UNCONSTRAINED
    if facts.is_interval:
        return Variant("proper_circular_arc")
    if len(facts.components) > 1:
        return Variant("not_proper_circular_arc")
    return UNCONSTRAINED
