"""Core vertex and edge properties.

Cardinality, identity, ordering, arity, multiplicity, self-loops,
directionality, weighting, signedness, uncertainty, data shape and schema.
These are single passes over the vertex and edge lists.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from graphspec.axes.variant import Variant
from graphspec.config import ComputePolicy, resolve_policy
from graphspec.graph.core import Edge, Graph
from graphspec.kernel import primitives as prim
from graphspec.kernel.facts import GraphFacts


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def compute_vertex_cardinality(graph: Graph) -> Variant:
    return Variant.of("finite", n=len(graph.vertices))


def compute_vertex_identity(graph: Graph) -> Variant:
    ids = graph.vertex_ids
    if len(set(ids)) == len(ids):
        return Variant("distinguishable")
    return Variant("indistinguishable")


def compute_vertex_ordering(graph: Graph, policy: ComputePolicy | None = None) -> Variant:
    """``total_order`` when every vertex has a distinct numeric order value.

    The condition holds vacuously for a graph without vertices.
    """
    policy = resolve_policy(policy)
    orders = [v.attrs.get(policy.vertex_order_key) for v in graph.vertices]
    if not all(_is_number(o) for o in orders):
        return Variant("unordered")
    if len(set(orders)) == len(orders):
        return Variant("total_order")
    return Variant("partial_order")


def compute_edge_arity(graph: Graph) -> Variant:
    """``binary``, ``k_ary`` for a single arity k != 2, else ``mixed_arity``."""
    arities = sorted({len(e.endpoints) for e in graph.edges})
    if not arities or arities == [2]:
        return Variant("binary")
    if len(arities) == 1:
        return Variant.of("k_ary", k=arities[0])
    return Variant.of("mixed_arity", arities=arities)


def compute_edge_multiplicity(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    facts = GraphFacts.of(graph, facts)
    return Variant("multi") if facts.has_parallel_edges else Variant("simple")


def compute_self_loops(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    facts = GraphFacts.of(graph, facts)
    return Variant("allowed") if facts.self_loop_count > 0 else Variant("disallowed")


def compute_directionality(graph: Graph) -> Variant:
    """Classify edge direction.

    Mixed when both directed and undirected edges occur. A purely directed
    graph is ``bidirected`` when every binary u->v has a matching v->u (a
    self-loop is its own match), and plain ``directed`` otherwise.

    ``antidirected`` stays in the vocabulary but is never produced: arcs
    that all have distinct opposites already qualify as bidirected.
    """
    has_dir = prim.has_directed_edges(graph)
    has_undir = prim.has_undirected_edges(graph)
    if has_dir and has_undir:
        return Variant("mixed")
    if not has_dir:
        return Variant("undirected")

    arcs = [e.endpoints for e in graph.edges if e.directed and e.is_binary]
    if not arcs:
        return Variant("directed")

    present = set(arcs)
    if all((v, u) in present for u, v in arcs):
        return Variant("bidirected")
    return Variant("directed")


def compute_weighting(graph: Graph) -> Variant:
    """``weighted_numeric`` with the weight range when every edge is weighted."""
    weights = [e.weight for e in graph.edges]
    if not weights or not all(_is_number(w) for w in weights):
        return Variant("unweighted")
    return Variant.of("weighted_numeric", min=min(weights), max=max(weights))


def compute_signedness(graph: Graph) -> Variant:
    if any(e.sign in (-1, 1) for e in graph.edges):
        return Variant("signed")
    return Variant("unsigned")


def _edge_probability(edge: Edge, key: str) -> float | None:
    if _is_number(edge.probability):
        return edge.probability
    value = edge.attrs.get(key)
    if _is_number(value) and not math.isnan(value):
        return value
    return None


def compute_uncertainty(graph: Graph, policy: ComputePolicy | None = None) -> Variant:
    """``probabilistic`` when any edge carries a probability.

    The ``probability`` field wins over the policy's probability attribute.
    The payload reports the range over the edges that carry one.
    """
    policy = resolve_policy(policy)
    probs = [p for e in graph.edges if (p := _edge_probability(e, policy.probability_key)) is not None]
    if not probs:
        return Variant("deterministic")
    return Variant.of("probabilistic", min=min(probs), max=max(probs))


def _data_shape(items: Iterable[tuple[str | None, Mapping[str, Any]]]) -> Variant:
    any_labels = False
    for label, attrs in items:
        if attrs:
            return Variant("attributed")
        if isinstance(label, str) and label:
            any_labels = True
    return Variant("labelled") if any_labels else Variant("unlabelled")


def compute_vertex_data(graph: Graph) -> Variant:
    """Attributes beat labels: ``attributed`` > ``labelled`` > ``unlabelled``."""
    return _data_shape((v.label, v.attrs) for v in graph.vertices)


def compute_edge_data(graph: Graph) -> Variant:
    return _data_shape((e.label, e.attrs) for e in graph.edges)


def compute_schema(graph: Graph) -> Variant:
    """``homogeneous`` when vertices share one attr key set and edges share one."""
    vertex_keys = {frozenset(v.attrs) for v in graph.vertices}
    edge_keys = {frozenset(e.attrs) for e in graph.edges}
    if len(vertex_keys) <= 1 and len(edge_keys) <= 1:
        return Variant("homogeneous")
    return Variant("heterogeneous")
