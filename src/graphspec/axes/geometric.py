"""Planarity and unit-disk recognition."""

from __future__ import annotations

import math

import networkx as nx

from graphspec.axes.metadata import vertex_position
from graphspec.axes.variant import UNCONSTRAINED, Variant
from graphspec.config import ComputePolicy, resolve_policy
from graphspec.graph.core import Graph
from graphspec.kernel.facts import GraphFacts


def compute_planarity(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Planarity of the underlying simple graph.

    Euler's bounds (E <= 3V - 6, or E <= 2V - 4 for bipartite graphs) reject
    dense graphs cheaply; whatever passes them is decided exactly with
    ``nx.check_planarity``.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    n, m = facts.n, facts.simple_edge_count
    if n < 3:
        return Variant("planar")
    if m > 3 * n - 6:
        return Variant("non_planar")
    if facts.is_bipartite and m > 2 * n - 4:
        return Variant("non_planar")

    is_planar, _ = nx.check_planarity(facts.nx_graph)
    return Variant("planar") if is_planar else Variant("non_planar")


def is_unit_disk(graph: Graph, policy: ComputePolicy | None = None, facts: GraphFacts | None = None) -> bool:
    """Check the given 2-D positions against a unit-disk model.

    The disk radius is taken as the longest edge; every edge must fit
    within it and every non-adjacent pair must lie strictly farther apart.
    Graphs without 2-D positions on every vertex are rejected.
    """
    facts = GraphFacts.of(graph, facts)
    policy = resolve_policy(policy)
    if not facts.undirected_binary:
        return False

    positions: dict[str, tuple[float, ...]] = {}
    for v in graph.vertices:
        pos = vertex_position(v, policy)
        if pos is None or len(pos) != 2:
            return False
        positions[v.id] = pos

    ids = facts.ids
    threshold = max(
        (math.dist(positions[u], positions[v]) for u in ids for v in facts.nbrs[u] if u < v),
        default=0.0,
    )
    for i, u in enumerate(ids):
        for v in ids[i + 1 :]:
            if not facts.adjacent(u, v) and math.dist(positions[u], positions[v]) <= threshold:
                return False
    return True
