"""Network statistics: scale-free degree distribution, small-world, communities."""

from __future__ import annotations

import math
from collections import Counter

import networkx as nx

from graphspec.axes.metadata import layer
from graphspec.axes.variant import UNCONSTRAINED, Variant
from graphspec.config import ComputePolicy, resolve_policy
from graphspec.graph.core import Graph
from graphspec.kernel.facts import GraphFacts
from graphspec.limits import (
    COMMUNITY_MIN_VERTICES,
    SCALE_FREE_MIN_VERTICES,
    SMALL_WORLD_MIN_VERTICES,
)

# Variance of log P(k) + log k below which the distribution counts as power-law.
SCALE_FREE_MAX_VARIANCE = 2.0
SCALE_FREE_MIN_COUNTED = 5


def compute_scale_free(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Method-of-moments power-law check.

    Isolated vertices are dropped. For a power law P(k) ~ k^-gamma the
    quantity log P(k) + log k has low variance; when it does, the exponent
    estimate is ``1 + mean``. This is a rough screen, not a fitted model.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary or facts.n < SCALE_FREE_MIN_VERTICES:
        return Variant("not_scale_free")

    counts = Counter(d for d in facts.degrees if d > 0)
    total = sum(counts.values())
    if len(counts) < 2 or total < SCALE_FREE_MIN_COUNTED:
        return Variant("not_scale_free")

    values = [math.log(c / total) + math.log(k) for k, c in sorted(counts.items())]
    mean = sum(values) / len(values)
    variance = sum((x - mean) ** 2 for x in values) / len(values)
    if variance < SCALE_FREE_MAX_VARIANCE:
        return Variant.of("scale_free", exponent=round(1 + mean, 2))
    return Variant("not_scale_free")


def compute_small_world(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Compare clustering and path length against a random graph of equal density.

    Small-world needs transitivity above twice the density p and an average
    shortest path no longer than 1.5 * ln(n) / ln(1 / (1 - p)).
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    n = facts.n
    if n < SMALL_WORLD_MIN_VERTICES or not facts.connected:
        return UNCONSTRAINED

    p = facts.simple_edge_count / (n * (n - 1) / 2)
    if p <= 0 or p >= 1:
        return Variant("not_small_world")

    g = facts.nx_graph
    random_path_length = math.log(n) / math.log(1 / (1 - p))
    clustered = nx.transitivity(g) > 2 * p
    short = nx.average_shortest_path_length(g) <= 1.5 * random_path_length
    return Variant("small_world") if clustered and short else Variant("not_small_world")


def compute_community_structure(
    graph: Graph, policy: ComputePolicy | None = None, facts: GraphFacts | None = None
) -> Variant:
    """Community count from layer labels, else from connected components.

    Labels are used only when every vertex has one and more than one value
    occurs. The component fallback is a weak proxy.
    """
    facts = GraphFacts.of(graph, facts)
    policy = resolve_policy(policy)
    if not facts.undirected_binary or facts.n < COMMUNITY_MIN_VERTICES:
        return UNCONSTRAINED

    labels = [layer(v, policy) for v in graph.vertices]
    if all(label for label in labels):
        distinct = len(set(labels))
        if distinct > 1:
            return Variant.of("modular", num_communities=distinct)

    communities = len(facts.components)
    if communities > 1:
        return Variant.of("modular", num_communities=communities)
    return Variant("non_modular")
