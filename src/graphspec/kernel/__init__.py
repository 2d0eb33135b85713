"""Shared kernel: primitives, the per-call facts cache, and pattern search."""

from graphspec.kernel.facts import GraphFacts
from graphspec.kernel.primitives import (
    build_adjacency,
    complement_adjacency,
    degrees,
    is_acyclic_directed,
    is_bipartite,
    is_chordal,
    is_connected,
    maximum_cardinality_search,
    two_coloring,
)

__all__ = [
    "GraphFacts",
    "build_adjacency",
    "complement_adjacency",
    "degrees",
    "is_acyclic_directed",
    "is_bipartite",
    "is_chordal",
    "is_connected",
    "maximum_cardinality_search",
    "two_coloring",
]
