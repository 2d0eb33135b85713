"""Boolean predicates over graphs.

Generic predicates (``axis_equals``, ``axis_kind_is``, ``has_graph_spec``)
build a ``Callable[[Graph], bool]`` and compute only the axes they compare.
Named predicates answer common questions directly; the ones backed by a
single cheap test skip the orchestrator entirely.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from graphspec.axes import advanced, geometric, intersection, structure
from graphspec.axes.variant import Variant
from graphspec.config import ComputePolicy
from graphspec.graph.core import Graph
from graphspec.kernel import primitives as prim
from graphspec.kernel.facts import GraphFacts
from graphspec.spec import compute_axes, compute_axis

GraphPredicate = Callable[[Graph], bool]
Expected = Variant | Mapping[str, Any] | str
PolicyLike = ComputePolicy | Mapping[str, Any] | None


def variant_matches(actual: Variant, expected: Expected) -> bool:
    """Structural comparison.

    Kinds must agree, and every payload field present on both sides must
    be equal. Fields only one side carries are ignored, so
    ``{"kind": "regular"}`` matches ``regular`` of any degree.
    """
    want = Variant.coerce(expected)
    if actual.kind != want.kind:
        return False
    have = actual.fields
    return all(have[key] == value for key, value in want.payload if key in have)


# =============================================================================
# Generic combinators
# =============================================================================


def axis_equals(name: str, expected: Expected, policy: PolicyLike = None) -> GraphPredicate:
    """Predicate: axis ``name`` structurally equals ``expected``.

    Example:
        >>> is_two_regular = axis_equals("degree_constraint", {"kind": "regular", "degree": 2})
        >>> is_two_regular(triangle)
        True
    """

    def predicate(graph: Graph) -> bool:
        return variant_matches(compute_axis(graph, name, policy), expected)

    return predicate


def axis_kind_is(name: str, kind: str, policy: PolicyLike = None) -> GraphPredicate:
    """Predicate: axis ``name`` has the given ``kind``, payload ignored."""

    def predicate(graph: Graph) -> bool:
        return compute_axis(graph, name, policy).kind == kind

    return predicate


def has_graph_spec(expected: Mapping[str, Expected], policy: PolicyLike = None) -> GraphPredicate:
    """Predicate: every listed axis matches.

    Only the listed axes are computed, sharing one facts cache.
    """

    def predicate(graph: Graph) -> bool:
        actual = compute_axes(graph, expected.keys(), policy)
        return all(variant_matches(actual[name], want) for name, want in expected.items())

    return predicate


# =============================================================================
# Named predicates: spec-backed
# =============================================================================

_SIMPLE_UNDIRECTED = {
    "directionality": "undirected",
    "edge_multiplicity": "simple",
    "self_loops": "disallowed",
}


def is_tree(graph: Graph) -> bool:
    """Simple, undirected, connected and acyclic."""
    return has_graph_spec({**_SIMPLE_UNDIRECTED, "cycles": "acyclic", "connectivity": "connected"})(graph)


def is_forest(graph: Graph) -> bool:
    return has_graph_spec({**_SIMPLE_UNDIRECTED, "cycles": "acyclic"})(graph)


def is_dag(graph: Graph) -> bool:
    return has_graph_spec(
        {
            "directionality": "directed",
            "edge_multiplicity": "simple",
            "self_loops": "disallowed",
            "cycles": "acyclic",
        }
    )(graph)


def is_complete(graph: Graph) -> bool:
    return axis_kind_is("completeness", "complete")(graph)


def is_sparse(graph: Graph) -> bool:
    return structure.compute_density(graph).kind == "sparse"


def is_dense(graph: Graph) -> bool:
    return structure.compute_density(graph).kind == "dense"


def is_regular(graph: Graph) -> bool:
    return axis_kind_is("degree_constraint", "regular")(graph)


def is_graph_connected(graph: Graph) -> bool:
    return axis_kind_is("connectivity", "connected")(graph)


def is_scale_free(graph: Graph) -> bool:
    return axis_kind_is("scale_free", "scale_free")(graph)


def is_small_world(graph: Graph) -> bool:
    return axis_kind_is("small_world", "small_world")(graph)


def is_modular(graph: Graph, policy: PolicyLike = None) -> bool:
    """Community structure detected (labels or several components)."""
    return axis_kind_is("community_structure", "modular", policy)(graph)


def is_hamiltonian(graph: Graph) -> bool:
    return axis_kind_is("hamiltonian", "hamiltonian")(graph)


def is_traceable(graph: Graph) -> bool:
    return axis_kind_is("traceable", "traceable")(graph)


def is_threshold(graph: Graph) -> bool:
    return axis_kind_is("threshold", "threshold")(graph)


def is_line_graph(graph: Graph) -> bool:
    return axis_kind_is("line", "line_graph")(graph)


def is_claw_free(graph: Graph) -> bool:
    return axis_kind_is("claw_free", "claw_free")(graph)


def is_cubic(graph: Graph) -> bool:
    return axis_kind_is("cubic", "cubic")(graph)


def is_k_regular(k: int) -> GraphPredicate:
    """Predicate factory: every vertex has degree ``k``."""

    def predicate(graph: Graph) -> bool:
        return advanced.compute_specific_regular(graph, k).kind == "k_regular"

    return predicate


def is_strongly_regular(graph: Graph) -> bool:
    return axis_kind_is("strongly_regular", "strongly_regular")(graph)


def is_self_complementary(graph: Graph) -> bool:
    return axis_kind_is("self_complementary", "self_complementary")(graph)


def is_vertex_transitive(graph: Graph) -> bool:
    """Conservative: graphs above the automorphism guard answer False."""
    return axis_kind_is("vertex_transitive", "vertex_transitive")(graph)


def is_complete_bipartite(graph: Graph) -> bool:
    return axis_kind_is("complete_bipartite", "complete_bipartite")(graph)


# =============================================================================
# Named predicates: direct
# =============================================================================


def is_bipartite(graph: Graph) -> bool:
    return structure.compute_partiteness(graph).kind == "bipartite"


def is_chordal(graph: Graph) -> bool:
    facts = GraphFacts(graph)
    return facts.undirected_binary and facts.is_chordal


def is_planar(graph: Graph) -> bool:
    return geometric.compute_planarity(graph).kind == "planar"


def is_split(graph: Graph) -> bool:
    return advanced.compute_split(graph).kind == "split"


def is_cograph(graph: Graph) -> bool:
    return advanced.compute_cograph(graph).kind == "cograph"


def is_perfect(graph: Graph) -> bool:
    return advanced.compute_perfect(graph).kind == "perfect"


def is_comparability(graph: Graph) -> bool:
    return intersection.is_comparability(graph)


def is_interval(graph: Graph) -> bool:
    return intersection.is_interval(graph)


def is_permutation(graph: Graph) -> bool:
    return intersection.is_permutation(graph)


def is_unit_disk(graph: Graph, policy: PolicyLike = None) -> bool:
    """2-D positions on every vertex realise the edges as a unit-disk graph."""
    return geometric.is_unit_disk(graph, policy)


def is_star(graph: Graph) -> bool:
    """A tree with a centre adjacent to every other vertex (K2 included)."""
    # K2 counts: either endpoint touches the only other vertex.
    if not is_tree(graph) or graph.n < 2:
        return False
    facts = GraphFacts(graph)
    return any(len(facts.nbrs[v]) == facts.n - 1 for v in facts.ids)


def is_eulerian(graph: Graph) -> bool:
    """Has an Eulerian circuit.

    Undirected: every degree even (loops count twice) and all edges in one
    component. Directed: in-degree equals out-degree everywhere and the
    edges are weakly connected. Mixed and hyper graphs answer False.
    """
    facts = GraphFacts(graph)
    if facts.n == 0 or not facts.all_binary:
        return False
    directed = [e for e in graph.edges if e.directed]
    if facts.undirected_binary:
        if any(len(facts.adjacency[v]) % 2 for v in facts.ids):
            return False
    elif len(directed) == len(graph.edges):
        balance = dict.fromkeys(facts.ids, 0)
        for e in directed:
            tail, head = e.endpoints
            balance[tail] += 1
            balance[head] -= 1
        if any(balance.values()):
            return False
    else:
        return False

    # Even degrees alone are not enough: the edges must form one component.
    touched = {v for e in graph.edges for v in e.endpoints}
    if not touched:
        return True
    underlying: dict[str, set[str]] = {v: set() for v in touched}
    for e in graph.edges:
        u, v = e.endpoints
        underlying[u].add(v)
        underlying[v].add(u)
    return len(prim.connected_components(underlying)) == 1
