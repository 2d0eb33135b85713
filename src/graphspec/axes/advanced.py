"""Advanced structure: perfection, split/cograph/threshold, line graphs,
regularity, symmetry, and complete bipartiteness.

Every computer here needs an undirected binary graph and answers
``unconstrained`` otherwise (``specific_regular`` only needs binary edges).
Loops and parallel edges are ignored; the tests run on the underlying
simple graph. The exception is ``complete_bipartite``, whose edge count is
the raw count, so a repeated edge or a loop rules K_{m,n} out.
"""

from __future__ import annotations

import networkx as nx
from networkx.algorithms.isomorphism import GraphMatcher

from graphspec.axes.variant import UNCONSTRAINED, Variant
from graphspec.graph.core import Graph
from graphspec.kernel.facts import GraphFacts
from graphspec.kernel.patterns import long_holes
from graphspec.limits import (
    PERFECT_EXACT_LIMIT,
    SELF_COMPLEMENTARY_LIMIT,
    VERTEX_TRANSITIVE_LIMIT,
)


def _has_odd_hole(facts: GraphFacts, graph: nx.Graph) -> bool | None:
    """Odd chordless cycle of length >= 5, or None once the deadline passes."""
    for cyc in long_holes(graph, 5):
        if facts.expired():
            return None
        if len(cyc) % 2 == 1:
            return True
    return False


def compute_perfect(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Perfect-graph recognition.

    Bipartite, chordal, co-chordal and comparability graphs are accepted
    outright. Otherwise small graphs are decided exactly by the Strong
    Perfect Graph Theorem (no odd hole, no odd antihole); larger ones are
    reported ``imperfect``.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    if facts.is_bipartite or facts.is_chordal or facts.is_cochordal or facts.is_comparability:
        return Variant("perfect")
    if facts.n > PERFECT_EXACT_LIMIT:
        facts.abstain("perfect", "exact odd-hole search skipped, answering imperfect")
        return Variant("imperfect")

    for view in (facts.nx_graph, facts.nx_complement):
        found = _has_odd_hole(facts, view)
        if found is None:
            facts.abstain("perfect", "deadline expired")
            return UNCONSTRAINED
        if found:
            return Variant("imperfect")
    return Variant("perfect")


def compute_split(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    return Variant("split") if facts.is_split else Variant("non_split")


def compute_cograph(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Cographs are exactly the graphs without an induced P4."""
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    return Variant("cograph") if facts.is_p4_free else Variant("non_cograph")


def compute_threshold(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    if facts.is_split and facts.is_p4_free:
        return Variant("threshold")
    return Variant("non_threshold")


def compute_claw_free(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    return Variant("claw_free") if facts.is_claw_free else Variant("has_claw")


def compute_line(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Line-graph recognition.

    Line graphs are claw-free, so a claw rejects immediately. Survivors are
    checked per component by reconstructing a root graph with
    ``nx.inverse_line_graph``, which raises when none exists.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    if not facts.is_claw_free:
        return Variant("non_line_graph")

    for component in facts.components:
        if len(component) < 2:
            continue
        sub = facts.nx_graph.subgraph(component).copy()
        try:
            nx.inverse_line_graph(sub)
        except nx.NetworkXError:
            return Variant("non_line_graph")
    return Variant("line_graph")


def compute_cubic(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    degrees = facts.degrees
    if degrees and all(d == 3 for d in degrees):
        return Variant("cubic")
    return Variant("non_cubic")


def compute_specific_regular(
    graph: Graph, k: int | None = None, facts: GraphFacts | None = None
) -> Variant:
    """``k_regular`` when every vertex has degree ``k``.

    With ``k=None`` the common degree is detected instead. Directed edges
    count toward total degree.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.all_binary:
        return UNCONSTRAINED
    degrees = facts.degrees
    if not degrees:
        return Variant("not_k_regular")
    target = degrees[0] if k is None else k
    if all(d == target for d in degrees):
        return Variant.of("k_regular", k=target)
    return Variant("not_k_regular")


def compute_strongly_regular(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Check for a single (k, lambda, mu) triple.

    Adjacent pairs must all share ``lambda_`` common neighbours and
    non-adjacent pairs ``mu``. When one of the two pair kinds does not occur
    (complete or edgeless graphs) its count is reported as 0.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    ids, nbrs = facts.ids, facts.nbrs
    if not ids:
        return Variant("not_strongly_regular")
    k = len(nbrs[ids[0]])
    if any(len(nbrs[v]) != k for v in ids):
        return Variant("not_strongly_regular")

    lambdas: set[int] = set()
    mus: set[int] = set()
    for i, u in enumerate(ids):
        for v in ids[i + 1 :]:
            common = len(nbrs[u] & nbrs[v])
            (lambdas if v in nbrs[u] else mus).add(common)
            if len(lambdas) > 1 or len(mus) > 1:
                return Variant("not_strongly_regular")
    return Variant.of(
        "strongly_regular",
        k=k,
        lambda_=next(iter(lambdas), 0),
        mu=next(iter(mus), 0),
    )


def compute_self_complementary(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Self-complementarity.

    Necessary conditions first: n = 0 or 1 (mod 4), exactly half of all
    pairs are edges, and the degree sequence maps onto the complement's.
    Small survivors get an exact isomorphism test against the complement.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    n = facts.n
    if n == 0:
        return Variant("self_complementary")
    if n % 4 not in (0, 1):
        return Variant("not_self_complementary")
    if facts.simple_edge_count * 4 != n * (n - 1):
        return Variant("not_self_complementary")

    degrees = sorted(len(facts.nbrs[v]) for v in facts.ids)
    if degrees != sorted(n - 1 - d for d in degrees):
        return Variant("not_self_complementary")

    if n > SELF_COMPLEMENTARY_LIMIT:
        facts.abstain("self_complementary", "isomorphism test skipped")
        return UNCONSTRAINED
    if nx.is_isomorphic(facts.nx_graph, facts.nx_complement):
        return Variant("self_complementary")
    return Variant("not_self_complementary")


def compute_vertex_transitive(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Regular graphs up to the size guard get an exact orbit check.

    The automorphism orbit of the first vertex is collected from VF2
    self-isomorphisms; the graph is vertex-transitive iff it covers V.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    ids, nbrs = facts.ids, facts.nbrs
    if len({len(nbrs[v]) for v in ids}) > 1:
        return Variant("not_vertex_transitive")
    if len(ids) <= 1:
        return Variant("vertex_transitive")
    if len(ids) > VERTEX_TRANSITIVE_LIMIT:
        facts.abstain("vertex_transitive", "automorphism search skipped")
        return UNCONSTRAINED

    target = set(ids)
    orbit: set[str] = set()
    for mapping in GraphMatcher(facts.nx_graph, facts.nx_graph).isomorphisms_iter():
        orbit.add(mapping[ids[0]])
        if orbit == target:
            return Variant("vertex_transitive")
    return Variant("not_vertex_transitive")


def compute_complete_bipartite(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """K_{m,n} recognition.

    ``m`` is the size of the colour class holding the first vertex. Every
    cross pair must be an edge and the raw edge count must be m * n, so
    parallel edges and loops make the graph ``not_complete_bipartite``.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    colouring = facts.coloring
    if colouring is None:
        return Variant("not_complete_bipartite")

    ids = facts.ids
    first = colouring[ids[0]] if ids else 0
    side_a = [v for v in ids if colouring[v] == first]
    side_b = [v for v in ids if colouring[v] != first]
    if len(graph.edges) != len(side_a) * len(side_b):
        return Variant("not_complete_bipartite")
    if any(b not in facts.nbrs[a] for a in side_a for b in side_b):
        return Variant("not_complete_bipartite")
    return Variant.of("complete_bipartite", m=len(side_a), n=len(side_b))
