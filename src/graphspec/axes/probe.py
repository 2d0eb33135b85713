"""Probe chordal and probe interval graphs.

A graph is probe-C when its vertices split into probes P and an
independent set N of non-probes such that adding some edges inside N
yields a graph in class C. The non-probe set is either designated through
the policy's probe key (``False`` marks a non-probe) or, for small graphs,
searched over every maximal independent set.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable

import networkx as nx

from graphspec.axes.metadata import has_probe_designation, is_non_probe
from graphspec.axes.variant import UNCONSTRAINED, Variant
from graphspec.config import ComputePolicy, resolve_policy
from graphspec.graph.core import Graph
from graphspec.kernel import primitives as prim
from graphspec.kernel.facts import GraphFacts
from graphspec.limits import PROBE_PAIR_LIMIT, PROBE_VERTEX_LIMIT

ClassTest = Callable[[prim.NeighborSets], bool]


def _chordal(nbrs: prim.NeighborSets) -> bool:
    return prim.is_chordal_nbrs(nbrs)


def _interval(nbrs: prim.NeighborSets) -> bool:
    if not prim.is_chordal_nbrs(nbrs):
        return False
    return nx.is_at_free(nx.Graph({v: list(around) for v, around in nbrs.items()}))


def _with_fill(nbrs: prim.NeighborSets, fill: tuple[tuple[str, str], ...]) -> prim.NeighborSets:
    out = {v: set(around) for v, around in nbrs.items()}
    for u, v in fill:
        out[u].add(v)
        out[v].add(u)
    return out


def _completes(
    facts: GraphFacts, non_probes: list[str], test: ClassTest
) -> bool | None:
    """Try every set of fill edges inside ``non_probes``.

    Returns True on success, False when no fill works, and None when the
    candidate pairs exceed the guard or the deadline passes.
    """
    pairs = list(itertools.combinations(non_probes, 2))
    if len(pairs) > PROBE_PAIR_LIMIT:
        return None
    for size in range(len(pairs) + 1):
        for fill in itertools.combinations(pairs, size):
            if facts.expired():
                return None
            if test(_with_fill(facts.nbrs, fill)):
                return True
    return False


def _probe_class(
    graph: Graph,
    policy: ComputePolicy | None,
    facts: GraphFacts | None,
    name: str,
    test: ClassTest,
) -> Variant:
    facts = GraphFacts.of(graph, facts)
    policy = resolve_policy(policy)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    if test(facts.nbrs):
        return Variant(name)

    if has_probe_designation(graph, policy):
        non_probes = list(dict.fromkeys(v.id for v in graph.vertices if is_non_probe(v, policy)))
        if any(facts.adjacent(u, v) for u, v in itertools.combinations(non_probes, 2)):
            return Variant(f"not_{name}")
        result = _completes(facts, non_probes, test)
        if result is None:
            facts.abstain(name, "too many designated non-probe pairs")
            return UNCONSTRAINED
        return Variant(name) if result else Variant(f"not_{name}")

    if facts.n > PROBE_VERTEX_LIMIT:
        facts.abstain(name, "undesignated search skipped")
        return UNCONSTRAINED

    undecided = False
    for independent in nx.find_cliques(facts.nx_complement):
        result = _completes(facts, sorted(independent), test)
        if result:
            return Variant(name)
        if result is None:
            undecided = True
    if undecided:
        facts.abstain(name, "some independent sets were not searched")
        return UNCONSTRAINED
    return Variant(f"not_{name}")


def compute_probe_chordal(
    graph: Graph, policy: ComputePolicy | None = None, facts: GraphFacts | None = None
) -> Variant:
    return _probe_class(graph, policy, facts, "probe_chordal", _chordal)


def compute_probe_interval(
    graph: Graph, policy: ComputePolicy | None = None, facts: GraphFacts | None = None
) -> Variant:
    return _probe_class(graph, policy, facts, "probe_interval", _interval)
