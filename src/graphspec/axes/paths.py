"""Hamiltonian cycles and paths by bounded backtracking.

Both searches abstain with ``unconstrained`` above ``HAMILTONIAN_LIMIT``
vertices, whatever the true answer, and whenever the analysis deadline
passes mid-search.
"""

from __future__ import annotations

from graphspec.axes.variant import UNCONSTRAINED, Variant
from graphspec.graph.core import Graph
from graphspec.kernel.facts import GraphFacts
from graphspec.limits import HAMILTONIAN_LIMIT


class _Expired(Exception):
    pass


class _PathSearch:
    """Depth-first search over vertex indices with an int bitset of visited vertices.

    The bitset is passed down the recursion and the bit is cleared again on
    return, so no per-branch copies are made.
    """

    def __init__(self, facts: GraphFacts) -> None:
        self.facts = facts
        index = {v: i for i, v in enumerate(facts.ids)}
        self.n = len(index)
        self.full = (1 << self.n) - 1
        self.masks = [0] * self.n
        self.adj: list[list[int]] = [[] for _ in range(self.n)]
        for v, i in index.items():
            for u in facts.nbrs[v]:
                self.adj[i].append(index[u])
                self.masks[i] |= 1 << index[u]

    def extend(self, current: int, visited: int, start: int, close: bool) -> bool:
        if self.facts.expired():
            raise _Expired
        if visited == self.full:
            return not close or bool(self.masks[current] >> start & 1)
        for nxt in self.adj[current]:
            bit = 1 << nxt
            if visited & bit:
                continue
            visited |= bit
            if self.extend(nxt, visited, start, close):
                return True
            visited &= ~bit
        return False

    def cycle(self) -> bool:
        return self.extend(0, 1, 0, close=True)

    def path(self) -> bool:
        return any(self.extend(s, 1 << s, s, close=False) for s in range(self.n))


def _search(facts: GraphFacts, axis: str, close: bool) -> bool | None:
    try:
        search = _PathSearch(facts)
        return search.cycle() if close else search.path()
    except _Expired:
        facts.abstain(axis, "deadline expired")
        return None


def compute_hamiltonian(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Hamiltonian cycle search.

    Fewer than three vertices, a vertex of degree < 2, or a disconnected
    graph rule a cycle out before any search.
    """
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    n = facts.n
    if n > HAMILTONIAN_LIMIT:
        facts.abstain("hamiltonian", "backtracking skipped")
        return UNCONSTRAINED
    if n < 3:
        return Variant("non_hamiltonian")
    if any(len(facts.nbrs[v]) < 2 for v in facts.ids) or not facts.connected:
        return Variant("non_hamiltonian")

    found = _search(facts, "hamiltonian", close=True)
    if found is None:
        return UNCONSTRAINED
    return Variant("hamiltonian") if found else Variant("non_hamiltonian")


def compute_traceable(graph: Graph, facts: GraphFacts | None = None) -> Variant:
    """Hamiltonian path search from every start vertex."""
    facts = GraphFacts.of(graph, facts)
    if not facts.undirected_binary:
        return UNCONSTRAINED
    n = facts.n
    if n > HAMILTONIAN_LIMIT:
        facts.abstain("traceable", "backtracking skipped")
        return UNCONSTRAINED
    if n < 2 or not facts.connected:
        return Variant("non_traceable")

    found = _search(facts, "traceable", close=False)
    if found is None:
        return UNCONSTRAINED
    return Variant("traceable") if found else Variant("non_traceable")
