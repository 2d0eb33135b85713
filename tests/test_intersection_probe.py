"""Tests for intersection-model classes and probe classes."""

import logging

import pytest

from graphspec import Graph, GraphFacts, Vertex, make_graph
from graphspec.axes import intersection, probe
from tests.builders import (
    C4,
    C5,
    CLAW,
    K4,
    P4,
    SPIDER,
    complement_of_cycle,
    cycle,
    directed,
    from_pairs,
    ids,
    star,
)

# C4 plus an isolated vertex.
C4_PLUS_K1 = make_graph(ids(4) + ["x"], [("v0", "v1"), ("v1", "v2"), ("v2", "v3"), ("v3", "v0")])


def _designated(graph, non_probes):
    """Copy ``graph`` with the probe attribute set on every vertex."""
    vertices = [Vertex(v.id, attrs={"probe": v.id not in non_probes}) for v in graph.vertices]
    return Graph(vertices, graph.edges)


class TestBooleanHelpers:
    """Test interval, proper interval, comparability and permutation."""

    @pytest.mark.parametrize(
        "graph,expected",
        [(P4, True), (K4, True), (star(3), True), (SPIDER, False), (C4, False)],
    )
    def test_is_interval(self, graph, expected):
        assert intersection.is_interval(graph) is expected

    def test_is_proper_interval(self):
        assert intersection.is_proper_interval(P4)
        assert not intersection.is_proper_interval(CLAW)

    def test_is_comparability(self):
        assert intersection.is_comparability(C4)
        assert not intersection.is_comparability(C5)

    @pytest.mark.parametrize(
        "graph,expected",
        [(P4, True), (C4, True), (C5, False), (cycle(6), False), (complement_of_cycle(6), False)],
    )
    def test_is_permutation(self, graph, expected):
        assert intersection.is_permutation(graph) is expected

    def test_directed_graphs_are_rejected(self):
        g = directed([("a", "b"), ("b", "c")])
        assert not intersection.is_interval(g)
        assert not intersection.is_comparability(g)

    def test_is_single_cycle(self):
        assert intersection.is_single_cycle(GraphFacts(C5))
        assert not intersection.is_single_cycle(GraphFacts(P4))
        two_triangles = from_pairs([("a", "b"), ("b", "c"), ("c", "a"), ("d", "e"), ("e", "f"), ("f", "d")])
        assert not intersection.is_single_cycle(GraphFacts(two_triangles))


class TestCircularArc:
    """Test circular-arc and proper circular-arc axes."""

    @pytest.mark.parametrize("graph", [C5, cycle(8), P4, K4, star(3)])
    def test_circular_arc(self, graph):
        assert intersection.compute_circular_arc(graph).kind == "circular_arc"

    def test_disconnected_non_interval_is_rejected(self):
        assert intersection.compute_circular_arc(C4_PLUS_K1).kind == "not_circular_arc"

    def test_undecided_is_unconstrained(self):
        assert intersection.compute_circular_arc(SPIDER).kind == "unconstrained"

    @pytest.mark.parametrize("graph", [C5, P4, K4])
    def test_proper_circular_arc(self, graph):
        assert intersection.compute_proper_circular_arc(graph).kind == "proper_circular_arc"

    @pytest.mark.parametrize("graph", [CLAW, SPIDER, C4_PLUS_K1])
    def test_not_proper_circular_arc(self, graph):
        assert intersection.compute_proper_circular_arc(graph).kind == "not_proper_circular_arc"


class TestProbeChordal:
    """Test probe chordal recognition."""

    def test_chordal_is_probe_chordal(self):
        assert probe.compute_probe_chordal(P4).kind == "probe_chordal"

    def test_c4_by_search(self):
        assert probe.compute_probe_chordal(C4).kind == "probe_chordal"

    def test_c5_by_search(self):
        assert probe.compute_probe_chordal(C5).kind == "not_probe_chordal"

    def test_designated_non_probes(self):
        assert probe.compute_probe_chordal(_designated(C4, {"v0", "v2"})).kind == "probe_chordal"

    def test_adjacent_non_probes_are_rejected(self):
        assert probe.compute_probe_chordal(_designated(C4, {"v0", "v1"})).kind == "not_probe_chordal"

    def test_custom_probe_key(self):
        vertices = [Vertex(v.id, attrs={"kind_probe": v.id not in {"v0", "v1"}}) for v in C4.vertices]
        g = Graph(vertices, C4.edges)
        assert probe.compute_probe_chordal(g, {"probe_key": "kind_probe"}).kind == "not_probe_chordal"

    def test_undesignated_guard(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="graphspec.kernel.facts"):
            result = probe.compute_probe_chordal(cycle(11))
        assert result.kind == "unconstrained"
        assert "probe_chordal abstains" in caplog.text

    def test_designated_pair_guard(self):
        g = _designated(cycle(12), {f"v{i}" for i in range(0, 12, 2)})
        assert probe.compute_probe_chordal(g).kind == "unconstrained"


class TestProbeInterval:
    """Test probe interval recognition."""

    def test_interval_is_probe_interval(self):
        assert probe.compute_probe_interval(P4).kind == "probe_interval"

    def test_c4_by_search(self):
        assert probe.compute_probe_interval(C4).kind == "probe_interval"

    def test_c5_by_search(self):
        assert probe.compute_probe_interval(C5).kind == "not_probe_interval"

    def test_directed_is_unconstrained(self):
        assert probe.compute_probe_interval(directed([("a", "b")])).kind == "unconstrained"
