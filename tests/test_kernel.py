"""Tests for kernel primitives, GraphFacts and pattern search."""

import logging

import networkx as nx
import pytest

from graphspec import Edge, Graph, GraphFacts, Vertex, make_graph
from graphspec.kernel import patterns
from graphspec.kernel import primitives as prim
from tests.builders import (
    BULL,
    C4,
    C5,
    CLAW,
    DOMINO,
    GEM,
    HOUSE,
    K4,
    P4,
    complement_of_cycle,
    complete_bipartite,
    cycle,
    directed,
    hyper,
    isolated,
    mixed,
    path,
    star,
    triangle,
)


class TestEdgeShape:
    """Test edge-shape predicates."""

    def test_undirected_binary(self):
        assert prim.is_undirected_binary(triangle())
        assert not prim.is_undirected_binary(mixed())
        assert not prim.is_undirected_binary(hyper())
        assert prim.is_undirected_binary(isolated(3))

    def test_parallel_edges_respect_direction(self):
        """u->v and v->u are distinct arcs; u-v and v-u are the same edge."""
        assert not prim.has_parallel_edges(directed([("a", "b"), ("b", "a")]))
        g = Graph([Vertex("a"), Vertex("b")], [Edge("e1", ("a", "b")), Edge("e2", ("b", "a"))])
        assert prim.has_parallel_edges(g)

    def test_hyperedges_compare_as_multisets(self):
        g = Graph(
            [Vertex("a"), Vertex("b"), Vertex("c")],
            [Edge("h1", ("a", "b", "c")), Edge("h2", ("c", "b", "a"))],
        )
        assert prim.has_parallel_edges(g)

    def test_count_self_loops(self):
        g = Graph([Vertex("a"), Vertex("b")], [Edge("l", ("a", "a")), Edge("e", ("a", "b"))])
        assert prim.count_self_loops(g) == 1


class TestAdjacency:
    """Test adjacency, degrees and complements."""

    def test_adjacency_skips_directed_and_hyper(self):
        adj = prim.build_adjacency(mixed())
        assert adj == {"a": ["b"], "b": ["a"], "c": []}
        assert prim.build_adjacency(hyper()) == {"a": [], "b": [], "c": []}

    def test_self_loop_counts_twice_in_adjacency(self):
        g = Graph([Vertex("a")], [Edge("l", ("a", "a"))])
        assert prim.build_adjacency(g) == {"a": ["a", "a"]}
        assert prim.neighbor_sets(prim.build_adjacency(g)) == {"a": set()}

    def test_degrees_include_directed_edges(self):
        assert prim.degrees(mixed()) == [1, 2, 1]

    def test_degrees_follow_vertex_order(self):
        assert prim.degrees(star(3)) == [3, 1, 1, 1]

    def test_complement(self):
        nbrs = prim.neighbor_sets(prim.build_adjacency(path(3)))
        assert prim.complement_adjacency(nbrs) == {"v0": {"v2"}, "v1": set(), "v2": {"v0"}}


class TestConnectivityAndColouring:
    """Test traversal-based primitives."""

    @pytest.mark.parametrize("n", [0, 1])
    def test_tiny_graphs_are_connected(self, n):
        assert prim.is_connected(isolated(n))

    def test_components_in_first_seen_order(self):
        g = make_graph(["a", "b", "c", "d"], [("c", "d"), ("a", "b")])
        nbrs = prim.neighbor_sets(prim.build_adjacency(g))
        assert prim.connected_components(nbrs) == [["a", "b"], ["c", "d"]]

    def test_kahn(self):
        assert prim.is_acyclic_directed(directed([("a", "b"), ("b", "c"), ("a", "c")]))
        assert not prim.is_acyclic_directed(directed([("a", "b"), ("b", "c"), ("c", "a")]))

    def test_two_coloring(self):
        colouring = prim.two_coloring(prim.build_adjacency(C4))
        assert colouring is not None
        assert colouring["v0"] != colouring["v1"]
        assert colouring["v0"] == colouring["v2"]
        assert prim.two_coloring(prim.build_adjacency(triangle())) is None

    def test_self_loop_is_not_bipartite(self):
        g = Graph([Vertex("a")], [Edge("l", ("a", "a"))])
        assert not prim.is_bipartite(g)


class TestChordality:
    """Test maximum cardinality search and perfect elimination."""

    @pytest.mark.parametrize(
        "graph,expected",
        [
            (triangle(), True),
            (P4, True),
            (K4, True),
            (C4, False),
            (C5, False),
            (HOUSE, False),
            (GEM, True),
            (isolated(5), True),
        ],
    )
    def test_is_chordal(self, graph, expected):
        assert prim.is_chordal(graph) is expected

    def test_mcs_visits_every_vertex(self):
        nbrs = prim.neighbor_sets(prim.build_adjacency(GEM))
        assert sorted(prim.maximum_cardinality_search(nbrs)) == sorted(nbrs)


class TestLocalStructure:
    """Test claw detection and transitive orientation."""

    def test_claw_centre(self):
        nbrs = prim.neighbor_sets(prim.build_adjacency(CLAW))
        assert prim.claw_centre(nbrs) == "c"

    def test_triangle_in_neighbourhood_is_not_a_claw(self):
        """Three neighbours with one edge among them are not independent."""
        nbrs = prim.neighbor_sets(prim.build_adjacency(BULL))
        assert prim.claw_centre(nbrs) is None

    @pytest.mark.parametrize(
        "graph,expected",
        [
            (C4, True),
            (P4, True),
            (K4, True),
            (complete_bipartite(2, 3), True),
            (C5, False),
            (complement_of_cycle(6), False),
        ],
    )
    def test_is_transitively_orientable(self, graph, expected):
        nbrs = prim.neighbor_sets(prim.build_adjacency(graph))
        assert prim.is_transitively_orientable(nbrs) is expected


class TestGraphFacts:
    """Test the call-scoped facts cache."""

    def test_values_are_cached(self):
        facts = GraphFacts(triangle())
        assert facts.nbrs is facts.nbrs
        assert facts.nx_graph is facts.nx_graph

    def test_of_reuses_matching_facts(self):
        g = triangle()
        facts = GraphFacts(g)
        assert GraphFacts.of(g, facts) is facts
        assert GraphFacts.of(triangle(), facts) is not facts
        assert GraphFacts.of(g, None).graph is g

    def test_no_deadline_never_expires(self):
        assert not GraphFacts.with_timeout(triangle(), None).expired()

    def test_past_deadline_expires(self):
        facts = GraphFacts.with_timeout(triangle(), -1.0)
        assert facts.expired()

    def test_duplicate_ids_collapse(self):
        g = Graph([Vertex("a"), Vertex("a"), Vertex("b")])
        assert GraphFacts(g).ids == ["a", "b"]

    def test_derived_classes(self):
        facts = GraphFacts(P4)
        assert facts.is_chordal
        assert facts.is_cochordal
        assert facts.is_split
        assert not facts.is_p4_free
        assert facts.is_interval
        assert facts.is_comparability and facts.is_cocomparability

    def test_cycle_is_not_interval(self):
        facts = GraphFacts(cycle(6))
        assert not facts.is_interval
        assert not facts.is_at_free

    def test_abstain_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="graphspec.kernel.facts"):
            GraphFacts(triangle()).abstain("perfect", "guard")
        assert "perfect abstains on 3 vertices: guard" in caplog.text

    def test_nx_views(self):
        facts = GraphFacts(C4)
        assert facts.nx_graph.number_of_edges() == 4
        assert facts.nx_complement.number_of_edges() == 2


class TestPatterns:
    """Test induced pattern matching."""

    def test_induced_not_just_subgraph(self):
        """K4 contains P4 as a subgraph but not as an induced one."""
        k4 = nx.complete_graph(4)
        assert not patterns.has_induced_subgraph(k4, patterns.P4)
        assert patterns.has_induced_subgraph(nx.path_graph(5), patterns.P4)

    @pytest.mark.parametrize(
        "graph,pattern",
        [
            (BULL, patterns.BULL),
            (GEM, patterns.GEM),
            (HOUSE, patterns.HOUSE),
            (DOMINO, patterns.DOMINO),
            (CLAW, patterns.CLAW),
        ],
    )
    def test_named_patterns_match_themselves(self, graph, pattern):
        assert patterns.has_induced_subgraph(GraphFacts(graph).nx_graph, pattern)

    def test_find_returns_mapping(self):
        mapping = patterns.find_induced_subgraph(nx.cycle_graph(5), patterns.P4)
        assert mapping is not None
        assert sorted(mapping.values()) == [0, 1, 2, 3]
        assert patterns.find_induced_subgraph(nx.path_graph(3), patterns.P4) is None

    def test_long_holes(self):
        assert patterns.has_long_hole(nx.cycle_graph(6))
        assert not patterns.has_long_hole(nx.cycle_graph(6), odd_only=True)
        assert patterns.has_long_hole(nx.cycle_graph(7), odd_only=True)
        assert not patterns.has_long_hole(nx.cycle_graph(4))
