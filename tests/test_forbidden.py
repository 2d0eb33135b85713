"""Tests for forbidden induced subgraph classes and perfect variants."""

import pytest

from graphspec.axes import forbidden, perfect_variants
from graphspec.kernel.primitives import build_adjacency, neighbor_sets
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
    SPIDER,
    complement_of_cycle,
    complete,
    cycle,
    directed,
    isolated,
    path,
    petersen,
    star,
)


class TestPatternFree:
    """Test the single-pattern classes."""

    @pytest.mark.parametrize(
        "compute,free,present",
        [
            (forbidden.compute_p5_free, [P4, C5, K4], [path(5), cycle(6)]),
            (forbidden.compute_c5_free, [C4, K4, path(6)], [C5, petersen()]),
            (forbidden.compute_bull_free, [C5, K4, P4], [BULL]),
            (forbidden.compute_gem_free, [K4, C5, HOUSE], [GEM]),
        ],
    )
    def test_free_and_present(self, compute, free, present):
        name = compute.__name__.removeprefix("compute_")
        for graph in free:
            assert compute(graph).kind == name
        for graph in present:
            assert compute(graph).kind == f"not_{name}"

    def test_directed_is_unconstrained(self):
        assert forbidden.compute_p5_free(directed([("a", "b")])).kind == "unconstrained"

    def test_pattern_scan_guard(self):
        assert forbidden.compute_p5_free(path(65)).kind == "unconstrained"


class TestHoleClasses:
    """Test classes that also forbid long holes."""

    def test_hh_free(self):
        assert forbidden.compute_hh_free(C4).kind == "hh_free"
        assert forbidden.compute_hh_free(path(6)).kind == "hh_free"
        assert forbidden.compute_hh_free(HOUSE).kind == "not_hh_free"
        assert forbidden.compute_hh_free(C5).kind == "not_hh_free"

    @pytest.mark.parametrize("graph", [star(3), C4, K4, P4])
    def test_distance_hereditary(self, graph):
        assert forbidden.compute_distance_hereditary(graph).kind == "distance_hereditary"

    @pytest.mark.parametrize("graph", [HOUSE, GEM, DOMINO, C5, cycle(6)])
    def test_not_distance_hereditary(self, graph):
        assert forbidden.compute_distance_hereditary(graph).kind == "not_distance_hereditary"

    def test_hole_search_guard(self):
        assert forbidden.compute_hh_free(path(17)).kind == "unconstrained"

    def test_weakly_chordal(self):
        assert forbidden.compute_weakly_chordal(P4).kind == "weakly_chordal"
        assert forbidden.compute_weakly_chordal(C4).kind == "weakly_chordal"
        assert forbidden.compute_weakly_chordal(HOUSE).kind == "weakly_chordal"

    def test_hole_or_antihole_is_not_weakly_chordal(self):
        assert forbidden.compute_weakly_chordal(cycle(6)).kind == "not_weakly_chordal"
        assert forbidden.compute_weakly_chordal(complement_of_cycle(6)).kind == "not_weakly_chordal"

    def test_split_graphs_skip_the_guard(self):
        """Split graphs are weakly chordal whatever their size."""
        assert forbidden.compute_weakly_chordal(complete(20)).kind == "weakly_chordal"
        assert forbidden.compute_weakly_chordal(cycle(17)).kind == "unconstrained"


class TestAtFree:
    """Test asteroidal-triple freeness."""

    @pytest.mark.parametrize("graph", [path(5), C5, K4, CLAW, isolated(3)])
    def test_at_free(self, graph):
        assert forbidden.compute_at_free(graph).kind == "at_free"

    @pytest.mark.parametrize("graph", [SPIDER, cycle(6)])
    def test_not_at_free(self, graph):
        assert forbidden.compute_at_free(graph).kind == "not_at_free"


class TestModular:
    """Test prime-graph recognition."""

    def test_smallest_module(self):
        nbrs = neighbor_sets(build_adjacency(C4))
        assert perfect_variants.smallest_module({"v0", "v2"}, nbrs) == {"v0", "v2"}
        assert perfect_variants.smallest_module({"v0", "v1"}, nbrs) == {"v0", "v1", "v2", "v3"}

    @pytest.mark.parametrize("graph", [P4, C5, isolated(2)])
    def test_prime(self, graph):
        assert perfect_variants.compute_modular(graph).kind == "modular"

    @pytest.mark.parametrize("graph", [C4, star(3), complete(3), isolated(3)])
    def test_not_prime(self, graph):
        assert perfect_variants.compute_modular(graph).kind == "not_modular"

    def test_guard(self):
        assert perfect_variants.compute_modular(path(13)).kind == "unconstrained"


class TestPtolemaic:
    """Test gem-free chordal recognition."""

    @pytest.mark.parametrize("graph", [star(3), K4, P4, isolated(3)])
    def test_ptolemaic(self, graph):
        assert perfect_variants.compute_ptolemaic(graph).kind == "ptolemaic"

    @pytest.mark.parametrize("graph", [GEM, C4, C5])
    def test_not_ptolemaic(self, graph):
        assert perfect_variants.compute_ptolemaic(graph).kind == "not_ptolemaic"


class TestQuasiLine:
    """Test that every neighbourhood splits into two cliques."""

    @pytest.mark.parametrize("graph", [C5, K4, P4, GEM])
    def test_quasi_line(self, graph):
        assert perfect_variants.compute_quasi_line(graph).kind == "quasi_line"

    def test_claw_is_not_quasi_line(self):
        assert perfect_variants.compute_quasi_line(CLAW).kind == "not_quasi_line"
