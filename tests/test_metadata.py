"""Tests for the metadata accessors and metadata-backed axes."""

import pytest

from graphspec import DEFAULT_POLICY, Edge, Graph, Variant, Vertex
from graphspec.axes import metadata


def _graph(vertex_attrs=(), edge_attrs=()):
    """Path a-b-c with attrs spread over the vertices and edges given."""
    vertex_attrs = list(vertex_attrs) + [{}] * (3 - len(vertex_attrs))
    edge_attrs = list(edge_attrs) + [{}] * (2 - len(edge_attrs))
    vertices = [Vertex(vid, attrs=attrs) for vid, attrs in zip("abc", vertex_attrs)]
    edges = [
        Edge("e0", ("a", "b"), attrs=edge_attrs[0]),
        Edge("e1", ("b", "c"), attrs=edge_attrs[1]),
    ]
    return Graph(vertices, edges)


class TestAccessors:
    """Test typed reads from the attribute bag."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ((1, 2), (1, 2)),
            ([1, 2, 3], (1, 2, 3)),
            ({"x": 1, "y": 2}, (1, 2)),
            ({"x": 1, "y": 2, "z": 3}, (1, 2, 3)),
            ({"x": 1}, None),
            ((1,), None),
            ("12", None),
            ((1, "2"), None),
            (None, None),
        ],
    )
    def test_vertex_position(self, raw, expected):
        assert metadata.vertex_position(Vertex("a", attrs={"pos": raw}), DEFAULT_POLICY) == expected

    def test_is_root_requires_true(self):
        assert metadata.is_root(Vertex("a", attrs={"root": True}), DEFAULT_POLICY)
        assert not metadata.is_root(Vertex("a", attrs={"root": 1}), DEFAULT_POLICY)

    def test_layer_normalises_to_string(self):
        assert metadata.layer(Vertex("a", attrs={"layer": 3}), DEFAULT_POLICY) == "3"
        assert metadata.layer(Vertex("a", attrs={"layer": ["x"]}), DEFAULT_POLICY) is None

    def test_unobserved_requires_false(self):
        assert metadata.is_unobserved(Vertex("a", attrs={"observed": False}), DEFAULT_POLICY)
        assert not metadata.is_unobserved(Vertex("a", attrs={"observed": 0}), DEFAULT_POLICY)

    def test_weight_vector(self):
        e = Edge("e", ("a", "b"), attrs={"weight_vector": [1, 2.5]})
        assert metadata.weight_vector(e, DEFAULT_POLICY) == (1, 2.5)
        e = Edge("e", ("a", "b"), attrs={"weight_vector": "1,2"})
        assert metadata.weight_vector(e, DEFAULT_POLICY) is None

    def test_probe_designation(self):
        g = _graph([{"probe": False}])
        assert metadata.has_probe_designation(g, DEFAULT_POLICY)
        assert metadata.is_non_probe(g.vertices[0], DEFAULT_POLICY)
        assert not metadata.is_non_probe(g.vertices[1], DEFAULT_POLICY)


class TestEmbedding:
    """Test the embedding axis."""

    def test_spatial(self):
        g = _graph([{"pos": (0, 0)}, {"pos": (1, 0)}, {"pos": {"x": 2, "y": 0}}])
        assert metadata.compute_embedding(g) == Variant.of("spatial_coordinates", dims=2)

    def test_mixed_dimensions_are_abstract(self):
        g = _graph([{"pos": (0, 0)}, {"pos": (1, 0)}, {"pos": (2, 0, 1)}])
        assert metadata.compute_embedding(g).kind == "abstract"

    def test_partial_positions_are_abstract(self):
        assert metadata.compute_embedding(_graph([{"pos": (0, 0)}])).kind == "abstract"

    def test_empty_graph_is_abstract(self):
        assert metadata.compute_embedding(Graph()).kind == "abstract"


class TestSimpleMetadataAxes:
    """Test rooting, layering, ordering and ports."""

    @pytest.mark.parametrize(
        "vertex_attrs,kind",
        [
            ([], "unrooted"),
            ([{"root": True}], "rooted"),
            ([{"root": True}, {"root": True}], "multi_rooted"),
        ],
    )
    def test_rooting(self, vertex_attrs, kind):
        assert metadata.compute_rooting(_graph(vertex_attrs)).kind == kind

    def test_layering_counts_vertices_and_edges(self):
        assert metadata.compute_layering(_graph([{"layer": "x"}])).kind == "single_layer"
        g = _graph([{"layer": "x"}], [{"layer": "y"}])
        assert metadata.compute_layering(g).kind == "multi_layer"

    def test_edge_ordering(self):
        assert metadata.compute_edge_ordering(_graph(edge_attrs=[{"order": 1}, {"order": 2}])).kind == "ordered"
        assert metadata.compute_edge_ordering(_graph(edge_attrs=[{"order": 1}])).kind == "unordered"

    @pytest.mark.parametrize("graph", [Graph(), Graph([Vertex("a")])])
    def test_edgeless_graph_is_ordered(self, graph):
        """Every edge carries an order, vacuously."""
        assert metadata.compute_edge_ordering(graph).kind == "ordered"

    def test_ports(self):
        assert metadata.compute_ports(_graph([{"ports": ["in", "out"]}])).kind == "port_labelled_vertices"
        assert metadata.compute_ports(_graph()).kind == "none"


class TestTemporal:
    """Test the temporal axis."""

    def test_static(self):
        assert metadata.compute_temporal(_graph()).kind == "static"

    def test_vertices_only(self):
        assert metadata.compute_temporal(_graph([{"time": 1}])).kind == "temporal_vertices"

    def test_edges_only(self):
        assert metadata.compute_temporal(_graph(edge_attrs=[{"time": 1}])).kind == "temporal_edges"

    def test_time_ordered(self):
        g = _graph([{"time": 0}], [{"time": 1.5}])
        assert metadata.compute_temporal(g).kind == "time_ordered"

    def test_non_numeric_times_are_not_ordered(self):
        g = _graph([{"time": "monday"}], [{"time": 1}])
        assert metadata.compute_temporal(g).kind == "temporal_vertices"

    def test_policy_time_key(self):
        g = _graph([{"t": 0}], [{"t": 1}])
        assert metadata.compute_temporal(g, {"time_key": "t"}).kind == "time_ordered"


class TestSemanticAxes:
    """Test observability, operational and measure semantics."""

    def test_observability_precedence(self):
        assert metadata.compute_observability(_graph()).kind == "fully_specified"
        assert metadata.compute_observability(_graph([{"observed": False}])).kind == "partially_observed"
        g = _graph([{"observed": False}], [{"latent": True}])
        assert metadata.compute_observability(g).kind == "latent_or_inferred"

    def test_operational_precedence(self):
        assert metadata.compute_operational_semantics(_graph()).kind == "structural_only"
        g = _graph([{"fn": "relu"}])
        assert metadata.compute_operational_semantics(g).kind == "annotated_with_functions"
        g = _graph([{"fn": "relu"}], [{"exec": True}])
        assert metadata.compute_operational_semantics(g).kind == "executable"

    def test_measure_precedence(self):
        assert metadata.compute_measure_semantics(_graph()).kind == "none"
        assert metadata.compute_measure_semantics(_graph(edge_attrs=[{"weight_vector": [1, 2]}])).kind == "metric"
        assert metadata.compute_measure_semantics(_graph([{"utility": 2}])).kind == "utility"
        g = _graph([{"utility": 2}], [{"cost": 1}])
        assert metadata.compute_measure_semantics(g).kind == "cost"

    def test_plain_weight_is_metric(self):
        g = Graph([Vertex("a"), Vertex("b")], [Edge("e", ("a", "b"), weight=1.0)])
        assert metadata.compute_measure_semantics(g).kind == "metric"

    def test_non_numeric_cost_is_ignored(self):
        assert metadata.compute_measure_semantics(_graph([{"cost": "high"}])).kind == "none"
