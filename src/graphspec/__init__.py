"""Graphspec - infer structural and semantic properties of graphs."""

from graphspec.axes.variant import UNCONSTRAINED, Variant
from graphspec.config import DEFAULT_POLICY, ComputePolicy, load_policy, resolve_policy
from graphspec.exceptions import (
    GraphspecError,
    InvalidGraphError,
    PolicyError,
    UnknownAxisError,
)
from graphspec.graph import Edge, Graph, Vertex, make_graph
from graphspec.kernel.facts import GraphFacts
from graphspec.predicates import (
    axis_equals,
    axis_kind_is,
    has_graph_spec,
    is_bipartite,
    is_chordal,
    is_claw_free,
    is_cograph,
    is_comparability,
    is_complete,
    is_complete_bipartite,
    is_cubic,
    is_dag,
    is_dense,
    is_eulerian,
    is_forest,
    is_graph_connected,
    is_hamiltonian,
    is_interval,
    is_k_regular,
    is_line_graph,
    is_modular,
    is_perfect,
    is_permutation,
    is_planar,
    is_regular,
    is_scale_free,
    is_self_complementary,
    is_small_world,
    is_sparse,
    is_split,
    is_star,
    is_strongly_regular,
    is_threshold,
    is_traceable,
    is_tree,
    is_unit_disk,
    is_vertex_transitive,
)
from graphspec.spec import (
    AXES,
    AxisDef,
    InferredGraphSpec,
    compute_axes,
    compute_axis,
    compute_graph_spec_from_graph,
)

__all__ = [
    # Graph model
    "Graph",
    "Vertex",
    "Edge",
    "make_graph",
    # Configuration
    "ComputePolicy",
    "DEFAULT_POLICY",
    "resolve_policy",
    "load_policy",
    # Results
    "Variant",
    "UNCONSTRAINED",
    "InferredGraphSpec",
    "AxisDef",
    "AXES",
    "GraphFacts",
    # Orchestrator
    "compute_graph_spec_from_graph",
    "compute_axes",
    "compute_axis",
    # Generic predicates
    "axis_equals",
    "axis_kind_is",
    "has_graph_spec",
    # Named predicates
    "is_tree",
    "is_forest",
    "is_dag",
    "is_bipartite",
    "is_complete",
    "is_sparse",
    "is_dense",
    "is_regular",
    "is_graph_connected",
    "is_eulerian",
    "is_star",
    "is_planar",
    "is_chordal",
    "is_interval",
    "is_permutation",
    "is_unit_disk",
    "is_comparability",
    "is_scale_free",
    "is_small_world",
    "is_modular",
    "is_hamiltonian",
    "is_traceable",
    "is_perfect",
    "is_split",
    "is_cograph",
    "is_threshold",
    "is_line_graph",
    "is_claw_free",
    "is_cubic",
    "is_k_regular",
    "is_strongly_regular",
    "is_self_complementary",
    "is_vertex_transitive",
    "is_complete_bipartite",
    # Errors
    "GraphspecError",
    "InvalidGraphError",
    "PolicyError",
    "UnknownAxisError",
]
