"""Orchestrator: compute every axis of a graph into one ``InferredGraphSpec``.

``AXES`` is the ordered registry of axis definitions. The orchestrator
builds one ``GraphFacts`` per call so that derived structures (adjacency,
colouring, chordality, ...) are computed once and shared by all
computers, then calls each computer exactly once.

Computers are total. If one raises anyway, the failure is logged and the
axis gets its fallback variant; pass ``strict=True`` to re-raise instead.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from graphspec.axes import (
    advanced,
    core_props,
    forbidden,
    geometric,
    intersection,
    metadata,
    network,
    paths,
    perfect_variants,
    probe,
    structure,
)
from graphspec.axes.variant import UNCONSTRAINED, Variant
from graphspec.config import ComputePolicy, resolve_policy
from graphspec.exceptions import GraphspecError, UnknownAxisError
from graphspec.graph.core import Graph
from graphspec.kernel.facts import GraphFacts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisDef:
    """Registry entry for one axis.

    Attributes:
        name: Field name on ``InferredGraphSpec``
        compute: The computer function
        kinds: Every ``kind`` the computer may return
        fallback: Variant used when the computer fails
        uses_policy: Whether ``compute`` takes a ``policy`` argument
        uses_facts: Whether ``compute`` takes a ``facts`` argument
    """

    name: str
    compute: Callable[..., Variant]
    kinds: frozenset[str]
    fallback: Variant
    uses_policy: bool = False
    uses_facts: bool = True

    def __call__(self, graph: Graph, policy: ComputePolicy, facts: GraphFacts) -> Variant:
        kwargs: dict[str, Any] = {}
        if self.uses_policy:
            kwargs["policy"] = policy
        if self.uses_facts:
            kwargs["facts"] = facts
        return self.compute(graph, **kwargs)


def _axis(
    name: str,
    compute: Callable[..., Variant],
    kinds: Iterable[str],
    fallback: Variant | str = UNCONSTRAINED,
    *,
    uses_policy: bool = False,
    uses_facts: bool = True,
) -> AxisDef:
    if isinstance(fallback, str):
        fallback = Variant(fallback)
    return AxisDef(name, compute, frozenset(kinds), fallback, uses_policy, uses_facts)


def _negatable(name: str, compute: Callable[..., Variant]) -> AxisDef:
    """``<name>`` / ``not_<name>`` / ``unconstrained`` axes."""
    return _axis(name, compute, (name, f"not_{name}", "unconstrained"))


_PLAIN = {"uses_facts": False}
_META = {"uses_policy": True, "uses_facts": False}

AXES: tuple[AxisDef, ...] = (
    # Core properties
    _axis("vertex_cardinality", core_props.compute_vertex_cardinality, ["finite"], "finite", **_PLAIN),
    _axis(
        "vertex_identity",
        core_props.compute_vertex_identity,
        ["distinguishable", "indistinguishable"],
        "indistinguishable",
        **_PLAIN,
    ),
    _axis(
        "vertex_ordering",
        core_props.compute_vertex_ordering,
        ["unordered", "total_order", "partial_order"],
        "unordered",
        **_META,
    ),
    _axis(
        "edge_arity",
        core_props.compute_edge_arity,
        ["binary", "k_ary", "mixed_arity"],
        "mixed_arity",
        **_PLAIN,
    ),
    _axis("edge_multiplicity", core_props.compute_edge_multiplicity, ["simple", "multi"], "multi"),
    _axis("self_loops", core_props.compute_self_loops, ["disallowed", "allowed"], "allowed"),
    _axis(
        "directionality",
        core_props.compute_directionality,
        ["undirected", "directed", "mixed", "bidirected", "antidirected"],
        "mixed",
        **_PLAIN,
    ),
    _axis(
        "weighting",
        core_props.compute_weighting,
        ["unweighted", "weighted_numeric"],
        "unweighted",
        **_PLAIN,
    ),
    _axis("signedness", core_props.compute_signedness, ["unsigned", "signed"], "unsigned", **_PLAIN),
    _axis(
        "uncertainty",
        core_props.compute_uncertainty,
        ["deterministic", "probabilistic"],
        "deterministic",
        **_META,
    ),
    _axis(
        "vertex_data",
        core_props.compute_vertex_data,
        ["unlabelled", "labelled", "attributed"],
        "unlabelled",
        **_PLAIN,
    ),
    _axis(
        "edge_data",
        core_props.compute_edge_data,
        ["unlabelled", "labelled", "attributed"],
        "unlabelled",
        **_PLAIN,
    ),
    _axis("schema", core_props.compute_schema, ["homogeneous", "heterogeneous"], "heterogeneous", **_PLAIN),
    # Structure
    _axis("connectivity", structure.compute_connectivity, ["connected", "unconstrained"]),
    _axis("cycles", structure.compute_cycles, ["acyclic", "cycles_allowed"], "cycles_allowed"),
    _axis(
        "degree_constraint",
        structure.compute_degree_constraint,
        ["regular", "degree_sequence", "unconstrained"],
    ),
    _axis("completeness", structure.compute_completeness, ["complete", "incomplete"], "incomplete"),
    _axis("partiteness", structure.compute_partiteness, ["bipartite", "unrestricted"], "unrestricted"),
    _axis("density", structure.compute_density, ["sparse", "dense", "unconstrained"]),
    # Metadata
    _axis("embedding", metadata.compute_embedding, ["abstract", "spatial_coordinates"], "abstract", **_META),
    _axis("rooting", metadata.compute_rooting, ["unrooted", "rooted", "multi_rooted"], "unrooted", **_META),
    _axis(
        "temporal",
        metadata.compute_temporal,
        ["static", "temporal_vertices", "temporal_edges", "time_ordered"],
        "static",
        **_META,
    ),
    _axis("layering", metadata.compute_layering, ["single_layer", "multi_layer"], "single_layer", **_META),
    _axis("edge_ordering", metadata.compute_edge_ordering, ["unordered", "ordered"], "unordered", **_META),
    _axis("ports", metadata.compute_ports, ["none", "port_labelled_vertices"], "none", **_META),
    _axis(
        "observability",
        metadata.compute_observability,
        ["fully_specified", "partially_observed", "latent_or_inferred"],
        "fully_specified",
        **_META,
    ),
    _axis(
        "operational_semantics",
        metadata.compute_operational_semantics,
        ["structural_only", "annotated_with_functions", "executable"],
        "structural_only",
        **_META,
    ),
    _axis(
        "measure_semantics",
        metadata.compute_measure_semantics,
        ["none", "metric", "cost", "utility"],
        "none",
        **_META,
    ),
    # Network statistics
    _axis("scale_free", network.compute_scale_free, ["scale_free", "not_scale_free"], "not_scale_free"),
    _axis("small_world", network.compute_small_world, ["small_world", "not_small_world", "unconstrained"]),
    _axis(
        "community_structure",
        network.compute_community_structure,
        ["modular", "non_modular", "unconstrained"],
        uses_policy=True,
    ),
    # Paths
    _axis("hamiltonian", paths.compute_hamiltonian, ["hamiltonian", "non_hamiltonian", "unconstrained"]),
    _axis("traceable", paths.compute_traceable, ["traceable", "non_traceable", "unconstrained"]),
    # Advanced structure
    _axis("perfect", advanced.compute_perfect, ["perfect", "imperfect", "unconstrained"]),
    _axis("split", advanced.compute_split, ["split", "non_split", "unconstrained"]),
    _axis("cograph", advanced.compute_cograph, ["cograph", "non_cograph", "unconstrained"]),
    _axis("threshold", advanced.compute_threshold, ["threshold", "non_threshold", "unconstrained"]),
    _axis("line", advanced.compute_line, ["line_graph", "non_line_graph", "unconstrained"]),
    _axis("claw_free", advanced.compute_claw_free, ["claw_free", "has_claw", "unconstrained"]),
    _axis("cubic", advanced.compute_cubic, ["cubic", "non_cubic", "unconstrained"]),
    _axis(
        "specific_regular",
        advanced.compute_specific_regular,
        ["k_regular", "not_k_regular", "unconstrained"],
    ),
    _negatable("strongly_regular", advanced.compute_strongly_regular),
    _negatable("self_complementary", advanced.compute_self_complementary),
    _negatable("vertex_transitive", advanced.compute_vertex_transitive),
    _negatable("complete_bipartite", advanced.compute_complete_bipartite),
    # Forbidden induced subgraphs
    _negatable("p5_free", forbidden.compute_p5_free),
    _negatable("c5_free", forbidden.compute_c5_free),
    _negatable("bull_free", forbidden.compute_bull_free),
    _negatable("gem_free", forbidden.compute_gem_free),
    _negatable("at_free", forbidden.compute_at_free),
    _negatable("hh_free", forbidden.compute_hh_free),
    _negatable("distance_hereditary", forbidden.compute_distance_hereditary),
    _negatable("weakly_chordal", forbidden.compute_weakly_chordal),
    # Perfect variants
    _negatable("modular", perfect_variants.compute_modular),
    _negatable("ptolemaic", perfect_variants.compute_ptolemaic),
    _negatable("quasi_line", perfect_variants.compute_quasi_line),
    # Intersection models
    _negatable("circular_arc", intersection.compute_circular_arc),
    _negatable("proper_circular_arc", intersection.compute_proper_circular_arc),
    # Probe classes
    _axis(
        "probe_chordal",
        probe.compute_probe_chordal,
        ["probe_chordal", "not_probe_chordal", "unconstrained"],
        uses_policy=True,
    ),
    _axis(
        "probe_interval",
        probe.compute_probe_interval,
        ["probe_interval", "not_probe_interval", "unconstrained"],
        uses_policy=True,
    ),
    # Geometry
    _axis("planarity", geometric.compute_planarity, ["planar", "non_planar", "unconstrained"]),
)

AXES_BY_NAME: dict[str, AxisDef] = {axis.name: axis for axis in AXES}


@dataclass(frozen=True)
class InferredGraphSpec:
    """Every axis of one graph, one ``Variant`` per field.

    Example:
        >>> spec = compute_graph_spec_from_graph(triangle)
        >>> spec.degree_constraint
        Variant('regular', degree=2)
        >>> spec["completeness"].kind
        'complete'
    """

    vertex_cardinality: Variant
    vertex_identity: Variant
    vertex_ordering: Variant
    edge_arity: Variant
    edge_multiplicity: Variant
    self_loops: Variant
    directionality: Variant
    weighting: Variant
    signedness: Variant
    uncertainty: Variant
    vertex_data: Variant
    edge_data: Variant
    schema: Variant
    connectivity: Variant
    cycles: Variant
    degree_constraint: Variant
    completeness: Variant
    partiteness: Variant
    density: Variant
    embedding: Variant
    rooting: Variant
    temporal: Variant
    layering: Variant
    edge_ordering: Variant
    ports: Variant
    observability: Variant
    operational_semantics: Variant
    measure_semantics: Variant
    scale_free: Variant
    small_world: Variant
    community_structure: Variant
    hamiltonian: Variant
    traceable: Variant
    perfect: Variant
    split: Variant
    cograph: Variant
    threshold: Variant
    line: Variant
    claw_free: Variant
    cubic: Variant
    specific_regular: Variant
    strongly_regular: Variant
    self_complementary: Variant
    vertex_transitive: Variant
    complete_bipartite: Variant
    p5_free: Variant
    c5_free: Variant
    bull_free: Variant
    gem_free: Variant
    at_free: Variant
    hh_free: Variant
    distance_hereditary: Variant
    weakly_chordal: Variant
    modular: Variant
    ptolemaic: Variant
    quasi_line: Variant
    circular_arc: Variant
    proper_circular_arc: Variant
    probe_chordal: Variant
    probe_interval: Variant
    planarity: Variant

    @classmethod
    def axis_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(cls))

    def __getitem__(self, name: str) -> Variant:
        if name not in AXES_BY_NAME:
            raise UnknownAxisError(name, list(AXES_BY_NAME))
        return getattr(self, name)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {name: getattr(self, name).to_dict() for name in self.axis_names()}


def _lookup(name: str) -> AxisDef:
    try:
        return AXES_BY_NAME[name]
    except KeyError:
        raise UnknownAxisError(name, list(AXES_BY_NAME)) from None


def _evaluate(
    axis: AxisDef,
    graph: Graph,
    policy: ComputePolicy,
    facts: GraphFacts,
    strict: bool,
) -> Variant:
    """Run one computer, substituting the fallback if it fails."""
    try:
        result = axis(graph, policy, facts)
        if result.kind not in axis.kinds:
            raise GraphspecError(
                f"Axis '{axis.name}' returned undeclared kind '{result.kind}'\n\n"
                f"  -> Declared kinds: {sorted(axis.kinds)}"
            )
    except Exception:
        if strict:
            raise
        logger.warning(
            "Axis %s failed on a graph with %d vertices; using fallback %s",
            axis.name,
            facts.n,
            axis.fallback.kind,
            exc_info=True,
        )
        return axis.fallback
    return result


def compute_axes(
    graph: Graph,
    names: Iterable[str],
    policy: ComputePolicy | Mapping[str, Any] | None = None,
    *,
    timeout: float | None = None,
    strict: bool = False,
) -> dict[str, Variant]:
    """Compute only the named axes, sharing one facts cache between them.

    Raises:
        UnknownAxisError: If a name is not a registered axis
        PolicyError: If ``policy`` has unknown keys or non-string values
    """
    axes = [_lookup(name) for name in dict.fromkeys(names)]
    resolved = resolve_policy(policy)
    facts = GraphFacts.with_timeout(graph, timeout)
    return {axis.name: _evaluate(axis, graph, resolved, facts, strict) for axis in axes}


def compute_axis(
    graph: Graph,
    name: str,
    policy: ComputePolicy | Mapping[str, Any] | None = None,
    *,
    timeout: float | None = None,
    strict: bool = False,
) -> Variant:
    """Compute a single axis by name."""
    return compute_axes(graph, [name], policy, timeout=timeout, strict=strict)[name]


def compute_graph_spec_from_graph(
    graph: Graph,
    policy: ComputePolicy | Mapping[str, Any] | None = None,
    *,
    timeout: float | None = None,
    strict: bool = False,
) -> InferredGraphSpec:
    """Compute every axis of ``graph``.

    Args:
        graph: The graph to analyse
        policy: Partial override of the default ``ComputePolicy``
        timeout: Seconds after which the guarded searches abstain with
            ``unconstrained``
        strict: Re-raise computer failures instead of using the fallback

    Returns:
        A freshly built ``InferredGraphSpec``

    Raises:
        PolicyError: If ``policy`` has unknown keys or non-string values
    """
    values = compute_axes(graph, (axis.name for axis in AXES), policy, timeout=timeout, strict=strict)
    return InferredGraphSpec(**values)
