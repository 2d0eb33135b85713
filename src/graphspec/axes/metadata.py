"""Metadata-backed axes.

These axes read conventions out of vertex and edge ``attrs``; which
attribute key means what comes from the ``ComputePolicy``. The typed
accessors below are the only place that touches the raw attribute bag.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from graphspec.axes.variant import Variant
from graphspec.config import ComputePolicy, resolve_policy
from graphspec.graph.core import Edge, Graph, Vertex

Element = Vertex | Edge


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# =============================================================================
# Typed accessors
# =============================================================================


def vertex_position(vertex: Vertex, policy: ComputePolicy) -> tuple[float, ...] | None:
    """Position as a 2- or 3-tuple.

    Accepts ``{"x": .., "y": ..[, "z": ..]}`` or a numeric sequence of
    length 2 or 3. Anything else yields None.
    """
    raw = vertex.attrs.get(policy.pos_key)
    if isinstance(raw, Mapping):
        if not (_is_number(raw.get("x")) and _is_number(raw.get("y"))):
            return None
        if _is_number(raw.get("z")):
            return (raw["x"], raw["y"], raw["z"])
        return (raw["x"], raw["y"])
    if isinstance(raw, Sequence) and not isinstance(raw, str):
        if len(raw) in (2, 3) and all(_is_number(c) for c in raw):
            return tuple(raw)
    return None


def is_root(vertex: Vertex, policy: ComputePolicy) -> bool:
    return vertex.attrs.get(policy.root_key) is True


def timestamp(element: Element, policy: ComputePolicy) -> Any:
    return element.attrs.get(policy.time_key)


def layer(element: Element, policy: ComputePolicy) -> str | None:
    """Layer tag normalised to a string; numbers and strings only."""
    raw = element.attrs.get(policy.layer_key)
    if isinstance(raw, str) or _is_number(raw):
        return str(raw)
    return None


def edge_order(edge: Edge, policy: ComputePolicy) -> float | None:
    raw = edge.attrs.get(policy.edge_order_key)
    return raw if _is_number(raw) else None


def has_ports(vertex: Vertex, policy: ComputePolicy) -> bool:
    return vertex.attrs.get(policy.port_key) is not None


def is_latent(element: Element, policy: ComputePolicy) -> bool:
    return element.attrs.get(policy.latent_key) is True


def is_unobserved(element: Element, policy: ComputePolicy) -> bool:
    return element.attrs.get(policy.observed_key) is False


def is_executable(element: Element, policy: ComputePolicy) -> bool:
    return element.attrs.get(policy.exec_key) is True


def function_name(element: Element, policy: ComputePolicy) -> str | None:
    raw = element.attrs.get(policy.function_key)
    return raw if isinstance(raw, str) else None


def cost(element: Element, policy: ComputePolicy) -> float | None:
    raw = element.attrs.get(policy.cost_key)
    return raw if _is_number(raw) else None


def utility(element: Element, policy: ComputePolicy) -> float | None:
    raw = element.attrs.get(policy.utility_key)
    return raw if _is_number(raw) else None


def weight_vector(edge: Edge, policy: ComputePolicy) -> tuple[float, ...] | None:
    raw = edge.attrs.get(policy.weight_vector_key)
    if isinstance(raw, Sequence) and not isinstance(raw, str) and all(_is_number(x) for x in raw):
        return tuple(raw)
    return None


def has_probe_designation(graph: Graph, policy: ComputePolicy) -> bool:
    return any(policy.probe_key in v.attrs for v in graph.vertices)


def is_non_probe(vertex: Vertex, policy: ComputePolicy) -> bool:
    return vertex.attrs.get(policy.probe_key) is False


def _elements(graph: Graph) -> Iterable[Element]:
    yield from graph.vertices
    yield from graph.edges


# =============================================================================
# Axes
# =============================================================================


def compute_embedding(graph: Graph, policy: ComputePolicy | None = None) -> Variant:
    """``spatial_coordinates`` when every vertex has a position of one dimension."""
    policy = resolve_policy(policy)
    positions = [vertex_position(v, policy) for v in graph.vertices]
    if not positions or any(p is None for p in positions):
        return Variant("abstract")
    dims = {len(p) for p in positions}
    if len(dims) == 1:
        return Variant.of("spatial_coordinates", dims=dims.pop())
    return Variant("abstract")


def compute_rooting(graph: Graph, policy: ComputePolicy | None = None) -> Variant:
    policy = resolve_policy(policy)
    roots = sum(1 for v in graph.vertices if is_root(v, policy))
    if roots == 1:
        return Variant("rooted")
    if roots > 1:
        return Variant("multi_rooted")
    return Variant("unrooted")


def compute_temporal(graph: Graph, policy: ComputePolicy | None = None) -> Variant:
    """Timestamps on vertices, edges, or both.

    ``time_ordered`` needs timestamps on both sides and every present one
    numeric.
    """
    policy = resolve_policy(policy)
    v_times = [t for v in graph.vertices if (t := timestamp(v, policy)) is not None]
    e_times = [t for e in graph.edges if (t := timestamp(e, policy)) is not None]
    if v_times and e_times and all(_is_number(t) for t in v_times + e_times):
        return Variant("time_ordered")
    if v_times:
        return Variant("temporal_vertices")
    if e_times:
        return Variant("temporal_edges")
    return Variant("static")


def compute_layering(graph: Graph, policy: ComputePolicy | None = None) -> Variant:
    policy = resolve_policy(policy)
    layers = {tag for el in _elements(graph) if (tag := layer(el, policy)) is not None}
    return Variant("multi_layer") if len(layers) > 1 else Variant("single_layer")


def compute_edge_ordering(graph: Graph, policy: ComputePolicy | None = None) -> Variant:
    """``ordered`` when every edge carries a numeric order, vacuously so without edges."""
    policy = resolve_policy(policy)
    if all(edge_order(e, policy) is not None for e in graph.edges):
        return Variant("ordered")
    return Variant("unordered")


def compute_ports(graph: Graph, policy: ComputePolicy | None = None) -> Variant:
    policy = resolve_policy(policy)
    if any(has_ports(v, policy) for v in graph.vertices):
        return Variant("port_labelled_vertices")
    return Variant("none")


def compute_observability(graph: Graph, policy: ComputePolicy | None = None) -> Variant:
    """Latent elements beat unobserved ones."""
    policy = resolve_policy(policy)
    if any(is_latent(el, policy) for el in _elements(graph)):
        return Variant("latent_or_inferred")
    if any(is_unobserved(el, policy) for el in _elements(graph)):
        return Variant("partially_observed")
    return Variant("fully_specified")


def compute_operational_semantics(graph: Graph, policy: ComputePolicy | None = None) -> Variant:
    policy = resolve_policy(policy)
    if any(is_executable(el, policy) for el in _elements(graph)):
        return Variant("executable")
    if any(function_name(el, policy) is not None for el in _elements(graph)):
        return Variant("annotated_with_functions")
    return Variant("structural_only")


def compute_measure_semantics(graph: Graph, policy: ComputePolicy | None = None) -> Variant:
    """Precedence: cost, then utility, then plain weights as a metric."""
    policy = resolve_policy(policy)
    if any(cost(el, policy) is not None for el in _elements(graph)):
        return Variant("cost")
    if any(utility(el, policy) is not None for el in _elements(graph)):
        return Variant("utility")
    if any(e.weight is not None or weight_vector(e, policy) is not None for e in graph.edges):
        return Variant("metric")
    return Variant("none")
