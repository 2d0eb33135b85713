"""Construction-time validation of graph records.

Computers are total over well-formed graphs; this module is where
ill-formed ones are turned away, so nothing downstream has to guard
against dangling endpoint references.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from graphspec.exceptions import InvalidGraphError

if TYPE_CHECKING:
    from graphspec.graph.core import Edge, Vertex


def validate_graph(vertices: Sequence[Vertex], edges: Sequence[Edge]) -> None:
    """Run all construction-time validations on a graph.

    Duplicate vertex ids are allowed: the ``vertex_identity`` axis reports
    them as indistinguishable rather than rejecting the graph.

    Raises:
        InvalidGraphError: On the first malformed edge found
    """
    known = {v.id for v in vertices}
    for edge in edges:
        _validate_endpoints(edge, known)
        _validate_sign(edge)
        _validate_probability(edge)
        _validate_weight(edge)


def _validate_endpoints(edge: Edge, known: set[str]) -> None:
    """Edges need at least one endpoint and may only reference known vertices."""
    if len(edge.endpoints) == 0:
        raise InvalidGraphError(
            f"Edge '{edge.id}' has no endpoints\n\n"
            f"How to fix:\n"
            f"  Give the edge two endpoints (binary) or more (hyperedge)",
            edge_id=edge.id,
        )
    for endpoint in edge.endpoints:
        if endpoint not in known:
            raise InvalidGraphError(
                f"Edge '{edge.id}' references unknown vertex '{endpoint}'\n\n"
                f"  -> Endpoints: {list(edge.endpoints)}\n\n"
                f"How to fix:\n"
                f"  Add a vertex with id '{endpoint}' or drop the edge",
                edge_id=edge.id,
                vertex_id=endpoint,
            )


def _validate_sign(edge: Edge) -> None:
    if edge.sign is not None and edge.sign not in (-1, 1):
        raise InvalidGraphError(
            f"Edge '{edge.id}' has invalid sign {edge.sign!r}\n\n"
            f"How to fix:\n"
            f"  Use -1, 1, or leave the sign unset",
            edge_id=edge.id,
        )


def _validate_probability(edge: Edge) -> None:
    p = edge.probability
    if p is None:
        return
    if isinstance(p, bool) or not isinstance(p, (int, float)) or not 0.0 <= p <= 1.0:
        raise InvalidGraphError(
            f"Edge '{edge.id}' has invalid probability {p!r}\n\n"
            f"How to fix:\n"
            f"  Use a number between 0 and 1",
            edge_id=edge.id,
        )


def _validate_weight(edge: Edge) -> None:
    w = edge.weight
    if w is None:
        return
    if isinstance(w, bool) or not isinstance(w, (int, float)) or math.isnan(w):
        raise InvalidGraphError(
            f"Edge '{edge.id}' has non-numeric weight {w!r}\n\n"
            f"How to fix:\n"
            f"  Use an int or float weight, or put other data in attrs",
            edge_id=edge.id,
        )
