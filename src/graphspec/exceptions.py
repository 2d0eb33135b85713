"""Exceptions raised at the boundaries of graphspec.

Axis computers never raise: malformed graphs are rejected when a ``Graph`` is
built, and bad policy overrides are rejected when a ``ComputePolicy`` is
merged. Everything past those two points returns ordinary values.
"""

from __future__ import annotations


class GraphspecError(Exception):
    """Base class for all graphspec errors."""


class InvalidGraphError(GraphspecError):
    """Graph record is structurally malformed.

    Raised at construction time, e.g. when an edge references a vertex id
    that is not part of the graph.

    Attributes:
        edge_id: Id of the offending edge, if the problem is edge-scoped
        vertex_id: Id of the offending vertex, if the problem is vertex-scoped
        message: Human-readable error message
    """

    def __init__(
        self,
        message: str,
        *,
        edge_id: str | None = None,
        vertex_id: str | None = None,
    ) -> None:
        self.message = message
        self.edge_id = edge_id
        self.vertex_id = vertex_id
        super().__init__(message)


class PolicyError(GraphspecError):
    """Compute policy override is invalid.

    Attributes:
        unknown: Override keys that are not policy fields
        message: Human-readable error message
    """

    def __init__(
        self,
        unknown: list[str] | None = None,
        message: str | None = None,
    ) -> None:
        self.unknown = unknown or []
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        names = ", ".join(f"'{k}'" for k in self.unknown)
        return (
            f"Unknown compute policy keys: {names}\n\n"
            f"How to fix:\n"
            f"  Use the field names of ComputePolicy (e.g. 'pos_key', 'root_key')"
        )


class UnknownAxisError(GraphspecError, KeyError):
    """Axis name is not in the registry.

    Attributes:
        name: The requested axis name
        available: Registered axis names
        message: Human-readable error message
    """

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        self.message = self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        close = [a for a in self.available if self.name in a or a in self.name]
        hint = f"\n  Did you mean: {', '.join(close)}?" if close else ""
        return (
            f"Unknown axis '{self.name}'\n\n"
            f"How to fix:\n"
            f"  Use one of InferredGraphSpec.axis_names(){hint}"
        )

    def __str__(self) -> str:
        return self.message
