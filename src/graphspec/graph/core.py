"""Graph records analysed by the axis computers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

import networkx as nx

from graphspec.graph.validation import validate_graph

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _freeze_attrs(attrs: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not attrs:
        return _EMPTY
    return MappingProxyType(dict(attrs))


@dataclass(frozen=True)
class Vertex:
    """A graph vertex.

    Attributes:
        id: Identifier, expected to be unique within a graph
        label: Optional display label
        attrs: Open attribute map (user data and policy-driven metadata)
    """

    id: str
    label: str | None = None
    attrs: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", _freeze_attrs(self.attrs))


@dataclass(frozen=True)
class Edge:
    """A binary edge or a hyperedge.

    Attributes:
        id: Identifier
        endpoints: Ordered vertex ids; length 2 is a binary edge, longer is a
            hyperedge. For directed binary edges the order is tail, head.
        directed: Whether the edge is directed
        weight: Optional numeric weight
        sign: Optional sign, -1 or +1
        probability: Optional existence probability in [0, 1]
        label: Optional display label
        attrs: Open attribute map
    """

    id: str
    endpoints: tuple[str, ...]
    directed: bool = False
    weight: float | None = None
    sign: Literal[-1, 1] | None = None
    probability: float | None = None
    label: str | None = None
    attrs: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "endpoints", tuple(self.endpoints))
        object.__setattr__(self, "attrs", _freeze_attrs(self.attrs))

    @property
    def is_binary(self) -> bool:
        return len(self.endpoints) == 2

    @property
    def is_self_loop(self) -> bool:
        return self.is_binary and self.endpoints[0] == self.endpoints[1]


@dataclass(frozen=True)
class Graph:
    """An immutable (vertices, edges) pair.

    No adjacency index is stored: every computer derives what it needs,
    usually through a call-scoped ``GraphFacts``.

    Construction validates referential integrity and raises
    ``InvalidGraphError`` on malformed input.

    Example:
        >>> g = Graph.from_dict({
        ...     "vertices": [{"id": "a"}, {"id": "b"}],
        ...     "edges": [{"id": "e1", "endpoints": ["a", "b"]}],
        ... })
        >>> len(g.edges)
        1
    """

    vertices: tuple[Vertex, ...] = ()
    edges: tuple[Edge, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "edges", tuple(self.edges))
        validate_graph(self.vertices, self.edges)

    @property
    def vertex_ids(self) -> list[str]:
        return [v.id for v in self.vertices]

    @property
    def n(self) -> int:
        return len(self.vertices)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Graph:
        """Build a graph from the plain dict shape parsers and generators emit."""
        vertices = [
            Vertex(id=str(v["id"]), label=v.get("label"), attrs=v.get("attrs"))
            for v in data.get("vertices", [])
        ]
        edges = [
            Edge(
                id=str(e["id"]),
                endpoints=tuple(str(x) for x in e["endpoints"]),
                directed=bool(e.get("directed", False)),
                weight=e.get("weight"),
                sign=e.get("sign"),
                probability=e.get("probability"),
                label=e.get("label"),
                attrs=e.get("attrs"),
            )
            for e in data.get("edges", [])
        ]
        return cls(tuple(vertices), tuple(edges))

    def to_dict(self) -> dict[str, Any]:
        """Inverse of ``from_dict``; optional fields are omitted when unset."""
        vertices = []
        for v in self.vertices:
            entry: dict[str, Any] = {"id": v.id}
            if v.label is not None:
                entry["label"] = v.label
            if v.attrs:
                entry["attrs"] = dict(v.attrs)
            vertices.append(entry)
        edges = []
        for e in self.edges:
            entry = {"id": e.id, "endpoints": list(e.endpoints), "directed": e.directed}
            for name in ("weight", "sign", "probability", "label"):
                value = getattr(e, name)
                if value is not None:
                    entry[name] = value
            if e.attrs:
                entry["attrs"] = dict(e.attrs)
            edges.append(entry)
        return {"vertices": vertices, "edges": edges}

    @classmethod
    def from_networkx(cls, nx_graph: nx.Graph) -> Graph:
        """Convert a NetworkX graph.

        Node and edge data dicts become ``attrs``; a ``weight`` entry is
        lifted into ``Edge.weight``. Multigraph parallel edges are kept.
        """
        directed = nx_graph.is_directed()
        vertices = [Vertex(id=str(n), attrs=data) for n, data in nx_graph.nodes(data=True)]
        edges = []
        if nx_graph.is_multigraph():
            edge_iter: Iterable[tuple[Any, Any, dict]] = (
                (u, v, d) for u, v, _, d in nx_graph.edges(keys=True, data=True)
            )
        else:
            edge_iter = nx_graph.edges(data=True)
        for i, (u, v, data) in enumerate(edge_iter):
            attrs = {k: val for k, val in data.items() if k != "weight"}
            edges.append(
                Edge(
                    id=f"e{i}",
                    endpoints=(str(u), str(v)),
                    directed=directed,
                    weight=data.get("weight"),
                    attrs=attrs,
                )
            )
        return cls(tuple(vertices), tuple(edges))


def make_graph(
    vertex_ids: Iterable[str],
    pairs: Iterable[tuple[str, str]],
    *,
    directed: bool = False,
) -> Graph:
    """Shorthand for a plain binary graph from ids and endpoint pairs."""
    vertices = tuple(Vertex(id=v) for v in vertex_ids)
    edges = tuple(
        Edge(id=f"e{i}", endpoints=(u, v), directed=directed)
        for i, (u, v) in enumerate(pairs)
    )
    return Graph(vertices, edges)
