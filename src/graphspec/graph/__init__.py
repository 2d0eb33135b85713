"""Graph package - graph records and construction-time validation."""

from graphspec.graph.core import Edge, Graph, Vertex, make_graph
from graphspec.graph.validation import validate_graph

__all__ = [
    "Edge",
    "Graph",
    "Vertex",
    "make_graph",
    "validate_graph",
]
