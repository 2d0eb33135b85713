"""Axis computers, grouped by the kind of structure they inspect.

Each ``compute_*`` function is total: it returns one of its axis's
variants and never raises on a well-formed ``Graph``.
"""

from graphspec.axes.variant import UNCONSTRAINED, Variant

__all__ = ["UNCONSTRAINED", "Variant"]
