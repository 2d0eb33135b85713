"""Compute policy: which attribute keys encode which metadata convention.

Defaults can be overridden per call (``ComputePolicy.merged``) or
project-wide from the ``[tool.graphspec.policy]`` section of the nearest
``pyproject.toml`` (``load_policy``).
"""

from __future__ import annotations

import dataclasses
import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from graphspec.exceptions import PolicyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComputePolicy:
    """Attribute-key conventions for the metadata-backed axes.

    Attributes:
        vertex_order_key: vertex attr holding a number for vertex ordering
        edge_order_key: edge attr holding a number for edge ordering
        pos_key: vertex attr holding a position ({x, y[, z]} or a 2/3-sequence)
        layer_key: vertex/edge attr naming a layer; also the community label
        time_key: vertex/edge attr holding a timestamp
        root_key: vertex attr set to True on roots
        port_key: vertex attr whose presence marks ports
        weight_vector_key: edge attr holding a sequence of weights
        probability_key: edge attr holding an existence probability
        probe_key: vertex attr set to False on non-probe vertices
        latent_key: vertex/edge attr set to True on latent elements
        observed_key: vertex/edge attr set to False on unobserved elements
        exec_key: vertex/edge attr set to True on executable elements
        function_key: vertex/edge attr naming an attached function
        cost_key: vertex/edge attr holding a numeric cost
        utility_key: vertex/edge attr holding a numeric utility
    """

    vertex_order_key: str = "order"
    edge_order_key: str = "order"
    pos_key: str = "pos"
    layer_key: str = "layer"
    time_key: str = "time"
    root_key: str = "root"
    port_key: str = "ports"
    weight_vector_key: str = "weight_vector"
    probability_key: str = "probability"
    probe_key: str = "probe"
    latent_key: str = "latent"
    observed_key: str = "observed"
    exec_key: str = "exec"
    function_key: str = "fn"
    cost_key: str = "cost"
    utility_key: str = "utility"

    def merged(self, overrides: ComputePolicy | Mapping[str, Any] | None) -> ComputePolicy:
        """Return a copy with ``overrides`` applied on top of this policy.

        Raises:
            PolicyError: If a key is not a policy field or a value is not a string
        """
        if overrides is None:
            return self
        if isinstance(overrides, ComputePolicy):
            return overrides
        fields = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(k for k in overrides if k not in fields)
        if unknown:
            raise PolicyError(unknown)
        for key, value in overrides.items():
            if not isinstance(value, str):
                raise PolicyError(
                    message=(
                        f"Policy key '{key}' must be a string, got {type(value).__name__}\n\n"
                        f"How to fix:\n"
                        f"  Pass the attribute name as a string, e.g. {key}='pos'"
                    )
                )
        return dataclasses.replace(self, **overrides)


DEFAULT_POLICY = ComputePolicy()


def resolve_policy(policy: ComputePolicy | Mapping[str, Any] | None) -> ComputePolicy:
    """Merge a partial policy over the defaults."""
    return DEFAULT_POLICY.merged(policy)


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_policy(start: Path | None = None) -> ComputePolicy:
    """Load [tool.graphspec.policy] from the nearest pyproject.toml.

    Returns the default policy if no pyproject.toml or no section is found.
    """
    path = find_pyproject(start)
    if path is None:
        return DEFAULT_POLICY

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("graphspec", {}).get("policy", {})
    if not section:
        return DEFAULT_POLICY

    logger.debug("Loaded compute policy overrides from %s: %s", path, sorted(section))
    return DEFAULT_POLICY.merged(section)
