"""Tagged axis values: a ``kind`` discriminator plus an optional payload."""

from __future__ import annotations

import keyword
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _freeze(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


# Payload names that collide with Python keywords carry a trailing
# underscore (``lambda_``); dicts use the bare name.
def _dict_name(key: str) -> str:
    if key.endswith("_") and keyword.iskeyword(key[:-1]):
        return key[:-1]
    return key


def _field_name(key: str) -> str:
    return f"{key}_" if keyword.iskeyword(key) else key


@dataclass(frozen=True)
class Variant:
    """One value of an axis, e.g. ``regular`` with ``degree=2``.

    Payload fields are stored as sorted ``(name, value)`` pairs so that
    variants compare and hash structurally. Sequences become tuples.

    Example:
        >>> v = Variant.of("regular", degree=2)
        >>> v.kind, v.degree
        ('regular', 2)
        >>> v.to_dict()
        {'kind': 'regular', 'degree': 2}
    """

    kind: str
    payload: tuple[tuple[str, Any], ...] = ()

    @classmethod
    def of(cls, kind: str, **payload: Any) -> Variant:
        return cls(kind, tuple(sorted((k, _freeze(v)) for k, v in payload.items())))

    @classmethod
    def coerce(cls, value: Variant | Mapping[str, Any] | str) -> Variant:
        """Accept a Variant, a ``{"kind": ..., **payload}`` dict, or a bare kind.

        Dict keys use the bare names emitted by ``to_dict`` (``lambda``).
        """
        if isinstance(value, Variant):
            return value
        if isinstance(value, str):
            return cls(value)
        data = dict(value)
        kind = data.pop("kind")
        return cls.of(kind, **{_field_name(k): v for k, v in data.items()})

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self.payload)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names that are not dataclass fields.
        for key, value in object.__getattribute__(self, "payload"):
            if key == name:
                return value
        raise AttributeError(f"{self.kind!r} variant has no field {name!r}")

    def __getitem__(self, name: str) -> Any:
        if name == "kind":
            return self.kind
        field = _field_name(name)
        for key, value in self.payload:
            if key == field:
                return value
        raise KeyError(name)

    def get(self, name: str, default: Any = None) -> Any:
        try:
            return self[name]
        except KeyError:
            return default

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"kind": self.kind}
        for key, value in self.payload:
            out[_dict_name(key)] = list(value) if isinstance(value, tuple) else value
        return out

    def __repr__(self) -> str:
        if not self.payload:
            return f"Variant({self.kind!r})"
        fields = ", ".join(f"{k}={v!r}" for k, v in self.payload)
        return f"Variant({self.kind!r}, {fields})"


# Shared fallbacks.
UNCONSTRAINED = Variant("unconstrained")
