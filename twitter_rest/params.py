"""
Optional request parameters and their wire encoding.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping
from urllib.parse import quote


def percent_encode(value: str) -> str:
    """RFC 3986 encoding: only ``A-Za-z0-9-._~`` pass through, hex is uppercase."""

    return quote(value, safe="")


def stringify(value: Any) -> str:
    """Render a parameter value the way the API expects it on the wire."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value)
    return str(value)


class ParameterSet:
    """Multi-valued mapping of request parameters.

    The same name may be added several times; every value is sent. ``None``
    values are ignored so option objects can hand over unset fields as-is.
    """

    def __init__(self, pairs: Iterable[tuple[str, Any]] | None = None) -> None:
        self._pairs: list[tuple[str, str]] = []
        for name, value in pairs or ():
            self.add(name, value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ParameterSet":
        return cls(data.items())

    def add(self, name: str, value: Any) -> "ParameterSet":
        if value is not None:
            self._pairs.append((name, stringify(value)))
        return self

    def set(self, name: str, value: Any) -> "ParameterSet":
        self.remove(name)
        return self.add(name, value)

    def update(self, data: Mapping[str, Any]) -> "ParameterSet":
        for name, value in data.items():
            self.add(name, value)
        return self

    def remove(self, name: str) -> None:
        self._pairs = [pair for pair in self._pairs if pair[0] != name]

    def get(self, name: str, default: str | None = None) -> str | None:
        for key, value in self._pairs:
            if key == name:
                return value
        return default

    def get_all(self, name: str) -> list[str]:
        return [value for key, value in self._pairs if key == name]

    def items(self) -> list[tuple[str, str]]:
        return list(self._pairs)

    def copy(self) -> "ParameterSet":
        clone = ParameterSet()
        clone._pairs = list(self._pairs)
        return clone

    def encode(self) -> str:
        """Encode as ``key=value&key=value`` for a query string or form body."""

        return "&".join(
            f"{percent_encode(name)}={percent_encode(value)}" for name, value in self._pairs
        )

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterSet):
            return NotImplemented
        return sorted(self._pairs) == sorted(other._pairs)

    def __repr__(self) -> str:
        return f"ParameterSet({self._pairs!r})"


def as_parameters(value: Any) -> ParameterSet:
    """Normalise caller supplied options into a fresh :class:`ParameterSet`.

    Accepts ``None``, a ParameterSet (copied, never mutated), an options
    object exposing ``to_params()`` or a plain mapping.
    """

    if value is None:
        return ParameterSet()
    if isinstance(value, ParameterSet):
        return value.copy()
    if hasattr(value, "to_params"):
        return value.to_params()
    return ParameterSet.from_mapping(value)
