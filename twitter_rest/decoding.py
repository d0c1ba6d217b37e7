"""
Lenient JSON decoding into typed results.

The API's field types are not perfectly stable, so a value whose JSON type
does not match the declared field type is dropped and reported rather than
failing the call. Only a body that is not JSON at all is fatal.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Generic, TypeVar, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError

from twitter_rest.exceptions import DecodeError

T = TypeVar("T")

# Enough for every mismatching field of a large timeline; each pass prunes at least one.
_MAX_PASSES = 64
_DROPPED = object()


@dataclass(frozen=True, slots=True)
class FieldMismatch:
    """A field skipped during decoding because its JSON type was unexpected."""

    location: tuple[str | int, ...]
    message: str
    value: Any = None

    @property
    def path(self) -> str:
        return ".".join(str(part) for part in self.location) or "<root>"


@dataclass(slots=True)
class DecodeResult(Generic[T]):
    value: T
    mismatches: list[FieldMismatch] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        return bool(self.mismatches)


def parse_json(raw: bytes | str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as exc:
        body = raw.encode("utf-8") if isinstance(raw, str) else raw
        raise DecodeError(f"Response body is not valid JSON: {exc}", body=body) from exc


def decode_json(raw: bytes | str, destination: Any) -> DecodeResult[Any]:
    """
    Decode a JSON body into ``destination``.

    Args:
        raw: Response body
        destination: A pydantic model class or any type pydantic can validate
            (``list[Tweet]``, ``dict[str, int]`` ...)

    Returns:
        DecodeResult holding the value and the fields that had to be skipped

    Raises:
        DecodeError: If the body is not valid JSON
    """
    return decode_payload(parse_json(raw), destination)


def decode_payload(payload: Any, destination: Any) -> DecodeResult[Any]:
    adapter = _adapter(destination)
    mismatches: list[FieldMismatch] = []
    data = payload
    copied = False

    for _ in range(_MAX_PASSES):
        try:
            return DecodeResult(adapter.validate_python(data), mismatches)
        except ValidationError as exc:
            errors = exc.errors()

        if not copied:
            data = copy.deepcopy(data)
            copied = True

        pruned = False
        for error in errors:
            location = tuple(error["loc"])
            if location and _drop(data, location):
                mismatches.append(FieldMismatch(location, error["msg"], error.get("input")))
                pruned = True
            elif not location:
                mismatches.append(FieldMismatch((), error["msg"], error.get("input")))
        if not pruned:
            break
        data = _sweep(data)

    return DecodeResult(_empty_value(adapter, destination), mismatches)


@lru_cache(maxsize=None)
def _cached_adapter(destination: Any) -> TypeAdapter:
    return TypeAdapter(destination)


def _adapter(destination: Any) -> TypeAdapter:
    if isinstance(destination, TypeAdapter):
        return destination
    try:
        return _cached_adapter(destination)
    except TypeError:  # unhashable type expression
        return TypeAdapter(destination)


def _drop(data: Any, location: tuple[str | int, ...]) -> bool:
    """Mark the deepest reachable value on ``location`` for removal."""

    parent: Any = None
    key: Any = None
    node = data
    for segment in location:
        if isinstance(node, dict) and segment in node:
            parent, key, node = node, segment, node[segment]
        elif isinstance(node, list) and isinstance(segment, int) and 0 <= segment < len(node):
            parent, key, node = node, segment, node[segment]
        else:
            break
    if parent is None:
        return False
    parent[key] = _DROPPED
    return True


def _sweep(node: Any) -> Any:
    if isinstance(node, dict):
        return {key: _sweep(value) for key, value in node.items() if value is not _DROPPED}
    if isinstance(node, list):
        return [_sweep(value) for value in node if value is not _DROPPED]
    return node


def _empty_value(adapter: TypeAdapter, destination: Any) -> Any:
    origin = get_origin(destination) or destination
    if isinstance(origin, type) and issubclass(origin, BaseModel):
        seed: Any = {}
    elif origin in (list, tuple, set, frozenset):
        seed = []
    elif origin is dict:
        seed = {}
    else:
        return None
    try:
        return adapter.validate_python(seed)
    except ValidationError:
        return None
