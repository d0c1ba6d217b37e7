"""
Shared protocol for endpoint wrappers.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol


class ApiClient(Protocol):
    """Protocol subset of :class:`twitter_rest.client.Client` consumed by services."""

    def call(
        self,
        method: str,
        endpoint: str,
        params: Any = None,
        destination: Any = None,
    ) -> Any:
        ...

    def call_multipart(
        self,
        endpoint: str,
        params: Any,
        files: Mapping[str, Any],
        destination: Any = None,
    ) -> Any:
        ...
