from __future__ import annotations
from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class LeafMapperProtocol(Protocol):
    """Shape-preserving map over the leaves of a nested structure."""

    def map_leaves(self, value: Any, fn: Callable[[Any], Any]) -> Any:
        ...
