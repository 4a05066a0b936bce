"""
leaf_mapper – Shape-preserving map over the leaves of nested text structures.

Mappings come back as dicts with the same key order, lists as lists and
tuples as tuples. Strings and bytes are leaves, as is anything that is
neither a mapping nor a sequence. Empty containers stay empty containers;
only leaves are handed to the transform.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Callable

from externaltext.core.interfaces.walker import LeafMapperProtocol


class LeafMapper(LeafMapperProtocol):
    """Recursive visitor over {leaf, sequence, mapping}."""

    def map_leaves(self, value: Any, fn: Callable[[Any], Any]) -> Any:
        if isinstance(value, Mapping):
            return {k: self.map_leaves(v, fn) for k, v in value.items()}
        if isinstance(value, tuple):
            return tuple(self.map_leaves(v, fn) for v in value)
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            return [self.map_leaves(v, fn) for v in value]
        return fn(value)


def map_leaves(value: Any, fn: Callable[[Any], Any]) -> Any:
    """Apply *fn* to every leaf of *value*, rebuilding its containers."""
    return LeafMapper().map_leaves(value, fn)
