from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from externaltext.core.models import PathLike


@runtime_checkable
class PathResolverProtocol(Protocol):
    def lookup(self, obj: Any, path: PathLike) -> Any:
        """Return the value at *path*, or MISSING when it does not resolve."""
        ...

    def format_path(self, path: PathLike) -> str:
        ...
