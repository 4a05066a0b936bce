from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from externaltext.core.models import PathLike, TextBundle


@runtime_checkable
class TextRendererProtocol(Protocol):
    """Resolves a path in a text bundle and renders every leaf below it."""

    def get(
        self,
        texts: Optional[TextBundle],
        path: PathLike,
        data: Optional[Mapping[str, Any]] = None,
        mode: Optional[str] = None,
    ) -> Any:
        ...
