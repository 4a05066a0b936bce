from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable

from externaltext.core.models import TextBundle

TextsSetter = Callable[[Optional[TextBundle]], None]


@runtime_checkable
class TextBundleSourceProtocol(Protocol):
    """Loader handed a setter; may complete synchronously or return an awaitable."""

    def __call__(self, set_texts: TextsSetter) -> Any:
        ...
