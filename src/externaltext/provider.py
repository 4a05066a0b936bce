"""
provider – Text bundle ownership and ambient lookup.

`TextBundleProvider` holds the current text bundle snapshot. It starts from a
default bundle and may be refreshed by a loader callback that receives the
setter (synchronously, or later from an awaitable it returns). Snapshots are
replaced wholesale; a render reads whichever snapshot is current when it
starts.

`activate()` binds a provider for the current execution context (a
ContextVar, so threads and asyncio tasks each see their own binding), which
is how `ExternalText` elements find their texts without passing the bundle
down every call.
"""

import contextlib
import inspect
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Awaitable, Iterator, Mapping, Optional

from externaltext.constants import DEFAULT_ELEMENT_MODE
from externaltext.core.interfaces.logging import LoggerLikeProtocol
from externaltext.core.interfaces.provider import TextBundleSourceProtocol
from externaltext.core.interfaces.render import TextRendererProtocol
from externaltext.core.models import PathLike, TextBundle
from externaltext.logging.helpers import get_logger
from externaltext.rendering.renderer import default_renderer, get

_ACTIVE: ContextVar[Optional["TextBundleProvider"]] = ContextVar("externaltext_provider", default=None)


class TextBundleProvider:
    """Owns the current text bundle and renders against it."""

    def __init__(
        self,
        texts: Optional[TextBundle] = None,
        *,
        load_texts: Optional[TextBundleSourceProtocol] = None,
        renderer: Optional[TextRendererProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._texts: Optional[TextBundle] = texts
        self._loader = load_texts
        self._renderer = renderer
        self._log = logger or get_logger("provider")

    @property
    def texts(self) -> Optional[TextBundle]:
        """Current snapshot (None until a bundle has been supplied)."""
        return self._texts

    @property
    def renderer(self) -> TextRendererProtocol:
        return self._renderer or default_renderer()

    def set_texts(self, texts: Optional[TextBundle]) -> None:
        """Replace the current snapshot."""
        self._texts = texts
        self._log.debug("text bundle replaced (%s)", type(texts).__name__)

    def load(self) -> Optional[Awaitable[Any]]:
        """Run the loader, if any, handing it :meth:`set_texts`.

        Returns the loader's awaitable when it is asynchronous so the caller
        can await (or schedule) it; synchronous loaders return None.
        """
        if self._loader is None:
            return None
        result = self._loader(self.set_texts)
        if inspect.isawaitable(result):
            return result
        return None

    async def aload(self) -> None:
        """Async variant of :meth:`load` that awaits an asynchronous loader."""
        pending = self.load()
        if pending is not None:
            await pending

    def get(
        self,
        path: PathLike,
        data: Optional[Mapping[str, Any]] = None,
        mode: str = "string",
    ) -> Any:
        """Render *path* against the current snapshot."""
        return self.renderer.get(self._texts, path, data, mode)

    @contextlib.contextmanager
    def activate(self) -> Iterator["TextBundleProvider"]:
        """Make this provider the ambient one for the enclosed block."""
        token = _ACTIVE.set(self)
        try:
            yield self
        finally:
            _ACTIVE.reset(token)


def current_provider() -> Optional[TextBundleProvider]:
    """Return the provider bound by the innermost `activate()`, if any."""
    return _ACTIVE.get()


def current_texts() -> Optional[TextBundle]:
    """Return the ambient provider's snapshot, or None."""
    provider = current_provider()
    return provider.texts if provider is not None else None


@dataclass(frozen=True)
class ExternalText:
    """A text element: *path* rendered with *data* according to *mode*.

    Rendering uses the explicitly given provider, else the ambient one. With
    neither, the element renders its placeholder.
    """
    path: PathLike
    data: Mapping[str, Any] = field(default_factory=dict)
    mode: str = DEFAULT_ELEMENT_MODE

    # data holds arbitrary values, so elements compare by value but are not hashable.
    __hash__ = None  # type: ignore[assignment]

    get = staticmethod(get)
    Provider = TextBundleProvider

    def __post_init__(self) -> None:
        if not isinstance(self.path, str):
            object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def render(self, provider: Optional[TextBundleProvider] = None) -> Any:
        source = provider or current_provider()
        if source is None:
            return default_renderer().get(None, self.path, self.data, self.mode)
        return source.get(self.path, self.data, self.mode)
