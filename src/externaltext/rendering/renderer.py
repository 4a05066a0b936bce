"""
Text renderer for externaltext.

This module provides:
  • TextRendererProtocol – DI-friendly interface (from core.interfaces.render).
  • TextRenderer         – path lookup + leaf mapping + evaluation/Markdown.
  • get                  – module-level entry point over a default renderer.

Notes
-----
• A path that does not resolve (or a missing bundle) yields the placeholder
  ``{{path}}`` so gaps stay visible in the rendered output.
• The render mode applies uniformly to every leaf below the path.
• Non-string leaves become ``None``.
• One failing leaf aborts the whole call; there are no partial results.
"""

from typing import Any, Callable, Mapping, Optional

from externaltext.config import ExternalTextConfig, normalize_mode
from externaltext.constants import BUNDLE_KEY
from externaltext.core.interfaces.logging import LoggerLikeProtocol
from externaltext.core.interfaces.markdown import MarkdownRendererProtocol
from externaltext.core.interfaces.paths import PathResolverProtocol
from externaltext.core.interfaces.render import TextRendererProtocol
from externaltext.core.interfaces.templating import TemplateEngineProtocol
from externaltext.core.interfaces.walker import LeafMapperProtocol
from externaltext.core.models import MISSING, PathLike, TextBundle
from externaltext.logging.helpers import get_logger
from externaltext.rendering.leaf_mapper import LeafMapper
from externaltext.rendering.markdown_renderer import MarkdownRenderer
from externaltext.rendering.path_resolver import PathResolver
from externaltext.rendering.template_engine import TemplateLiteralEngine


class TextRenderer(TextRendererProtocol):
    """Resolve a path in a text bundle and render every leaf below it."""

    def __init__(
        self,
        *,
        config: Optional[ExternalTextConfig] = None,
        template_engine: Optional[TemplateEngineProtocol] = None,
        markdown_renderer: Optional[MarkdownRendererProtocol] = None,
        path_resolver: Optional[PathResolverProtocol] = None,
        leaf_mapper: Optional[LeafMapperProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._cfg = config or ExternalTextConfig()
        self._log = logger or get_logger("render")
        self._engine = template_engine or TemplateLiteralEngine(
            max_passes=self._cfg.max_passes, logger=get_logger("templates")
        )
        self._markdown = markdown_renderer or MarkdownRenderer(
            extensions=self._cfg.markdown_extensions,
            allow_html=self._cfg.allow_html,
        )
        self._paths = path_resolver or PathResolver()
        self._mapper = leaf_mapper or LeafMapper()

    @property
    def config(self) -> ExternalTextConfig:
        return self._cfg

    def resolve(self, texts: Optional[TextBundle], path: PathLike) -> Any:
        """Return the item at *path*, or the placeholder string when absent."""
        item = MISSING
        if texts is not None:
            try:
                item = self._paths.lookup(texts, path)
            except ValueError as exc:
                self._log.warning("malformed text path %r: %s", path, exc)
        if item is MISSING:
            label = self._paths.format_path(path)
            self._log.debug("text not found, using placeholder: %s", label)
            return self._cfg.placeholder(label)
        return item

    def leaf_renderer(
        self,
        texts: Optional[TextBundle],
        data: Optional[Mapping[str, Any]],
        mode: str,
    ) -> Callable[[Any], Any]:
        """Build the per-leaf transform for one `get` call."""
        context = {BUNDLE_KEY: texts, **(data or {})}

        def render(value: Any) -> Any:
            if not isinstance(value, str):
                return None
            if mode == "raw":
                return value
            source = self._engine.render(value, context)
            if mode == "string":
                return source
            return self._markdown.render(source)

        return render

    def get(
        self,
        texts: Optional[TextBundle],
        path: PathLike,
        data: Optional[Mapping[str, Any]] = None,
        mode: Optional[str] = None,
    ) -> Any:
        """Render the item at *path* in *texts* according to *mode*.

        Args:
            texts: Text bundle, or None when none has been supplied yet.
            path: Dotted/bracketed path, or a sequence of keys/indices.
            data: Names available to interpolation sites besides ``$$``.
            mode: 'raw', 'string' or 'markdown'; defaults to the config's mode.

        Returns:
            A single rendered leaf, or a structure shaped like the resolved item.
        """
        canonical = normalize_mode(mode) if mode is not None else self._cfg.default_mode
        item = self.resolve(texts, path)
        return self._mapper.map_leaves(item, self.leaf_renderer(texts, data, canonical))


_DEFAULT_RENDERER: Optional[TextRenderer] = None


def default_renderer() -> TextRenderer:
    """Return the lazily built module-wide renderer (no shared mutable state)."""
    global _DEFAULT_RENDERER
    if _DEFAULT_RENDERER is None:
        _DEFAULT_RENDERER = TextRenderer()
    return _DEFAULT_RENDERER


def get(
    texts: Optional[TextBundle],
    path: PathLike,
    data: Optional[Mapping[str, Any]] = None,
    mode: str = "string",
) -> Any:
    """Render the item at *path* in *texts*; see :meth:`TextRenderer.get`."""
    return default_renderer().get(texts, path, data, mode)
