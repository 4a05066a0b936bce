"""
rendering.factories – Default DI factories for template engine, Markdown renderer
and text renderer.

These classes are thin facades around the concrete implementations so callers
can inject them via Protocol-based factories without importing implementation
details at the composition sites.
"""

import logging
from typing import Callable, Optional

from externaltext.config import ExternalTextConfig
from externaltext.core.interfaces.factories import (
    MarkdownRendererFactoryProtocol,
    TemplateEngineFactoryProtocol,
    TextRendererFactoryProtocol,
)
from externaltext.core.interfaces.markdown import MarkdownRendererProtocol
from externaltext.core.interfaces.render import TextRendererProtocol
from externaltext.core.interfaces.templating import TemplateEngineProtocol
from externaltext.logging.helpers import get_logger
from externaltext.rendering.markdown_renderer import MarkdownRenderer
from externaltext.rendering.renderer import TextRenderer
from externaltext.rendering.template_engine import TemplateLiteralEngine


class DefaultTemplateEngineFactory(TemplateEngineFactoryProtocol):
    """Default factory for TemplateEngineProtocol.

    Example:
        >>> factory = DefaultTemplateEngineFactory()
        >>> engine = factory(None, logger)
    """

    def __init__(
        self,
        builder: Optional[Callable[[Optional[int], logging.Logger], TemplateEngineProtocol]] = None,
    ) -> None:
        self._builder = builder or self._default_builder

    @staticmethod
    def _default_builder(max_passes: Optional[int], logger: logging.Logger) -> TemplateEngineProtocol:
        return TemplateLiteralEngine(max_passes=max_passes, logger=logger)

    def __call__(  # type: ignore[override]
        self,
        max_passes: Optional[int],
        logger: logging.Logger,
    ) -> TemplateEngineProtocol:
        return self._builder(max_passes, logger)


class DefaultMarkdownRendererFactory(MarkdownRendererFactoryProtocol):
    """Default factory for MarkdownRendererProtocol."""

    def __init__(
        self,
        builder: Optional[Callable[[tuple[str, ...], bool], MarkdownRendererProtocol]] = None,
    ) -> None:
        self._builder = builder or (
            lambda extensions, allow_html: MarkdownRenderer(extensions=extensions, allow_html=allow_html)
        )

    def __call__(self, extensions: tuple[str, ...], allow_html: bool) -> MarkdownRendererProtocol:  # type: ignore[override]
        return self._builder(extensions, allow_html)


class DefaultTextRendererFactory(TextRendererFactoryProtocol):
    """Default factory for TextRendererProtocol.

    Example:
        >>> factory = DefaultTextRendererFactory()
        >>> renderer = factory(engine, markdown_renderer, logger)
    """

    def __init__(
        self,
        builder: Optional[
            Callable[[TemplateEngineProtocol, MarkdownRendererProtocol, logging.Logger], TextRendererProtocol]
        ] = None,
        *,
        config: Optional[ExternalTextConfig] = None,
    ) -> None:
        self._cfg = config
        self._builder = builder or self._default_builder

    def _default_builder(
        self,
        template_engine: TemplateEngineProtocol,
        markdown_renderer: MarkdownRendererProtocol,
        logger: logging.Logger,
    ) -> TextRendererProtocol:
        return TextRenderer(
            config=self._cfg,
            template_engine=template_engine,
            markdown_renderer=markdown_renderer,
            logger=logger,
        )

    def __call__(  # type: ignore[override]
        self,
        template_engine: TemplateEngineProtocol,
        markdown_renderer: MarkdownRendererProtocol,
        logger: logging.Logger,
    ) -> TextRendererProtocol:
        return self._builder(template_engine, markdown_renderer, logger)


def build_text_renderer(
    config: Optional[ExternalTextConfig] = None,
    *,
    engine_factory: Optional[TemplateEngineFactoryProtocol] = None,
    markdown_factory: Optional[MarkdownRendererFactoryProtocol] = None,
    renderer_factory: Optional[TextRendererFactoryProtocol] = None,
    logger: Optional[logging.Logger] = None,
) -> TextRendererProtocol:
    """Wire the default (or injected) factories into a text renderer."""
    cfg = config or ExternalTextConfig()
    lg = logger or get_logger("render")
    engine = (engine_factory or DefaultTemplateEngineFactory())(cfg.max_passes, get_logger("templates"))
    md = (markdown_factory or DefaultMarkdownRendererFactory())(cfg.markdown_extensions, cfg.allow_html)
    return (renderer_factory or DefaultTextRendererFactory(config=cfg))(engine, md, lg)
