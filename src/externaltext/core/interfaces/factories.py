# src/externaltext/core/interfaces/factories.py
"""
core.interfaces.factories – Protocols for DI factories (engine/markdown/renderer).

These protocols standardize the dependency-injection surface so higher-level
composition (e.g., TextBundleProvider) can accept pluggable factories without
depending on concrete implementations.
"""

import logging
from typing import Optional, Protocol, runtime_checkable

from externaltext.core.interfaces.markdown import MarkdownRendererProtocol
from externaltext.core.interfaces.render import TextRendererProtocol
from externaltext.core.interfaces.templating import TemplateEngineProtocol


@runtime_checkable
class TemplateEngineFactoryProtocol(Protocol):
    """Factory that builds a TemplateEngineProtocol."""

    def __call__(
        self,
        max_passes: Optional[int],
        logger: logging.Logger,
    ) -> TemplateEngineProtocol:  # pragma: no cover - interface
        ...


@runtime_checkable
class MarkdownRendererFactoryProtocol(Protocol):
    """Factory that builds a MarkdownRendererProtocol."""

    def __call__(
        self,
        extensions: tuple[str, ...],
        allow_html: bool,
    ) -> MarkdownRendererProtocol:  # pragma: no cover - interface
        ...


@runtime_checkable
class TextRendererFactoryProtocol(Protocol):
    """Factory that builds a TextRendererProtocol from its collaborators."""

    def __call__(
        self,
        template_engine: TemplateEngineProtocol,
        markdown_renderer: MarkdownRendererProtocol,
        logger: logging.Logger,
    ) -> TextRendererProtocol:  # pragma: no cover - interface
        ...
