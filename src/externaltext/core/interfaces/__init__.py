from .factories import (
    MarkdownRendererFactoryProtocol,
    TemplateEngineFactoryProtocol,
    TextRendererFactoryProtocol,
)
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .markdown import MarkdownRendererProtocol
from .paths import PathResolverProtocol
from .provider import TextBundleSourceProtocol, TextsSetter
from .render import TextRendererProtocol
from .templating import TemplateEngineProtocol
from .walker import LeafMapperProtocol

__all__ = [
    'LeafMapperProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'MarkdownRendererFactoryProtocol',
    'MarkdownRendererProtocol',
    'PathResolverProtocol',
    'TemplateEngineFactoryProtocol',
    'TemplateEngineProtocol',
    'TextBundleSourceProtocol',
    'TextRendererFactoryProtocol',
    'TextRendererProtocol',
    'TextsSetter',
]
