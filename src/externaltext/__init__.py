from __future__ import annotations

from externaltext.config import ExternalTextConfig
from externaltext.core.errors import (
    EvaluationError,
    EvaluationLimitError,
    ExternalTextError,
    RenderModeError,
)
from externaltext.core.models import MISSING, RENDER_MODES, MarkdownFragment, RenderMode
from externaltext.processing.escaping import escape, unescape
from externaltext.processing.string_interpolator import TemplateLiteralInterpolator, evaluate
from externaltext.rendering.factories import (
    DefaultMarkdownRendererFactory,
    DefaultTemplateEngineFactory,
    DefaultTextRendererFactory,
    build_text_renderer,
)
from externaltext.rendering.leaf_mapper import LeafMapper, map_leaves
from externaltext.rendering.markdown_renderer import MarkdownRenderer
from externaltext.rendering.path_resolver import PathResolver, format_path, parse_path
from externaltext.rendering.renderer import TextRenderer, get
from externaltext.rendering.template_engine import TemplateLiteralEngine
from externaltext.provider import ExternalText, TextBundleProvider, current_provider, current_texts

__version__ = '0.3.0'

# Long-form name, kept as an alias.
evaluate_as_template_literal = evaluate


__all__ = [
    'escape',
    'unescape',
    'evaluate',
    'evaluate_as_template_literal',
    'get',
    'map_leaves',
    'parse_path',
    'format_path',
    'RenderMode',
    'RENDER_MODES',
    'MISSING',
    'MarkdownFragment',
    'ExternalTextError',
    'EvaluationError',
    'EvaluationLimitError',
    'RenderModeError',
    'ExternalTextConfig',
    'TemplateLiteralInterpolator',
    'TemplateLiteralEngine',
    'MarkdownRenderer',
    'PathResolver',
    'LeafMapper',
    'TextRenderer',
    'TextBundleProvider',
    'ExternalText',
    'current_provider',
    'current_texts',
    'build_text_renderer',
    'DefaultTemplateEngineFactory',
    'DefaultMarkdownRendererFactory',
    'DefaultTextRendererFactory',
]
