from __future__ import annotations

"""Public surface for externaltext.core.

Protocol types, models and errors live here so downstream code has a stable
import location:

    from externaltext.core import TemplateEngineProtocol, EvaluationError, ...
"""

from externaltext.core.errors import (
    EvaluationError,
    EvaluationLimitError,
    ExternalTextError,
    RenderModeError,
)
from externaltext.core.interfaces import (
    LeafMapperProtocol,
    MarkdownRendererProtocol,
    PathResolverProtocol,
    TemplateEngineProtocol,
    TextBundleSourceProtocol,
    TextRendererProtocol,
)
from externaltext.core.models import (
    MISSING,
    RENDER_MODES,
    MarkdownFragment,
    PathLike,
    RenderMode,
    TextBundle,
)

__all__ = [
    # Errors
    "EvaluationError",
    "EvaluationLimitError",
    "ExternalTextError",
    "RenderModeError",
    # Protocols
    "LeafMapperProtocol",
    "MarkdownRendererProtocol",
    "PathResolverProtocol",
    "TemplateEngineProtocol",
    "TextBundleSourceProtocol",
    "TextRendererProtocol",
    # Models
    "MISSING",
    "RENDER_MODES",
    "MarkdownFragment",
    "PathLike",
    "RenderMode",
    "TextBundle",
]
