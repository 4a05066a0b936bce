from __future__ import annotations
from typing import Protocol, runtime_checkable

from externaltext.core.models import MarkdownFragment


@runtime_checkable
class MarkdownRendererProtocol(Protocol):
    """Turns evaluated Markdown source into a presentation fragment."""

    def render(self, source: str) -> MarkdownFragment:
        ...
