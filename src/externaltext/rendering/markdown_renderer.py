"""
markdown_renderer – Markdown → HTML fragments via Python-Markdown.

Raw HTML embedded in the source passes through untouched by default, which
is what bundle authors rely on for inline markup. With ``allow_html=False``
the raw-HTML block and inline processors are removed, so tags come out as
escaped text while the rest of the Markdown syntax still applies.
"""

from typing import Iterable, Optional

import markdown
from markdown.extensions import Extension

from externaltext.core.interfaces.markdown import MarkdownRendererProtocol
from externaltext.core.models import MarkdownFragment


class NoRawHtmlExtension(Extension):
    """Disable raw HTML blocks and inline tags."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")


class MarkdownRenderer(MarkdownRendererProtocol):
    """Render Markdown source to a :class:`MarkdownFragment`.

    A fresh ``markdown.Markdown`` instance is built per call; instances carry
    per-document state and are not safe to share between callers.
    """

    def __init__(
        self,
        *,
        extensions: Optional[Iterable[str]] = None,
        allow_html: bool = True,
        output_format: str = "html",
    ) -> None:
        self._extensions = tuple(extensions or ())
        self._allow_html = bool(allow_html)
        self._output_format = output_format

    @property
    def allow_html(self) -> bool:
        return self._allow_html

    def render(self, source: str) -> MarkdownFragment:
        extensions: list = list(self._extensions)
        if not self._allow_html:
            extensions.append(NoRawHtmlExtension())
        rendered = markdown.markdown(
            source,
            extensions=extensions,
            output_format=self._output_format,
        )
        return MarkdownFragment(source=source, html=rendered)
