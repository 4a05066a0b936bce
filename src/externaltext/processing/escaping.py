"""
escaping – Delimiter escaping around template evaluation.

The template delimiter (backtick) is also significant in Markdown, so leaf
content routinely contains it. Every unescaped backtick is prefixed with the
escape marker before a pass and the marker is stripped once the fixed point
is reached. A backtick that already carries the marker is left alone.
"""

from externaltext.constants import ESCAPE_MARKER, TEMPLATE_DELIM

_ESCAPED = ESCAPE_MARKER + TEMPLATE_DELIM


def escape(s: str) -> str:
    """Prefix every unescaped delimiter in *s* with the escape marker."""
    out: list[str] = []
    prev = ''
    for ch in s:
        if ch == TEMPLATE_DELIM and prev != ESCAPE_MARKER:
            out.append(_ESCAPED)
        else:
            out.append(ch)
        prev = ch
    return ''.join(out)


def unescape(s: str) -> str:
    """Inverse of :func:`escape`."""
    return s.replace(_ESCAPED, TEMPLATE_DELIM)
