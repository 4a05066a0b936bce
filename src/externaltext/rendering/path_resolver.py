from __future__ import annotations
"""
Path resolver for text bundles.

Paths use the standard property-access notation:

    heading                 → texts["heading"]
    sections.intro.title    → nested mappings
    items[0].label          → sequence index
    items.0.label           → same, dotted form
    labels['x.y']           → quoted key (may contain dots/brackets)

A sequence of keys/indices is accepted in place of the string form.
A mapping key equal to the whole path string is used as-is before the
path is split. Lookups that fail return :data:`MISSING`, never ``None``, so
a found-but-empty value stays distinguishable from an absent one.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any, Pattern

from externaltext.core.interfaces.paths import PathResolverProtocol
from externaltext.core.models import MISSING, PathLike, PathSegment

PATH_NAME_RX = re.compile(r"[^.\[\]]+")
_BRACKET_RX = re.compile(
    r"""\[\s*(?:(?P<index>-?\d+)|'(?P<sq>(?:[^'\\]|\\.)*)'|"(?P<dq>(?:[^"\\]|\\.)*)")\s*\]"""
)
_QUOTE_ESC_RX = re.compile(r"\\(.)")


def scan_path(text: str, name_rx: Pattern[str] = PATH_NAME_RX) -> tuple[PathSegment, ...]:
    """Split *text* into segments; *name_rx* decides what a dotted name may contain.

    Raises:
        ValueError: on empty segments, unbalanced brackets or stray characters.
    """
    segments: list[PathSegment] = []
    i = 0
    n = len(text)
    after_dot = False
    while i < n:
        ch = text[i]
        if ch == ".":
            if not segments or after_dot:
                raise ValueError(f"empty segment in path {text!r} at {i}")
            after_dot = True
            i += 1
            continue
        if ch == "[" and not after_dot:
            m = _BRACKET_RX.match(text, i)
            if m is None:
                raise ValueError(f"malformed bracket in path {text!r} at {i}")
            if m.group("index") is not None:
                segments.append(int(m.group("index")))
            else:
                quoted = m.group("sq") if m.group("sq") is not None else m.group("dq")
                segments.append(_QUOTE_ESC_RX.sub(r"\1", quoted))
            i = m.end()
            continue
        m = name_rx.match(text, i)
        if m is None:
            raise ValueError(f"unexpected {ch!r} in path {text!r} at {i}")
        segments.append(m.group())
        after_dot = False
        i = m.end()
    if after_dot:
        raise ValueError(f"path {text!r} ends with '.'")
    return tuple(segments)


def parse_path(path: PathLike) -> tuple[PathSegment, ...]:
    """Return *path* as a tuple of segments."""
    if isinstance(path, str):
        return scan_path(path)
    return tuple(path)


def format_path(path: PathLike) -> str:
    """Return the dotted/bracketed text form of *path*."""
    if isinstance(path, str):
        return path
    out: list[str] = []
    for seg in path:
        if isinstance(seg, int):
            out.append(f"[{seg}]")
        elif PATH_NAME_RX.fullmatch(seg):
            out.append(f".{seg}" if out else seg)
        else:
            out.append("[" + repr(seg) + "]")
    return "".join(out)


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


class PathResolver(PathResolverProtocol):
    """Walks mappings by key, sequences by index, other objects by attribute.

    Attribute access is limited to public names; it lets data-context values
    such as dataclasses be addressed the same way as plain dicts.
    """

    def lookup(self, obj: Any, path: PathLike) -> Any:
        # A key spelled exactly like the path wins over splitting it.
        if isinstance(path, str) and isinstance(obj, Mapping) and path in obj:
            return obj[path]
        segments = parse_path(path)
        if not segments:
            return MISSING
        return self.walk(obj, segments)

    def walk(self, obj: Any, segments: Sequence[PathSegment]) -> Any:
        cur = obj
        for seg in segments:
            cur = self._step(cur, seg)
            if cur is MISSING:
                return MISSING
        return cur

    @staticmethod
    def _step(cur: Any, seg: PathSegment) -> Any:
        if isinstance(cur, Mapping):
            if seg in cur:
                return cur[seg]
            if isinstance(seg, int) and str(seg) in cur:
                return cur[str(seg)]
            return MISSING
        if _is_sequence(cur):
            if isinstance(seg, str):
                if not (seg.isascii() and seg.isdigit()):
                    return MISSING
                seg = int(seg)
            return cur[seg] if 0 <= seg < len(cur) else MISSING
        if cur is None or isinstance(cur, (str, bytes, bytearray, int, float, bool)):
            return MISSING
        if isinstance(seg, str) and not seg.startswith("_"):
            return getattr(cur, seg, MISSING)
        return MISSING

    def format_path(self, path: PathLike) -> str:
        return format_path(path)
