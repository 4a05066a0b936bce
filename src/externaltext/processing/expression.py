"""
expression – Restricted evaluator for ``${...}`` interpolation sites.

Only identifier and property-path lookups are supported:

  • ${name}                → context["name"]
  • ${$$.section.title}    → member lookup through the path resolver
  • ${items[0]}, ${m['k']} → index / quoted-key members

Nothing is executed; anything outside this grammar is an EvaluationError.
"""

import json
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from externaltext.constants import SITE_CLOSE
from externaltext.core.errors import EvaluationError
from externaltext.core.interfaces.paths import PathResolverProtocol
from externaltext.core.models import MISSING, PathSegment
from externaltext.rendering.path_resolver import PathResolver, format_path, scan_path

IDENT_RX = re.compile(r"[A-Za-z_$][\w$]*")
_MEMBER_NAME_RX = re.compile(r"[\w$]+")


@dataclass(frozen=True)
class Expression:
    """Parsed interpolation site: a bound name plus a member chain."""
    source: str
    name: str
    members: tuple[PathSegment, ...] = ()

    @property
    def path(self) -> str:
        if not self.members:
            return self.name
        return format_path((self.name, *self.members))


def parse_expression(source: str) -> Expression:
    """Parse the body of an interpolation site."""
    text = source.strip()
    m = IDENT_RX.match(text)
    if m is None:
        raise EvaluationError(f"expected identifier in ${{{source}}}", expression=source)
    rest = text[m.end():].lstrip()
    if rest.startswith("."):
        rest = rest[1:]
        if not rest or rest[0] in ".[":
            raise EvaluationError(f"expected member name in ${{{source}}}", expression=source)
    elif rest and not rest.startswith("["):
        raise EvaluationError(f"unsupported expression ${{{source}}}", expression=source)
    try:
        members = scan_path(rest, _MEMBER_NAME_RX)
    except ValueError as exc:
        raise EvaluationError(f"invalid member access in ${{{source}}}: {exc}", expression=source) from exc
    return Expression(source=source, name=m.group(), members=members)


def find_site_end(template: str, start: int) -> int:
    """Return the index of the ``}`` closing the site whose body starts at *start*.

    Braces inside quoted bracket keys do not close the site. Returns -1 when
    the site is unterminated.
    """
    quote: Optional[str] = None
    i = start
    n = len(template)
    while i < n:
        ch = template[i]
        if quote is not None:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == SITE_CLOSE:
            return i
        i += 1
    return -1


def stringify(value: Any) -> str:
    """Convert an interpolated value to the text substituted for its site."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Mapping):
        return json.dumps(dict(value), ensure_ascii=False, default=str)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ",".join(stringify(v) for v in value)
    return str(value)


class ExpressionEvaluator:
    """Resolve parsed expressions against a context mapping."""

    def __init__(self, *, resolver: Optional[PathResolverProtocol] = None) -> None:
        self._resolver = resolver or PathResolver()

    def resolve(self, expr: Expression, context: Mapping[str, Any]) -> Any:
        if expr.name not in context:
            raise EvaluationError(
                f"{expr.name} is not defined",
                expression=expr.source,
                name=expr.name,
            )
        value = context[expr.name]
        if not expr.members:
            return value
        found = self._resolver.lookup(value, list(expr.members))
        if found is MISSING:
            raise EvaluationError(
                f"cannot resolve {expr.path}",
                expression=expr.source,
                name=expr.path,
            )
        return found

    def evaluate(self, source: str, context: Mapping[str, Any]) -> str:
        return stringify(self.resolve(parse_expression(source), context))
