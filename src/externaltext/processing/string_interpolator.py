"""
string_interpolator – Fixed-point ``${...}`` template interpolation.

Semantics:

  • ${name}          → value bound to *name* in the context
  • ${$$.a.b}        → member lookup (see :mod:`externaltext.processing.expression`)
  • \\`              → literal backtick (escape marker consumed)

A single pass substitutes every site. Substituted text may itself contain
sites (e.g. a bundle entry pointing at another entry), so passes repeat
until the escaped output of one pass equals the escaped input it was
produced from. The input is escaped before each pass and unescaped once at
the end.
"""

from typing import Any, Mapping, Optional

from externaltext.constants import ESCAPE_MARKER, SITE_OPEN, TEMPLATE_DELIM
from externaltext.core.errors import EvaluationError, EvaluationLimitError
from externaltext.core.interfaces.logging import LoggerLikeProtocol
from externaltext.logging.helpers import get_logger, trace_eval
from externaltext.processing.escaping import escape, unescape
from externaltext.processing.expression import ExpressionEvaluator, find_site_end

_ESCAPED_DELIM = ESCAPE_MARKER + TEMPLATE_DELIM


class TemplateLiteralInterpolator:
    """Evaluates a string as a template literal until it stops changing.

    There is no cycle detection: a context whose expansion keeps producing
    new text never converges. ``max_passes`` turns that into an
    EvaluationLimitError; by default it is unbounded.
    """

    def __init__(
        self,
        *,
        evaluator: Optional[ExpressionEvaluator] = None,
        max_passes: Optional[int] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        if max_passes is not None and max_passes < 1:
            raise ValueError("max_passes must be a positive integer or None")
        self._eval = evaluator or ExpressionEvaluator()
        self._max_passes = max_passes
        self._log = logger or get_logger("processing.interpolate")

    def evaluate_once(self, tpl: str, context: Mapping[str, Any]) -> str:
        """Run a single substitution pass over the escaped template *tpl*."""
        out: list[str] = []
        i = 0
        n = len(tpl)

        while i < n:
            if tpl.startswith(_ESCAPED_DELIM, i):
                out.append(TEMPLATE_DELIM)
                i += len(_ESCAPED_DELIM)
                continue

            if tpl.startswith(SITE_OPEN, i):
                body_start = i + len(SITE_OPEN)
                j = find_site_end(tpl, body_start)
                if j == -1:
                    raise EvaluationError(
                        f"unterminated interpolation site at offset {i}",
                        expression=tpl[body_start:],
                    )
                out.append(self._eval.evaluate(tpl[body_start:j], context))
                i = j + 1
                continue

            out.append(tpl[i])
            i += 1

        return "".join(out)

    def interpolate(self, tpl: str, context: Optional[Mapping[str, Any]] = None) -> str:
        """Evaluate *tpl* against *context* to a fixed point.

        Parameters
        ----------
        tpl:
            Template string, possibly containing ``${...}`` sites and backticks.
        context:
            Names available to the sites. Keys that are not identifiers are
            unreachable but harmless.

        Returns
        -------
        str
            The fully expanded, unescaped text.

        Raises
        ------
        EvaluationError
            When a site references an unbound name, an unresolvable member or
            is malformed.
        """
        if not isinstance(tpl, str):
            raise TypeError(f"template must be str, not {type(tpl).__name__}")
        ctx: Mapping[str, Any] = context if context is not None else {}

        prev = ""
        curr = tpl
        passes = 0
        while True:
            escaped = escape(curr)
            if escaped == prev:
                break
            if self._max_passes is not None and passes >= self._max_passes:
                raise EvaluationLimitError(
                    f"no fixed point after {passes} passes",
                    passes=passes,
                )
            prev = escaped
            curr = self.evaluate_once(escaped, ctx)
            passes += 1
            trace_eval(self._log, "interpolation pass", n=passes, length=len(curr))

        return unescape(prev)


_DEFAULT = TemplateLiteralInterpolator()


def evaluate(template: str, context: Optional[Mapping[str, Any]] = None) -> str:
    """Module-level shortcut around a default :class:`TemplateLiteralInterpolator`."""
    return _DEFAULT.interpolate(template, context)
