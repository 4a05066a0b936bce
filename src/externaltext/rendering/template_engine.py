"""
template_engine – Concrete TemplateEngineProtocol implementation for externaltext.

Wraps :class:`TemplateLiteralInterpolator` behind the Protocol surface so the
text renderer can take any engine by injection.
"""

from typing import Any, Mapping, Optional

from externaltext.core.errors import EvaluationError
from externaltext.core.interfaces.templating import TemplateEngineProtocol
from externaltext.core.interfaces.logging import LoggerLikeProtocol
from externaltext.logging.helpers import get_logger
from externaltext.processing.string_interpolator import TemplateLiteralInterpolator


class TemplateLiteralEngine(TemplateEngineProtocol):
    """Fixed-point ``${...}`` engine.

    Unlike a best-effort formatter, failures are not swallowed: an unbound
    name aborts the render and the EvaluationError reaches the caller.
    """

    def __init__(
        self,
        *,
        interpolator: Optional[TemplateLiteralInterpolator] = None,
        max_passes: Optional[int] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger("templates")
        self._interp = interpolator or TemplateLiteralInterpolator(
            max_passes=max_passes, logger=self._log
        )

    def render(self, template: str, variables: Mapping[str, Any]) -> str:  # type: ignore[override]
        """Render *template* replacing ${sites} via *variables*."""
        try:
            return self._interp.interpolate(template, variables)
        except EvaluationError as exc:
            self._log.error("template evaluation failed: %s", exc)
            raise
