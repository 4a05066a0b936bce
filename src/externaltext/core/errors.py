from __future__ import annotations

"""Exception types raised by externaltext.

Missing paths are not errors (they render as placeholders); only template
evaluation and invalid render modes raise.
"""

from typing import Optional


class ExternalTextError(Exception):
    """Base class for every error raised by externaltext."""


class EvaluationError(ExternalTextError, ValueError):
    """An interpolation site could not be evaluated.

    Attributes:
        expression: Source text of the offending interpolation site, if known.
        name: Unbound identifier or unresolved member, if applicable.
    """

    def __init__(self, message: str, *, expression: Optional[str] = None, name: Optional[str] = None) -> None:
        super().__init__(message)
        self.expression = expression
        self.name = name


class EvaluationLimitError(EvaluationError):
    """Raised when a configured pass limit is hit before a fixed point."""

    def __init__(self, message: str, *, passes: int) -> None:
        super().__init__(message)
        self.passes = passes


class RenderModeError(ExternalTextError, ValueError):
    """Unknown render mode passed to `get`."""
