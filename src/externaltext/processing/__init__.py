"""Public API surface for externaltext.processing."""
from externaltext.processing.escaping import escape, unescape
from externaltext.processing.string_interpolator import TemplateLiteralInterpolator, evaluate

__all__ = [
    "escape",
    "unescape",
    "evaluate",
    "TemplateLiteralInterpolator",
]
