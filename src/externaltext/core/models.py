from dataclasses import dataclass
from typing import Any, Literal, Mapping, Sequence, Tuple, Union

# Single source of truth for render modes
RenderMode = Literal['raw', 'string', 'markdown']
RENDER_MODES: Tuple[str, ...] = ('raw', 'string', 'markdown')

# Accepted for compatibility with element markup written against 'markup'.
MODE_ALIASES: Mapping[str, str] = {'markup': 'markdown'}

PathSegment = Union[str, int]
PathLike = Union[str, Sequence[PathSegment]]

TextBundle = Union[Mapping[str, Any], Sequence[Any]]


class _Missing:
    """Sentinel type for lookups that did not resolve."""

    _instance = None

    def __new__(cls) -> '_Missing':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


@dataclass(frozen=True)
class MarkdownFragment:
    """Rendered Markdown leaf.

    Keeps the evaluated source next to the HTML so callers can re-render or
    diff. ``__html__`` lets template engines that honor the markup protocol
    insert it without escaping.
    """
    source: str
    html: str

    def __str__(self) -> str:
        return self.html

    def __html__(self) -> str:
        return self.html
