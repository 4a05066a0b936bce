from __future__ import annotations

"""Typed configuration for externaltext.

`ExternalTextConfig` is optional: every component has working defaults.
`from_env` reads EXTERNALTEXT_* variables so deployments can tune rendering
without code changes.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from externaltext.constants import DEFAULT_MODE, PLACEHOLDER_TEMPLATE
from externaltext.core.errors import RenderModeError
from externaltext.core.models import MODE_ALIASES, RENDER_MODES


def normalize_mode(mode: str) -> str:
    """Return the canonical render mode for *mode* (aliases included)."""
    canonical = MODE_ALIASES.get(mode, mode)
    if canonical not in RENDER_MODES:
        raise RenderModeError(
            f"unknown render mode {mode!r} (expected one of {', '.join(RENDER_MODES)})"
        )
    return canonical


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ExternalTextConfig:
    """Immutable settings shared by the renderer and its collaborators."""
    default_mode: str = DEFAULT_MODE
    max_passes: Optional[int] = None
    allow_html: bool = True
    markdown_extensions: tuple[str, ...] = field(default_factory=tuple)
    placeholder_template: str = PLACEHOLDER_TEMPLATE

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_mode", normalize_mode(self.default_mode))
        if self.max_passes is not None and self.max_passes < 1:
            raise ValueError("max_passes must be a positive integer or None")
        if "%s" not in self.placeholder_template:
            raise ValueError("placeholder_template must contain '%s'")

    def placeholder(self, path: str) -> str:
        return self.placeholder_template % path

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ExternalTextConfig":
        """Build a config from EXTERNALTEXT_* variables (os.environ by default).

        Recognized:
            EXTERNALTEXT_DEFAULT_MODE          raw | string | markdown
            EXTERNALTEXT_MAX_PASSES            positive int; empty/0 = unbounded
            EXTERNALTEXT_ALLOW_HTML            1/0, true/false
            EXTERNALTEXT_MARKDOWN_EXTENSIONS   comma separated extension names
        """
        env = os.environ if environ is None else environ
        kwargs: dict = {}

        mode = env.get("EXTERNALTEXT_DEFAULT_MODE", "").strip()
        if mode:
            kwargs["default_mode"] = mode

        passes = env.get("EXTERNALTEXT_MAX_PASSES", "").strip()
        if passes:
            try:
                n = int(passes)
            except ValueError as exc:
                raise ValueError(f"EXTERNALTEXT_MAX_PASSES must be an integer (got {passes!r})") from exc
            kwargs["max_passes"] = n or None

        allow = env.get("EXTERNALTEXT_ALLOW_HTML")
        if allow is not None and allow.strip():
            kwargs["allow_html"] = _parse_bool(allow)

        exts = env.get("EXTERNALTEXT_MARKDOWN_EXTENSIONS", "")
        names = tuple(e.strip() for e in exts.split(",") if e.strip())
        if names:
            kwargs["markdown_extensions"] = names

        return cls(**kwargs)
