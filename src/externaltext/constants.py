from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Character that delimits template literals; escaped while evaluating.
TEMPLATE_DELIM: str = '`'

# Marker placed in front of TEMPLATE_DELIM by `escape`.
ESCAPE_MARKER: str = '\\'

# Reserved context key bound to the whole text bundle on every `get` call.
BUNDLE_KEY: str = '$$'

# Opening/closing tokens of an interpolation site.
SITE_OPEN: str = '${'
SITE_CLOSE: str = '}'

# Shown in place of content whose path does not resolve.
PLACEHOLDER_TEMPLATE: str = '{{%s}}'

DEFAULT_MODE: str = 'string'
DEFAULT_ELEMENT_MODE: str = 'markdown'
