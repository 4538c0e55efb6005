from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Program name used as the diagnostic prefix ("rcat: ...").
PROG: str = 'rcat'

# Theme used when --theme is omitted and RCAT_THEME is unset, and the
# fallback for unknown theme names.
DEFAULT_THEME: str = 'monokai'

# Width of the right-aligned line-number field emitted by -n/--number.
NUMBER_WIDTH: int = 6

# Source label used in errors raised while reading standard input.
STDIN_LABEL: str = '<stdin>'
