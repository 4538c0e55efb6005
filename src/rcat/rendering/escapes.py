from __future__ import annotations

"""
24-bit (truecolor) terminal escapes, produced by Pygments' own formatter.

One `TerminalTrueColorFormatter` is built per theme. The theme's
`background_color` is folded into the root `Token` style so every token
inherits it as background unless its own style sets one; the formatter then
resolves token inheritance and writes the SGR sequences.
"""

import io
from typing import Dict, Iterable, List, Tuple

from pygments.formatters import TerminalTrueColorFormatter
from pygments.token import Token

from rcat.core.models import StyledSegment, Theme

_MARK = '\x00'

_FORMATTERS: Dict[Tuple[type, bool], TerminalTrueColorFormatter] = {}
_PAIRS: Dict[Tuple[type, bool, object], Tuple[str, str]] = {}


def _with_background(style_cls: type) -> type:
    bg = style_cls.background_color or ''
    if not bg.startswith('#'):
        return style_cls
    styles = dict(style_cls.styles)
    styles[Token] = f"{styles.get(Token, '')} bg:{bg}".strip()
    return type(style_cls)(style_cls.__name__, (style_cls,), {'styles': styles})


def terminal_formatter(theme: Theme, *, background: bool = True) -> TerminalTrueColorFormatter:
    """Return the (cached) truecolor formatter for *theme*."""
    key = (theme.style_cls, background)
    formatter = _FORMATTERS.get(key)
    if formatter is None:
        style_cls = _with_background(theme.style_cls) if background else theme.style_cls
        formatter = TerminalTrueColorFormatter(style=style_cls)
        _FORMATTERS[key] = formatter
    return formatter


def escape_pair(theme: Theme, ttype, *, background: bool = True) -> Tuple[str, str]:
    """Return the (escape, reset) sequences *theme* writes around *ttype*."""
    key = (theme.style_cls, background, ttype)
    pair = _PAIRS.get(key)
    if pair is None:
        buf = io.StringIO()
        terminal_formatter(theme, background=background).format([(ttype, _MARK)], buf)
        on, _, off = buf.getvalue().partition(_MARK)
        pair = (on, off)
        _PAIRS[key] = pair
    return pair


def as_24_bit_terminal_escaped(segments: Iterable[StyledSegment]) -> str:
    """Concatenate *segments*, each wrapped in its escape and reset sequences."""
    parts: List[str] = []
    for seg in segments:
        parts.append(f'{seg.style.escape}{seg.text}{seg.style.reset}')
    return ''.join(parts)
