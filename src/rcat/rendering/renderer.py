"""
Line renderer for rcat.

This module provides:
  • LineRendererProtocol – DI-friendly interface (from core.interfaces.render).
  • LineRenderer         – numbering + highlighting + escape encoding.

Notes
-----
• Tokenization is delegated to a HighlighterProtocol implementation
  (PygmentsHighlighter by default), injected via constructor.
• Exactly one highlight state and one line counter exist per call to
  `render_stream`, so every source starts fresh.
• Every rendered line ends with exactly one '\\n', including a final line
  that had no terminator in the source.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from rcat.constants import NUMBER_WIDTH
from rcat.core.interfaces.highlighting import HighlighterProtocol
from rcat.core.interfaces.render import LineRendererProtocol
from rcat.core.models import Grammar, Theme
from rcat.rendering.escapes import as_24_bit_terminal_escaped


class LineRenderer(LineRendererProtocol):
    """Render raw lines as numbered, color-escaped terminal lines."""

    def __init__(
        self,
        *,
        highlighter: HighlighterProtocol,
        number_width: int = NUMBER_WIDTH,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._hl = highlighter
        self._width = number_width
        self._log = logger or logging.getLogger('rcat.render')

    def render_stream(
        self,
        grammar: Grammar,
        theme: Theme,
        lines: Iterable[str],
        number_lines: bool,
    ) -> Iterator[str]:
        state = self._hl.initial_state(grammar)
        counter = 1
        for line in lines:
            segments, state = self._hl.tokenize(grammar, theme, state, line)
            prefix = f'{counter:>{self._width}}\t' if number_lines else ''
            body = as_24_bit_terminal_escaped(segments)
            yield f'{prefix}{body}\n'
            counter += 1
        self._log.debug('rendered %d line(s) as %s', counter - 1, grammar.name)
