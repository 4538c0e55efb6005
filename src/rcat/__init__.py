from __future__ import annotations

import logging
from typing import Optional

from rcat.constants import DEFAULT_THEME, NUMBER_WIDTH
from rcat.cli import Rcat
from rcat.core.errors import HighlightError, RcatError, SourceError
from rcat.core.interfaces.highlighting import HighlighterProtocol
from rcat.core.models import RunOutcome
from rcat.highlighting.syntax import resolve_syntax
from rcat.highlighting.themes import resolve_theme
from rcat.highlighting.tokenizer import PygmentsHighlighter
from rcat.io.sources import open_file, open_stdin
from rcat.logging.helpers import get_logger
from rcat.parsing.parser import _build_parser
from rcat.rendering.renderer import LineRenderer
from rcat.runtime.session import Session, SessionOptions

__version__ = '0.3.0'


def renderer_factory(
    *,
    highlighter: Optional[HighlighterProtocol] = None,
    number_width: int = NUMBER_WIDTH,
    logger: Optional[logging.Logger] = None,
) -> LineRenderer:
    """Factory helper that returns a concrete LineRenderer.

    Falls back to PygmentsHighlighter when no highlighter is provided.
    """
    hl = highlighter or PygmentsHighlighter(logger=logger)
    lg = logger or get_logger('render')
    return LineRenderer(highlighter=hl, number_width=number_width, logger=lg)


__all__ = [
    'Rcat',
    'DEFAULT_THEME',
    'renderer_factory',
    'Session',
    'SessionOptions',
    'RunOutcome',
    'LineRenderer',
    'PygmentsHighlighter',
    'resolve_syntax',
    'resolve_theme',
    'open_file',
    'open_stdin',
    'RcatError',
    'SourceError',
    'HighlightError',
    '_build_parser',
]
