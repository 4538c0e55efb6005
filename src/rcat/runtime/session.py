from __future__ import annotations

"""
Session controller: drives every requested source through the renderer.

The theme is resolved once per run and shared by all sources; the grammar
is resolved per source. Errors are isolated per source: a failing file is
reported and flagged in the RunOutcome, and the next file is still processed.
"""

from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from rcat.constants import DEFAULT_THEME
from rcat.core.errors import HighlightError, SourceError
from rcat.core.interfaces.highlighting import SyntaxCatalogProtocol, ThemeCatalogProtocol
from rcat.core.interfaces.logging import DiagnosticsProtocol
from rcat.core.interfaces.render import LineRendererProtocol
from rcat.core.models import Grammar, RunOutcome, Theme
from rcat.highlighting.catalog import get_syntax_catalog, get_theme_catalog
from rcat.highlighting.syntax import resolve_syntax
from rcat.highlighting.themes import resolve_theme
from rcat.highlighting.tokenizer import PygmentsHighlighter
from rcat.io.sources import SourceLines, open_file, open_stdin
from rcat.logging.helpers import get_logger
from rcat.rendering.renderer import LineRenderer


@dataclass(frozen=True)
class SessionOptions:
    """What to display and how; an empty `files` means standard input."""
    files: Tuple[str, ...] = ()
    number_lines: bool = False
    theme: str = DEFAULT_THEME


class Session:
    """Run one invocation: resolve, render and report every source."""

    def __init__(
        self,
        *,
        out: TextIO,
        stdin: Optional[TextIO] = None,
        renderer: Optional[LineRendererProtocol] = None,
        syntax_catalog: Optional[SyntaxCatalogProtocol] = None,
        theme_catalog: Optional[ThemeCatalogProtocol] = None,
        logger: Optional[DiagnosticsProtocol] = None,
    ) -> None:
        self._out = out
        self._stdin = stdin
        self._log = logger or get_logger('session')
        self._renderer = renderer or LineRenderer(highlighter=PygmentsHighlighter())
        self._syntaxes = syntax_catalog if syntax_catalog is not None else get_syntax_catalog()
        self._themes = theme_catalog if theme_catalog is not None else get_theme_catalog()

    def list_themes(self) -> int:
        """Print the header and one '- <name>' line per theme; always succeeds."""
        self._out.write('Tema yang tersedia:\n')
        for name in self._themes:
            self._out.write(f'- {name}\n')
        self._out.flush()
        return 0

    def run(self, options: SessionOptions) -> RunOutcome:
        outcome = RunOutcome()
        theme = resolve_theme(options.theme, self._themes, logger=self._log)

        if not options.files:
            self._drive_stdin(theme, options.number_lines, outcome)
            return outcome

        for path in options.files:
            self._drive_file(path, theme, options.number_lines, outcome)
        return outcome

    def _drive_file(self, path: str, theme: Theme, number_lines: bool, outcome: RunOutcome) -> None:
        outcome.mark_source()
        grammar = resolve_syntax(path, self._syntaxes)
        try:
            lines = open_file(path, logger=self._log)
            self._emit(grammar, theme, lines, number_lines)
        except (SourceError, HighlightError) as exc:
            self._log.error('%s: %s', path, exc.detail)
            outcome.add_error(f'{path}: {exc.detail}')

    def _drive_stdin(self, theme: Theme, number_lines: bool, outcome: RunOutcome) -> None:
        outcome.mark_source()
        grammar = resolve_syntax(None, self._syntaxes)
        try:
            lines = open_stdin(self._stdin, logger=self._log)
            self._emit(grammar, theme, lines, number_lines)
        except (SourceError, HighlightError) as exc:
            self._log.error('Gagal membaca standard input: %s', exc.detail)
            outcome.add_error(f'standard input: {exc.detail}')

    def _emit(self, grammar: Grammar, theme: Theme, lines: SourceLines, number_lines: bool) -> None:
        # the file is closed even when rendering stops before the first read
        with lines:
            try:
                for rendered in self._renderer.render_stream(grammar, theme, lines, number_lines):
                    self._out.write(rendered)
            finally:
                self._out.flush()
