from __future__ import annotations

from typing import Iterable, Iterator, Protocol, runtime_checkable

from rcat.core.models import Grammar, Theme


@runtime_checkable
class LineRendererProtocol(Protocol):
    """Turns a stream of raw lines into terminal-ready text."""

    def render_stream(
        self,
        grammar: Grammar,
        theme: Theme,
        lines: Iterable[str],
        number_lines: bool,
    ) -> Iterator[str]:
        """Yield one rendered line (terminator included) per input line."""
        ...
