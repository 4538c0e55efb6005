from __future__ import annotations

from typing import Iterator, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

from rcat.core.models import Grammar, HighlightState, StyledSegment, Theme


@runtime_checkable
class HighlighterProtocol(Protocol):
    """Line tokenizer: the pluggable highlighting engine."""

    def initial_state(self, grammar: Grammar) -> HighlightState:
        """Return a fresh state for a new source using `grammar`."""
        ...

    def tokenize(
        self,
        grammar: Grammar,
        theme: Theme,
        state: HighlightState,
        line: str,
    ) -> Tuple[List[StyledSegment], HighlightState]:
        """Split `line` (no terminator) into styled segments and advance the state."""
        ...


@runtime_checkable
class SyntaxCatalogProtocol(Protocol):
    def find_by_extension(self, extension: str) -> Optional[Grammar]:
        ...

    def plain_text(self) -> Grammar:
        ...


@runtime_checkable
class ThemeCatalogProtocol(Protocol):
    def names(self) -> Sequence[str]:
        ...

    def get(self, name: str) -> Optional[Theme]:
        ...

    def first(self) -> Optional[Theme]:
        ...

    def __iter__(self) -> Iterator[str]:
        ...
