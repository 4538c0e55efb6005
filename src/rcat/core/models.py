from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Grammar:
    """Opaque handle on a lexical ruleset (one language, or plain text)."""
    name: str
    lexer_cls: type
    aliases: Tuple[str, ...] = ()
    plain: bool = False


@dataclass(frozen=True)
class Theme:
    """Opaque handle on a color palette registered in the theme catalog."""
    name: str
    style_cls: type


@dataclass(frozen=True)
class SegmentStyle:
    """Display style for one run of text.

    `token` is the Pygments token type the run was lexed as. `escape` and
    `reset` are the terminal sequences the theme's formatter writes around
    it; both are empty for the terminal default.
    """
    token: Optional[object] = None
    escape: str = ''
    reset: str = ''

    def looks_like(self, other: SegmentStyle) -> bool:
        return self.escape == other.escape and self.reset == other.reset


@dataclass(frozen=True)
class StyledSegment:
    style: SegmentStyle
    text: str


@dataclass(frozen=True)
class HighlightState:
    """Lexer state carried from one line to the next within a single source.

    `stack` is the lexer state stack; anything above 'root' is an open
    multi-line construct (triple-quoted string, heredoc, ...). Constructs a
    lexer only recognizes as one match (`/* ... */`, `<!-- ... -->`) are
    carried as `pending`: the lines since the construct opened, each with its
    terminator. `stack` is then the stack at the start of `pending`.
    """
    stack: Tuple[str, ...] = ('root',)
    pending: str = ''

    @property
    def is_initial(self) -> bool:
        return self.stack == ('root',) and not self.pending


@dataclass
class RunOutcome:
    """Aggregate verdict across every source processed in one invocation."""
    failed: bool = False
    sources: int = 0
    errors: List[str] = field(default_factory=list)

    def mark_source(self) -> None:
        self.sources += 1

    def add_error(self, message: str) -> None:
        self.failed = True
        self.errors.append(message)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0
