from __future__ import annotations

"""
Pygments-backed line tokenizer.

Pygments lexes whole documents; rcat streams one line at a time. Multi-line
constructs are carried in `HighlightState` two ways.

The lexer state stack (triple-quoted strings, heredocs ...):

  • ExtendedRegexLexer subclasses are driven through a LexerContext, whose
    stack survives the call.
  • Plain RegexLexer subclasses are driven by `_iter_regex_tokens`, which
    runs the same matching loop as RegexLexer but over a caller-owned stack.
  • Every other lexer (or one overriding its token loop) starts each line
    from the stack it was given.

Pending text, for constructs a lexer only knows as a single match
(`/* ... */`, `<!-- ... -->`). A line is left open when its last token runs
across the line end (C's unterminated comment rule) or when it only lexes
cleanly once a usual block closer is appended. The next line is then lexed
together with the pending lines, tentatively closed the same way, and only
its own slice of the token stream is emitted.

Each line is lexed with a trailing newline so line-anchored rules behave as
in a full document; the newline is not part of the emitted segments.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from pygments.lexer import ExtendedRegexLexer, Lexer, LexerContext, RegexLexer
from pygments.token import Token, Whitespace, Error, _TokenType

from rcat.core.errors import HighlightError
from rcat.core.interfaces.highlighting import HighlighterProtocol
from rcat.core.models import Grammar, HighlightState, SegmentStyle, StyledSegment, Theme
from rcat.logging.helpers import get_logger
from rcat.rendering.escapes import escape_pair

RawToken = Tuple[_TokenType, str]

# tried in order, each on a line of its own after the open text
BLOCK_CLOSERS = ('*/', '-->', '"""', "'''", '*)', '-}', ']]', '`')
MAX_PENDING_LINES = 100


def _uses_own_loop(lexer: Lexer, base: type) -> bool:
    return type(lexer).get_tokens_unprocessed is base.get_tokens_unprocessed


def _iter_regex_tokens(lexer: RegexLexer, text: str, statestack: List[str]) -> Iterator[Tuple[int, _TokenType, str]]:
    """RegexLexer's matching loop over *statestack*, mutated in place."""
    pos = 0
    tokendefs = lexer._tokens
    statetokens = tokendefs[statestack[-1]]
    while True:
        for rexmatch, action, new_state in statetokens:
            m = rexmatch(text, pos)
            if not m:
                continue
            if action is not None:
                if type(action) is _TokenType:
                    yield pos, action, m.group()
                else:
                    yield from action(lexer, m)
            pos = m.end()
            if new_state is not None:
                if isinstance(new_state, tuple):
                    for state in new_state:
                        if state == '#pop':
                            if len(statestack) > 1:
                                statestack.pop()
                        elif state == '#push':
                            statestack.append(statestack[-1])
                        else:
                            statestack.append(state)
                elif isinstance(new_state, int):
                    # keep at least the root state
                    if abs(new_state) >= len(statestack):
                        del statestack[1:]
                    else:
                        del statestack[new_state:]
                elif new_state == '#push':
                    statestack.append(statestack[-1])
                else:
                    raise ValueError(f'wrong state def: {new_state!r}')
                statetokens = tokendefs[statestack[-1]]
            break
        else:
            if pos >= len(text):
                break
            if text[pos] == '\n':
                # unmatched newline: back to root
                statestack[:] = ['root']
                statetokens = tokendefs['root']
                yield pos, Whitespace, '\n'
                pos += 1
                continue
            yield pos, Error, text[pos]
            pos += 1


def _slice(tokens: List[RawToken], start: int, end: int) -> List[RawToken]:
    """Return the parts of *tokens* covering text offsets [start, end)."""
    out: List[RawToken] = []
    pos = 0
    for ttype, value in tokens:
        nxt = pos + len(value)
        lo, hi = max(pos, start), min(nxt, end)
        if lo < hi:
            out.append((ttype, value[lo - pos:hi - pos]))
        pos = nxt
        if pos >= end:
            break
    return out


def _has_error(tokens: List[RawToken]) -> bool:
    return any(ttype in Error for ttype, _ in tokens)


def _runs_past_line_end(tokens: List[RawToken]) -> bool:
    if not tokens:
        return False
    ttype, value = tokens[-1]
    return len(value) > 1 and value.endswith('\n') and ttype not in Token.Text


class PygmentsHighlighter(HighlighterProtocol):
    """Tokenize lines with Pygments lexers and style them with Pygments styles."""

    def __init__(self, *, background: bool = True, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('highlight')
        self._background = background
        self._lexers: Dict[type, Lexer] = {}

    def initial_state(self, grammar: Grammar) -> HighlightState:
        return HighlightState()

    def tokenize(
        self,
        grammar: Grammar,
        theme: Theme,
        state: HighlightState,
        line: str,
    ) -> Tuple[List[StyledSegment], HighlightState]:
        pending = state.pending
        text = f'{pending}{line}\n'
        try:
            lexer = self._lexer_for(grammar)
            tokens, stack = self._lex(lexer, state.stack, text)
            still_open = False
            if _has_error(tokens):
                closed = self._close_tentatively(lexer, state.stack, text)
                if closed is not None:
                    tokens, still_open = closed, True
            elif _runs_past_line_end(tokens):
                still_open = True
        except Exception as exc:
            raise HighlightError(grammar.name, f'{type(exc).__name__}: {exc}') from exc

        own = _slice(tokens, len(pending), len(pending) + len(line))
        if ''.join(value for _, value in own) != line:
            # The lexer did not reproduce its input; keep the text, lose the colors.
            self._log.debug('token stream mismatch for %s, rendering line as plain text', grammar.name)
            own = [(Token.Text, line)] if line else []

        if still_open and pending.count('\n') < MAX_PENDING_LINES:
            new_state = HighlightState(state.stack, text)
        else:
            new_state = HighlightState(stack)
        return self._to_segments(theme, own), new_state

    def _lexer_for(self, grammar: Grammar) -> Lexer:
        lexer = self._lexers.get(grammar.lexer_cls)
        if lexer is None:
            lexer = grammar.lexer_cls()
            self._lexers[grammar.lexer_cls] = lexer
        return lexer

    def _close_tentatively(self, lexer: Lexer, stack: Tuple[str, ...], text: str) -> Optional[List[RawToken]]:
        for closer in BLOCK_CLOSERS:
            tokens, _ = self._lex(lexer, stack, f'{text}{closer}\n')
            if not _has_error(tokens):
                return tokens
        return None

    def _lex(self, lexer: Lexer, stack: Tuple[str, ...], text: str) -> Tuple[List[RawToken], Tuple[str, ...]]:
        if isinstance(lexer, ExtendedRegexLexer) and _uses_own_loop(lexer, ExtendedRegexLexer):
            ctx = LexerContext(text, 0, stack=list(stack))
            tokens = [(ttype, value) for _, ttype, value in lexer.get_tokens_unprocessed(context=ctx)]
            return tokens, tuple(ctx.stack)
        if isinstance(lexer, RegexLexer) and _uses_own_loop(lexer, RegexLexer):
            statestack = list(stack)
            tokens = [(ttype, value) for _, ttype, value in _iter_regex_tokens(lexer, text, statestack)]
            return tokens, tuple(statestack)
        tokens = [(ttype, value) for _, ttype, value in lexer.get_tokens_unprocessed(text)]
        return tokens, stack

    def _to_segments(self, theme: Theme, tokens: List[RawToken]) -> List[StyledSegment]:
        segments: List[StyledSegment] = []
        for ttype, value in tokens:
            escape, reset = escape_pair(theme, ttype, background=self._background)
            style = SegmentStyle(token=ttype, escape=escape, reset=reset)
            if segments and segments[-1].style.looks_like(style):
                segments[-1] = StyledSegment(segments[-1].style, segments[-1].text + value)
            else:
                segments.append(StyledSegment(style, value))
        return segments
