from __future__ import annotations

import io
import re
import unittest
from typing import List, Tuple

from pygments.formatters import TerminalTrueColorFormatter
from pygments.style import Style
from pygments.styles import get_style_by_name
from pygments.token import Token

from rcat.core.models import Grammar, HighlightState, SegmentStyle, StyledSegment, Theme
from rcat.rendering import LineRenderer, as_24_bit_terminal_escaped, escape_pair, terminal_formatter

PLAIN = Grammar(name='Text only', lexer_cls=object, plain=True)
THEME = Theme(name='fake', style_cls=object)
STYLE = SegmentStyle(token=Token.Text, escape='\x1b[38;2;160;176;192m', reset='\x1b[39m')


class _Paper(Style):
    background_color = '#102030'
    styles = {
        Token: '#aabbcc',
        Token.Keyword: 'bold #010203',
        Token.Error: 'bg:#ff0000',
    }


PAPER = Theme(name='paper', style_cls=_Paper)


class _RecordingHighlighter:
    """Echo each line as one segment, counting lines in the state stack."""

    def __init__(self) -> None:
        self.seen_states: List[HighlightState] = []

    def initial_state(self, grammar: Grammar) -> HighlightState:
        return HighlightState()

    def tokenize(self, grammar, theme, state, line) -> Tuple[List[StyledSegment], HighlightState]:
        self.seen_states.append(state)
        segments = [StyledSegment(STYLE, line)] if line else []
        return segments, HighlightState(state.stack + ('seen',))


_SGR = re.compile(r'\x1b\[[0-9;]*m')


def _codes(sequence: str) -> List[str]:
    return sequence[2:-1].split(';')


class EscapeTests(unittest.TestCase):
    def test_formatter_is_built_once_per_theme(self) -> None:
        self.assertIs(terminal_formatter(PAPER), terminal_formatter(PAPER))
        self.assertIsNot(terminal_formatter(PAPER), terminal_formatter(PAPER, background=False))

    def test_token_colors_come_from_the_style(self) -> None:
        on, off = escape_pair(PAPER, Token.Keyword)
        self.assertIn('38;2;1;2;3', on)
        self.assertIn('01', _codes(on))
        self.assertTrue(off)

    def test_theme_background_is_inherited(self) -> None:
        on, _ = escape_pair(PAPER, Token.Name.Function)
        self.assertIn('38;2;170;187;204', on)
        self.assertIn('48;2;16;32;48', on)

    def test_token_background_overrides_theme(self) -> None:
        on, _ = escape_pair(PAPER, Token.Error)
        self.assertIn('48;2;255;0;0', on)
        self.assertNotIn('48;2;16;32;48', on)

    def test_background_can_be_left_out(self) -> None:
        on, _ = escape_pair(PAPER, Token.Name, background=False)
        self.assertIn('38;2;170;187;204', on)
        self.assertNotIn('48;2;', on)

    def test_escapes_match_pygments_output(self) -> None:
        theme = Theme(name='monokai', style_cls=get_style_by_name('monokai'))
        buf = io.StringIO()
        TerminalTrueColorFormatter(style=theme.style_cls).format([(Token.Keyword, 'def')], buf)
        on, off = escape_pair(theme, Token.Keyword, background=False)
        self.assertEqual(f'{on}def{off}', buf.getvalue())

    def test_default_style_emits_nothing(self) -> None:
        segs = [StyledSegment(SegmentStyle(), 'raw')]
        self.assertEqual(as_24_bit_terminal_escaped(segs), 'raw')

    def test_segments_are_wrapped_and_reset(self) -> None:
        other = SegmentStyle(token=Token.Keyword, escape='\x1b[01m', reset='\x1b[00m')
        segs = [StyledSegment(STYLE, 'ab'), StyledSegment(other, 'cd')]
        out = as_24_bit_terminal_escaped(segs)
        self.assertEqual(out, '\x1b[38;2;160;176;192mab\x1b[39m\x1b[01mcd\x1b[00m')
        self.assertEqual(_SGR.sub('', out), 'abcd')


class LineRendererTests(unittest.TestCase):
    def setUp(self) -> None:
        self.hl = _RecordingHighlighter()
        self.renderer = LineRenderer(highlighter=self.hl)

    def _render(self, lines, number_lines=False) -> List[str]:
        return list(self.renderer.render_stream(PLAIN, THEME, lines, number_lines))

    def test_numbering_is_right_aligned_width_six(self) -> None:
        out = self._render(['a', 'b'], number_lines=True)
        self.assertTrue(out[0].startswith('     1\t'))
        self.assertTrue(out[1].startswith('     2\t'))

    def test_numbering_beyond_field_width(self) -> None:
        narrow = LineRenderer(highlighter=self.hl, number_width=2)
        out = list(narrow.render_stream(PLAIN, THEME, ['x'] * 100, True))
        self.assertTrue(out[8].startswith(' 9\t'))
        self.assertTrue(out[-1].startswith('100\t'))

    def test_no_numbering_means_no_prefix(self) -> None:
        out = self._render(['alpha', 'beta'])
        self.assertEqual([_SGR.sub('', ln) for ln in out], ['alpha\n', 'beta\n'])
        self.assertFalse(any('\t' in ln for ln in out))

    def test_every_line_gets_exactly_one_terminator(self) -> None:
        out = self._render(['', 'last-without-newline'])
        self.assertEqual(out[0], '\n')
        self.assertTrue(out[1].endswith('\n'))
        self.assertFalse(out[1].endswith('\n\n'))

    def test_state_is_threaded_and_fresh_per_stream(self) -> None:
        self._render(['1', '2', '3'])
        self.assertEqual([len(s.stack) for s in self.hl.seen_states], [1, 2, 3])
        self.hl.seen_states.clear()
        self._render(['again'])
        self.assertEqual(self.hl.seen_states, [HighlightState()])

    def test_counter_resets_per_stream(self) -> None:
        self._render(['a', 'b'], number_lines=True)
        out = self._render(['c'], number_lines=True)
        self.assertTrue(out[0].startswith('     1\t'))

    def test_streaming_is_lazy(self) -> None:
        def lines():
            yield 'first'
            raise AssertionError('second line should not be read yet')

        stream = self.renderer.render_stream(PLAIN, THEME, lines(), False)
        self.assertEqual(_SGR.sub('', next(stream)), 'first\n')


if __name__ == '__main__':
    unittest.main()
