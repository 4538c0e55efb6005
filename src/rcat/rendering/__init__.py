"""rcat.rendering – escape encoding and the per-line renderer."""
from .escapes import as_24_bit_terminal_escaped, escape_pair, terminal_formatter
from .renderer import LineRenderer

__all__ = ["as_24_bit_terminal_escaped", "escape_pair", "terminal_formatter", "LineRenderer"]
