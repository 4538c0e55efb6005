from __future__ import annotations

"""Exception hierarchy shared by the drivers, the highlighter and the session.

Every error that is recoverable at source granularity carries a `detail`
string; the session controller turns it into a single diagnostic line.
"""


class RcatError(Exception):
    """Base class for all rcat errors."""


class SourceError(RcatError):
    """A source could not be opened, or failed while being read."""

    def __init__(self, source: str, detail: str) -> None:
        super().__init__(f"{source}: {detail}")
        self.source = source
        self.detail = detail


class HighlightError(RcatError):
    """The highlighting engine could not tokenize a line."""

    def __init__(self, grammar: str, detail: str) -> None:
        super().__init__(f"{grammar}: {detail}")
        self.grammar = grammar
        self.detail = f"gagal mewarnai sintaks {grammar}: {detail}"


def describe_error(exc: BaseException) -> str:
    """Return the short human-readable part of a low-level I/O failure."""
    if isinstance(exc, UnicodeDecodeError):
        return f"bukan teks UTF-8 yang valid (byte {exc.start})"
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)
