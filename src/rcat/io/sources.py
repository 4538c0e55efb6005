from __future__ import annotations

"""
Source drivers: turn a file path or the standard-input stream into a lazy,
forward-only sequence of lines with their terminators removed.

Open failures are raised eagerly by `open_file`; read failures (I/O errors,
invalid UTF-8) surface while the returned iterator is consumed. Both are
reported as `SourceError` tagged with the source identifier.

Files are read as bytes and decoded one line at a time, so every line before
an undecodable one is still delivered.
"""

import logging
import sys
from typing import BinaryIO, Iterator, Optional, TextIO, Union

from rcat.constants import STDIN_LABEL
from rcat.core.errors import SourceError, describe_error
from rcat.logging.helpers import get_logger, trace_io


def _chomp(raw: str, *, crlf: bool) -> str:
    if raw.endswith('\n'):
        raw = raw[:-1]
        if crlf and raw.endswith('\r'):
            raw = raw[:-1]
    return raw


def _read_lines(stream: Union[TextIO, BinaryIO], source: str, *, crlf: bool) -> Iterator[str]:
    while True:
        try:
            raw = stream.readline()
            if isinstance(raw, bytes):
                raw = raw.decode('utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceError(source, describe_error(exc)) from exc
        if not raw:
            return
        yield _chomp(raw, crlf=crlf)


class SourceLines:
    """Lazy line iterator over one source.

    When it owns its stream (files), `close()` closes the stream whether or
    not reading ever started; reaching the end closes it as well. Usable as
    a context manager.
    """

    def __init__(
        self,
        stream: Union[TextIO, BinaryIO],
        source: str,
        *,
        crlf: bool,
        owns_stream: bool,
        logger: logging.Logger,
    ) -> None:
        self.source = source
        self._stream = stream
        self._owns = owns_stream
        self._log = logger
        self._lines = _read_lines(stream, source, crlf=crlf)

    @property
    def closed(self) -> bool:
        return self._owns and self._stream.closed

    def __iter__(self) -> SourceLines:
        return self

    def __next__(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            self.close()
            raise

    def close(self) -> None:
        self._lines.close()
        if self._owns and not self._stream.closed:
            self._stream.close()
            trace_io(self._log, 'closed source', source=self.source)

    def __enter__(self) -> SourceLines:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def open_file(path: str, *, logger: Optional[logging.Logger] = None) -> SourceLines:
    """Open *path* for reading and return its lines.

    Only '\\n' separates lines; a '\\r' right before it is dropped too.

    Raises:
        SourceError: when the path cannot be opened (missing, permission
            denied, is a directory, ...).
    """
    log = logger or get_logger('sources')
    try:
        stream = open(path, 'rb')
    except OSError as exc:
        raise SourceError(path, describe_error(exc)) from exc
    trace_io(log, 'opened source', source=path)
    return SourceLines(stream, path, crlf=True, owns_stream=True, logger=log)


def open_stdin(stream: Optional[TextIO] = None, *, logger: Optional[logging.Logger] = None) -> SourceLines:
    """Announce that input is awaited, then return the lines of *stream*.

    The stream defaults to ``sys.stdin`` and is never closed here.
    """
    log = logger or get_logger('sources')
    log.info('(Membaca dari standard input. Tekan Ctrl+D untuk selesai)')
    return SourceLines(
        stream if stream is not None else sys.stdin,
        STDIN_LABEL,
        crlf=False,
        owns_stream=False,
        logger=log,
    )
