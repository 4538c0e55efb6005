from __future__ import annotations

import logging
import os
import sys
from typing import NoReturn, Optional, Sequence, TextIO

from rcat.logging.helpers import get_logger, is_trace_io_enabled, setup_base_logger
from rcat.parsing.parser import _build_parser
from rcat.runtime.session import Session, SessionOptions


logger = get_logger('rcat')


def _configure_logging(enable_json: bool) -> None:
    """Point the 'rcat' logger at stderr, either JSON or plain text."""
    level = logging.DEBUG if is_trace_io_enabled() else logging.INFO
    setup_base_logger(json_logs=enable_json, level=level)


class Rcat:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(
        argv: Sequence[str],
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> int:
        """Run the tool with an argv-like sequence and return the exit status."""
        json_logs = '--json-logs' in argv or os.getenv('RCAT_JSON_LOGS') == '1'
        _configure_logging(json_logs)

        ns = _build_parser().parse_args(list(argv))
        session = Session(out=stdout or sys.stdout, stdin=stdin)

        if ns.list_themes:
            return session.list_themes()

        outcome = session.run(
            SessionOptions(files=tuple(ns.files), number_lines=ns.number, theme=ns.theme)
        )
        logger.debug('processed %d source(s), %d failed', outcome.sources, len(outcome.errors))
        return outcome.exit_code


def main() -> NoReturn:
    """Entry point for `rcat` and `python -m rcat`."""
    try:
        raise SystemExit(Rcat.run(sys.argv[1:]))
    except KeyboardInterrupt:
        logger.error('Dihentikan oleh pengguna.')
        raise SystemExit(130)
    except BrokenPipeError:
        # stdout reader went away; silence the flush at interpreter shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Kesalahan tak terduga: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
