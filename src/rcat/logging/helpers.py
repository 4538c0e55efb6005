from __future__ import annotations

"""Small logging helpers to standardize rcat logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'rcat' logger.
    - get_logger: Namespaced logger factory ('rcat.*').
    - trace_io utilities gated by RCAT_TRACE_IO.

Plain-text records are rendered as ``rcat: <message>`` so that per-source
diagnostics read like classic Unix tools (``rcat: missing.txt: No such file``).
"""

import logging
import os
import sys
from typing import Optional, TextIO

from rcat.constants import PROG

_HANDLER_NAME = f"{PROG}-stderr"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'rcat.session').
        - msg: Formatted message string.
        - version: rcat.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        """Resolve rcat version lazily to avoid import cycles.

        Returns:
            str: Version string or 'unknown' if it cannot be determined.
        """
        try:
            from rcat import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("RCAT_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'rcat' logger and return it.

    The logger owns one stderr handler. Calling this again updates that
    handler (format, level, stream) instead of stacking another one, so a
    run with `--json-logs` after a plain run switches to JSON.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(PROG)
    base.setLevel(level)
    base.propagate = False

    handler = next((h for h in base.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.set_name(_HANDLER_NAME)
        base.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)

    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(f"{PROG}: %(message)s"))
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'rcat'."""
    if not name or name == PROG:
        return logging.getLogger(PROG)
    if name.startswith(f"{PROG}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PROG}.{name}")


def is_trace_io_enabled() -> bool:
    """Check if IO tracing is enabled via env flag."""
    return os.getenv("RCAT_TRACE_IO") == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity IO trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context, attached to the record as 'context'.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
