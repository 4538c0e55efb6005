from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class DiagnosticsProtocol(Protocol):
    """Where rcat sends its stderr diagnostics.

    Warnings carry the theme fallback, info the stdin advisory, errors the
    per-source failures; debug is reserved for IO tracing.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...
