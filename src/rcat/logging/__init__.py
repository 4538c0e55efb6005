"""rcat.logging – logger configuration and namespaced logger helpers."""
from .helpers import JsonLogFormatter, get_logger, setup_base_logger, trace_io

__all__ = ["JsonLogFormatter", "get_logger", "setup_base_logger", "trace_io"]
