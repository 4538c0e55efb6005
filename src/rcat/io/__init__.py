"""rcat.io – file and standard-input source drivers."""
from .sources import SourceLines, open_file, open_stdin

__all__ = ["SourceLines", "open_file", "open_stdin"]
