"""rcat.runtime – the session controller."""
from .session import Session, SessionOptions

__all__ = ["Session", "SessionOptions"]
