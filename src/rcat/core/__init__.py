from __future__ import annotations

"""Public surface for rcat.core.

Exposes the data model, the error hierarchy and the protocol types so that
downstream code has one stable import location:

    from rcat.core import Grammar, HighlighterProtocol, SourceError, ...
"""

from rcat.core.errors import HighlightError, RcatError, SourceError
from rcat.core.interfaces import (
    HighlighterProtocol,
    LineRendererProtocol,
    SyntaxCatalogProtocol,
    ThemeCatalogProtocol,
)
from rcat.core.models import (
    Grammar,
    HighlightState,
    RunOutcome,
    SegmentStyle,
    StyledSegment,
    Theme,
)

__all__ = [
    # Errors
    "RcatError",
    "SourceError",
    "HighlightError",
    # Protocols
    "HighlighterProtocol",
    "LineRendererProtocol",
    "SyntaxCatalogProtocol",
    "ThemeCatalogProtocol",
    # Models
    "Grammar",
    "HighlightState",
    "RunOutcome",
    "SegmentStyle",
    "StyledSegment",
    "Theme",
]
