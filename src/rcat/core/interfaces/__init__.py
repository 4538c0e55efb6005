from .highlighting import HighlighterProtocol, SyntaxCatalogProtocol, ThemeCatalogProtocol
from .logging import DiagnosticsProtocol
from .render import LineRendererProtocol

__all__ = [
    'HighlighterProtocol',
    'SyntaxCatalogProtocol',
    'ThemeCatalogProtocol',
    'DiagnosticsProtocol',
    'LineRendererProtocol',
]
