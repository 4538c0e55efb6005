"""rcat.highlighting – catalogs, resolvers and the Pygments line tokenizer."""
from .catalog import SyntaxCatalog, ThemeCatalog, get_syntax_catalog, get_theme_catalog
from .syntax import resolve_syntax
from .themes import resolve_theme
from .tokenizer import PygmentsHighlighter

__all__ = [
    "SyntaxCatalog",
    "ThemeCatalog",
    "get_syntax_catalog",
    "get_theme_catalog",
    "resolve_syntax",
    "resolve_theme",
    "PygmentsHighlighter",
]
