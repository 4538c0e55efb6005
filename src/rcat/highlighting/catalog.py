from __future__ import annotations

"""
Process-wide syntax and theme catalogs backed by Pygments.

This module exposes:
  * `SyntaxCatalog`: file extension → Grammar lookup with a plain-text fallback.
  * `ThemeCatalog`: ordered theme names and name → Theme lookup.
  * `get_syntax_catalog` / `get_theme_catalog`: guarded one-time accessors.

Both catalogs are read-only once built and live for the whole process.
"""

import logging
from typing import Iterator, Optional, Sequence, Tuple

from pygments.lexers import find_lexer_class_for_filename
from pygments.lexers.special import TextLexer
from pygments.styles import get_all_styles, get_style_by_name
from pygments.util import ClassNotFound

from rcat.core.models import Grammar, Theme
from rcat.logging.helpers import get_logger

_PROBE_STEM = 'rcat-source'


def _grammar_for(lexer_cls: type, *, plain: bool = False) -> Grammar:
    return Grammar(
        name=lexer_cls.name,
        lexer_cls=lexer_cls,
        aliases=tuple(getattr(lexer_cls, 'aliases', ()) or ()),
        plain=plain,
    )


class SyntaxCatalog:
    """Grammar lookup over the Pygments lexer registry."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('catalog')
        self._plain = _grammar_for(TextLexer, plain=True)

    def find_by_extension(self, extension: str) -> Optional[Grammar]:
        """Return the grammar registered for *extension* (``'.py'``), or None.

        Only the extension takes part in the match, so well-known names such
        as ``Makefile`` or ``.bashrc`` stay unmatched.
        """
        if not extension:
            return None
        lexer_cls = find_lexer_class_for_filename(f'{_PROBE_STEM}{extension}')
        if lexer_cls is None:
            return None
        if lexer_cls is TextLexer:
            return self._plain
        self._log.debug('syntax for %s: %s', extension, lexer_cls.name)
        return _grammar_for(lexer_cls)

    def plain_text(self) -> Grammar:
        return self._plain


class ThemeCatalog:
    """Ordered collection of theme names with lazy style loading."""

    def __init__(self, names: Optional[Sequence[str]] = None) -> None:
        self._names: Tuple[str, ...] = tuple(names) if names is not None else tuple(get_all_styles())

    def names(self) -> Tuple[str, ...]:
        return self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def get(self, name: str) -> Optional[Theme]:
        if name not in self._names:
            return None
        try:
            style_cls = get_style_by_name(name)
        except ClassNotFound:
            return None
        return Theme(name=name, style_cls=style_cls)

    def first(self) -> Optional[Theme]:
        for name in self._names:
            theme = self.get(name)
            if theme is not None:
                return theme
        return None


_SYNTAX_CATALOG: Optional[SyntaxCatalog] = None
_THEME_CATALOG: Optional[ThemeCatalog] = None


def get_syntax_catalog(logger: Optional[logging.Logger] = None) -> SyntaxCatalog:
    global _SYNTAX_CATALOG
    if _SYNTAX_CATALOG is None:
        _SYNTAX_CATALOG = SyntaxCatalog(logger=logger)
    return _SYNTAX_CATALOG


def get_theme_catalog() -> ThemeCatalog:
    global _THEME_CATALOG
    if _THEME_CATALOG is None:
        _THEME_CATALOG = ThemeCatalog()
    return _THEME_CATALOG
