from __future__ import annotations

import os
from typing import Optional

from rcat.core.interfaces.highlighting import SyntaxCatalogProtocol
from rcat.core.models import Grammar
from rcat.highlighting.catalog import get_syntax_catalog


def resolve_syntax(path: Optional[str], catalog: Optional[SyntaxCatalogProtocol] = None) -> Grammar:
    """Pick the grammar for *path* by its extension, plain text otherwise.

    ``None`` stands for standard input, which is always plain text. The
    fallback is silent.
    """
    cat = catalog if catalog is not None else get_syntax_catalog()
    if path:
        extension = os.path.splitext(os.path.basename(path))[1]
        grammar = cat.find_by_extension(extension)
        if grammar is not None:
            return grammar
    return cat.plain_text()
