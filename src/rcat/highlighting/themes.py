from __future__ import annotations

import logging
from typing import Optional

from rcat.constants import DEFAULT_THEME
from rcat.core.errors import RcatError
from rcat.core.interfaces.highlighting import ThemeCatalogProtocol
from rcat.core.models import Theme
from rcat.highlighting.catalog import get_theme_catalog
from rcat.logging.helpers import get_logger


def resolve_theme(
    name: Optional[str],
    catalog: Optional[ThemeCatalogProtocol] = None,
    *,
    default: str = DEFAULT_THEME,
    logger: Optional[logging.Logger] = None,
) -> Theme:
    """Return the theme called *name*, or a fallback with a warning.

    The fallback is *default* when the catalog has it, otherwise the first
    theme in catalog order. Only an empty catalog raises.
    """
    cat = catalog if catalog is not None else get_theme_catalog()
    theme = cat.get(name) if name else None
    if theme is not None:
        return theme

    fallback = cat.get(default) or cat.first()
    if fallback is None:
        raise RcatError('katalog tema kosong')

    log = logger or get_logger('themes')
    log.warning(
        "Peringatan: Tema '%s' tidak ditemukan. Menggunakan default '%s'.",
        name,
        fallback.name,
    )
    return fallback
