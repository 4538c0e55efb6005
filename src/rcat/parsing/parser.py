# rcat/parsing/parser.py
from __future__ import annotations

import argparse
import os

from rcat.constants import DEFAULT_THEME, PROG


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - The default theme honors RCAT_THEME, read when the parser is built.
        - Help texts are user-facing and therefore written in Indonesian.
    """
    from rcat import __version__

    p = argparse.ArgumentParser(
        prog=PROG,
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPSI] [FILE ...]",
        description=(
            "rcat – alternatif 'cat' modern dengan pewarnaan sintaks.\n"
            "Tanpa FILE, isi dibaca dari standard input."
        ),
    )

    g_out = p.add_argument_group("Tampilan")
    g_misc = p.add_argument_group("Lain-lain")

    g_out.add_argument(
        "-n",
        "--number",
        action="store_true",
        dest="number",
        help="Tampilkan nomor pada setiap baris output.",
    )
    g_out.add_argument(
        "--theme",
        metavar="NAMA",
        dest="theme",
        default=os.getenv("RCAT_THEME") or DEFAULT_THEME,
        help=(
            "Nama tema pewarnaan sintaks (lihat --list-themes). "
            f"Bawaan: RCAT_THEME atau '{DEFAULT_THEME}'."
        ),
    )
    g_out.add_argument(
        "--list-themes",
        action="store_true",
        dest="list_themes",
        help="Tampilkan daftar semua tema yang tersedia lalu keluar.",
    )

    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Tulis pesan diagnostik sebagai JSON per baris (juga RCAT_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    p.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        help="File yang akan ditampilkan (jika kosong, baca dari stdin).",
    )
    return p
