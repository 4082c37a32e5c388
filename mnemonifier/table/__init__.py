"""Mnemonic table for the mnemonifier codec.

The bundled ``mnemonics.dat`` maps non-ASCII BMP codepoints to the
two-character RFC 1345 mnemonics, extended with mnemonics derived from
canonical decompositions (``Ǹ`` becomes ``N|!``). Longer RFC 1345
mnemonics such as ``1000RCD`` are not bundled. A complete table is built
offline by ``tools/generate_mnemonics.py`` and loaded with ``load_table``.
"""

from __future__ import annotations

from .loader import (
    clear_table_cache,
    get_default_table,
    load_table,
    parse_table,
    serialize_table,
)
from .model import MnemonicTable

__all__ = [
    "MnemonicTable",
    "clear_table_cache",
    "get_default_table",
    "load_table",
    "parse_table",
    "serialize_table",
]
