"""Reversible Unicode to ASCII transcoding using RFC 1345 mnemonics.

This package converts any Unicode string into an ASCII-only form that stays
human-readable where possible, and converts that form back to the exact
original string.

Encoding Strategy:
------------------
Each codepoint of the input is written as:

1. ``[[]`` / ``[]]`` for literal square brackets
2. The character itself for any other ASCII character
3. ``[token]`` for codepoints in the mnemonic table (``ü`` -> ``[u:]``)
4. ``[#HEX]`` for everything else (``€`` -> ``[#20AC]``), optionally with an
   annotator hint (``[#20AC{EUR}]``)

Decoding comes in two flavours. Strict decoding rejects stray brackets and
non-canonical hex escapes. Lax decoding passes anything it cannot parse
through unchanged, for text that was edited or typed by hand.
"""

from __future__ import annotations

from functools import lru_cache

from .annotators import (
    Annotator,
    LookalikeAnnotator,
    UnidecodeAnnotator,
    get_annotator,
    no_annotation,
    sanitize_annotation,
)
from .codec import Mnemonifier, decode, encode
from .config import MnemonifierConfig
from .exceptions import DecodeError, MnemonifierError, TableLoadError
from .table import (
    MnemonicTable,
    clear_table_cache,
    get_default_table,
    load_table,
    parse_table,
    serialize_table,
)


@lru_cache(maxsize=1)
def _get_default_codec() -> Mnemonifier:
    return Mnemonifier()


def mnemonify(text: str) -> str:
    """Encode text with the bundled table and no annotator."""
    return _get_default_codec().mnemonify(text)


def unmnemonify(text: str, strict: bool = False) -> str:
    """Decode text with the bundled table."""
    return _get_default_codec().unmnemonify(text, strict)


__all__ = [
    "Annotator",
    "DecodeError",
    "LookalikeAnnotator",
    "MnemonicTable",
    "Mnemonifier",
    "MnemonifierConfig",
    "MnemonifierError",
    "TableLoadError",
    "UnidecodeAnnotator",
    "clear_table_cache",
    "decode",
    "encode",
    "get_annotator",
    "get_default_table",
    "load_table",
    "mnemonify",
    "no_annotation",
    "parse_table",
    "sanitize_annotation",
    "serialize_table",
    "unmnemonify",
]
