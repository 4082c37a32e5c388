"""Loader for the serialized mnemonic table.

Record format:
--------------
The table resource is UTF-8 text made of back-to-back records. Each record
is one header character followed by the mnemonic token:

- A header of a literal space means "previous codepoint + 1".
- Any other header character stands for its own codepoint.
- The token runs until the first character outside 0x21..0x7E, which is
  the header of the next record.

The bundled table is built once per process on first use and shared by all
codec instances.
"""

from __future__ import annotations

from collections.abc import Mapping
from importlib import resources
import logging
import os
import threading
from typing import BinaryIO

from ..const import (
    ASCII_LIMIT,
    BMP_LIMIT,
    RECORD_NEXT,
    TABLE_PACKAGE,
    TABLE_RESOURCE,
    TOKEN_FORBIDDEN,
    TOKEN_MAX,
    TOKEN_MIN,
)
from ..exceptions import TableLoadError
from .model import MnemonicTable

_LOGGER = logging.getLogger(__name__)

TableSource = str | os.PathLike | bytes | BinaryIO

_TABLE_LOCK = threading.Lock()
_default_table: MnemonicTable | None = None


def _is_token_char(char: str) -> bool:
    return TOKEN_MIN <= ord(char) <= TOKEN_MAX


def parse_table(text: str) -> MnemonicTable:
    """Parse serialized table records.

    Args:
        text: Decoded table resource.

    Returns:
        The parsed table.

    Raises:
        TableLoadError: If a record is truncated or malformed.
    """
    forward: dict[int, str] = {}
    reverse: dict[str, int] = {}
    codepoint = 0
    pos = 0
    length = len(text)

    while pos < length:
        header = text[pos]
        codepoint = codepoint + 1 if header == RECORD_NEXT else ord(header)
        if not ASCII_LIMIT <= codepoint <= BMP_LIMIT:
            raise TableLoadError(f"Codepoint {codepoint:#x} outside table range", pos)
        pos += 1

        start = pos
        while pos < length and _is_token_char(text[pos]):
            pos += 1
        token = text[start:pos]
        if not token:
            raise TableLoadError(f"Missing mnemonic for U+{codepoint:04X}", start)
        if not TOKEN_FORBIDDEN.isdisjoint(token):
            raise TableLoadError(f"Mnemonic {token!r} contains escape characters", start)

        forward[codepoint] = token
        reverse[token] = codepoint

    return MnemonicTable(forward, reverse)


def serialize_table(mapping: Mapping[int, str]) -> str:
    """Serialize a codepoint -> token mapping into table records."""
    parts: list[str] = []
    last = 0
    for codepoint in sorted(mapping):
        parts.append(RECORD_NEXT if codepoint == last + 1 else chr(codepoint))
        parts.append(mapping[codepoint])
        last = codepoint
    return "".join(parts)


def load_table(source: TableSource) -> MnemonicTable:
    """Load a mnemonic table from a path, raw bytes or a binary stream.

    Raises:
        TableLoadError: If the source cannot be read, is not UTF-8, or is
            malformed.
    """
    try:
        if isinstance(source, (bytes, bytearray)):
            data: bytes | str = bytes(source)
        elif hasattr(source, "read"):
            data = source.read()  # type: ignore[union-attr]
        else:
            with open(source, "rb") as handle:  # type: ignore[arg-type]
                data = handle.read()
        text = data if isinstance(data, str) else data.decode("utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise TableLoadError(f"Unable to load mnemonic table: {err}") from err

    table = parse_table(text)
    _LOGGER.debug("Loaded mnemonic table with %d entries", len(table))
    return table


def _load_bundled_table() -> MnemonicTable:
    try:
        data = resources.files(TABLE_PACKAGE).joinpath(TABLE_RESOURCE).read_bytes()
    except OSError as err:
        raise TableLoadError(f"Unable to read bundled {TABLE_RESOURCE}: {err}") from err
    return load_table(data)


def get_default_table() -> MnemonicTable:
    """Return the bundled table, building it on first use.

    Concurrent first callers block on a lock until the single build
    completes; every caller sees the same instance afterwards.
    """
    global _default_table  # noqa: PLW0603
    table = _default_table
    if table is None:
        with _TABLE_LOCK:
            if _default_table is None:
                _default_table = _load_bundled_table()
            table = _default_table
    return table


def clear_table_cache() -> None:
    """Forget the bundled table so the next use rebuilds it.

    Useful for testing.
    """
    global _default_table  # noqa: PLW0603
    with _TABLE_LOCK:
        _default_table = None
