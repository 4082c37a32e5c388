"""Decoder turning mnemonic form back into Unicode text.

Escapes recognized at an unconsumed ``[``:

- ``[[]`` and ``[]]``: literal brackets
- ``[#HEX]`` and ``[#HEX{info}]``: a codepoint in hex; ``info`` runs to the
  first ``}]`` and is discarded
- ``[token]``: a codepoint from the mnemonic table

Lax decoding copies anything else through unchanged. Strict decoding fails
on the first stray ``]``, unmatched ``[`` or non-canonical hex escape.
"""

from __future__ import annotations

import re

from ..const import (
    ESCAPE_CLOSE,
    ESCAPE_HEX,
    ESCAPE_OPEN,
    INFO_OPEN,
    INFO_TERMINATOR,
    MAX_CODEPOINT,
)
from ..exceptions import DecodeError
from ..table import MnemonicTable

_HEX_ESCAPE = re.compile(r"\[#([0-9A-Fa-f]+)([\]{])")


def _match_hex(text: str, offset: int, strict: bool) -> tuple[str, int] | None:
    match = _HEX_ESCAPE.match(text, offset)
    if match is None:
        return None

    end = match.end()
    if match.group(2) == INFO_OPEN:
        close = text.find(INFO_TERMINATOR, end)
        if close == -1:
            return None
        end = close + len(INFO_TERMINATOR)

    digits = match.group(1)
    codepoint = int(digits, 16)
    if codepoint > MAX_CODEPOINT:
        return None
    if strict and digits != f"{codepoint:X}":
        raise DecodeError(text, offset, "Non-canonical hex escape")
    return chr(codepoint), end


def _match_escape(
    text: str, offset: int, table: MnemonicTable, strict: bool
) -> tuple[str, int] | None:
    """Match one escape starting at ``text[offset] == '['``.

    Returns:
        The decoded character and the offset just past the escape, or None
        if no valid escape starts here.
    """
    marker = text[offset + 1 : offset + 2]

    if marker == ESCAPE_HEX:
        return _match_hex(text, offset, strict)

    if marker in (ESCAPE_OPEN, ESCAPE_CLOSE):
        if text.startswith(ESCAPE_CLOSE, offset + 2):
            return marker, offset + 3
        return None

    end = text.find(ESCAPE_CLOSE, offset + 1)
    if end == -1:
        return None
    codepoint = table.codepoint_for(text[offset + 1 : end])
    if codepoint is None:
        return None
    return chr(codepoint), end + 1


def _check_literal(text: str, start: int, end: int) -> None:
    stray = text.find(ESCAPE_CLOSE, start, end)
    if stray != -1:
        raise DecodeError(text, stray, "Unescaped ']'")


def decode(text: str, table: MnemonicTable, strict: bool = False) -> str:
    """Decode mnemonic form back to the original text.

    Args:
        text: Mnemonified text.
        table: Mnemonic table to resolve tokens with.
        strict: Reject malformed input instead of passing it through.

    Returns:
        The decoded text.

    Raises:
        DecodeError: If ``strict`` is set and the input is malformed.
    """
    offset = text.find(ESCAPE_OPEN)
    if offset == -1:
        if strict:
            _check_literal(text, 0, len(text))
        return text

    result: list[str] = []
    parsed = 0
    while offset != -1:
        if strict:
            _check_literal(text, parsed, offset)
        result.append(text[parsed:offset])

        match = _match_escape(text, offset, table, strict)
        if match is None:
            if strict:
                raise DecodeError(text, offset, "Invalid escape")
            result.append(ESCAPE_OPEN)
            parsed = offset + 1
        else:
            decoded, parsed = match
            result.append(decoded)

        offset = text.find(ESCAPE_OPEN, parsed)

    if strict:
        _check_literal(text, parsed, len(text))
    result.append(text[parsed:])
    return "".join(result)
