"""Encoder turning Unicode text into mnemonic form."""

from __future__ import annotations

from ..annotators import Annotator, no_annotation, sanitize_annotation
from ..const import ASCII_LIMIT, ESCAPE_CLOSE, ESCAPE_OPEN, ESCAPED_CLOSE, ESCAPED_OPEN
from ..table import MnemonicTable


def _hex_escape(codepoint: int, annotator: Annotator) -> str:
    info = sanitize_annotation(annotator(codepoint))
    if info is None:
        return f"[#{codepoint:X}]"
    return f"[#{codepoint:X}{{{info}}}]"


def encode(
    text: str,
    table: MnemonicTable,
    annotator: Annotator = no_annotation,
) -> str:
    """Encode text into ASCII-only mnemonic form.

    Per codepoint:
    1. ``[`` and ``]`` become ``[[]`` and ``[]]``
    2. Other ASCII is copied unchanged
    3. Codepoints with a mnemonic become ``[token]``
    4. Everything else becomes ``[#HEX]``, or ``[#HEX{hint}]`` when the
       annotator supplies a usable hint

    Lone surrogates are ordinary codepoints here and take the hex form.

    Args:
        text: Text to encode.
        table: Mnemonic table to look tokens up in.
        annotator: Hint provider for codepoints without a mnemonic.

    Returns:
        The mnemonified text. Encoding never fails.
    """
    if text.isascii() and ESCAPE_OPEN not in text and ESCAPE_CLOSE not in text:
        return text

    result: list[str] = []
    for char in text:
        if char == ESCAPE_OPEN:
            result.append(ESCAPED_OPEN)
            continue
        if char == ESCAPE_CLOSE:
            result.append(ESCAPED_CLOSE)
            continue

        codepoint = ord(char)
        if codepoint < ASCII_LIMIT:
            result.append(char)
            continue

        token = table.token_for(codepoint)
        if token is not None:
            result.append(f"[{token}]")
        else:
            result.append(_hex_escape(codepoint, annotator))

    return "".join(result)
