#!/usr/bin/env python3
"""
Generate mnemonifier/table/mnemonics.dat from RFC 1345.

Builds the mnemonic table in three steps:
1. The RFC 1345 character mnemonics for codepoints 0x80-0xFFFF, with the two
   published errata applied.
2. Mnemonics for combining marks, prefixed with "|" (U+0301 -> "|'").
3. Mnemonics for precomposed characters whose canonical decomposition is a
   mapped base character plus combining marks (U+01F8 -> "N|!").

The result is validated (token alphabet, assigned codepoints, unique tokens),
written, and read back to check the round trip.

Usage: generate_mnemonics.py rfc1345.txt [-o mnemonics.dat]
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable
import logging
from pathlib import Path
import re
import sys
import unicodedata

from mnemonifier.const import ASCII_LIMIT, BMP_LIMIT, TOKEN_FORBIDDEN
from mnemonifier.table import parse_table, serialize_table

_LOGGER = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent / "mnemonifier" / "table" / "mnemonics.dat"

# Mnemonics for combining marks, used as "|" suffixes in decompositions
COMBINING_MNEMONICS: dict[int, str] = {
    0x0300: "!",  # COMBINING GRAVE ACCENT
    0x0301: "'",  # COMBINING ACUTE ACCENT
    0x0303: "?",  # COMBINING TILDE
    0x0304: "-",  # COMBINING MACRON
    0x0306: "(",  # COMBINING BREVE
    0x0307: ".",  # COMBINING DOT ABOVE
    0x0308: ":",  # COMBINING DIAERESIS
    0x030B: '"',  # COMBINING DOUBLE ACUTE ACCENT
    0x030C: "<",  # COMBINING CARON
    0x030F: "!!",  # COMBINING DOUBLE GRAVE ACCENT
    0x0311: ")",  # COMBINING INVERTED BREVE
    0x0313: "=,",  # COMBINING COMMA ABOVE
    0x0314: "==,",  # COMBINING REVERSED COMMA ABOVE
    0x0326: "-,",  # COMBINING COMMA BELOW
    0x0327: ",",  # COMBINING CEDILLA
    0x0338: "/",  # COMBINING LONG SOLIDUS OVERLAY
    0x0342: "=?",  # COMBINING GREEK PERISPOMENI
    0x0345: "--,",  # COMBINING GREEK YPOGEGRAMMENI
}

# Corrections from the RFC editor errata (eid 2683)
ERRATA: dict[int, str] = {
    0x1E4B: "n->",
    0x1E69: "s.-.",
}

_TABLE_START = " SP     0020    SPACE"
_TABLE_END = "4.  CHARSETS"
_PAGE_FOOTER = "Simonsen            "
_UNFINISHED_NOTE = "        e000    indicates unfinished (Mnemonic)"
# The only mnemonic longer than six characters breaks the column layout
_LONG_ENTRY = " 1000RCD        2180    ROMAN NUMERAL ONE THOUSAND C D"
_LINE = re.compile(r" ([!-~][ -~]{5}) ([0-9a-f]{4})    [A-Za-z(/:)0-9 -]*")


def parse_rfc1345(lines: Iterable[str]) -> dict[int, str]:
    """Parse the character mnemonic table of RFC 1345.

    Args:
        lines: Lines of the RFC text, without line terminators.

    Returns:
        Mapping of non-ASCII codepoints to mnemonics.

    Raises:
        ValueError: If a table line cannot be parsed.
    """
    mnemonics: dict[int, str] = {}
    it = iter(lines)

    for line in it:
        if line == _TABLE_START:
            break

    for line in it:
        if line == _TABLE_END:
            break
        if not line or line.startswith(" " * 16) or line == _UNFINISHED_NOTE:
            continue
        if line.startswith(_PAGE_FOOTER):
            # footer, form feed, page header
            next(it, None)
            next(it, None)
            continue
        if line == _LONG_ENTRY:
            mnemonics[0x2180] = "1000RCD"
            continue

        match = _LINE.fullmatch(line)
        if match is None:
            raise ValueError(f"Unparseable RFC 1345 line: {line!r}")
        codepoint = int(match.group(2), 16)
        if codepoint >= ASCII_LIMIT:
            mnemonics[codepoint] = match.group(1).strip()

    mnemonics.update(ERRATA)
    return mnemonics


def add_decompositions(mnemonics: dict[int, str]) -> dict[int, str]:
    """Add mnemonics for combining marks and decomposable characters.

    Returns:
        A new mapping; existing mnemonics always take precedence.
    """
    # ASCII maps to itself while building so "A" + U+0300 becomes "A|!"
    result: dict[int, str] = {cp: chr(cp) for cp in range(ASCII_LIMIT)}
    result.update(mnemonics)

    for codepoint in range(BMP_LIMIT + 1):
        if codepoint in result or 0xD800 <= codepoint <= 0xDFFF:
            continue
        if codepoint in COMBINING_MNEMONICS:
            result[codepoint] = "|" + COMBINING_MNEMONICS[codepoint]
            continue

        char = chr(codepoint)
        decomposed = unicodedata.normalize("NFD", char)
        if unicodedata.normalize("NFC", decomposed) != char:
            continue
        base = result.get(ord(decomposed[0]))
        if base is None:
            continue
        marks = [COMBINING_MNEMONICS.get(ord(mark)) for mark in decomposed[1:]]
        if None in marks:
            continue
        result[codepoint] = base + "".join("|" + mark for mark in marks)  # type: ignore[operator]

    for codepoint in range(ASCII_LIMIT):
        del result[codepoint]
    return result


def validate_mnemonics(mnemonics: dict[int, str]) -> None:
    """Check the invariants the codec relies on.

    Raises:
        ValueError: On unassigned codepoints, invalid characters or
            duplicate mnemonics.
    """
    seen: dict[str, int] = {}
    for codepoint, mnemonic in sorted(mnemonics.items()):
        if not ASCII_LIMIT <= codepoint <= BMP_LIMIT:
            raise ValueError(f"Codepoint {codepoint:#x} outside table range")
        if unicodedata.category(chr(codepoint)) == "Cn":
            raise ValueError(f"Codepoint U+{codepoint:04X} is unassigned")
        if not re.fullmatch(r"[!-~]+", mnemonic) or not TOKEN_FORBIDDEN.isdisjoint(mnemonic):
            raise ValueError(f"Invalid mnemonic {mnemonic!r} for U+{codepoint:04X}")
        if mnemonic in seen:
            raise ValueError(
                f"Mnemonic {mnemonic!r} used for U+{seen[mnemonic]:04X} and U+{codepoint:04X}"
            )
        seen[mnemonic] = codepoint


def build_table(lines: Iterable[str]) -> dict[int, str]:
    """Build and validate the complete mnemonic mapping."""
    mnemonics = add_decompositions(parse_rfc1345(lines))
    validate_mnemonics(mnemonics)
    return mnemonics


def write_table(mnemonics: dict[int, str], output: Path) -> None:
    """Write the table resource and verify it reads back identically."""
    output.write_bytes(serialize_table(mnemonics).encode("utf-8"))
    roundtrip = parse_table(output.read_bytes().decode("utf-8"))
    if dict(roundtrip.forward) != mnemonics:
        raise ValueError(f"{output} does not read back identically")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("rfc", type=Path, help="path to rfc1345.txt")
    parser.add_argument("-o", "--output", type=Path, default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    # Form feeds separate pages and must stay inside their own line
    text = args.rfc.read_text(encoding="ascii", errors="replace")
    lines = text.replace("\r\n", "\n").split("\n")
    try:
        mnemonics = build_table(lines)
        write_table(mnemonics, args.output)
    except ValueError as err:
        _LOGGER.error("%s", err)
        return 1

    _LOGGER.info("Wrote %d mnemonics to %s", len(mnemonics), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
