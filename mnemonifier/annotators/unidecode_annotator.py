"""Annotator using Unidecode transliterations as hints."""

from __future__ import annotations

from unidecode import unidecode

from ..const import BMP_LIMIT, INFO_CLOSE, INFO_OPEN, SURROGATE_MAX, SURROGATE_MIN

# Unidecode's marker for codepoints it has no transliteration for
_UNKNOWN = "[?]"


class UnidecodeAnnotator:
    """Annotate BMP codepoints with their Unidecode transliteration.

    ``€`` becomes ``[#20AC{EUR}]``. Astral codepoints and lone surrogates
    are never passed to Unidecode. Codepoints without a usable
    transliteration get no hint.
    """

    def __call__(self, codepoint: int) -> str | None:
        if codepoint > BMP_LIMIT or SURROGATE_MIN <= codepoint <= SURROGATE_MAX:
            return None
        info = unidecode(chr(codepoint)).strip()
        if not info or _UNKNOWN in info or INFO_OPEN in info or INFO_CLOSE in info:
            return None
        return info
