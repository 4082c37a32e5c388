"""Look-alike hints for codepoints the mnemonic table does not cover.

This module provides the LOOKALIKE_HINTS dictionary which maps codepoints to
short ASCII look-alikes. The hints are ONLY consulted for codepoints without
a mnemonic, so they end up inside hex escapes (``[#20AC{EUR}]``) and never
replace the mnemonic form.
"""

from __future__ import annotations

LOOKALIKE_HINTS: dict[int, str] = {
    # ==========================================================================
    # CURRENCY
    # Signs added to Unicode after RFC 1345 was published.
    # ==========================================================================
    0x20A0: "ECU",  # EURO-CURRENCY SIGN
    0x20AC: "EUR",  # EURO SIGN
    0x20AD: "LAK",  # KIP SIGN
    0x20AE: "MNT",  # TUGRIK SIGN
    0x20B1: "PHP",  # PESO SIGN
    0x20B2: "PYG",  # GUARANI SIGN
    0x20B4: "UAH",  # HRYVNIA SIGN
    0x20B5: "GHS",  # CEDI SIGN
    0x20B8: "KZT",  # TENGE SIGN
    0x20B9: "INR",  # INDIAN RUPEE SIGN
    0x20BA: "TRY",  # TURKISH LIRA SIGN
    0x20BC: "AZN",  # MANAT SIGN
    0x20BD: "RUB",  # RUBLE SIGN
    0x20BE: "GEL",  # LARI SIGN
    0x20BF: "BTC",  # BITCOIN SIGN
    # ==========================================================================
    # PUNCTUATION
    # ==========================================================================
    0x2053: "~",  # SWUNG DASH
    0x2E3A: "----",  # TWO-EM DASH
    0x2E3B: "------",  # THREE-EM DASH
    0xFFFD: "?",  # REPLACEMENT CHARACTER
    # ==========================================================================
    # EMOJI (supplementary planes)
    # ==========================================================================
    0x1F600: ":D",  # GRINNING FACE
    0x1F609: ";)",  # WINKING FACE
    0x1F610: ":|",  # NEUTRAL FACE
    0x1F61B: ":P",  # FACE WITH STUCK-OUT TONGUE
    0x1F622: ":'(",  # CRYING FACE
    0x1F642: ":)",  # SLIGHTLY SMILING FACE
    0x1F641: ":(",  # SLIGHTLY FROWNING FACE
    0x1F44D: "+1",  # THUMBS UP SIGN
    0x1F44E: "-1",  # THUMBS DOWN SIGN
}


class LookalikeAnnotator:
    """Annotator backed by a static look-alike map."""

    def __init__(self, hints: dict[int, str] | None = None) -> None:
        self._hints = LOOKALIKE_HINTS if hints is None else hints

    def __call__(self, codepoint: int) -> str | None:
        return self._hints.get(codepoint)
