"""Exceptions raised by the mnemonifier codec."""

from __future__ import annotations


class MnemonifierError(Exception):
    """Base class for all mnemonifier errors."""


class TableLoadError(MnemonifierError):
    """The mnemonic table source could not be read or parsed.

    Raised on first construction of a codec; there is no usable codec
    without a valid table, so retrying with the same source is pointless.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class DecodeError(MnemonifierError, ValueError):
    """Strict decoding rejected the input.

    Attributes:
        text: The complete input that failed to decode.
        position: Index of the first grammar violation.
        reason: Short description of the violation.
    """

    def __init__(self, text: str, position: int, reason: str) -> None:
        super().__init__(f"{reason} at position {position}: {text!r}")
        self.text = text
        self.position = position
        self.reason = reason
