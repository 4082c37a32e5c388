"""Immutable bidirectional mnemonic table."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ..const import BMP_LIMIT


class MnemonicTable:
    """Mapping between non-ASCII BMP codepoints and mnemonic tokens.

    The reverse index is built alongside the forward mapping. Both are
    exposed read-only, so a table can be shared between threads and codec
    instances without locking.
    """

    __slots__ = ("_forward", "_reverse")

    def __init__(self, forward: dict[int, str], reverse: dict[str, int]) -> None:
        self._forward = MappingProxyType(forward)
        self._reverse = MappingProxyType(reverse)

    @classmethod
    def from_mapping(cls, mapping: Mapping[int, str]) -> MnemonicTable:
        """Build a table from a codepoint -> token mapping.

        Later duplicate tokens overwrite earlier reverse entries, the same
        way the resource loader treats them.
        """
        forward: dict[int, str] = {}
        reverse: dict[str, int] = {}
        for codepoint, token in mapping.items():
            forward[codepoint] = token
            reverse[token] = codepoint
        return cls(forward, reverse)

    @property
    def forward(self) -> Mapping[int, str]:
        """Return the read-only codepoint -> token mapping."""
        return self._forward

    @property
    def reverse(self) -> Mapping[str, int]:
        """Return the read-only token -> codepoint mapping."""
        return self._reverse

    def token_for(self, codepoint: int) -> str | None:
        """Return the mnemonic token for a codepoint, if any."""
        if codepoint > BMP_LIMIT:
            return None
        return self._forward.get(codepoint)

    def codepoint_for(self, token: str) -> int | None:
        """Return the codepoint for a mnemonic token, if any."""
        return self._reverse.get(token)

    def __len__(self) -> int:
        return len(self._forward)

    def __contains__(self, codepoint: object) -> bool:
        return codepoint in self._forward

    def __iter__(self) -> Iterator[int]:
        return iter(self._forward)

    def __repr__(self) -> str:
        return f"<MnemonicTable entries={len(self._forward)}>"
