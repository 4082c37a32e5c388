"""Codec object bundling a table, an annotator and decoding defaults."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..annotators import Annotator, get_annotator, no_annotation
from ..const import DEFAULT_STRICT
from ..exceptions import DecodeError
from ..table import MnemonicTable, get_default_table, load_table
from .decoder import decode
from .encoder import encode

if TYPE_CHECKING:
    from ..config import MnemonifierConfig

_LOGGER = logging.getLogger(__name__)


class Mnemonifier:
    """Convert Unicode text to human-readable ASCII and back.

    ``à`` becomes ``[a!]``, ``Ǹ`` becomes ``[N|!]`` and anything without a
    mnemonic becomes a hex escape such as ``[#20AC]``. Square brackets in
    the original are written as ``[[]`` and ``[]]`` so every encoded string
    decodes back to exactly the original.

    Instances hold no mutable state; one codec can be shared between
    threads.
    """

    def __init__(
        self,
        table: MnemonicTable | None = None,
        annotator: Annotator | None = None,
        strict: bool = DEFAULT_STRICT,
    ) -> None:
        """Initialize the codec.

        Args:
            table: Mnemonic table; the bundled table is used if omitted.
            annotator: Hint provider for codepoints without a mnemonic.
            strict: Default decoding mode for ``unmnemonify``.

        Raises:
            TableLoadError: If the bundled table cannot be loaded.
        """
        self._table = table if table is not None else get_default_table()
        self._annotator = annotator if annotator is not None else no_annotation
        self._strict = strict

    @classmethod
    def from_config(cls, config: MnemonifierConfig) -> Mnemonifier:
        """Create a codec from a configuration object."""
        table = load_table(config.table_path) if config.table_path else None
        _LOGGER.debug(
            "Creating codec (annotator=%s, strict=%s, table=%s)",
            config.annotator,
            config.strict,
            config.table_path or "bundled",
        )
        return cls(
            table=table,
            annotator=get_annotator(config.annotator),
            strict=config.strict,
        )

    @property
    def table(self) -> MnemonicTable:
        """Return the mnemonic table."""
        return self._table

    @property
    def strict(self) -> bool:
        """Return the default decoding mode."""
        return self._strict

    def mnemonify(self, text: str) -> str:
        """Convert any Unicode string into mnemonic form."""
        return encode(text, self._table, self._annotator)

    def unmnemonify(self, text: str, strict: bool | None = None) -> str:
        """Convert a mnemonified string back to the original.

        Args:
            text: Mnemonified string.
            strict: Override the codec's default decoding mode.

        Raises:
            DecodeError: If strict decoding is used and the input is invalid.
        """
        if strict is None:
            strict = self._strict
        return decode(text, self._table, strict)

    def is_mnemonified(self, text: str) -> bool:
        """Return True if the text passes strict decoding."""
        try:
            decode(text, self._table, strict=True)
        except DecodeError:
            return False
        return True

    encode = mnemonify
    decode = unmnemonify

    def __repr__(self) -> str:
        return f"<Mnemonifier table={self._table!r} strict={self._strict}>"
