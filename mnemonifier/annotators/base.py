"""Annotator interface for codepoints without a mnemonic."""

from __future__ import annotations

import logging
from typing import Protocol

from ..const import INFO_CLOSE, INFO_OPEN

_LOGGER = logging.getLogger(__name__)

_FORBIDDEN_IN_INFO = frozenset((INFO_OPEN, INFO_CLOSE, "[", "]"))


class Annotator(Protocol):
    """Callable returning a short ASCII hint for a codepoint, or None."""

    def __call__(self, codepoint: int) -> str | None:
        """Return a hint for the codepoint."""


def no_annotation(codepoint: int) -> str | None:  # noqa: ARG001
    """Default annotator that never supplies a hint."""
    return None


def sanitize_annotation(info: str | None) -> str | None:
    """Validate an annotator hint before it is embedded in an escape.

    Hints must be non-empty printable ASCII without braces or square
    brackets. Anything else is dropped so the escape stays parseable and
    the output stays ASCII.

    Args:
        info: Hint returned by an annotator.

    Returns:
        The hint, or None if it is missing or unusable.
    """
    if not info:
        return None
    for char in info:
        if char in _FORBIDDEN_IN_INFO or not " " <= char <= "~":
            _LOGGER.warning("Dropping annotation %r (contains %r)", info, char)
            return None
    return info
