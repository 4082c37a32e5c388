"""Codepoint annotators for the mnemonifier codec.

An annotator supplies an optional human-readable hint for a codepoint the
mnemonic table does not cover. The hint is embedded in the hex escape
(``[#20AC{EUR}]``) and discarded again on decoding.
"""

from __future__ import annotations

from collections.abc import Callable

from ..const import ANNOTATOR_LOOKALIKE, ANNOTATOR_NONE, ANNOTATOR_UNIDECODE
from .base import Annotator, no_annotation, sanitize_annotation
from .lookalike import LOOKALIKE_HINTS, LookalikeAnnotator
from .unidecode_annotator import UnidecodeAnnotator

_FACTORIES: dict[str, Callable[[], Annotator]] = {
    ANNOTATOR_NONE: lambda: no_annotation,
    ANNOTATOR_LOOKALIKE: LookalikeAnnotator,
    ANNOTATOR_UNIDECODE: UnidecodeAnnotator,
}


def get_annotator(name: str) -> Annotator:
    """Return the annotator registered under a configuration name.

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        factory = _FACTORIES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown annotator '{name}'") from None
    return factory()


__all__ = [
    "LOOKALIKE_HINTS",
    "Annotator",
    "LookalikeAnnotator",
    "UnidecodeAnnotator",
    "get_annotator",
    "no_annotation",
    "sanitize_annotation",
]
