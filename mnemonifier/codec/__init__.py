"""Encoder, decoder and codec object."""

from __future__ import annotations

from .decoder import decode
from .encoder import encode
from .mnemonifier import Mnemonifier

__all__ = ["Mnemonifier", "decode", "encode"]
