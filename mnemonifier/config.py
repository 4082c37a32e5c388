"""Configuration dataclass for the mnemonifier codec."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import voluptuous as vol

from .const import (
    ANNOTATORS,
    CONF_ANNOTATOR,
    CONF_STRICT,
    CONF_TABLE_PATH,
    DEFAULT_ANNOTATOR,
    DEFAULT_STRICT,
)

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_STRICT, default=DEFAULT_STRICT): bool,
        vol.Optional(CONF_ANNOTATOR, default=DEFAULT_ANNOTATOR): vol.All(
            str, vol.Lower, vol.In(ANNOTATORS)
        ),
        vol.Optional(CONF_TABLE_PATH): vol.Any(None, vol.Coerce(str)),
    }
)


@dataclass(frozen=True)
class MnemonifierConfig:
    """Codec configuration."""

    strict: bool = DEFAULT_STRICT
    annotator: str = DEFAULT_ANNOTATOR
    table_path: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MnemonifierConfig:
        """Build a configuration from a plain mapping.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        try:
            validated = CONFIG_SCHEMA(dict(data))
        except vol.Invalid as err:
            raise ValueError(f"Invalid mnemonifier configuration: {err}") from err

        return cls(
            strict=validated[CONF_STRICT],
            annotator=validated[CONF_ANNOTATOR],
            table_path=validated.get(CONF_TABLE_PATH),
        )
