"""Constants for the mnemonifier codec."""

from __future__ import annotations

# Escape syntax
ESCAPE_OPEN = "["
ESCAPE_CLOSE = "]"
ESCAPE_HEX = "#"
INFO_OPEN = "{"
INFO_CLOSE = "}"
ESCAPED_OPEN = "[[]"
ESCAPED_CLOSE = "[]]"
INFO_TERMINATOR = "}]"

# Codepoint ranges
ASCII_LIMIT = 0x80
BMP_LIMIT = 0xFFFF
MAX_CODEPOINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF

# Mnemonic tokens use printable ASCII (0x21..0x7E) except the escape
# metacharacters.
TOKEN_MIN = 0x21
TOKEN_MAX = 0x7E
TOKEN_FORBIDDEN: frozenset[str] = frozenset("[]#{}")

HEX_DIGITS: frozenset[str] = frozenset("0123456789ABCDEFabcdef")

# Record header meaning "previous codepoint + 1" in the table resource
RECORD_NEXT = " "

# Bundled resource
TABLE_PACKAGE = "mnemonifier.table"
TABLE_RESOURCE = "mnemonics.dat"

# Configuration keys
CONF_STRICT = "strict"
CONF_ANNOTATOR = "annotator"
CONF_TABLE_PATH = "table_path"

# Annotator names
ANNOTATOR_NONE = "none"
ANNOTATOR_LOOKALIKE = "lookalike"
ANNOTATOR_UNIDECODE = "unidecode"
ANNOTATORS: tuple[str, ...] = (
    ANNOTATOR_NONE,
    ANNOTATOR_LOOKALIKE,
    ANNOTATOR_UNIDECODE,
)

# Default values
DEFAULT_STRICT = False
DEFAULT_ANNOTATOR = ANNOTATOR_NONE
