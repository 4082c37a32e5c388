"""Tests for the offline mnemonic table generator."""

import pytest

from mnemonifier import Mnemonifier, MnemonifierConfig, load_table
from tools.generate_mnemonics import (
    add_decompositions,
    build_table,
    main,
    parse_rfc1345,
    validate_mnemonics,
    write_table,
)

RFC_EXCERPT = [
    "3.  CHARACTER MNEMONIC TABLE",
    "",
    " SP     0020    SPACE",
    " Nb     0023    NUMBER SIGN",
    " A!     00c0    LATIN CAPITAL LETTER A WITH GRAVE",
    "                continuation of the previous description",
    " a:     00e4    LATIN SMALL LETTER A WITH DIAERESIS",
    "",
    "Simonsen                                                      [Page 20]",
    "\f",
    "RFC 1345        Character Mnemonics & Character Sets      June 1992",
    "",
    " E=     0415    CYRILLIC CAPITAL LETTER IE",
    "        e000    indicates unfinished (Mnemonic)",
    " 1000RCD        2180    ROMAN NUMERAL ONE THOUSAND C D",
    " n-     1e4b    LATIN SMALL LETTER N WITH CIRCUMFLEX BELOW",
    "4.  CHARSETS",
    " XX     00ff    AFTER THE TABLE",
]


class TestParseRfc1345:
    """Tests for parse_rfc1345."""

    def test_parses_table_section(self) -> None:
        assert parse_rfc1345(RFC_EXCERPT) == {
            0x00C0: "A!",
            0x00E4: "a:",
            0x0415: "E=",
            0x2180: "1000RCD",
            0x1E4B: "n->",
            0x1E69: "s.-.",
        }

    def test_unparseable_line(self) -> None:
        with pytest.raises(ValueError):
            parse_rfc1345([" SP     0020    SPACE", "garbage", "4.  CHARSETS"])


class TestAddDecompositions:
    """Tests for add_decompositions."""

    def test_combining_marks(self) -> None:
        result = add_decompositions({})
        assert result[0x0301] == "|'"
        assert result[0x0345] == "|--,"

    def test_decomposed_characters(self) -> None:
        result = add_decompositions({0x00C0: "A!", 0x0415: "E="})
        assert result[0x00C0] == "A!"
        assert result[0x00C1] == "A|'"
        assert result[0x0400] == "E=|!"
        assert result[0x01F8] == "N|!"

    def test_multiple_marks(self) -> None:
        assert add_decompositions({})[0x1E08] == "C|,|'"

    def test_ascii_removed(self) -> None:
        result = add_decompositions({})
        assert all(codepoint >= 0x80 for codepoint in result)

    def test_unmapped_mark_skipped(self) -> None:
        # U+0104 decomposes to A + COMBINING OGONEK, which has no mnemonic
        assert 0x0104 not in add_decompositions({})

    def test_singleton_decomposition_skipped(self) -> None:
        # U+212B ANGSTROM SIGN normalizes to U+00C5
        assert 0x212B not in add_decompositions({0x00C5: "AA"})


class TestValidateMnemonics:
    """Tests for validate_mnemonics."""

    def test_valid(self) -> None:
        validate_mnemonics({0x00C0: "A!", 0x00C1: "A'"})

    @pytest.mark.parametrize(
        "mnemonics",
        [
            {0x00C0: "A!", 0x00C1: "A!"},
            {0x00C0: "A#"},
            {0x00C0: "A]"},
            {0x00C0: "A {"},
            {0x00C0: ""},
            {0x0378: "xx"},
            {0x0041: "A"},
        ],
    )
    def test_invalid(self, mnemonics) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(ValueError):
            validate_mnemonics(mnemonics)


class TestWriteTable:
    """Tests for building and writing the resource."""

    def test_build_and_write(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        mnemonics = build_table(RFC_EXCERPT)
        output = tmp_path / "mnemonics.dat"
        write_table(mnemonics, output)

        table = load_table(output)
        assert dict(table.forward) == mnemonics
        assert table.codepoint_for("E=|!") == 0x0400

    def test_main(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        rfc = tmp_path / "rfc1345.txt"
        rfc.write_text("\n".join(RFC_EXCERPT), encoding="ascii")
        output = tmp_path / "out.dat"

        assert main([str(rfc), "-o", str(output)]) == 0
        assert load_table(output).token_for(0x00E4) == "a:"

    def test_main_bad_input(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        rfc = tmp_path / "rfc1345.txt"
        rfc.write_text(" SP     0020    SPACE\nnot a table line\n", encoding="ascii")

        assert main([str(rfc), "-o", str(tmp_path / "out.dat")]) == 1


class TestGeneratedTableInCodec:
    """A generated table carries the long RFC 1345 mnemonics into the codec."""

    def test_long_mnemonics(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        output = tmp_path / "mnemonics.dat"
        write_table(build_table(RFC_EXCERPT), output)
        codec = Mnemonifier(table=load_table(output))

        assert codec.table.token_for(0x2180) == "1000RCD"
        assert codec.mnemonify("ↀ ṩ") == "[1000RCD] [s.-.]"
        assert codec.unmnemonify("[1000RCD] [s.-.]", strict=True) == "ↀ ṩ"

    def test_loaded_through_config(self, tmp_path) -> None:  # type: ignore[no-untyped-def]
        output = tmp_path / "mnemonics.dat"
        write_table(build_table(RFC_EXCERPT), output)
        codec = Mnemonifier.from_config(MnemonifierConfig(table_path=str(output)))

        assert codec.unmnemonify("[1000RCD]", strict=True) == "ↀ"
