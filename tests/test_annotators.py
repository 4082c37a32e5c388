"""Tests for codepoint annotators."""

import logging

import pytest

from mnemonifier import (
    LookalikeAnnotator,
    UnidecodeAnnotator,
    get_annotator,
    no_annotation,
    sanitize_annotation,
)
from mnemonifier.annotators import LOOKALIKE_HINTS


class TestSanitizeAnnotation:
    """Tests for sanitize_annotation."""

    def test_valid(self) -> None:
        assert sanitize_annotation("EUR") == "EUR"
        assert sanitize_annotation(":8364:") == ":8364:"
        assert sanitize_annotation("Zhong Wen") == "Zhong Wen"

    def test_missing(self) -> None:
        assert sanitize_annotation(None) is None
        assert sanitize_annotation("") is None

    @pytest.mark.parametrize("info", ["{x", "x}", "a]", "[a", "ä", "tab\there", "\x7f"])
    def test_rejected(self, info) -> None:  # type: ignore[no-untyped-def]
        assert sanitize_annotation(info) is None

    def test_rejected_logged_as_warning(self, caplog) -> None:  # type: ignore[no-untyped-def]
        with caplog.at_level(logging.WARNING, logger="mnemonifier.annotators.base"):
            assert sanitize_annotation("{x") is None
        assert [record.levelno for record in caplog.records] == [logging.WARNING]
        assert "Dropping annotation" in caplog.text


class TestNoAnnotation:
    def test_always_none(self) -> None:
        assert no_annotation(0x20AC) is None
        assert no_annotation(0x1F600) is None


class TestLookalikeAnnotator:
    """Tests for LookalikeAnnotator."""

    def test_known(self) -> None:
        annotator = LookalikeAnnotator()
        assert annotator(0x20AC) == "EUR"
        assert annotator(0x1F642) == ":)"

    def test_unknown(self) -> None:
        assert LookalikeAnnotator()(0x4E2D) is None

    def test_custom_hints(self) -> None:
        assert LookalikeAnnotator({0x2603: "snowman"})(0x2603) == "snowman"
        assert LookalikeAnnotator({})(0x20AC) is None

    def test_hints_are_usable(self) -> None:
        for codepoint, hint in LOOKALIKE_HINTS.items():
            assert sanitize_annotation(hint) == hint, hex(codepoint)


class TestUnidecodeAnnotator:
    """Tests for UnidecodeAnnotator."""

    def test_euro(self) -> None:
        assert UnidecodeAnnotator()(0x20AC) == "EUR"

    def test_han_stripped(self) -> None:
        assert UnidecodeAnnotator()(0x4E2D) == "Zhong"

    def test_astral_ignored(self) -> None:
        assert UnidecodeAnnotator()(0x1D11E) is None

    @pytest.mark.filterwarnings("error")
    @pytest.mark.parametrize("codepoint", [0xD800, 0xD834, 0xDD1E, 0xDFFF])
    def test_surrogates_ignored(self, codepoint) -> None:  # type: ignore[no-untyped-def]
        assert UnidecodeAnnotator()(codepoint) is None

    def test_unknown_ignored(self) -> None:
        # private use area has no transliteration
        assert UnidecodeAnnotator()(0xE000) is None


class TestGetAnnotator:
    """Tests for get_annotator."""

    def test_none(self) -> None:
        assert get_annotator("none") is no_annotation

    def test_by_name(self) -> None:
        assert isinstance(get_annotator("lookalike"), LookalikeAnnotator)
        assert isinstance(get_annotator("Unidecode"), UnidecodeAnnotator)

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            get_annotator("transliterate")
