from collections.abc import Generator

import pytest

from mnemonifier import Mnemonifier, MnemonicTable, clear_table_cache, get_default_table


@pytest.fixture
def table() -> MnemonicTable:
    return get_default_table()


@pytest.fixture
def codec(table: MnemonicTable) -> Mnemonifier:
    return Mnemonifier(table=table)


@pytest.fixture
def small_table() -> MnemonicTable:
    """Tiny injected table independent of the bundled resource."""
    return MnemonicTable.from_mapping({0x00E4: "a:", 0x00DF: "ss", 0x2260: "!="})


@pytest.fixture
def fresh_table_cache() -> Generator[None, None, None]:
    """Drop the cached bundled table before and after the test."""
    clear_table_cache()
    yield
    clear_table_cache()
