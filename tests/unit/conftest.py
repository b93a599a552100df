"""Unit test fixtures for tablefmt."""

import pytest

from tablefmt import Table
from tablefmt.demo import DataFactory


@pytest.fixture
def id_name_table() -> Table:
    """Two-column table: right-aligned ID, left-aligned NAME."""
    return Table.builder().columns("| ID | NAME |").widths(4, 6).alignments("R").build()


@pytest.fixture
def ab_table() -> Table:
    """Two three-wide columns with one-space margins."""
    return Table.builder().columns("| A | B |").widths(3, 3).build()


@pytest.fixture
def showcase_table() -> Table:
    """The customer-style table used for the marker gallery."""
    return (
        Table.builder()
        .columns("| ID | NAME | FIRSTNAME | CONTACT |")
        .widths(6, 16, 16, 24)
        .alignments("R")
        .build()
    )


@pytest.fixture
def factory() -> DataFactory:
    return DataFactory()
