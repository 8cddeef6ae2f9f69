"""Abstract report document handed to a render sink."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Cell:
    """Single table cell.

    ``anchor`` is the id of the cell itself, ``href`` the fragment it links to.
    """

    data: str
    anchor: str | None = None
    href: str | None = None
    header: bool = False


type Row = Sequence[Cell]


@dataclass(frozen=True, kw_only=True)
class Heading:
    """Section heading, optionally carrying an anchor id and a link."""

    level: int
    text: str
    anchor: str | None = None
    href: str | None = None


@dataclass(frozen=True, kw_only=True)
class Table:
    """Table made of rows of cells, header rows first."""

    rows: Sequence[Row]


@dataclass(frozen=True, kw_only=True)
class RawText:
    """Free text paragraph."""

    text: str


type Block = Heading | Table | RawText


@dataclass(frozen=True, kw_only=True)
class Report:
    """Ordered sequence of blocks making up the consolidated report."""

    blocks: Sequence[Block]
    suite_count: int = 0

    @property
    def is_empty(self) -> bool:
        """Whether no suite contributed to the report."""
        return self.suite_count == 0
