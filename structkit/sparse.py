"""Sparse integer matrices linked by row and by column."""

from __future__ import annotations

import argparse
import bisect
import sys
from dataclasses import dataclass
from itertools import product
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union


@dataclass(frozen=True)
class SparseEntry:
    """A non-zero value at a row and column."""

    row: int
    column: int
    value: int


class SparseMatrix:
    """A matrix that stores only its non-zero entries."""

    def __init__(self, rows: int, columns: int, entries: Iterable[SparseEntry] = ()) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.columns = columns
        self._by_row: list[list[SparseEntry]] = [[] for _ in range(rows)]
        self._by_column: list[list[SparseEntry]] = [[] for _ in range(columns)]
        self._positions: set[tuple[int, int]] = set()
        for entry in entries:
            self._link(entry)

    def _link(self, entry: SparseEntry) -> None:
        if not (0 <= entry.row < self.rows and 0 <= entry.column < self.columns):
            raise ValueError(
                f"entry ({entry.row}, {entry.column}) lies outside "
                f"a {self.rows}x{self.columns} matrix"
            )
        if entry.value == 0:
            return
        position = (entry.row, entry.column)
        if position in self._positions:
            raise ValueError(f"duplicate entry at {position}")
        self._positions.add(position)
        bisect.insort(self._by_row[entry.row], entry, key=lambda e: e.column)
        bisect.insort(self._by_column[entry.column], entry, key=lambda e: e.row)

    def __len__(self) -> int:
        return len(self._positions)

    def row_entries(self, row: int) -> list[SparseEntry]:
        """Return the entries of one row, ordered by column."""
        if not 0 <= row < self.rows:
            raise IndexError(f"row {row} out of range")
        return list(self._by_row[row])

    def column_entries(self, column: int) -> list[SparseEntry]:
        """Return the entries of one column, ordered by row."""
        if not 0 <= column < self.columns:
            raise IndexError(f"column {column} out of range")
        return list(self._by_column[column])

    def entries_by_column(self) -> Iterator[SparseEntry]:
        """Yield every entry, column by column, each column top to bottom."""
        for column in self._by_column:
            yield from column

    def format(self) -> str:
        """Render the entries as ``(column, row, value),`` lines."""
        return "\n".join(
            f"({entry.column}, {entry.row}, {entry.value}),"
            for entry in self.entries_by_column()
        )


def parse_sparse(text: str) -> SparseMatrix:
    """Parse a row count, a column count and then every value in row order."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError("matrix data holds a value that is not an integer") from exc
    if len(numbers) < 2:
        raise ValueError("matrix data lacks its dimensions")
    rows, columns, *values = numbers
    if rows < 0 or columns < 0:
        raise ValueError("matrix dimensions must not be negative")
    if len(values) < rows * columns:
        raise ValueError(
            f"expected {rows * columns} values, found {len(values)}"
        )
    cells = product(range(rows), range(columns))
    entries = (
        SparseEntry(row, column, value)
        for (row, column), value in zip(cells, values)
        if value != 0
    )
    return SparseMatrix(rows, columns, entries)


def load_sparse(path: Union[str, Path]) -> SparseMatrix:
    """Read a sparse matrix from a text file."""
    return parse_sparse(Path(path).read_text())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load a matrix file and print its non-zero entries."""
    parser = argparse.ArgumentParser(
        prog="structkit-sparse", description="Display a sparse matrix."
    )
    parser.add_argument("path", help="file holding the matrix")
    args = parser.parse_args(argv)
    try:
        matrix = load_sparse(args.path)
    except OSError as exc:
        print(f"Unable to open the file: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if len(matrix):
        print(matrix.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())