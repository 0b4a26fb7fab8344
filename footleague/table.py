"""The result table that queries fill and that can be edited and saved."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator


class ResultTable:
    """Rows of text cells; the first row fixes the number of columns."""

    def __init__(self, rows: Iterable[Iterable[object]] = ()) -> None:
        self._rows: list[list[str]] = []
        self._columns = 0
        self.update(rows)

    @property
    def column_count(self) -> int:
        return self._columns

    @property
    def rows(self) -> list[list[str]]:
        return [list(row) for row in self._rows]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        return (tuple(row) for row in self._rows)

    def update(self, rows: Iterable[Iterable[object]]) -> None:
        """Replace the contents; rows are cut or padded to the first row's width."""
        cells = [[str(cell) for cell in row] for row in rows]
        self._columns = len(cells[0]) if cells else 0
        width = self._columns
        self._rows = [(row + [""] * width)[:width] for row in cells]

    def clear(self) -> None:
        self._rows = []
        self._columns = 0

    def delete_row(self, index: int) -> list[str]:
        """Remove and return the row at a zero-based index."""
        if not 0 <= index < len(self._rows):
            raise IndexError("select a row to delete")
        return self._rows.pop(index)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write each cell followed by a tab, one row per line."""
        with open(path, "w", encoding="utf-8") as stream:
            for row in self._rows:
                stream.write("".join(f"{cell}\t" for cell in row) + "\n")