"""
Data models holding the values shown in a bracket diagram.

The render pipeline only needs the read side of BracketModel; any object
providing ``column_count``, ``row_count`` and ``value_at`` can be rendered.
DefaultBracketModel is a thread-safe, column-oriented store with factories
for the two common shapes (elimination bracket and fixed grid).
"""

import threading
from typing import Any, Callable, Iterable, List, Optional, Protocol, Sequence, Union

from .models import GridPosition


class BracketModel(Protocol):
    """Read-only view of the values in a bracket grid."""

    def column_count(self) -> int:
        ...

    def row_count(self, column: int) -> int:
        ...

    def value_at(self, column: int, row: int) -> Any:
        ...


class DefaultBracketModel:
    """
    Column-oriented bracket storage.

    Every column is a list of values. All access goes through ``lock``, a
    re-entrant lock the render pipeline also holds for a whole pass, so the
    model cannot change shape while it is being drawn.

    Example:
        >>> model = DefaultBracketModel.elimination(["A", "B", "C", "D"])
        >>> model.column_count()
        3
        >>> [model.row_count(c) for c in range(3)]
        [4, 2, 1]
    """

    def __init__(self, columns: int):
        if columns < 0:
            raise ValueError("Column count must be >= 0")
        self.lock = threading.RLock()
        self._columns: List[List[Any]] = [[] for _ in range(columns)]

    @classmethod
    def elimination(
        cls, entries: Union[int, Sequence[Any]]
    ) -> "DefaultBracketModel":
        """
        Create a single-elimination bracket.

        Each later column holds half the rows of the previous one, rounded
        up, down to a single final cell. Odd rounds leave the last entry
        without an opponent.

        Args:
            entries: Either the first-round row count or the values to place.
                Values fill the first column, then later columns in
                column-major order; missing values stay None.

        Raises:
            ValueError: If there are no entries.
        """
        values: Sequence[Any] = []
        if isinstance(entries, int):
            size = entries
        else:
            values = list(entries)
            size = len(values)

        if size < 1:
            raise ValueError("Row count has to be > 0")

        model = cls((size - 1).bit_length() + 1)
        rows = size
        for column in range(model.column_count()):
            model._columns[column] = [None] * rows
            rows = (rows + 1) // 2
        model._fill(values)
        return model

    @classmethod
    def grid(
        cls, entries: Sequence[Any], columns: int, rows: int
    ) -> "DefaultBracketModel":
        """
        Create a fixed grid of ``columns`` x ``rows`` cells.

        Raises:
            ValueError: If columns or rows is smaller than 1.
        """
        if columns < 1:
            raise ValueError("Column count has to be > 0")
        if rows < 1:
            raise ValueError("Row count has to be > 0")

        model = cls(columns)
        for column in range(columns):
            model._columns[column] = [None] * rows
        model._fill(list(entries))
        return model

    def _fill(self, values: List[Any]) -> None:
        idx = 0
        for column in self._columns:
            for row in range(len(column)):
                if idx >= len(values):
                    return
                column[row] = values[idx]
                idx += 1

    def column_count(self) -> int:
        with self.lock:
            return len(self._columns)

    def row_count(self, column: int) -> int:
        """Rows in a column; 0 for columns past the end."""
        with self.lock:
            if column < 0 or column >= len(self._columns):
                return 0
            return len(self._columns[column])

    def value_at(self, column: int, row: int) -> Any:
        """Value at a cell, or None if the cell does not exist."""
        with self.lock:
            if column < 0 or column >= len(self._columns):
                return None
            values = self._columns[column]
            return values[row] if 0 <= row < len(values) else None

    def set_value_at(self, value: Any, column: int, row: int) -> None:
        """
        Store a value.

        Rows at or past the end of the column append a new cell; unknown
        columns are ignored.
        """
        with self.lock:
            if column < 0 or column >= len(self._columns):
                return
            values = self._columns[column]
            if row >= len(values):
                values.append(value)
            else:
                values[row] = value

    def add_column(self, values: Iterable[Any] = ()) -> int:
        """Append a column and return its index."""
        with self.lock:
            self._columns.append(list(values))
            return len(self._columns) - 1

    def cell_count(self) -> int:
        """Total number of cells over all columns."""
        with self.lock:
            return sum(len(values) for values in self._columns)

    def next_position(
        self, predicate: Callable[[Any], bool]
    ) -> Optional[GridPosition]:
        """
        Find the slot a matching value advances into.

        Columns are scanned from the second-to-last one backwards, so the
        furthest-advanced match wins.

        Returns:
            The next-column position fed by the first match, or None.
        """
        with self.lock:
            for column in range(len(self._columns) - 2, -1, -1):
                for row, value in enumerate(self._columns[column]):
                    if predicate(value):
                        return GridPosition(column, row).next_slot()
        return None

    def __repr__(self) -> str:
        shape = [len(values) for values in self._columns]
        return f"DefaultBracketModel(rows={shape})"
