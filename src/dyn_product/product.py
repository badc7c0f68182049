"""Lazy cartesian product over a run-time number of rows.

Example:
    >>> from dyn_product import DynProduct
    >>> data = [["GroupA-1", "GroupA-2"], ["GroupB-1", "GroupB-2", "GroupB-3"]]
    >>> for item in DynProduct(data):
    ...     print(item)
    ['GroupA-1', 'GroupB-1']
    ['GroupA-1', 'GroupB-2']
    ['GroupA-1', 'GroupB-3']
    ['GroupA-2', 'GroupB-1']
    ['GroupA-2', 'GroupB-2']
    ['GroupA-2', 'GroupB-3']

When the number of rows is known while writing the code, ``itertools.product``
is the better tool.
"""

import logging
import math
from typing import Generic, Iterator, List, Sequence, TypeVar

from .counter import countup
from .sequence import as_slice

T = TypeVar("T")


class DynProduct(Generic[T]):
    """Iterator over every combination picking one element from each row.

    Combinations come out in odometer order: the last row changes fastest,
    the first row slowest. Each combination is a new list whose items are the
    very objects stored in the rows (views, not copies), so mutating an item
    mutates the caller's data.

    Edge cases:
        - No rows: a single empty combination is produced.
        - Any empty row: nothing is produced.

    The enumerator is forward only. Build a new one to enumerate again;
    construction is cheap and does not touch row contents.
    """

    def __init__(self, rows: Sequence[Sequence[T]]):
        """Initialize the enumerator.

        Args:
            rows: Ordered rows, or an ``AsSlice`` view of them. Each row must be
                a sequence or ``AsSlice`` implementer. Rows are borrowed and
                must not change length while enumerating.
        """
        self._rows = rows
        members = list(as_slice(rows))
        self._views = [as_slice(row) for row in members]
        # Lengths come from the row itself when it defines __len__
        self._sized = [
            row if hasattr(row, "__len__") else view
            for row, view in zip(members, self._views)
        ]
        self._digits = [0] * len(self._views)
        self._done = any(len(row) == 0 for row in self._sized)

        logging.debug(
            "DynProduct over %d rows with lengths %s",
            len(self._views),
            [len(row) for row in self._sized],
        )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "DynProduct[T]":
        """Build an enumerator from a collection or slice-like view of rows."""
        return cls(rows)

    @property
    def rows(self) -> Sequence[Sequence[T]]:
        """The borrowed rows collection."""
        return self._rows

    @property
    def total(self) -> int:
        """Number of combinations in the full product."""
        return math.prod(len(row) for row in self._sized)

    @property
    def exhausted(self) -> bool:
        return self._done

    def __iter__(self) -> Iterator[List[T]]:
        return self

    def __next__(self) -> List[T]:
        if self._done:
            raise StopIteration

        if not self._views:
            self._done = True
            return []

        if self._digits[0] >= len(self._sized[0]):
            self._done = True
            logging.debug("DynProduct exhausted after %d combinations", self.total)
            raise StopIteration

        combination = [view[digit] for view, digit in zip(self._views, self._digits)]
        countup(self._digits, self._sized)
        return combination

    def __length_hint__(self) -> int:
        if self._done:
            return 0
        # Position of the counter read as a mixed-radix number
        rank = 0
        for row, digit in zip(self._sized, self._digits):
            rank = rank * len(row) + digit
        return max(self.total - rank, 0)

    def __repr__(self) -> str:
        lengths = [len(row) for row in self._sized]
        state = "done" if self._done else "active"
        return f"DynProduct(lengths={lengths}, {state})"


def dyn_product(*rows: Sequence[T]) -> DynProduct[T]:
    """Return a ``DynProduct`` over the given rows.

    >>> list(dyn_product("ab", "xy"))
    [['a', 'x'], ['a', 'y'], ['b', 'x'], ['b', 'y']]
    """
    return DynProduct(rows)
