"""Indexable sequence capability for product rows.

A row is anything the product engine can index by position and ask for a
length. Built-in ordered containers (list, tuple, str, range) qualify as they
are; other types opt in by implementing the ``AsSlice`` protocol.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Iterator, Optional, Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class AsSlice(Protocol[T_co]):
    """Something that can be viewed as an ordered, finite sequence."""

    def as_slice(self) -> Sequence[T_co]:
        """Return a read-only view over the elements, in order, without copying."""
        ...

    def __len__(self) -> int:
        return len(self.as_slice())


def as_slice(obj: Any) -> Sequence:
    """Return the ordered view the product engine indexes into.

    Any object with an ``as_slice()`` method counts as an implementer, whether
    or not it subclasses ``AsSlice`` or defines ``__len__``. Mappings are
    rejected even though they support ``[]`` and ``len()``, since their keys
    are not positions.

    Args:
        obj: An ``AsSlice`` implementer or a sequence-like object

    Returns:
        ``obj.as_slice()`` for implementers, ``obj`` itself otherwise

    Raises:
        TypeError: If obj can't be indexed by position
    """
    if callable(getattr(obj, "as_slice", None)):
        return obj.as_slice()
    if isinstance(obj, Sequence):
        return obj
    if not isinstance(obj, Mapping) and hasattr(obj, "__getitem__") and hasattr(obj, "__len__"):
        return obj
    raise TypeError(
        f"Expected a sequence or AsSlice implementer, got {type(obj).__name__}"
    )


class SliceView(Sequence):
    """Read-only window over ``data[start:stop]`` that never copies.

    Unlike slicing a list, indexing a view reads through to the underlying
    data, so elements keep their identity.
    """

    __slots__ = ("_data", "_start", "_stop")

    def __init__(self, data: Sequence, start: int = 0, stop: Optional[int] = None):
        self._data = data
        self._start, self._stop, _ = slice(start, stop).indices(len(data))
        if self._stop < self._start:
            self._stop = self._start

    def as_slice(self) -> "SliceView":
        return self

    def __len__(self) -> int:
        return self._stop - self._start

    def __getitem__(self, index):
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                raise ValueError("SliceView only supports contiguous slices")
            return SliceView(self._data, self._start + start, self._start + stop)
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("SliceView index out of range")
        return self._data[self._start + index]

    def __iter__(self) -> Iterator:
        for i in range(self._start, self._stop):
            yield self._data[i]

    def __repr__(self) -> str:
        return f"SliceView({type(self._data).__name__}[{self._start}:{self._stop}])"

