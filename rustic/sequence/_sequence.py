from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional, Self

import attrs

from rustic._exceptions import IndexOutOfRangeError


def _scan_length[T](items: list[T], predicate: Callable[[T], bool]) -> int:
    """Return the number of leading items that satisfy the predicate."""

    length = 0
    for item in items:
        if not predicate(item):
            break
        length += 1
    return length


@attrs.define(init=False, repr=False)
class Sequence[T]:
    """Ordered collection with chainable transformations and a pull cursor.

    All transformations are eager: they compute a new list of items immediately and
    return a new sequence wrapping it, with its cursor at the start.
    The receiver is never modified by a transformation.

    The cursor is only used by :meth:`next`, :meth:`peek` and :meth:`reset`.
    Since it is mutable, a sequence must not be consumed from several threads
    without external synchronization.
    """

    _items: list[T]
    _cursor: int = attrs.field(eq=False)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items = list(items)
        self._cursor = 0

    @classmethod
    def from_items(cls, items: Iterable[T]) -> Sequence[T]:
        """Create a sequence over the given items.

        The items are copied, so modifying the original collection afterward doesn't
        affect the sequence.
        """

        return cls(items)

    @classmethod
    def range(cls, start: int, end: Optional[int] = None) -> Sequence[int]:
        """Create a sequence over the integers in the range [start, end).

        If only one argument is given, it is the end of the range and the range
        starts at 0.
        """

        if end is None:
            start, end = 0, start
        return cls(range(start, end))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    @property
    def cursor(self) -> int:
        return self._cursor

    def has_next(self) -> bool:
        return self._cursor < len(self._items)

    def next(self) -> T:
        """Return the item under the cursor and move the cursor forward.

        Raises:
            IndexOutOfRangeError: If all the items have already been consumed.
        """

        item = self.peek()
        self._cursor += 1
        return item

    def peek(self) -> T:
        """Return the item under the cursor without consuming it.

        Raises:
            IndexOutOfRangeError: If all the items have already been consumed.
        """

        if not self.has_next():
            raise IndexOutOfRangeError(
                f"Cursor at {self._cursor} is past the end of the sequence"
            )
        return self._items[self._cursor]

    def peek_at(self, index: int) -> T:
        """Return the item at the given position, regardless of the cursor.

        Raises:
            IndexOutOfRangeError: If the index is not in [0, len).
        """

        if index < 0 or index >= len(self._items):
            raise IndexOutOfRangeError(f"Index out of bounds: {index}")
        return self._items[index]

    def reset(self) -> None:
        self._cursor = 0

    def map[R](self, func: Callable[[T], R]) -> Sequence[R]:
        return type(self)(func(item) for item in self._items)

    def filter(self, predicate: Callable[[T], bool]) -> Self:
        return type(self)(item for item in self._items if predicate(item))

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first item satisfying the predicate, or None if there is none."""

        return next((item for item in self._items if predicate(item)), None)

    def for_each(self, func: Callable[[T], Any]) -> None:
        for item in self._items:
            func(item)

    def collect[R](self, func: Optional[Callable[[T], R]] = None) -> list[T] | list[R]:
        """Return the items in a new list, optionally transformed by a function."""

        if func is None:
            return list(self._items)
        return [func(item) for item in self._items]

    def reduce[R](self, func: Callable[[R, T], R], initial: R) -> R:
        accumulator = initial
        for item in self._items:
            accumulator = func(accumulator, item)
        return accumulator

    def count(self, predicate: Optional[Callable[[T], bool]] = None) -> int:
        if predicate is None:
            return len(self._items)
        return sum(1 for item in self._items if predicate(item))

    def any(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(item) for item in self._items)

    def all(self, predicate: Callable[[T], bool]) -> bool:
        return all(predicate(item) for item in self._items)

    def chain[R](self, func: Callable[[T], Sequence[R]]) -> Sequence[R]:
        """Concatenate the sequences obtained by applying a function to each item."""

        return type(self)(
            itertools.chain.from_iterable(func(item).collect() for item in self._items)
        )

    def skip(self, n: int) -> Self:
        return type(self)(self._items[n:])

    def take(self, n: int) -> Self:
        return type(self)(self._items[:n])

    def skip_while(self, predicate: Callable[[T], bool]) -> Self:
        """Drop the leading items that satisfy the predicate.

        The scan stops at the first item that doesn't satisfy the predicate, or at
        the end of the sequence.
        """

        return type(self)(self._items[_scan_length(self._items, predicate) :])

    def take_while(self, predicate: Callable[[T], bool]) -> Self:
        """Keep the leading items that satisfy the predicate."""

        return type(self)(self._items[: _scan_length(self._items, predicate)])

    def enumerate(self) -> Sequence[tuple[int, T]]:
        return type(self)(enumerate(self._items))

    def zip[U](self, other: Sequence[U]) -> Sequence[tuple[T, U]]:
        """Pair the items of both sequences, stopping at the end of the shortest."""

        return type(self)(zip(self._items, other._items))

    def chain_with[U](self, other: Sequence[U]) -> Sequence[tuple[T, U]]:
        """Pair each item with the item at the same position in another sequence.

        Raises:
            IndexOutOfRangeError: If the other sequence is shorter than this one.
        """

        return type(self)(self.collect_with(other))

    def collect_into[U, R](
        self, other: Sequence[U], func: Callable[[T, U], R]
    ) -> list[R]:
        """Combine each item with the item at the same position in another sequence.

        Items of the other sequence past the length of this one are ignored.

        Raises:
            IndexOutOfRangeError: If the other sequence is shorter than this one.
        """

        return [
            func(item, other.peek_at(index)) for index, item in enumerate(self._items)
        ]

    def collect_with[U](self, other: Sequence[U]) -> list[tuple[T, U]]:
        return self.collect_into(other, lambda item, other_item: (item, other_item))

    def collect_while(self, predicate: Callable[[T], bool]) -> list[T]:
        return self._items[: _scan_length(self._items, predicate)]

    def collect_until(self, predicate: Callable[[T], bool]) -> list[T]:
        length = _scan_length(self._items, lambda item: not predicate(item))
        return self._items[:length]
