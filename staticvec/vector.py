"""A vector with a fixed capacity and a dynamic length."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from staticvec.errors import CapacityError

T = TypeVar("T")


class StaticVector(Generic[T]):
    """A sequence that holds at most ``capacity`` elements.

    ``default`` is a zero-argument factory used by :meth:`set_len` to create
    new elements when the length grows.
    """

    __slots__ = ("_capacity", "_default", "_items")

    def __init__(self, capacity: int, default: Callable[[], T] | None = None) -> None:
        if capacity <= 0:
            raise ValueError("CAPACITY must be greater than 0")
        self._capacity = capacity
        self._default = default
        self._items: list[T] = []

    def capacity(self) -> int:
        """Return the maximum number of elements the vector can hold."""
        return self._capacity

    def is_empty(self) -> bool:
        """Return whether the vector has no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return whether the vector is at maximum capacity."""
        return len(self._items) == self._capacity

    def push(self, value: T) -> None:
        """Append ``value``; raise :class:`CapacityError` if the vector is full."""
        if self.is_full():
            raise CapacityError()
        self._items.append(value)

    def clear(self) -> None:
        """Remove all elements."""
        self._items.clear()

    def set_len(self, new_length: int) -> None:
        """Resize to ``new_length``, filling new slots from the default factory.

        Raises :class:`CapacityError` if ``new_length`` exceeds the capacity.
        """
        if new_length < 0:
            raise ValueError("length must not be negative")
        if new_length > self._capacity:
            raise CapacityError()
        missing = new_length - len(self._items)
        if missing > 0:
            if self._default is None:
                raise TypeError("growing the vector needs a default factory")
            self._items.extend(self._default() for _ in range(missing))
        else:
            del self._items[new_length:]

    def first(self) -> T | None:
        """Return the first element, or None if the vector is empty."""
        return self.get(0)

    def last(self) -> T | None:
        """Return the last element, or None if the vector is empty."""
        return self._items[-1] if self._items else None

    def get(self, index: int) -> T | None:
        """Return the element at ``index``, or None if it is out of bounds."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def pop(self) -> T | None:
        """Remove and return the last element, or None if the vector is empty."""
        return self._items.pop() if self._items else None

    def pop_if(self, predicate: Callable[[T], bool]) -> T | None:
        """Remove and return the last element if ``predicate`` accepts it."""
        if not self._items:
            return None
        return self._items.pop() if predicate(self._items[-1]) else None

    def as_list(self) -> list[T]:
        """Return the elements as a new list."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return self._items[index]
        return self._items[index]

    def __setitem__(self, index: int | slice, value: Any) -> None:
        if isinstance(index, slice):
            values = list(value) if isinstance(value, Iterable) else [value]
            target = range(len(self._items))[index]
            if len(values) != len(target):
                raise ValueError("slice assignment must not change the length")
            self._items[index] = values
            return
        self._items[index] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StaticVector):
            return self._capacity == other._capacity and self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"StaticVector(capacity={self._capacity}, items={self._items!r})"