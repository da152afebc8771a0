"""A self-checking workout of :class:`StaticVector` driven by arbitrary bytes."""

from __future__ import annotations

from collections.abc import Iterable

from staticvec.errors import CapacityError
from staticvec.vector import StaticVector

_CAPACITY = 125


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise AssertionError(message)


def _try_push(vec: StaticVector[int], value: int) -> bool:
    try:
        vec.push(value)
    except CapacityError:
        return False
    return True


def exercise(data: Iterable[int]) -> list[int]:
    """Push, inspect and pop the bytes of ``data`` on a vector of capacity 125.

    Every step is checked against the vector's contract and an
    :class:`AssertionError` is raised on the first violation. Returns the
    elements the vector kept after pushing all of ``data``.
    """
    payload = bytes(data)
    vec: StaticVector[int] = StaticVector(_CAPACITY, default=int)

    _check(vec.capacity() == _CAPACITY, "capacity differs from the requested one")
    _check(len(vec) == 0, "new vector is not empty")
    _check(vec.is_empty(), "new vector does not report empty")
    _check(not vec.is_full(), "new vector reports full")
    _check(vec.first() is None, "new vector has a first element")
    _check(vec.last() is None, "new vector has a last element")
    _check(vec.pop() is None, "pop on a new vector returned a value")
    _check(vec.pop_if(lambda _: True) is None, "pop_if on a new vector returned a value")

    first_byte: int | None = None
    prev_byte: int | None = None

    for i, byte in enumerate(payload):
        full_before = vec.is_full()
        pushed = _try_push(vec, byte)
        full_after = vec.is_full()

        if first_byte is None:
            first_byte = byte
        _check(vec.first() == first_byte, "first element changed")

        if full_before:
            _check(len(vec) == vec.capacity(), "full vector has wrong length")
            _check(not pushed, "push into a full vector succeeded")
            _check(not vec.is_empty(), "full vector reports empty")
            _check(vec.is_full(), "full vector stopped reporting full")
            _check(vec.last() == prev_byte, "last element changed on a failed push")
            _check(vec.get(i) is None, "index past the length returned a value")
        else:
            _check(len(vec) == i + 1, "length did not grow by one")
            _check(pushed, "push into a vector with room failed")
            _check(not vec.is_empty(), "vector reports empty after a push")
            _check(vec.is_full() == full_after, "fullness changed without a push")
            _check(full_after == (len(vec) == vec.capacity()), "fullness disagrees with length")
            _check(vec.last() == byte, "last element is not the pushed byte")
            _check(vec.get(i) == byte, "get does not return the pushed byte")
            _check(vec[i] == byte, "indexing does not return the pushed byte")
            prev_byte = byte

    kept = vec.as_list()

    vec[:] = [1] * len(vec)
    _check(sum(vec.as_list()) == len(vec), "filled elements do not sum to the length")

    vec.clear()
    for byte in payload:
        _check(_try_push(vec, byte), "push into an emptied vector failed")
        _check(len(vec) == 1, "length is not one after a single push")
        _check(vec.pop() == byte, "pop did not return the pushed byte")
        _check(vec.is_empty(), "vector is not empty after pop")

    vec.clear()
    for byte in payload:
        _check(_try_push(vec, byte), "push into an emptied vector failed")
        _check(len(vec) == 1, "length is not one after a single push")
        _check(vec.pop_if(lambda _: True) == byte, "pop_if did not return the pushed byte")
        _check(vec.is_empty(), "vector is not empty after pop_if")

    return kept