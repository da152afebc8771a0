# staticvec

A vector with a fixed capacity and a dynamic length. You set the capacity once,
when you create the vector. An operation that would need more room than that
raises `staticvec.errors.CapacityError`.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Usage

```python
from staticvec.vector import StaticVector
from staticvec.errors import CapacityError

vec = StaticVector(3, int)  # capacity 3, new slots are filled with int()

vec.push(1)
vec.push(2)
vec.push(3)
assert vec.is_full()

try:
    vec.push(4)
except CapacityError as err:
    print(err)  # vector needs larger capacity

assert len(vec) == 3
assert vec.capacity() == 3
assert vec.first() == 1
assert vec.last() == 3
assert vec.get(5) is None

vec[0] = 10
assert vec.as_list() == [10, 2, 3]

assert vec.pop() == 3
assert vec.pop_if(lambda n: n % 2 == 1) is None  # last element is 2
assert vec.pop_if(lambda n: n % 2 == 0) == 2

vec.set_len(3)  # grows with default values
assert list(vec) == [10, 0, 0]

vec.clear()
assert vec.is_empty()
```

## Behaviour

- `StaticVector(capacity, default=None)`: a capacity of zero or less raises
  `ValueError("CAPACITY must be greater than 0")`. `default` is a factory that
  takes no arguments. `set_len` uses it to create new elements.
- `push(value)` raises `CapacityError` when the vector is full.
- `set_len(new_length)` raises `CapacityError` if `new_length` is larger than
  the capacity, and in that case it changes nothing. It raises `ValueError` for
  a negative length. When it grows the vector, it calls `default` once for each
  new slot, and it raises `TypeError` if no `default` was given. When it shrinks
  the vector, it drops the elements from `new_length` onward.
- `first`, `last`, `get`, `pop` and `pop_if` return `None` when there is no such
  element. `get` returns `None` for any index outside `0 <= index < len(vec)`.
  `pop_if(predicate)` removes the last element only if `predicate` returns true
  for it.
- `as_list()` returns a new list of the elements.
- `vec[i]` follows list indexing: negative indices count from the end, and an
  index out of range raises `IndexError`. Slices are supported.
  `vec[i] = value` replaces an element. Assigning to a slice must not change
  the length, otherwise `ValueError` is raised. So `vec[:] = [1] * len(vec)`
  fills the vector.
- Two vectors are equal when their capacities and their elements are equal.
- `CapacityError` is an `Exception` whose message is
  `vector needs larger capacity`.

## Self-check

`staticvec.exercise.exercise(data)` takes an iterable of byte values and runs a
series of consistency checks on a vector with capacity 125. It pushes every
byte. It then fills the vector and checks it, and pushes and pops each byte in
turn, once with `pop` and once with `pop_if`. It raises `AssertionError` at the
first check that fails. It returns the elements the vector held after all the
bytes were pushed, which is at most the first 125 of them:

```python
from staticvec.exercise import exercise

assert exercise(b"abc") == [97, 98, 99]
assert len(exercise(bytes(200))) == 125
```

## Scope

This is a library only. It provides no command-line tool.