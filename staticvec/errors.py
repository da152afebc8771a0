"""Errors raised by the fixed-capacity vector."""

from __future__ import annotations

_MESSAGE = "vector needs larger capacity"


class CapacityError(Exception):
    """Raised when a vector is full or an operation needs more room than its capacity."""

    def __init__(self) -> None:
        super().__init__(_MESSAGE)

    def __str__(self) -> str:
        return _MESSAGE