"""Operations on plain sequences of integers: median, insertion, deletion, searching."""

from __future__ import annotations

from typing import NamedTuple, Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT_MASK = 0xFFFFFFFF


def _truncating_half(total: int) -> int:
    """Halve an integer, rounding toward zero."""
    half = abs(total) // 2
    return half if total >= 0 else -half


def median(values: Sequence[int]) -> int:
    """Return the median of an already sorted sequence.

    For an even count the two middle values are averaged with integer
    division that rounds toward zero.
    """
    count = len(values)
    if count == 0:
        raise ValueError("median of an empty sequence")
    middle = count // 2
    if count % 2:
        return values[middle]
    return _truncating_half(values[middle] + values[middle - 1])


def insert_at(values: Sequence[int], position: int, item: int) -> list[int]:
    """Return a new list with ``item`` placed at zero-based ``position``."""
    if not 0 <= position <= len(values):
        raise IndexError(f"insert position {position} out of range 0..{len(values)}")
    return [*values[:position], item, *values[position:]]


def delete_at(values: Sequence[int], position: int) -> list[int]:
    """Return a new list without the element at zero-based ``position``."""
    if not 0 <= position < len(values):
        raise IndexError(f"delete position {position} out of range 0..{len(values) - 1}")
    return [*values[:position], *values[position + 1:]]


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in sorted ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        current = values[mid]
        if current == target:
            return mid
        if current < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def find_positions(values: Sequence[int], target: int) -> list[int]:
    """Return every one-based position at which ``target`` occurs."""
    return [position for position, value in enumerate(values, start=1) if value == target]


def average(values: Sequence[int]) -> float:
    """Return the arithmetic mean of ``values``."""
    if not values:
        raise ValueError("average of an empty sequence")
    return sum(values) / len(values)


class NumberFormats(NamedTuple):
    """Octal, hexadecimal and eight-bit binary renderings of a 32-bit integer."""

    octal: str
    hexadecimal: str
    binary: str

    def __str__(self) -> str:
        return f"{self.octal} {self.hexadecimal} {self.binary}"


def number_formats(number: int) -> NumberFormats:
    """Render a 32-bit signed integer in octal, hexadecimal and low-byte binary.

    Negative numbers are shown as their unsigned 32-bit pattern.
    """
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"{number} does not fit in a 32-bit signed integer")
    unsigned = number & _UINT_MASK
    return NumberFormats(
        octal=format(unsigned, "o"),
        hexadecimal=format(unsigned, "x"),
        binary=format(number & 0xFF, "08b"),
    )