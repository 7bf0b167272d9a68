"""Small string and array puzzles."""

from __future__ import annotations

from typing import Iterable, Sequence


def remove_stars(text: str) -> str:
    """Remove each ``*`` together with the nearest kept character to its left."""
    kept: list[str] = []
    for char in text:
        if char == "*":
            if kept:
                kept.pop()
        else:
            kept.append(char)
    return "".join(kept)


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Report whether ``target`` occurs in a row- and column-sorted matrix."""
    if not matrix or not matrix[0]:
        return False
    row, column = 0, len(matrix[0]) - 1
    while column >= 0 and row < len(matrix):
        value = matrix[row][column]
        if target < value:
            column -= 1
        elif target > value:
            row += 1
        else:
            return True
    return False


def min_swaps(text: str) -> int:
    """Return the fewest swaps that balance a string of square brackets."""
    unmatched = 0
    for char in text:
        if char == "]":
            if unmatched:
                unmatched -= 1
        else:
            unmatched += 1
    return (unmatched + 1) // 2


def longest_common_prefix(strings: Iterable[str]) -> str:
    """Return the longest prefix shared by every string."""
    ordered = sorted(strings)
    if not ordered:
        return ""
    first, last = ordered[0], ordered[-1]
    length = 0
    for a, b in zip(first, last):
        if a != b:
            break
        length += 1
    return first[:length]


def count_even_digit_numbers(numbers: Iterable[int]) -> int:
    """Count the numbers written with an even number of decimal digits."""
    return sum(1 for number in numbers if len(str(abs(number))) % 2 == 0)


def prefix_common_array(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """For each index, count values present in both prefixes up to it.

    The inputs are permutations of the same distinct values.
    """
    if len(first) != len(second):
        raise ValueError("sequences must have the same length")
    seen_first: set[int] = set()
    seen_second: set[int] = set()
    common = 0
    result: list[int] = []
    for a, b in zip(first, second):
        seen_first.add(a)
        seen_second.add(b)
        if a == b:
            common += 1
        else:
            common += (a in seen_second) + (b in seen_first)
        result.append(common)
    return result


def dedupe_sorted(numbers: Iterable[int]) -> list[int]:
    """Collapse runs of equal values, keeping one of each in order."""
    result: list[int] = []
    for number in numbers:
        if not result or result[-1] != number:
            result.append(number)
    return result