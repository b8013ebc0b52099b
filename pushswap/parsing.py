"""Reading and validating the integers given on the command line."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647
SINGLE_LIMIT = 2147483646

_WHITESPACE = " \t\n\r\v\f"


class ParseError(ValueError):
    """Raised when the input cannot be turned into a valid list of integers."""


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def atoi(text: str) -> int:
    """Read a leading optionally signed integer, skipping whitespace; 0 if none."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def is_number_char(char: str) -> bool:
    """True for a decimal digit or a sign character."""
    return "0" <= char <= "9" or char in "+-"


def join_arguments(args: Iterable[str]) -> list[str]:
    """Join all arguments and split them again into space-separated words."""
    return split_words(" ".join(args), " ")


def parse_numbers(words: Sequence[str]) -> list[int]:
    """Convert words to integers, rejecting bad characters, duplicates and overflow."""
    for word in words:
        if not all(is_number_char(ch) for ch in word):
            raise ParseError(f"invalid number: {word!r}")
    values = [atoi(word) for word in words]
    if len(set(values)) != len(values):
        raise ParseError("duplicate numbers")
    for word, value in zip(words, values):
        if not INT_MIN <= value <= INT_MAX:
            raise ParseError(f"number out of range: {word!r}")
    return values


def parse_single(word: str) -> int:
    """Read the lone argument, which must lie within the narrower single-value range."""
    value = atoi(word)
    if value > SINGLE_LIMIT or value < -SINGLE_LIMIT:
        raise ParseError(f"number out of range: {word!r}")
    return value


def minimum(values: Iterable[int]) -> int:
    """Smallest value; raises ValueError when empty."""
    return min(values)


def normalize(values: Sequence[int]) -> list[int]:
    """Replace each value by the count of values strictly smaller than it."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]


def max_bits(values: Iterable[int]) -> int:
    """Number of bits needed for the largest non-negative value."""
    return max(0, *values).bit_length() if values else 0


def is_sorted(values: Sequence[int]) -> bool:
    """True when the values are in non-decreasing order."""
    return all(left <= right for left, right in zip(values, values[1:]))