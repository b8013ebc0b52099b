"""Strategies that sort stack a, choosing one by the number of values."""

from __future__ import annotations

from typing import Iterable

from .parsing import is_sorted, max_bits, minimum, normalize
from .stacks import Stacks


def sort_two_three(stacks: Stacks) -> None:
    """Sort a stack a of two or three values using swaps and rotations."""
    a = stacks.a
    if len(a) == 2:
        if a[0] > a[1]:
            stacks.sa()
        return
    if len(a) != 3:
        return
    first, second, third = a
    if second > third > first:
        stacks.rra()
        stacks.sa()
    elif first > second and first < third:
        stacks.sa()
    elif second > first > third:
        stacks.rra()
    elif first > second and second < third:
        stacks.ra()
    elif first > second > third:
        stacks.sa()
        stacks.rra()


def _push_smallest(stacks: Stacks, strict: bool) -> None:
    smallest = minimum(stacks.a)
    if strict:
        while stacks.a[0] > smallest:
            stacks.ra()
    else:
        while stacks.a[0] != smallest:
            stacks.ra()
    stacks.pb()


def sort_four_five(stacks: Stacks) -> None:
    """Sort a stack a of four or five values by parking the smallest on b."""
    size = len(stacks.a)
    if size == 4:
        _push_smallest(stacks, strict=True)
        sort_two_three(stacks)
        stacks.pa()
    elif size == 5:
        _push_smallest(stacks, strict=True)
        _push_smallest(stacks, strict=False)
        sort_two_three(stacks)
        stacks.pa()
        stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Sort stack a with a binary radix sort over the ranks of its values."""
    values = list(stacks.a)
    ranks = normalize(values)
    by_rank = dict(zip(ranks, values))
    stacks.a.clear()
    stacks.a.extend(ranks)
    for bit in range(max_bits(ranks)):
        for _ in range(len(stacks.a)):
            if stacks.a[0] >> bit & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()
    restored = [by_rank[rank] for rank in stacks.a]
    stacks.a.clear()
    stacks.a.extend(restored)


def sort_stacks(stacks: Stacks) -> None:
    """Pick the strategy that suits the size of stack a and apply it."""
    size = len(stacks.a)
    if size in (2, 3):
        sort_two_three(stacks)
    elif size in (4, 5):
        sort_four_five(stacks)
    elif size > 5:
        radix_sort(stacks)


def push_swap(values: Iterable[int]) -> list[str]:
    """Return the instructions that sort ``values``; none if already sorted."""
    values = list(values)
    instructions: list[str] = []
    if is_sorted(values):
        return instructions
    stacks = Stacks(values, instructions.append)
    sort_stacks(stacks)
    return instructions