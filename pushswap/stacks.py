"""The two stacks and the instructions that move values between them."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, Optional


class Stacks:
    """Stacks ``a`` and ``b``; index 0 is the top of each.

    Every instruction that acts reports its name to ``emit``.
    """

    def __init__(self, a: Iterable[int], emit: Optional[Callable[[str], None]] = None):
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque()
        self._emit = emit if emit is not None else (lambda _name: None)

    @staticmethod
    def _swap(stack: deque) -> None:
        if len(stack) > 1:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: deque) -> None:
        if len(stack) > 1:
            stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: deque) -> None:
        if len(stack) > 1:
            stack.rotate(1)

    def sa(self) -> None:
        """Swap the two top values of a."""
        self._swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top values of b."""
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the two top values of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a; does nothing if b is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b; does nothing if a is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def ra(self) -> None:
        """Rotate a: its top value goes to the bottom."""
        self._rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Rotate b: its top value goes to the bottom."""
        self._rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Reverse-rotate a: its bottom value goes to the top."""
        self._reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Reverse-rotate b: its bottom value goes to the top."""
        self._reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._emit("rrr")