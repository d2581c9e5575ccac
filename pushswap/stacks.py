"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b``, top first, plus the record of every move made.

    Each move is recorded in :attr:`moves` under its name, whether or not it
    changed anything. A move on a stack that is too small is a no-op.
    """

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self.a: list[int] = list(numbers)
        self.b: list[int] = []
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    @staticmethod
    def _swap(stack: list[int]) -> None:
        if len(stack) > 1:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        if len(stack) > 1:
            stack.append(stack.pop(0))

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        if len(stack) > 1:
            stack.insert(0, stack.pop())

    @staticmethod
    def _push(target: list[int], source: list[int]) -> None:
        if source:
            target.insert(0, source.pop(0))

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        self._swap(self.a)
        self.moves.append("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        self._swap(self.b)
        self.moves.append("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self.moves.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.a, self.b)
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.b, self.a)
        self.moves.append("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: its top element goes to the bottom."""
        self._rotate(self.a)
        self.moves.append("ra")

    def rb(self) -> None:
        """Rotate ``b`` up: its top element goes to the bottom."""
        self._rotate(self.b)
        self.moves.append("rb")

    def rr(self) -> None:
        """Rotate both stacks up."""
        self._rotate(self.a)
        self._rotate(self.b)
        self.moves.append("rr")

    def rra(self) -> None:
        """Rotate ``a`` down: its bottom element goes to the top."""
        self._reverse_rotate(self.a)
        self.moves.append("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: its bottom element goes to the top."""
        self._reverse_rotate(self.b)
        self.moves.append("rrb")

    def rrr(self) -> None:
        """Rotate both stacks down."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self.moves.append("rrr")