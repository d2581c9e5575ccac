"""Sorting stack ``a`` with the insertion strategy: cheapest element first."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.parsing import INT_MIN
from pushswap.stacks import Stacks


def is_ascending(values: Sequence[int]) -> bool:
    """Tell whether ``values`` never decrease from top to bottom."""
    return all(left <= right for left, right in zip(values, values[1:]))


def max_position(values: Sequence[int]) -> int:
    """Return the position of the first largest value."""
    return values.index(max(values))


def all_top(pos_a: int, pos_b: int) -> int:
    """Cost of bringing both positions to the top by rotating both up."""
    return max(pos_a, pos_b)


def all_bot(size_a: int, size_b: int, pos_a: int, pos_b: int) -> int:
    """Cost of bringing both positions to the top by rotating both down."""
    return max(size_a - pos_a, size_b - pos_b)


def top_bot(size_b: int, pos_a: int, pos_b: int) -> int:
    """Cost of rotating ``a`` up and ``b`` down."""
    return pos_a + (size_b - pos_b)


def bot_top(size_a: int, pos_a: int, pos_b: int) -> int:
    """Cost of rotating ``a`` down and ``b`` up."""
    return pos_b + (size_a - pos_a)


def _costs(stacks: Stacks, pos_a: int, pos_b: int) -> tuple[int, int, int, int]:
    size_a, size_b = len(stacks.a), len(stacks.b)
    return (
        all_top(pos_a, pos_b),
        all_bot(size_a, size_b, pos_a, pos_b),
        top_bot(size_b, pos_a, pos_b),
        bot_top(size_a, pos_a, pos_b),
    )


def insertion_steps(stacks: Stacks, pos_a: int, pos_b: int) -> int:
    """Fewest rotations that bring ``a[pos_a]`` and ``b[pos_b]`` to the top."""
    return min(_costs(stacks, pos_a, pos_b))


def find_target(b: Sequence[int], number: int) -> int:
    """Return the position in ``b`` after which ``number`` belongs.

    That is the largest value below ``number``; when there is none, the
    largest value of ``b``. The smallest 32-bit integer never counts as a
    value below ``number``.
    """
    best: int | None = None
    best_value = INT_MIN
    for position, value in enumerate(b):
        if best_value < value < number:
            best_value = value
            best = position
    if best is None:
        return max_position(b)
    return best


def cheapest_position(stacks: Stacks) -> int:
    """Return the position in ``a`` of the element cheapest to move to ``b``."""
    cheapest = 0
    min_steps: int | None = None
    for position, number in enumerate(stacks.a):
        target = find_target(stacks.b, number)
        steps = insertion_steps(stacks, position, target)
        if min_steps is None or steps < min_steps:
            min_steps = steps
            cheapest = position
    return cheapest


def rotate_into_place(stacks: Stacks, pos_a: int) -> None:
    """Rotate so that ``a[pos_a]`` and its target in ``b`` are both on top."""
    number = stacks.a[pos_a]
    target = stacks.b[find_target(stacks.b, number)]
    up_up, down_down, up_down, down_up = _costs(
        stacks, pos_a, stacks.b.index(target)
    )

    def a_ready() -> bool:
        return stacks.a[0] == number

    def b_ready() -> bool:
        return stacks.b[0] == target

    if up_up <= min(down_down, up_down, down_up):
        while not a_ready() and not b_ready():
            stacks.rr()
        while not a_ready():
            stacks.ra()
        while not b_ready():
            stacks.rb()
    elif down_down <= min(up_up, up_down, down_up):
        while not a_ready() and not b_ready():
            stacks.rrr()
        while not a_ready():
            stacks.rra()
        while not b_ready():
            stacks.rrb()
    elif up_down <= min(up_up, down_down, down_up):
        while not a_ready():
            stacks.ra()
        while not b_ready():
            stacks.rrb()
    else:
        while not a_ready():
            stacks.rra()
        while not b_ready():
            stacks.rb()


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of three elements."""
    position = max_position(stacks.a)
    if position == 0:
        stacks.ra()
    elif position == 1:
        stacks.rra()
    if not is_ascending(stacks.a):
        stacks.sa()


def rotate_max_up(stacks: Stacks) -> None:
    """Bring the largest element of ``b`` to its top the shorter way round."""
    largest = max(stacks.b)
    if stacks.b.index(largest) <= len(stacks.b) // 2:
        while stacks.b[0] != largest:
            stacks.rb()
    else:
        while stacks.b[0] != largest:
            stacks.rrb()


def push_back(stacks: Stacks) -> None:
    """Move every element of ``b`` back into the sorted stack ``a``."""
    rotate_max_up(stacks)
    counter = 0
    top_b = stacks.b[0]
    if stacks.a[0] < top_b < stacks.a[1]:
        stacks.ra()
        counter = 2
    elif top_b < stacks.a[0]:
        counter = 3
    while stacks.b:
        if stacks.a[-1] > stacks.b[0] and counter < 3:
            stacks.rra()
            counter += 1
        else:
            stacks.pa()
    while not is_ascending(stacks.a):
        stacks.rra()


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` in ascending order, recording the moves made."""
    if len(stacks.a) >= 3 and not is_ascending(stacks.a):
        while len(stacks.b) < 2 and len(stacks.a) > 3:
            stacks.pb()
        while len(stacks.a) > 3:
            rotate_into_place(stacks, cheapest_position(stacks))
            stacks.pb()
        sort_three(stacks)
        if stacks.b:
            push_back(stacks)
    elif len(stacks.a) == 2 and not is_ascending(stacks.a):
        stacks.sa()


def sort_numbers(numbers: Iterable[int]) -> list[str]:
    """Return the moves that sort ``numbers`` from top to bottom."""
    stacks = Stacks(numbers)
    sort_stacks(stacks)
    return stacks.moves