import pytest

from pushswap.stacks import Stacks


def test_initial_state():
    stacks = Stacks([3, 1, 2])
    assert stacks.a == [3, 1, 2]
    assert stacks.b == []
    assert stacks.moves == []


def test_init_copies_input():
    numbers = [1, 2]
    stacks = Stacks(numbers)
    stacks.sa()
    assert numbers == [1, 2]
    assert stacks.a == [2, 1]


def test_sa_swaps_top_two():
    stacks = Stacks([1, 2, 3])
    stacks.sa()
    assert stacks.a == [2, 1, 3]
    assert stacks.moves == ["sa"]


def test_sa_twice_restores():
    stacks = Stacks([5, 7, 9])
    stacks.sa()
    stacks.sa()
    assert stacks.a == [5, 7, 9]
    assert stacks.moves == ["sa", "sa"]


def test_sb_and_ss():
    stacks = Stacks([1, 2, 3, 4])
    stacks.pb()
    stacks.pb()
    assert stacks.b == [2, 1]
    stacks.sb()
    assert stacks.b == [1, 2]
    stacks.ss()
    assert stacks.a == [4, 3]
    assert stacks.b == [2, 1]
    assert stacks.moves == ["pb", "pb", "sb", "ss"]


def test_pb_then_pa_round_trip():
    stacks = Stacks([4, 5, 6])
    stacks.pb()
    assert stacks.a == [5, 6]
    assert stacks.b == [4]
    stacks.pa()
    assert stacks.a == [4, 5, 6]
    assert stacks.b == []
    assert stacks.moves == ["pb", "pa"]


def test_push_from_empty_is_noop_but_recorded():
    stacks = Stacks([1, 2])
    stacks.pa()
    assert stacks.a == [1, 2]
    assert stacks.b == []
    assert stacks.moves == ["pa"]


def test_ra_moves_top_to_bottom():
    stacks = Stacks([1, 2, 3])
    stacks.ra()
    assert stacks.a == [2, 3, 1]
    assert stacks.moves == ["ra"]


def test_rra_moves_bottom_to_top():
    stacks = Stacks([1, 2, 3])
    stacks.rra()
    assert stacks.a == [3, 1, 2]
    assert stacks.moves == ["rra"]


@pytest.mark.parametrize("numbers", [[1, 2], [8, 3, 5, 1], [10, -4, 0, 7, 2]])
def test_ra_then_rra_restores(numbers):
    stacks = Stacks(numbers)
    stacks.ra()
    stacks.rra()
    assert stacks.a == numbers


@pytest.mark.parametrize("numbers", [[1, 2, 3], [9, 8, 7, 6]])
def test_full_rotation_restores(numbers):
    stacks = Stacks(numbers)
    for _ in numbers:
        stacks.ra()
    assert stacks.a == numbers
    assert len(stacks.moves) == len(numbers)


def test_rb_rrb_and_both_stack_rotations():
    stacks = Stacks([1, 2, 3, 4, 5, 6])
    stacks.pb()
    stacks.pb()
    stacks.pb()
    assert stacks.b == [3, 2, 1]
    stacks.rb()
    assert stacks.b == [2, 1, 3]
    stacks.rrb()
    assert stacks.b == [3, 2, 1]
    stacks.rr()
    assert stacks.a == [5, 6, 4]
    assert stacks.b == [2, 1, 3]
    stacks.rrr()
    assert stacks.a == [4, 5, 6]
    assert stacks.b == [3, 2, 1]
    assert stacks.moves[-4:] == ["rb", "rrb", "rr", "rrr"]


@pytest.mark.parametrize("move", ["sa", "sb", "ss", "ra", "rb", "rr", "rra", "rrb", "rrr"])
def test_moves_on_single_element_are_noops(move):
    stacks = Stacks([42])
    getattr(stacks, move)()
    assert stacks.a == [42]
    assert stacks.b == []
    assert stacks.moves == [move]


def test_moves_preserve_elements():
    numbers = [3, -1, 7, 0, 12, 5]
    stacks = Stacks(numbers)
    for move in ["pb", "pb", "ra", "sb", "rr", "pb", "rrr", "ss", "pa", "rrb", "sa"]:
        getattr(stacks, move)()
    assert sorted(stacks.a + stacks.b) == sorted(numbers)
    assert len(stacks.moves) == 11