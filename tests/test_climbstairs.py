import pytest

from algokit.climbstairs import climb_stairs


@pytest.mark.parametrize("n", [0, 1, 2])
def test_small_values_returned_unchanged(n):
    assert climb_stairs(n) == n


@pytest.mark.parametrize("n", range(3, 40))
def test_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_strictly_increasing():
    values = [climb_stairs(n) for n in range(1, 30)]
    assert all(a < b for a, b in zip(values[1:], values[2:]))


def test_large_value_is_exact():
    n = 200
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)
    assert climb_stairs(n) > 2 ** 100