import pytest

from spltoolkit.randomness import (
    random_chance,
    random_integer,
    random_real,
    set_random_seed,
)

N_TRIALS = 10000
N_RANGES = 20
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@pytest.fixture(autouse=True)
def _seeded():
    set_random_seed(12345)


@pytest.mark.parametrize("low,high", [(0, 9), (-10, 10)])
def test_random_integer_range_and_spread(low, high):
    size = high - low + 1
    counts = [0] * size
    for _ in range(N_TRIALS):
        k = random_integer(low, high)
        assert low <= k <= high
        counts[k - low] += 1
    expected = N_TRIALS / size
    assert all(0.5 * expected <= c <= 1.5 * expected for c in counts)


@pytest.mark.parametrize("low,high", [(0.0, 10.0), (-100.0, 100.0)])
def test_random_real_range_and_spread(low, high):
    counts = [0] * N_RANGES
    for _ in range(N_TRIALS):
        d = random_real(low, high)
        assert low <= d < high
        counts[int(N_RANGES * (d - low) / (high - low))] += 1
    expected = N_TRIALS / N_RANGES
    assert all(0.5 * expected <= c <= 1.5 * expected for c in counts)


@pytest.mark.parametrize("p", [0.5, 0.9])
def test_random_chance_hit_rate(p):
    hits = sum(random_chance(p) for _ in range(N_TRIALS))
    expected = p * N_TRIALS
    assert 0.5 * expected <= hits <= 1.5 * expected


def test_random_chance_never_and_always():
    assert not any(random_chance(0) for _ in range(N_TRIALS))
    assert all(random_chance(1) for _ in range(N_TRIALS))


def test_huge_range_covers_all_quarters():
    mask_high = (INT_MAX + 1) >> 1
    ranges_left = 0xF
    for _ in range(N_TRIALS):
        if not ranges_left:
            break
        k = random_integer(INT_MIN, INT_MAX)
        assert INT_MIN <= k <= INT_MAX
        if k < 0:
            bit = 1 if k & mask_high else 2
        else:
            bit = 8 if k & mask_high else 4
        ranges_left &= ~bit
    assert ranges_left == 0


def test_seed_makes_sequence_repeatable():
    set_random_seed(42)
    first = [random_integer(0, 1000) for _ in range(10)]
    first_real = random_real(0.0, 1.0)
    set_random_seed(42)
    second = [random_integer(0, 1000) for _ in range(10)]
    second_real = random_real(0.0, 1.0)
    assert first == second
    assert first_real == second_real


def test_single_value_range():
    assert {random_integer(7, 7) for _ in range(100)} == {7}


def test_integer_results_are_ints():
    values = [random_integer(-3, 3) for _ in range(200)]
    assert all(isinstance(v, int) for v in values)
    assert set(values) == set(range(-3, 4))