import itertools

import pytest

from threadkit.rand import MASK, RAND_MAX, SCALE, Rand, RandInt, lcg_step


def test_default_seed_matches_explicit_999():
    a, b = Rand(), Rand(999)
    assert [a.draw() for _ in range(20)] == [b.draw() for _ in range(20)]


def test_draws_are_in_unit_interval():
    r = Rand(12345)
    values = [r.draw() for _ in range(1000)]
    assert all(0.0 <= v <= 1.0 for v in values)


def test_draw_follows_lcg_step_chain():
    seed = 777
    expected = []
    for _ in range(10):
        seed, value = lcg_step(seed)
        expected.append(value)
    r = Rand(777)
    assert [r.draw() for _ in range(10)] == expected
    assert r.seed == seed


def test_lcg_step_value_is_scaled_seed():
    new_seed, value = lcg_step(42)
    assert 0 <= new_seed <= MASK
    assert value == new_seed * SCALE


def test_only_low_31_bits_of_seed_matter():
    big = Rand(2**40 + 5)
    small = Rand(5)
    assert [big.draw() for _ in range(5)] == [small.draw() for _ in range(5)]


def test_rand_is_iterable():
    a, b = Rand(3), Rand(3)
    assert list(itertools.islice(a, 4)) == [b.draw() for _ in range(4)]


def test_randint_in_bounds():
    r = RandInt(10, seed=7)
    values = [r.draw() for _ in range(500)]
    assert all(0 <= v < 10 for v in values)
    assert set(values) == set(range(10))


def test_randint_reproducible_with_seed():
    a, b = RandInt(1000, seed=99), RandInt(1000, seed=99)
    assert [a.draw() for _ in range(20)] == [b.draw() for _ in range(20)]


def test_randint_zero_bound_uses_full_range():
    r = RandInt()
    values = [r.draw() for _ in range(100)]
    assert all(0 <= v <= RAND_MAX for v in values)
    assert max(values) > 1000


def test_randint_negative_bound_rejected():
    with pytest.raises(ValueError):
        RandInt(-1)