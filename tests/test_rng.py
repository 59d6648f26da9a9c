from itertools import islice

from apmath.number import Apm
from apmath.rng import RandomGenerator


def test_first_value_from_zero_seed_is_multiplier():
    gen = RandomGenerator(0)
    assert gen.next() == Apm(".716805947629621")


def test_same_seed_same_sequence():
    a = RandomGenerator("12345")
    b = RandomGenerator(12345)
    assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]


def test_values_in_unit_interval():
    gen = RandomGenerator(987654321)
    for value in islice(gen, 200):
        assert Apm(0) <= value < 1


def test_values_have_at_most_fifteen_digits():
    gen = RandomGenerator(42)
    for value in islice(gen, 50):
        assert (value * Apm("1e15")).is_integer()


def test_set_seed_restarts():
    gen = RandomGenerator(7)
    first = [gen.next() for _ in range(5)]
    gen.set_seed(7)
    assert [gen.next() for _ in range(5)] == first


def test_different_seeds_differ():
    assert RandomGenerator(1).next() != RandomGenerator(2).next()


def test_default_seed_gives_unit_interval_value():
    value = RandomGenerator().next()
    assert Apm(0) <= value < 1