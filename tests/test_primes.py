import pytest

from apmath.number import Apm
from apmath.primes import is_prime, main, primes_from


def test_first_ten_from_one():
    assert [int(str_) for str_ in map(lambda p: p.digits, primes_from(1))] == [
        3, 5, 7, 11, 13, 17, 19, 23, 29, 31,
    ]


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 97, 7919, "1000000007"])
def test_known_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [0, 1, 4, 9, 10, 16, 91, 121, 7917, 1000000008])
def test_known_composites(n):
    assert is_prime(n) is False


def test_non_integer_rejected():
    with pytest.raises(ValueError):
        is_prime("7.5")


def test_primes_from_are_increasing_and_prime():
    found = primes_from(1000, 10)
    assert len(found) == 10
    assert all(is_prime(p) for p in found)
    assert found == sorted(found)
    assert found[0] >= 1000


def test_no_prime_skipped_between_results():
    found = primes_from(500, 8)
    first, last = found[0], found[-1]
    candidate = first
    between = []
    while candidate <= last:
        if is_prime(candidate):
            between.append(candidate)
        candidate = candidate + 2
    assert between == found


def test_start_below_three_begins_at_three():
    assert primes_from(-50, 1) == [Apm(3)]


def test_fractional_start_rounds_to_odd():
    assert primes_from("3.7", 1) == primes_from(3, 1)


def test_main_prints_primes(capsys):
    assert main(["100"]) == 0
    lines = capsys.readouterr().out.split()
    assert [Apm(line) for line in lines] == primes_from(100)


def test_main_without_arguments_shows_usage(capsys):
    assert main([]) == 4
    assert "Usage" in capsys.readouterr().out


def test_main_bad_number(capsys):
    assert main(["abc"]) == 1
    assert "primenum" in capsys.readouterr().err