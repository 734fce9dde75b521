import pytest

from algodrills.window import first_negatives, is_prime, smallest_prime_with_remainder


def test_first_negatives_source_example():
    data = [12, -1, -7, 8, -15, 30, 16, 28]
    assert first_negatives(data, 3) == [-1, -1, -7, -15, -15, 0]


@pytest.mark.parametrize("k", [1, 2, 3, 5, 8])
def test_first_negatives_length(k):
    data = [12, -1, -7, 8, -15, 30, 16, 28]
    assert len(first_negatives(data, k)) == len(data) - k + 1


def test_first_negatives_window_one_keeps_negatives():
    data = [4, -2, 5, -9]
    assert first_negatives(data, 1) == [0, -2, 0, -9]


def test_first_negatives_window_larger_than_input():
    assert first_negatives([1, -2], 5) == []


def test_first_negatives_all_positive():
    assert first_negatives([1, 2, 3, 4], 2) == [0, 0, 0]


def test_first_negatives_bad_window():
    with pytest.raises(ValueError):
        first_negatives([1, 2], 0)


def test_is_prime_small_range():
    assert [n for n in range(30) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 25, 49, 121])
def test_is_prime_rejects(n):
    assert is_prime(n) is False


def test_smallest_prime_invariants():
    numbers = [3, 4, 5]
    result = smallest_prime_with_remainder(numbers)
    assert is_prime(result)
    assert result > 3
    assert all(result % num == 3 for num in numbers if num != 3)


def test_smallest_prime_is_minimal():
    numbers = [2, 3, 7]
    result = smallest_prime_with_remainder(numbers)
    assert all(result % num == 2 for num in (3, 7))
    for candidate in range(3, result):
        assert not (is_prime(candidate) and candidate % 3 == 2 and candidate % 7 == 2)


def test_smallest_prime_single_number_is_next_prime():
    assert smallest_prime_with_remainder([7]) == 11


def test_smallest_prime_empty_raises():
    with pytest.raises(ValueError):
        smallest_prime_with_remainder([])