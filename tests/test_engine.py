import math

import pytest

from engine import iter_permutations, permutations


def test_base_cases_permute_to_themselves() -> None:
    assert permutations([]) == [()]
    assert permutations(["x"]) == [("x",)]


def test_order_fixes_heads_in_index_order() -> None:
    assert permutations("abc") == [
        ("a", "b", "c"),
        ("a", "c", "b"),
        ("b", "a", "c"),
        ("b", "c", "a"),
        ("c", "a", "b"),
        ("c", "b", "a"),
    ]


@pytest.mark.parametrize("n", range(0, 7))
def test_count_is_factorial_and_each_ordering_once(n: int) -> None:
    items = list(range(n))
    result = permutations(items)
    assert len(result) == math.factorial(n)
    assert len(set(result)) == math.factorial(n)
    assert all(sorted(perm) == items for perm in result)


def test_duplicate_values_are_not_merged() -> None:
    result = permutations("aab")
    assert len(result) == 6
    assert len(set(result)) == 3


def test_iterator_is_lazy() -> None:
    stream = iter_permutations(range(12))
    assert next(stream) == tuple(range(12))
