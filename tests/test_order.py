import pytest

from arrayutils import comparing, max, min, natural_order, reverse_order


def by_value(a, b):
    return a - b


def test_min_and_max(numbers):
    assert min(numbers, by_value).unwrap() == 1
    assert max(numbers, by_value).unwrap() == 8


def test_empty_sequence_is_absent():
    assert min([], by_value).is_absent
    assert max([], by_value).is_absent


def test_ties_keep_earliest_element():
    items = [("b", 2), ("a", 1), ("c", 1), ("d", 2)]
    by_second = comparing(lambda item: item[1])

    assert min(items, by_second).unwrap() == ("a", 1)
    assert max(items, by_second).unwrap() == ("b", 2)


def test_ties_keep_earliest_identity():
    first, second = [0], [0]
    assert min([first, second], lambda a, b: 0).unwrap() is first
    assert max([first, second], lambda a, b: 0).unwrap() is first


def test_natural_order_default():
    assert min(["pear", "apple", "fig"]).unwrap() == "apple"
    assert max(["pear", "apple", "fig"]).unwrap() == "pear"


def test_natural_order_values():
    assert natural_order(1, 2) == -1
    assert natural_order(2, 2) == 0
    assert natural_order(3, 2) == 1


def test_reverse_order_swaps_min_and_max(numbers):
    assert min(numbers, reverse_order(by_value)).unwrap() == 8
    assert max(numbers, reverse_order()).unwrap() == 1


def test_single_element():
    assert min([42], by_value).unwrap() == 42
    assert max([42], by_value).unwrap() == 42


def test_non_callable_comparator_rejected():
    with pytest.raises(TypeError, match="comparator"):
        min([1, 2], 3)  # type: ignore[arg-type]
