from dataclasses import dataclass

from velautil.slices import (
    all_match,
    any_match,
    contains,
    count,
    filter_items,
    find,
    flatten,
    group_by,
    index,
    intersect,
    iter_to_list,
    map_items,
    reduce,
    sort_items,
    subtract,
    union,
)


def test_set_operations():
    a = [1, 2, 3, 4]
    b = [2, 4, 6, 8]
    assert intersect(a, b) == [2, 4]
    assert union(a, b) == [1, 2, 3, 4, 6, 8]
    assert subtract(a, b) == [1, 3]


def test_set_operations_empty():
    assert intersect([1, 2], []) == []
    assert union([], [1]) == [1]
    assert subtract([], [1]) == []


def test_map_items():
    assert map_items([1, 2, 3], lambda i: f"val:{i}") == ["val:1", "val:2", "val:3"]


def test_filter_items():
    assert filter_items([1, 2, 3], lambda i: i % 2 == 1) == [1, 3]


def test_index():
    assert index([1, 2, 3], lambda i: i % 2 == 0) == 1
    assert index([1, 2, 3], lambda i: i % 4 == 0) == -1


def test_find():
    assert find([1, 2, 3], lambda i: i % 2 == 0) == 2
    assert find([1, 2, 3], lambda i: i % 4 == 0) is None


def test_flatten():
    assert flatten([[1, 2, 3], [2, 4, 6]]) == [1, 2, 3, 2, 4, 6]


def test_all_match():
    assert all_match([1, 2, 3], lambda i: i % 2 == 0) is False
    assert all_match([0, 2, 4], lambda i: i % 2 == 0) is True


def test_any_match():
    assert any_match([1, 2, 3], lambda i: i % 2 == 0) is True
    assert any_match([1, 3, 5], lambda i: i % 2 == 0) is False


def test_count():
    assert count([1, 2, 3], lambda i: i % 2 != 0) == 2


def test_group_by():
    def sign(t):
        if t > 0:
            return "positive"
        if t < 0:
            return "negative"
        return "zero"

    assert group_by([-1, 1, 0, 2, -2], sign) == {
        "positive": [1, 2],
        "negative": [-1, -2],
        "zero": [0],
    }


def test_reduce():
    def add_even(cnt, item):
        return cnt + item if item % 2 == 0 else cnt

    assert reduce([0, 1, 2, 3, 4], add_even, 0) == 6


class _SumEqual:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __eq__(self, other):
        return self.x + self.y == other.x + other.y

    __hash__ = None


@dataclass
class _Plain:
    x: int
    y: int


def test_contains_custom_equality():
    items = [_SumEqual(1, 2), _SumEqual(3, 4)]
    assert contains(items, _SumEqual(2, 1)) is True
    assert contains(items, _SumEqual(2, 2)) is False


def test_contains_value_equality():
    items = [_Plain(1, 2), _Plain(3, 4)]
    assert contains(items, _Plain(1, 2)) is True
    assert contains(items, _Plain(2, 1)) is False


class _Counter:
    def __init__(self):
        self.val = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.val += 1
        if self.val > 3:
            raise StopIteration
        return self.val


def test_iter_to_list():
    assert iter_to_list(_Counter()) == [1, 2, 3]
    assert iter_to_list(None) == []


def test_sort_items():
    values = ["x2", "y3", "z1"]
    sort_items(values, lambda x, y: int(x[-1]) < int(y[-1]))
    assert values == ["z1", "x2", "y3"]