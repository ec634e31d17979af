import pytest

from harbol.deque import Deque


def _filled():
    d = Deque(8)
    for v in (1, 2, 3, 4):
        d.append(v)
    return d


def test_append_indices_and_values():
    d = _filled()
    assert list(d.nodes()) == [7, 6, 5, 4]
    assert [d.get(n) for n in d.nodes()] == [1, 2, 3, 4]
    assert list(d) == [1, 2, 3, 4]
    assert len(d) == 4


def test_prepend_after_append():
    d = _filled()
    for v in (1, 2, 3, 4):
        d.prepend(v)
    assert list(d.nodes()) == [0, 1, 2, 3, 7, 6, 5, 4]
    assert list(d) == [4, 3, 2, 1, 1, 2, 3, 4]
    assert len(d) == 8


def test_pop_front_and_back():
    d = _filled()
    for v in (1, 2, 3, 4):
        d.prepend(v)
    assert d.pop_front() == 4
    assert d.pop_back() == 4
    assert list(d.nodes()) == [1, 2, 3, 7, 6, 5]
    assert list(d) == [3, 2, 1, 1, 2, 3]
    assert len(d) == 6


def test_reset_empties_but_keeps_pool():
    d = _filled()
    d.reset()
    assert list(d) == []
    assert not d
    assert len(d) == 0
    assert d.capacity == 8
    assert d.append(9) == 7
    assert list(d) == [9]


def test_clear_releases_pool():
    d = _filled()
    d.clear()
    assert d.capacity == 0
    assert list(d) == []
    assert d.head is None
    d.append("x")
    assert list(d) == ["x"]
    assert d.capacity == 1


def test_growth_doubles_capacity():
    d = Deque(2)
    for v in "abc":
        d.append(v)
    assert d.capacity == 4
    assert list(d.nodes()) == [1, 0, 3]
    assert list(d) == ["a", "b", "c"]


def test_backward_links_match_forward():
    d = Deque(3)
    d.append(1)
    d.prepend(0)
    d.append(2)
    d.append(3)
    d.pop_front()
    d.prepend(-1)
    forward = list(d.nodes())
    backward = []
    n = d.tail
    while n is not None:
        backward.append(n)
        n = d.prev_node(n)
    assert backward == forward[::-1]
    assert list(d) == [-1, 1, 2, 3]


def test_front_back_and_empty_errors():
    d = Deque(4)
    with pytest.raises(IndexError):
        d.pop_front()
    with pytest.raises(IndexError):
        d.pop_back()
    with pytest.raises(IndexError):
        d.front()
    with pytest.raises(IndexError):
        d.back()
    d.append(1)
    d.append(2)
    assert d.front() == 1
    assert d.back() == 2
    assert d.pop_back() == 2
    assert d.pop_back() == 1
    assert not d


def test_out_of_range_node_queries():
    d = _filled()
    assert d.next_node(100) is None
    assert d.prev_node(-1) is None
    with pytest.raises(IndexError):
        d.get(8)


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Deque(0)