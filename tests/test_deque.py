import pytest

from algolab.deque import LinkedDeque


def make(*backs):
    d = LinkedDeque()
    for value in backs:
        d.push_back(value)
    return d


def test_new_deque_is_empty():
    d = LinkedDeque()
    assert d.is_empty()
    assert len(d) == 0
    assert list(d) == []


def test_push_back_order():
    d = make(1, 2, 3)
    assert list(d) == [3, 2, 1]
    assert d.back() == 3
    assert d.front() == 1


def test_push_front_order():
    d = LinkedDeque()
    d.push_front(1)
    d.push_front(2)
    assert list(d) == [1, 2]
    assert d.front() == 2
    assert d.back() == 1


def test_mixed_pushes():
    d = LinkedDeque()
    d.push_back(5)
    d.push_front(7)
    d.push_back(4)
    assert list(d) == [4, 5, 7]
    assert len(d) == 3


def test_pops_return_ends():
    d = make(1, 2, 3)
    assert d.pop_back() == 3
    assert d.pop_front() == 1
    assert list(d) == [2]
    assert d.pop_front() == 2
    assert d.is_empty()


@pytest.mark.parametrize("operation", ["back", "front", "pop_back", "pop_front"])
def test_empty_access_raises(operation):
    with pytest.raises(IndexError):
        getattr(LinkedDeque(), operation)()


def test_clear():
    d = make(1, 2, 3)
    d.clear()
    assert d.is_empty()
    assert list(d) == []


def test_reverse_swaps_ends():
    d = make(1, 2, 3)
    d.reverse()
    assert list(d) == [1, 2, 3]
    assert d.back() == 1
    assert d.front() == 3


def test_reverse_twice_is_identity():
    d = make(4, 8, 15, 16)
    before = list(d)
    d.reverse()
    d.reverse()
    assert list(d) == before


def test_reverse_empty_stays_empty():
    d = LinkedDeque()
    d.reverse()
    assert d.is_empty()