import pytest

from chudsplit.splitting import binary_split
from chudsplit.triple import merge, term


def test_singleton_range_is_term():
    assert binary_split(0, 1) == term(0)
    assert binary_split(7, 8) == term(7)


def test_two_terms():
    assert binary_split(0, 2) == merge(term(0), term(1))


def test_any_split_point_agrees():
    n = 12
    whole = binary_split(0, n)
    for m in range(1, n):
        assert merge(binary_split(0, m), binary_split(m, n)) == whole


def test_sequential_fold_of_terms_agrees():
    acc = term(0)
    for a in range(1, 20):
        acc = merge(acc, term(a))
    assert acc == binary_split(0, 20)


def test_offset_range():
    assert binary_split(5, 9) == merge(merge(term(5), term(6)), merge(term(7), term(8)))


@pytest.mark.parametrize("a,b", [(0, 0), (3, 2), (-1, 2)])
def test_invalid_range(a, b):
    with pytest.raises(ValueError):
        binary_split(a, b)
