import pytest

from chudsplit.triple import A, B, C, C3_OVER_24, Triple, merge, term


def test_first_term_is_unit():
    assert term(0) == Triple(1, 1, A)


def test_second_term():
    t = term(1)
    assert t.p == -5
    assert t.q == 10939058860032000
    assert t.t == -5 * (A + B)


def test_q_division_is_exact():
    assert (C**3) % 24 == 0
    for a in range(1, 300):
        assert (a**3 * C**3) % 24 == 0
        assert term(a).q == (a**3 * C**3) // 24


def test_p_sign_and_factors():
    for a in range(1, 50):
        t = term(a)
        assert t.p < 0
        assert -t.p == (6 * a - 5) * (2 * a - 1) * (6 * a - 1)
        assert t.t == t.p * (A + B * a)
        assert t.q == a**3 * C3_OVER_24


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        term(-1)


def test_merge_is_ordered():
    left, right = term(1), term(2)
    forward = merge(left, right)
    backward = merge(right, left)
    assert forward.p == backward.p
    assert forward.q == backward.q
    assert forward.t != backward.t


def test_merge_formula():
    left, right = term(3), term(4)
    m = merge(left, right)
    assert m.p == left.p * right.p
    assert m.q == left.q * right.q
    assert m.t == right.q * left.t + left.p * right.t


def test_triple_is_frozen():
    t = term(2)
    with pytest.raises(AttributeError):
        t.p = 0
