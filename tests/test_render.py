import pytest
from mpmath import mpf

from chudsplit.render import pi_string, render_fixed


PI_80 = "3.14159265358979323846264338327950288419716939937510582097494459230781640628620899"


def test_pi_string_prefix():
    s = pi_string(80, workers=1)
    assert s == PI_80


def test_pi_string_parallel_matches():
    assert pi_string(80, workers=4) == PI_80


def test_pi_string_zero_digits():
    assert pi_string(0) == "3."


def test_render_truncates():
    assert render_fixed(mpf("3.75"), 1) == "3.7"
    assert render_fixed(mpf("3.75"), 2) == "3.75"
    assert render_fixed(mpf("3.75"), 4) == "3.7500"


def test_render_below_one():
    assert render_fixed(mpf(1) / 8, 4) == "0.1250"
    assert render_fixed(mpf(1) / 8, 2) == "0.12"


def test_render_rejects_negative():
    with pytest.raises(ValueError):
        render_fixed(mpf(1), -1)
    with pytest.raises(ValueError):
        render_fixed(mpf(-1), 2)
