from chudsplit.verify import extract_fractional_digits, spigot_prefix, verify_pi_string


PI_50 = "3.14159265358979323846264338327950288419716939937510"


def test_spigot_pi_prefix():
    assert "3." + spigot_prefix(50) == PI_50


def test_verify_accepts_pi():
    assert verify_pi_string(PI_50, 50) == (True, "pi spigot")
    assert verify_pi_string(PI_50, 1000) == (True, "pi spigot")


def test_verify_rejects_wrong_digit():
    bad = PI_50[:-1] + "1"
    ok, kind = verify_pi_string(bad, 50)
    assert not ok
    assert kind == "pi spigot"


def test_verify_rejects_integer_part():
    assert verify_pi_string("2" + PI_50[1:], 10) == (False, "integer part")


def test_verify_skipped():
    assert verify_pi_string("nonsense", 0) == (True, "verification skipped")


def test_extract_fractional_digits():
    assert extract_fractional_digits("3.14") == "14"
    assert extract_fractional_digits("3") == ""
