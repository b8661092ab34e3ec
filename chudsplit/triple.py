from dataclasses import dataclass


# Fixed constants of the Chudnovsky formula.
A = 13591409
B = 545140134
C = 640320
C3_OVER_24 = (C**3) // 24
SQRT_ARG = 10005
SCALE = 426880


@dataclass(frozen=True)
class Triple:
    p: int
    q: int
    t: int


def term(a: int) -> Triple:
    """Triple for the single-index range [a, a + 1)."""
    if a < 0:
        raise ValueError("a must be >= 0")
    if a == 0:
        return Triple(1, 1, A)
    p = -(6 * a - 5) * (2 * a - 1) * (6 * a - 1)
    q = a * a * a * C3_OVER_24
    return Triple(p, q, p * (A + B * a))


def merge(left: Triple, right: Triple) -> Triple:
    """Combine the triple of [a, m) with the triple of [m, b).

    The operands are not interchangeable: ``left`` must cover the lower
    index range.
    """
    return Triple(
        left.p * right.p,
        left.q * right.q,
        right.q * left.t + left.p * right.t,
    )
