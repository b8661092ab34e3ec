from .triple import Triple, merge, term


def _split(a: int, b: int) -> Triple:
    if b - a == 1:
        return term(a)
    m = (a + b) // 2
    return merge(_split(a, m), _split(m, b))


def binary_split(a: int, b: int) -> Triple:
    """Triple for the half-open range [a, b) by recursive halving."""
    a = int(a)
    b = int(b)
    if a < 0:
        raise ValueError("a must be >= 0")
    if b <= a:
        raise ValueError("range must be non-empty")
    return _split(a, b)


def _split_range(ab):
    return binary_split(ab[0], ab[1])
