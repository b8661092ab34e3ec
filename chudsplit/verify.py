from typing import Iterator, Tuple


def pi_digits_spigot() -> Iterator[int]:
    q, r, t, k, n, l = 1, 0, 1, 1, 3, 3
    while True:
        if 4 * q + r - t < n * t:
            yield n
            q, r, t, k, n, l = (
                10 * q,
                10 * (r - n * t),
                t,
                k,
                ((10 * (3 * q + r)) // t) - 10 * n,
                l,
            )
        else:
            q, r, t, k, n, l = (
                q * k,
                (2 * q + r) * l,
                t * l,
                k + 1,
                (q * (7 * k + 2) + r * l) // (t * l),
                l + 2,
            )


def spigot_prefix(count: int) -> str:
    g = pi_digits_spigot()
    next(g)
    return "".join(str(next(g)) for _ in range(int(count)))


def extract_fractional_digits(display: str) -> str:
    if "." not in display:
        return ""
    return display.split(".", 1)[1]


def verify_pi_string(display: str, samples: int) -> Tuple[bool, str]:
    samples = int(samples)
    if samples <= 0:
        return True, "verification skipped"
    if not display.startswith("3."):
        return False, "integer part"
    fractional = extract_fractional_digits(display)
    expected = spigot_prefix(min(samples, len(fractional)))
    actual = fractional[: len(expected)]
    return expected == actual, "pi spigot"
