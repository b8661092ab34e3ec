from .evaluate import PrecisionContext


DIGITS_PER_TERM = 14
EXTRA_TERMS = 10
GUARD_DIGITS = 100
BITS_PER_DIGIT = 4


def plan_digits(digits: int) -> PrecisionContext:
    digits = int(digits)
    if digits < 0:
        raise ValueError("digits must be >= 0")
    return PrecisionContext(
        precision_bits=(digits + GUARD_DIGITS) * BITS_PER_DIGIT,
        series_length=digits // DIGITS_PER_TERM + EXTRA_TERMS,
    )
