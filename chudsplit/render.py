import sys

from .evaluate import compute_pi_in
from .planner import plan_digits


# Long digit strings exceed the default int -> str conversion limit.
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)


def render_fixed(value, digits: int) -> str:
    """Fixed-point string of ``value`` truncated to ``digits`` places."""
    digits = int(digits)
    if digits < 0:
        raise ValueError("digits must be >= 0")
    if value < 0:
        raise ValueError("value must be >= 0")
    scaled = int(value * (10**digits))
    s = str(scaled)
    if digits == 0:
        return s + "."
    if len(s) <= digits:
        s = "0" * (digits - len(s) + 1) + s
    return s[:-digits] + "." + s[-digits:]


def pi_string(digits: int, workers: int = 1, use_processes: bool = False) -> str:
    context = plan_digits(digits)
    value = compute_pi_in(context, workers, use_processes=use_processes)
    return render_fixed(value, digits)
