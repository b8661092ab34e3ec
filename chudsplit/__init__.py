__all__ = [
    "Triple",
    "term",
    "merge",
    "binary_split",
    "partition_range",
    "split_ranges",
    "fold_ordered",
    "reduce_parallel",
    "PrecisionContext",
    "evaluate_pi",
    "compute_pi",
    "plan_digits",
    "render_fixed",
    "pi_string",
    "verify_pi_string",
]

from .evaluate import PrecisionContext, compute_pi, evaluate_pi
from .parallel import fold_ordered, partition_range, reduce_parallel, split_ranges
from .planner import plan_digits
from .render import pi_string, render_fixed
from .splitting import binary_split
from .triple import Triple, merge, term
from .verify import verify_pi_string
