import logging
from dataclasses import dataclass

from mpmath.ctx_mp import MPContext

from .parallel import reduce_parallel
from .triple import SCALE, SQRT_ARG, Triple


logger = logging.getLogger(__name__)

GUARD_BITS = 64


@dataclass(frozen=True)
class PrecisionContext:
    precision_bits: int
    series_length: int

    def __post_init__(self):
        if int(self.precision_bits) < 1:
            raise ValueError("precision_bits must be >= 1")
        if int(self.series_length) < 1:
            raise ValueError("series_length must be >= 1")


def evaluate_pi(triple: Triple, precision_bits: int):
    precision_bits = int(precision_bits)
    if precision_bits < 1:
        raise ValueError("precision_bits must be >= 1")
    if triple.t == 0:
        raise ZeroDivisionError("t is zero")
    # Private context: mpmath.mp is process-global.
    ctx = MPContext()
    ctx.prec = precision_bits + GUARD_BITS
    logger.debug("evaluating at %d bits (+%d guard)", precision_bits, GUARD_BITS)
    k = SCALE * ctx.sqrt(SQRT_ARG)
    pi = k * ctx.mpf(triple.q) / ctx.mpf(triple.t)
    ctx.prec = precision_bits
    return +pi


def _check_positive(name: str, value) -> int:
    if isinstance(value, bool) or int(value) != value:
        raise ValueError(f"{name} must be an integer")
    value = int(value)
    if value < 1:
        raise ValueError(f"{name} must be >= 1")
    return value


def compute_pi(series_length: int, worker_count: int, precision_bits: int, use_processes: bool = False):
    series_length = _check_positive("series_length", series_length)
    worker_count = _check_positive("worker_count", worker_count)
    precision_bits = _check_positive("precision_bits", precision_bits)
    if worker_count > series_length:
        logger.debug("clamping %d workers to %d terms", worker_count, series_length)
        worker_count = series_length
    triple = reduce_parallel(series_length, worker_count, use_processes=use_processes)
    return evaluate_pi(triple, precision_bits)


def compute_pi_in(context: PrecisionContext, worker_count: int, use_processes: bool = False):
    return compute_pi(context.series_length, worker_count, context.precision_bits, use_processes=use_processes)
