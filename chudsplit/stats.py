import time
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class RunStats:
    digits: int
    workers: int
    elapsed: float

    @property
    def digits_per_second(self) -> float:
        if self.elapsed <= 0:
            return 0.0
        return self.digits / self.elapsed

    def lines(self) -> List[str]:
        return [
            "======= Stats =======",
            f"Time      : {self.elapsed:.3f} s",
            f"Threads   : {self.workers}",
            f"Decimals  : {self.digits}",
            f"Dec / sec : {self.digits_per_second:.0f}",
        ]


def timed(fn, *args, **kwargs):
    t0 = time.perf_counter()
    result = fn(*args, **kwargs)
    return result, time.perf_counter() - t0
