"""MTIE algorithms.

Two interchangeable strategies compute MTIE from a :class:`SampleSeries`:

* :class:`ExhaustiveMtieAlgorithm` evaluates every interval 1..N-1 by running
  a sliding-extrema scan per interval. Cost is O(N^2).
* :class:`DyadicMtieAlgorithm` evaluates only intervals 2^k - 1 by doubling
  window extrema level by level. Cost is O(N log N) with O(N) memory.

See "Fast Algorithms for TVAR and MTIE Computation in Characterization of
Network Synchronization Performance" for the doubling decomposition.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import islice
import operator
from typing import Protocol, Sequence

from .errors import InsufficientData, InvalidConfiguration, MonotonicityError
from .scanner import SlidingExtremaScanner
from .series import SampleSeries


@dataclass(frozen=True)
class MtieResult:
    """MTIE value for a single observation interval (in samples)."""

    interval: int
    value: float


class MtieAlgorithm(Protocol):
    """Protocol for a strategy that computes MTIE from a series."""

    name: str

    def compute(self, series: SampleSeries) -> list[MtieResult]:
        """Return results in strictly increasing interval order."""


def require_samples(series: SampleSeries) -> None:
    if len(series) < 2:
        raise InsufficientData(len(series))


def check_monotonic(results: Sequence[MtieResult]) -> None:
    """Raise if any MTIE value is smaller than the one before it."""

    for index in range(1, len(results)):
        previous, current = results[index - 1], results[index]
        if current.value < previous.value:
            raise MonotonicityError(
                f"MTIE is not monotonically increasing: interval {previous.interval} has "
                f"{previous.value} but interval {current.interval} has {current.value}"
            )


class ExhaustiveMtieAlgorithm:
    """Compute MTIE for every interval from 1 to N-1."""

    name = "exhaustive"

    def __init__(self, workers: int = 1) -> None:
        if workers < 1:
            raise InvalidConfiguration(f"workers must be at least 1, got {workers}")
        self._workers = workers

    @property
    def workers(self) -> int:
        return self._workers

    def compute(self, series: SampleSeries) -> list[MtieResult]:
        require_samples(series)
        samples = series.values
        intervals = range(1, len(samples))

        def evaluate(interval: int) -> MtieResult:
            # Each call owns its scanner; nothing is shared between intervals.
            scanner = SlidingExtremaScanner(samples, interval + 1)
            return MtieResult(interval=interval, value=scanner.max_excursion())

        if self._workers == 1:
            return [evaluate(interval) for interval in intervals]
        with ThreadPoolExecutor(max_workers=self._workers) as pool:
            return list(pool.map(evaluate, intervals))


class DyadicMtieAlgorithm:
    """Compute MTIE at intervals 2^k - 1 using binary doubling."""

    name = "dyadic"

    def compute(self, series: SampleSeries) -> list[MtieResult]:
        require_samples(series)
        count = len(series)
        # Level 0: every window of length 1 is its own max and min.
        highs: list[float] = list(series.values)
        lows: list[float] = list(highs)
        results: list[MtieResult] = []
        span = 2
        while span <= count:
            half = span // 2
            # A window of length span at i is the windows of length half at i and i + half.
            # map() stops at the shorter input, leaving N - span + 1 positions.
            highs = list(map(max, highs, islice(highs, half, None)))
            lows = list(map(min, lows, islice(lows, half, None)))
            value = max(map(operator.sub, highs, lows))
            results.append(MtieResult(interval=span - 1, value=value))
            span *= 2
        return results
