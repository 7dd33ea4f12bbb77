"""Algorithm selection and dispatch."""

from __future__ import annotations

import logging
import time

from .algorithms import (
    DyadicMtieAlgorithm,
    ExhaustiveMtieAlgorithm,
    MtieAlgorithm,
    MtieResult,
    check_monotonic,
    require_samples,
)
from .errors import InvalidConfiguration
from .series import SampleSeries

DEFAULT_THRESHOLD = 100_000
ALGORITHM_MODES = ("auto", "exhaustive", "dyadic")


class MtieEngine:
    """Pick an MTIE algorithm for a series and run it.

    In ``auto`` mode series of at most ``threshold`` samples get the exhaustive
    algorithm and larger series the dyadic one. ``exhaustive`` and ``dyadic``
    force a variant regardless of length.
    """

    def __init__(
        self,
        threshold: int = DEFAULT_THRESHOLD,
        workers: int = 1,
        algorithm: str = "auto",
        logger: logging.Logger | None = None,
    ) -> None:
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold <= 0:
            raise InvalidConfiguration(f"threshold must be a positive integer, got {threshold!r}")
        if algorithm not in ALGORITHM_MODES:
            raise InvalidConfiguration(
                f"algorithm must be one of {', '.join(ALGORITHM_MODES)}, got {algorithm!r}"
            )
        self._threshold = threshold
        self._mode = algorithm
        self._exhaustive = ExhaustiveMtieAlgorithm(workers=workers)
        self._dyadic = DyadicMtieAlgorithm()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def mode(self) -> str:
        return self._mode

    def select(self, series: SampleSeries) -> MtieAlgorithm:
        """Return the algorithm that would run for ``series``."""

        if self._mode == "exhaustive":
            return self._exhaustive
        if self._mode == "dyadic":
            return self._dyadic
        return self._exhaustive if len(series) <= self._threshold else self._dyadic

    def compute(self, series: SampleSeries) -> list[MtieResult]:
        """Compute MTIE results for ``series`` in ascending interval order."""

        require_samples(series)
        algorithm = self.select(series)
        self._logger.info(
            "mtie_algorithm_selected",
            extra={"algorithm": algorithm.name, "samples": len(series), "threshold": self._threshold},
        )
        started = time.perf_counter()
        results = algorithm.compute(series)
        check_monotonic(results)
        self._logger.debug(
            "mtie_computed",
            extra={
                "algorithm": algorithm.name,
                "intervals": len(results),
                "elapsed_s": time.perf_counter() - started,
            },
        )
        return results
