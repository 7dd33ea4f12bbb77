"""Sliding-window extrema using monotonic deques."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Sequence

from .errors import InvalidConfiguration


class SlidingExtremaScanner:
    """Report the (max, min) of every window of a fixed length.

    Two deques of sample indices are kept: the max-deque holds indices with
    strictly decreasing values, the min-deque strictly increasing values.
    Each index is pushed and popped at most once per deque, so a full scan
    costs O(N) regardless of the window length.
    """

    def __init__(self, samples: Sequence[float], window: int) -> None:
        if window < 1:
            raise InvalidConfiguration(f"window length must be positive, got {window}")
        if window > len(samples):
            raise InvalidConfiguration(
                f"window length {window} exceeds series length {len(samples)}"
            )
        self._samples = samples
        self._window = window

    @property
    def window(self) -> int:
        return self._window

    def __iter__(self) -> Iterator[tuple[float, float]]:
        samples = self._samples
        window = self._window
        max_idx: deque[int] = deque()
        min_idx: deque[int] = deque()
        for j in range(len(samples)):
            value = samples[j]
            while max_idx and samples[max_idx[-1]] <= value:
                max_idx.pop()
            max_idx.append(j)
            while min_idx and samples[min_idx[-1]] >= value:
                min_idx.pop()
            min_idx.append(j)

            start = j - window + 1
            while max_idx[0] < start:
                max_idx.popleft()
            while min_idx[0] < start:
                min_idx.popleft()
            if start >= 0:
                yield samples[max_idx[0]], samples[min_idx[0]]

    def max_excursion(self) -> float:
        """Largest peak-to-peak value over all windows."""

        best = 0.0
        for high, low in self:
            spread = high - low
            if spread > best:
                best = spread
        return best
