"""Immutable container for TIE samples."""

from __future__ import annotations

from typing import Iterable, Iterator, overload


class SampleSeries:
    """Ordered, read-only sequence of TIE samples.

    The series may legally hold zero or one samples; callers that need a
    window of at least two samples check the length themselves.
    """

    __slots__ = ("_samples",)

    def __init__(self, samples: Iterable[float] = ()) -> None:
        self._samples: tuple[float, ...] = tuple(float(value) for value in samples)

    def __len__(self) -> int:
        return len(self._samples)

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[float, ...]: ...

    def __getitem__(self, index: int | slice) -> float | tuple[float, ...]:
        return self._samples[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._samples)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SampleSeries):
            return NotImplemented
        return self._samples == other._samples

    def __hash__(self) -> int:
        return hash(self._samples)

    def __repr__(self) -> str:
        return f"SampleSeries(n={len(self._samples)})"

    @property
    def values(self) -> tuple[float, ...]:
        """Underlying samples as a tuple."""

        return self._samples
