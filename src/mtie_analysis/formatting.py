"""Render MTIE results as text."""

from __future__ import annotations

from typing import Iterable, TextIO

from .algorithms import MtieResult


def format_result(result: MtieResult) -> str:
    # repr() gives the shortest string that round-trips the float exactly.
    return f"{result.interval} {result.value!r}"


def write_results(results: Iterable[MtieResult], stream: TextIO) -> None:
    """Write one ``<interval> <value>`` line per result."""

    for result in results:
        stream.write(format_result(result) + "\n")
