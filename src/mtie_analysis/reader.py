"""Read TIE samples from text input.

The input format is one number per line. Blank lines and lines starting with
``#`` or ``//`` are ignored. The values are assumed to be sampled at a
uniform rate; their units are irrelevant to the computation.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
import sys
from typing import Iterable, TextIO

from .errors import InputReadError, ParseError
from .series import SampleSeries

COMMENT_PREFIXES = ("#", "//")

logger = logging.getLogger(__name__)


def parse_tie_lines(lines: Iterable[str]) -> list[float]:
    """Convert text lines into TIE values, raising ParseError on bad lines."""

    values: list[float] = []
    for line_number, line in enumerate(lines, start=1):
        text = line.strip()
        if not text or text.startswith(COMMENT_PREFIXES):
            continue
        try:
            value = float(text)
        except ValueError:
            raise ParseError(line_number, line.rstrip("\r\n")) from None
        if not math.isfinite(value):
            raise ParseError(line_number, line.rstrip("\r\n"))
        values.append(value)
    return values


def read_samples(path: str | Path | None = None, stream: TextIO | None = None) -> SampleSeries:
    """Read a SampleSeries from ``path`` or from ``stream`` (stdin by default)."""

    if path is not None:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise InputReadError(f"Could not read file '{path}': {exc.strerror}") from exc
        except UnicodeDecodeError as exc:
            raise InputReadError(f"Could not read file '{path}': {exc.reason}") from exc
        source = str(path)
    else:
        stream = stream if stream is not None else sys.stdin
        try:
            text = stream.read()
        except OSError as exc:
            raise InputReadError(f"Could not read standard input: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise InputReadError(f"Could not read standard input: {exc.reason}") from exc
        source = "<stdin>"

    series = SampleSeries(parse_tie_lines(text.splitlines()))
    logger.debug("tie_samples_read", extra={"source": source, "samples": len(series)})
    return series
