"""Command-line entry point for MTIE computation."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from . import __version__
from .config import MtieSettings, load_settings
from .engine import ALGORITHM_MODES, MtieEngine
from .errors import MtieError
from .formatting import write_results
from .logging_utils import configure_logging
from .reader import read_samples

DESCRIPTION = """\
Calculates MTIE from a series of TIE input data.

The TIE input data is expected to be in text format, with one number per line.
Blank lines and lines starting with '#' or '//' are ignored.
It is assumed that the input data was sampled at a uniform rate.
The MTIE calculation is unaware of the sampling rate of the data,
or the units of the TIE measurement.

The MTIE is printed to standard output, with each line containing:
- an interval (in samples)
- the MTIE for that interval

Series longer than the threshold only report intervals 1, 3, 7, 15, ...
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mtie",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-i",
        "--input",
        metavar="PATH",
        help="File containing the TIE input data. If omitted, data is read from standard input.",
    )
    parser.add_argument("--config", metavar="TOML", help="Path to TOML configuration file")
    parser.add_argument("--threshold", type=int, help="Largest series computed for every interval")
    parser.add_argument("--algorithm", choices=ALGORITHM_MODES, help="Force an algorithm")
    parser.add_argument(
        "--workers",
        type=int,
        help="Thread pool size for the exhaustive scans; results are unchanged and the scans stay GIL-bound",
    )
    parser.add_argument("--log-level", help="Logging level (overrides configuration)")
    return parser


def _engine_from(args: argparse.Namespace, settings: MtieSettings) -> MtieEngine:
    engine = settings.engine
    return MtieEngine(
        threshold=args.threshold if args.threshold is not None else engine.threshold,
        workers=args.workers if args.workers is not None else engine.workers,
        algorithm=args.algorithm or engine.algorithm,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = MtieSettings.from_toml(args.config) if args.config else load_settings()
        if args.log_level:
            settings.logging = settings.logging.model_copy(update={"level": args.log_level})
        configure_logging(settings.logging)
        engine = _engine_from(args, settings)
        series = read_samples(args.input)
        results = engine.compute(series)
    except MtieError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    write_results(results, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
