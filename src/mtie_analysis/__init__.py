"""Maximum Time Interval Error (MTIE) computation from TIE samples."""

from .algorithms import (
    DyadicMtieAlgorithm,
    ExhaustiveMtieAlgorithm,
    MtieAlgorithm,
    MtieResult,
    check_monotonic,
)
from .config import EngineConfig, LoggingConfig, MtieSettings, load_settings
from .engine import DEFAULT_THRESHOLD, MtieEngine
from .errors import (
    InputReadError,
    InsufficientData,
    InvalidConfiguration,
    MonotonicityError,
    MtieError,
    ParseError,
)
from .formatting import format_result, write_results
from .logging_utils import JsonFormatter, configure_logging
from .reader import parse_tie_lines, read_samples
from .scanner import SlidingExtremaScanner
from .series import SampleSeries

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DEFAULT_THRESHOLD",
    "DyadicMtieAlgorithm",
    "EngineConfig",
    "ExhaustiveMtieAlgorithm",
    "InputReadError",
    "InsufficientData",
    "InvalidConfiguration",
    "JsonFormatter",
    "LoggingConfig",
    "MonotonicityError",
    "MtieAlgorithm",
    "MtieEngine",
    "MtieError",
    "MtieResult",
    "MtieSettings",
    "ParseError",
    "SampleSeries",
    "SlidingExtremaScanner",
    "check_monotonic",
    "configure_logging",
    "format_result",
    "load_settings",
    "parse_tie_lines",
    "read_samples",
    "write_results",
]
